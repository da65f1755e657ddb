"""Tests for definition generation and the category word bank."""

import pytest

from app.data.definitions import NO_DEFINITION_AVAILABLE, TRANSLATION_UNAVAILABLE
from app.data.word_bank import WORDS_BY_CATEGORY
from app.services import vocabulary_service
from app.services.llm_service import FailureReason, GenerationResult


class TestRegenerateDefinition:
    @pytest.mark.asyncio
    async def test_override_skips_generation(self, mock_generate):
        assert await vocabulary_service.regenerate_definition("Herbst") == "autumn"
        mock_generate.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("word, expected", [
        ("HERBST", "autumn"),
        ("Hälfte", "half"),
        ("  kita ", "daycare"),
    ])
    async def test_override_is_case_insensitive(self, mock_generate, word, expected):
        assert await vocabulary_service.regenerate_definition(word) == expected

    @pytest.mark.asyncio
    async def test_generated_definition(self, mock_generate):
        mock_generate.return_value = GenerationResult.success("der Baum (noun): tree. Der Baum ist groß.")

        definition = await vocabulary_service.regenerate_definition("Baum", "Der Baum ist groß.")

        assert definition.startswith("der Baum")
        prompt = mock_generate.call_args.args[0]
        assert "'Baum'" in prompt
        assert "Der Baum ist groß." in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [
        "h, Kneipe means pub",
        "efer Bäume zu",
        "x",
    ])
    async def test_nonsense_is_rejected(self, mock_generate, text):
        mock_generate.return_value = GenerationResult.success(text)
        assert await vocabulary_service.regenerate_definition("Baum") == TRANSLATION_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_failure_returns_sentinel(self, mock_generate):
        mock_generate.return_value = GenerationResult.failed(FailureReason.TIMEOUT)
        assert await vocabulary_service.regenerate_definition("Baum") == TRANSLATION_UNAVAILABLE


class TestGenerateDefinition:
    @pytest.mark.asyncio
    async def test_failure(self, mock_generate):
        assert await vocabulary_service.generate_definition("Baum") == NO_DEFINITION_AVAILABLE

    @pytest.mark.asyncio
    async def test_success(self, mock_generate):
        mock_generate.return_value = GenerationResult.success("tree")
        assert await vocabulary_service.generate_definition("Baum") == "tree"


class TestValidation:
    def test_is_valid_definition(self):
        assert vocabulary_service.is_valid_definition("sun")
        assert vocabulary_service.is_valid_definition("H, capital letters are fine")
        assert not vocabulary_service.is_valid_definition("")
        assert not vocabulary_service.is_valid_definition(None)
        assert not vocabulary_service.is_valid_definition("a, b")


class TestCategories:
    def test_categories(self):
        categories = vocabulary_service.get_categories()
        assert categories["Essen"] == "Food & Drink"
        assert len(categories) == 30

    def test_words_by_category(self):
        words = vocabulary_service.get_words_by_category("Essen", 5)
        bank = dict(WORDS_BY_CATEGORY["Essen"])

        assert len(words) == 5
        assert len({w.word for w in words}) == 5
        assert all(bank[w.word] == w.definition for w in words)

    def test_unknown_category_uses_default(self):
        words = vocabulary_service.get_words_by_category("Unbekannt", 3)
        family = dict(WORDS_BY_CATEGORY["Familie"])
        assert all(w.word in family for w in words)

    def test_count_is_capped(self):
        assert len(vocabulary_service.get_words_by_category("Sport", 100)) == 20

    def test_count_must_be_positive(self):
        with pytest.raises(ValueError):
            vocabulary_service.get_words_by_category("Sport", 0)
