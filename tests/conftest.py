"""Shared fixtures: sample vocabulary and a patched text generator."""

import pytest
from unittest.mock import AsyncMock, patch

from app.schemas.quiz import VocabularyWord
from app.services.llm_service import FailureReason, GenerationResult


@pytest.fixture
def words():
    return [
        VocabularyWord(word="der Herbst", definition="autumn"),
        VocabularyWord(word="die Sonne", definition="sun"),
        VocabularyWord(word="kaufen", definition="to buy"),
    ]


@pytest.fixture
def mock_generate():
    """Replace the Groq call; tests set return_value / side_effect."""
    with patch("app.services.llm_service.generate", new_callable=AsyncMock) as mocked:
        mocked.return_value = GenerationResult.failed(FailureReason.SERVICE_ERROR, "not set up")
        yield mocked

