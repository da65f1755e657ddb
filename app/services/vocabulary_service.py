"""
Vocabulary definitions and category word lists
"""
import logging
import random
from typing import Dict, List, Optional

from app.config import get_settings
from app.data.definitions import (
    DEFINITION_OVERRIDES,
    NO_DEFINITION_AVAILABLE,
    NONSENSE_PATTERNS,
    TRANSLATION_UNAVAILABLE,
)
from app.data.word_bank import CATEGORIES, DEFAULT_CATEGORY, WORDS_BY_CATEGORY
from app.schemas.quiz import VocabularyWord
from app.services import llm_service

settings = get_settings()
logger = logging.getLogger(__name__)

DEFINITION_SYSTEM_PROMPT = "You are a helpful German-English dictionary assistant."


def build_definition_prompt(word: str, context: Optional[str] = None) -> str:
    prompt = f"Provide a clear and concise definition in English for the German word '{word}'"
    if context:
        prompt += f" as used in this context: '{context}'"
    prompt += (
        ". Also include the gender if it's a noun (der/die/das), the verb form if applicable, "
        "and example usage in a simple sentence."
    )
    return prompt


def lookup_override(word: str) -> Optional[str]:
    """Pinned translation for a word, case-insensitive"""
    return DEFINITION_OVERRIDES.get(word.strip().lower())


def is_valid_definition(definition: Optional[str]) -> bool:
    """Reject empty, too short or known garbage generator output"""
    if not definition or len(definition) < 2:
        return False
    return not any(pattern.search(definition) for pattern in NONSENSE_PATTERNS)


async def _request_definition(word: str, context: Optional[str]) -> Optional[str]:
    result = await llm_service.generate(
        build_definition_prompt(word, context),
        DEFINITION_SYSTEM_PROMPT,
        max_tokens=settings.DEFINITION_MAX_TOKENS,
        temperature=settings.DEFINITION_TEMPERATURE
    )
    if not result.ok:
        logger.info("Definition for %r unavailable (%s)", word, result.failure.value)
        return None
    return result.text


async def generate_definition(word: str, context: Optional[str] = None) -> str:
    """
    Definition for a newly saved word

    Returns:
        str: generated definition, or NO_DEFINITION_AVAILABLE on failure
    """
    definition = await _request_definition(word, context)
    return definition or NO_DEFINITION_AVAILABLE


async def regenerate_definition(word: str, context: Optional[str] = None) -> str:
    """
    Fresh definition for a saved word

    Words in the override table never reach the generator. Generated text
    that fails validation is replaced by TRANSLATION_UNAVAILABLE.

    Args:
        word: German word as saved by the user
        context: Sentence the word was saved from

    Returns:
        str: definition, never raises for generation problems
    """
    override = lookup_override(word)
    if override is not None:
        return override

    definition = await _request_definition(word, context)
    if not is_valid_definition(definition):
        logger.info("Rejected generated definition for %r: %r", word, definition)
        return TRANSLATION_UNAVAILABLE

    return definition


def get_categories() -> Dict[str, str]:
    """Category name -> English description"""
    return dict(CATEGORIES)


def get_words_by_category(category: str, count: int = 10) -> List[VocabularyWord]:
    """
    Random selection of words from a category

    Unknown categories (and categories without a word list) use the
    default category.
    """
    if count < 1:
        raise ValueError("count must be at least 1")

    words = WORDS_BY_CATEGORY.get(category) or WORDS_BY_CATEGORY[DEFAULT_CATEGORY]
    selection = random.sample(words, min(count, len(words)))
    return [VocabularyWord(word=word, definition=definition) for word, definition in selection]
