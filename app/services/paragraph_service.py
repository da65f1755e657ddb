import logging
from typing import Optional

from app.config import get_settings
from app.data.paragraphs import (
    DEFAULT_LEVEL_DESCRIPTION,
    FALLBACK_PARAGRAPHS,
    LEVEL_DESCRIPTIONS,
    PARAGRAPH_LEVELS,
)
from app.exceptions import ParagraphValidationError
from app.services import llm_service

settings = get_settings()
logger = logging.getLogger(__name__)

PARAGRAPH_SYSTEM_PROMPT = "You are a German language teacher creating content for German language learners."


def get_level_description(level: str) -> str:
    return LEVEL_DESCRIPTIONS.get(level, DEFAULT_LEVEL_DESCRIPTION)


def build_paragraph_prompt(level: str, topic: Optional[str] = None) -> str:
    prompt = (
        f"Generate a German paragraph for language learners at {level} level "
        f"({get_level_description(level)}). "
    )

    if topic:
        prompt += f"The topic should be about '{topic}'. "

    prompt += f"""The paragraph should:
1. Be approximately 100-150 words
2. Use vocabulary and grammar appropriate for {level} level German
3. Include a variety of sentence structures
4. Be engaging and interesting to read
5. Avoid using extremely rare or technical vocabulary unless necessary for the topic
6. Be culturally relevant to German-speaking countries"""

    return prompt


def get_fallback_paragraph(level: str, topic: Optional[str] = None) -> str:
    """Static text for the level, topic specific when one exists"""
    texts = FALLBACK_PARAGRAPHS[level]
    if topic:
        key = topic.strip().lower()
        if key in texts:
            return texts[key]
    return texts["default"]


async def generate_paragraph(level: str, topic: Optional[str] = None) -> str:
    """
    Generate a reading paragraph

    Args:
        level: A2, B1, B2 or C1
        topic: Optional topic

    Returns:
        str: generated paragraph, or the static fallback text on failure

    Raises:
        ParagraphValidationError: unsupported level
    """
    level = (level or "").strip().upper()
    if level not in PARAGRAPH_LEVELS:
        raise ParagraphValidationError(
            f"Level must be one of {', '.join(PARAGRAPH_LEVELS)}"
        )
    topic = topic.strip() if topic and topic.strip() else None

    result = await llm_service.generate(
        build_paragraph_prompt(level, topic),
        PARAGRAPH_SYSTEM_PROMPT,
        max_tokens=settings.PARAGRAPH_MAX_TOKENS,
        temperature=settings.PARAGRAPH_TEMPERATURE
    )

    if not result.ok:
        logger.info(
            "Paragraph generation failed (%s), using fallback text for %s/%s",
            result.failure.value, level, topic or "default"
        )
        return get_fallback_paragraph(level, topic)

    return result.text
