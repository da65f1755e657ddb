"""Errors raised by the learning core.

Only validation errors ever reach the caller. Generation problems are turned
into fallback content inside the services.
"""


class LearningCoreError(Exception):
    """Base class for all core errors."""


class ValidationFailure(LearningCoreError, ValueError):
    """Caller supplied input the core cannot work with."""


class QuizValidationError(ValidationFailure):
    pass


class ParagraphValidationError(ValidationFailure):
    pass


class QuizFormatError(LearningCoreError):
    """Generated quiz content does not fit the quiz schema."""
