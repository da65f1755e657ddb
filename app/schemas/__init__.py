from app.schemas.progress import (
    ActivityCounts,
    ParagraphLevelCounts,
    ProgressResult,
    ProgressStats,
    WordDifficultyCounts,
)
from app.schemas.quiz import (
    FillBlankQuestion,
    MatchingPayload,
    MatchPair,
    MultipleChoiceQuestion,
    QuizAttemptResult,
    QuizSpec,
    QuizType,
    VocabularyWord,
)

__all__ = [
    'ActivityCounts',
    'ParagraphLevelCounts',
    'ProgressResult',
    'ProgressStats',
    'WordDifficultyCounts',
    'FillBlankQuestion',
    'MatchingPayload',
    'MatchPair',
    'MultipleChoiceQuestion',
    'QuizAttemptResult',
    'QuizSpec',
    'QuizType',
    'VocabularyWord',
]
