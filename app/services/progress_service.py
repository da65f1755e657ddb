import math
from typing import Iterable, Optional, Sequence

from app.config import get_settings
from app.data.levels import LEVEL_TABLE, LevelTable
from app.schemas.progress import (
    ActivityCounts,
    ParagraphLevelCounts,
    ProgressResult,
    ProgressStats,
    WordDifficultyCounts,
)

settings = get_settings()

# Points per activity
WORD_POINTS = {"beginner": 1, "intermediate": 2, "advanced": 3}
QUIZ_ATTEMPT_POINTS = 5
PARAGRAPH_POINTS = {"A2": 5, "B1": 10, "B2": 15, "C1": 20}


def compute_progress(counts: ActivityCounts, table: LevelTable = LEVEL_TABLE) -> ProgressResult:
    """
    Convert aggregated learning activity into level information

    Pure function: same counts always give the same result, never raises.

    Returns:
        ProgressResult: level, names, points and percentage to next level
    """
    points = calculate_total_points(counts)

    current_level = determine_level(points, table)
    next_threshold = get_next_level_threshold(current_level, table)
    previous_threshold = get_previous_level_threshold(current_level, table)

    percent_to_next = calculate_percent_to_next(
        points, current_level, previous_threshold, next_threshold
    )

    return ProgressResult(
        level=current_level,
        level_name=get_level_name(current_level, table),
        points=points,
        next_level=next_threshold,
        next_level_name=get_level_name(next_threshold, table),
        next_level_points=next_threshold,
        current_level_points=previous_threshold,
        percent_to_next=percent_to_next,
        cefr_equivalent=map_to_cefr(current_level, table),
        stats=ProgressStats(
            words_learned=counts.words_by_difficulty.total,
            quiz_score_avg=counts.quiz_avg_score_percent,
            quiz_attempts=counts.quiz_attempts,
            paragraphs_read=counts.paragraphs_by_level.total,
        ),
    )


def calculate_total_points(counts: ActivityCounts) -> int:
    """Sum points from vocabulary, quizzes and paragraphs"""
    words = counts.words_by_difficulty
    paragraphs = counts.paragraphs_by_level

    points = 0

    # Vocabulary
    points += words.beginner * WORD_POINTS["beginner"]
    points += words.intermediate * WORD_POINTS["intermediate"]
    points += words.advanced * WORD_POINTS["advanced"]

    # Quizzes: attempts plus up to 20 points for the average score
    points += counts.quiz_attempts * QUIZ_ATTEMPT_POINTS
    points += math.floor(counts.quiz_avg_score_percent / 10 * 2)

    # Paragraphs
    for level, value in PARAGRAPH_POINTS.items():
        points += getattr(paragraphs, level) * value

    return int(points)


def determine_level(points: int, table: LevelTable = LEVEL_TABLE) -> int:
    """Highest threshold not above points; the first threshold at minimum"""
    level = table.first

    for threshold in table.thresholds:
        if points >= threshold:
            level = threshold
        else:
            break

    return level


def get_next_level_threshold(current_level: int, table: LevelTable = LEVEL_TABLE) -> int:
    """Following threshold, or the same level at the top of the table"""
    thresholds = table.thresholds
    if current_level in thresholds:
        index = thresholds.index(current_level)
        if index + 1 < len(thresholds):
            return thresholds[index + 1]

    return current_level


def get_previous_level_threshold(current_level: int, table: LevelTable = LEVEL_TABLE) -> int:
    """Preceding threshold, or 0 for the first level"""
    thresholds = table.thresholds
    if current_level in thresholds:
        index = thresholds.index(current_level)
        if index > 0:
            return thresholds[index - 1]

    return 0


def calculate_percent_to_next(
    points: int,
    current_level: int,
    previous_threshold: int,
    next_threshold: int
) -> int:
    # Top of the table: nothing left to progress towards
    if next_threshold == current_level or next_threshold <= previous_threshold:
        return 0

    ratio = (points - previous_threshold) / (next_threshold - previous_threshold)
    # round half up
    percent = math.floor(ratio * 100 + 0.5)
    return max(0, min(100, percent))


def get_level_name(threshold: int, table: LevelTable = LEVEL_TABLE) -> str:
    return table.names.get(threshold, f"Level {threshold}")


def map_to_cefr(level: int, table: LevelTable = LEVEL_TABLE) -> str:
    """Map the numerical level to its approximate CEFR equivalent"""
    for cefr_level, (low, high) in table.cefr_ranges.items():
        if low <= level <= high:
            return cefr_level

    return "A1"


# Aggregation helpers for the data-access layer

def classify_word_difficulty(word: str) -> str:
    length = len(word)
    if length <= 5:
        return "beginner"
    if length <= 10:
        return "intermediate"
    return "advanced"


def count_words_by_difficulty(words: Iterable[str]) -> WordDifficultyCounts:
    buckets = {"beginner": 0, "intermediate": 0, "advanced": 0}
    for word in words:
        buckets[classify_word_difficulty(word)] += 1
    return WordDifficultyCounts(**buckets)


def count_paragraphs_by_level(levels: Iterable[str]) -> ParagraphLevelCounts:
    """Count paragraph levels; levels outside A2..C1 earn no points and are skipped"""
    buckets = {level: 0 for level in PARAGRAPH_POINTS}
    for level in levels:
        key = (level or "").upper()
        if key in buckets:
            buckets[key] += 1
    return ParagraphLevelCounts(**buckets)


def average_quiz_score(
    scores: Sequence[int],
    question_counts: Optional[Sequence[int]] = None
) -> float:
    """
    Average quiz score as a rounded percentage of correct answers

    Args:
        scores: Correct answers per attempt
        question_counts: Questions per attempt, aligned with scores. When
            missing, every attempt is assumed to have
            QUIZ_ESTIMATED_QUESTIONS_PER_ATTEMPT questions.

    Returns:
        float: 0..100
    """
    if not scores:
        return 0.0

    if question_counts is not None:
        if len(question_counts) != len(scores):
            raise ValueError("question_counts must align with scores")
        total_questions = sum(question_counts)
    else:
        total_questions = len(scores) * settings.QUIZ_ESTIMATED_QUESTIONS_PER_ATTEMPT

    if total_questions <= 0:
        return 0.0

    avg = math.floor(sum(scores) / total_questions * 100 + 0.5)
    return float(max(0, min(100, avg)))


def build_activity_counts(
    saved_words: Iterable[str],
    quiz_scores: Sequence[int],
    paragraph_levels: Iterable[str],
    question_counts: Optional[Sequence[int]] = None
) -> ActivityCounts:
    """Aggregate raw records into the counts compute_progress consumes"""
    return ActivityCounts(
        words_by_difficulty=count_words_by_difficulty(saved_words),
        quiz_attempts=len(quiz_scores),
        quiz_avg_score_percent=average_quiz_score(quiz_scores, question_counts),
        paragraphs_by_level=count_paragraphs_by_level(paragraph_levels),
    )
