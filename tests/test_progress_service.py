"""Tests for the progression engine."""

import pytest
from pydantic import ValidationError

from app.data.levels import LEVEL_TABLE
from app.schemas.progress import ActivityCounts, ParagraphLevelCounts, WordDifficultyCounts
from app.services import progress_service
from app.services.progress_service import (
    average_quiz_score,
    build_activity_counts,
    calculate_total_points,
    classify_word_difficulty,
    compute_progress,
    count_paragraphs_by_level,
    count_words_by_difficulty,
    determine_level,
    get_level_name,
    get_next_level_threshold,
    get_previous_level_threshold,
    map_to_cefr,
)


def counts(beginner=0, intermediate=0, advanced=0, attempts=0, avg=0, A2=0, B1=0, B2=0, C1=0):
    return ActivityCounts(
        words_by_difficulty=WordDifficultyCounts(
            beginner=beginner, intermediate=intermediate, advanced=advanced
        ),
        quiz_attempts=attempts,
        quiz_avg_score_percent=avg,
        paragraphs_by_level=ParagraphLevelCounts(A2=A2, B1=B1, B2=B2, C1=C1),
    )


# ── Level table ────────────────────────────────────────────────

class TestLevelTable:
    def test_has_34_ascending_thresholds(self):
        thresholds = LEVEL_TABLE.thresholds
        assert len(thresholds) == 34
        assert thresholds[0] == 1
        assert thresholds[-1] == 9999
        assert list(thresholds) == sorted(set(thresholds))

    def test_every_threshold_has_a_unique_name(self):
        names = [LEVEL_TABLE.names[t] for t in LEVEL_TABLE.thresholds]
        assert len(set(names)) == len(names)

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            LEVEL_TABLE.names[1] = "Changed"


# ── Points ─────────────────────────────────────────────────────

class TestPoints:
    def test_zero_counts(self):
        assert calculate_total_points(ActivityCounts()) == 0

    def test_all_activities(self):
        c = counts(beginner=2, intermediate=3, advanced=4, attempts=2, avg=75, A2=1, B1=1, B2=1, C1=1)
        # 2 + 6 + 12 + 10 + 15 + 5 + 10 + 15 + 20
        assert calculate_total_points(c) == 95

    def test_quiz_average_is_floored(self):
        assert calculate_total_points(counts(avg=33)) == 6
        assert calculate_total_points(counts(avg=100)) == 20

    def test_negative_counts_are_rejected_by_the_schema(self):
        with pytest.raises(ValidationError):
            WordDifficultyCounts(beginner=-1)
        with pytest.raises(ValidationError):
            ActivityCounts(quiz_avg_score_percent=120)


# ── Level walk ─────────────────────────────────────────────────

class TestLevels:
    def test_minimum_level_at_zero_points(self):
        assert determine_level(0) == 1

    @pytest.mark.parametrize("threshold", LEVEL_TABLE.thresholds)
    def test_threshold_round_trip(self, threshold):
        assert determine_level(threshold) == threshold

    def test_between_thresholds(self):
        assert determine_level(49) == 1
        assert determine_level(50) == 50
        assert determine_level(99) == 50
        assert determine_level(123456) == 9999

    def test_next_and_previous(self):
        assert get_next_level_threshold(1) == 50
        assert get_previous_level_threshold(1) == 0
        assert get_next_level_threshold(50) == 100
        assert get_previous_level_threshold(50) == 1

    def test_plateau_at_last_threshold(self):
        assert get_next_level_threshold(9999) == 9999
        assert get_previous_level_threshold(9999) == 9700

    def test_unknown_level_name_defaults(self):
        assert get_level_name(50) == "First Words"
        assert get_level_name(123) == "Level 123"

    def test_cefr_mapping(self):
        assert map_to_cefr(1) == "A1"
        assert map_to_cefr(500) == "A2"
        assert map_to_cefr(2500) == "B2"
        assert map_to_cefr(9999) == "C2"
        assert map_to_cefr(0) == "A1"


# ── compute_progress ───────────────────────────────────────────

class TestComputeProgress:
    def test_ten_beginner_words(self):
        result = compute_progress(counts(beginner=10))

        assert result.points == 10
        assert result.level == 1
        assert result.level_name == "Newcomer"
        assert result.current_level_points == 0
        assert result.next_level == 50
        assert result.next_level_points == 50
        assert result.next_level_name == "First Words"
        assert result.percent_to_next == 20
        assert result.stats.words_learned == 10

    def test_percent_is_relative_to_previous_threshold(self):
        result = compute_progress(counts(beginner=2, intermediate=3, advanced=4, attempts=2, avg=75,
                                         A2=1, B1=1, B2=1, C1=1))
        assert result.level == 50
        assert result.current_level_points == 1
        assert result.next_level == 100
        # (95 - 1) / (100 - 1) = 94.9%
        assert result.percent_to_next == 95

    def test_half_rounds_up(self):
        result = compute_progress(counts(beginner=301))
        assert result.level == 300
        assert result.current_level_points == 200
        assert result.next_level == 400
        # (301 - 200) / (400 - 200) = 50.5%
        assert result.percent_to_next == 51

    def test_percent_at_threshold(self):
        result = compute_progress(counts(A2=30))  # 150 points
        assert result.level == 150
        assert result.current_level_points == 100
        assert result.percent_to_next == 50

    def test_max_level_plateaus(self):
        result = compute_progress(counts(C1=500))

        assert result.points == 10000
        assert result.level == 9999
        assert result.next_level == result.level
        assert result.percent_to_next == 0
        assert result.level_name == "Legend"
        assert result.cefr_equivalent == "C2"

    def test_zero_activity(self):
        result = compute_progress(ActivityCounts())
        assert result.level == 1
        assert result.points == 0
        assert result.percent_to_next == 0

    def test_idempotent(self):
        c = counts(beginner=7, intermediate=5, attempts=3, avg=60, B1=2)
        assert compute_progress(c) == compute_progress(c)

    def test_invariants_over_point_range(self):
        for beginner in range(0, 10500, 37):
            result = compute_progress(counts(beginner=beginner))
            assert result.level >= 1
            assert result.current_level_points <= result.points
            assert 0 <= result.percent_to_next <= 100

    @pytest.mark.parametrize("field", [
        "beginner", "intermediate", "advanced", "attempts", "avg", "A2", "B1", "B2", "C1",
    ])
    def test_monotonic_in_every_count(self, field):
        base = dict(beginner=40, intermediate=12, advanced=3, attempts=4, avg=50, A2=2, B1=1, B2=0, C1=0)
        before = compute_progress(counts(**base))

        base[field] += 50 if field != "avg" else 40
        after = compute_progress(counts(**base))

        assert after.points >= before.points
        assert after.level >= before.level


# ── Aggregation helpers ────────────────────────────────────────

class TestAggregation:
    def test_word_difficulty_by_length(self):
        assert classify_word_difficulty("Haus") == "beginner"
        assert classify_word_difficulty("Sonne") == "beginner"
        assert classify_word_difficulty("Fenster") == "intermediate"
        assert classify_word_difficulty("Tankstelle") == "intermediate"
        assert classify_word_difficulty("Kindergarten") == "advanced"

    def test_count_words(self):
        result = count_words_by_difficulty(["Haus", "Sonne", "Fenster", "Tankstelle", "Kindergarten"])
        assert (result.beginner, result.intermediate, result.advanced) == (2, 2, 1)

    def test_count_paragraphs_ignores_other_levels(self):
        result = count_paragraphs_by_level(["A2", "b1", "B1", "C2", "A1"])
        assert result.A2 == 1
        assert result.B1 == 2
        assert result.total == 3

    def test_average_uses_estimate_without_question_counts(self):
        # 14 correct out of an estimated 2 * 10 questions
        assert average_quiz_score([8, 6]) == 70

    def test_average_with_real_question_counts(self):
        assert average_quiz_score([8, 6], question_counts=[10, 5]) == 93

    def test_average_edge_cases(self):
        assert average_quiz_score([]) == 0
        assert average_quiz_score([0, 0], question_counts=[0, 0]) == 0
        with pytest.raises(ValueError):
            average_quiz_score([1, 2], question_counts=[3])

    def test_average_is_always_a_float(self):
        assert isinstance(average_quiz_score([]), float)
        assert isinstance(average_quiz_score([0, 0], question_counts=[0, 0]), float)
        assert isinstance(average_quiz_score([8, 6]), float)

    def test_build_activity_counts_feeds_compute_progress(self):
        c = build_activity_counts(
            saved_words=["Haus", "Fenster", "Kindergarten"],
            quiz_scores=[10],
            paragraph_levels=["B1"],
        )
        assert c.quiz_attempts == 1
        assert c.quiz_avg_score_percent == 100

        result = progress_service.compute_progress(c)
        # 1 + 2 + 3 + 5 + 20 + 10
        assert result.points == 41
        assert result.stats.paragraphs_read == 1
