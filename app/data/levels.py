"""
Level table for the progression engine.

Thresholds are point values; a user's level *is* the highest threshold they
have reached. Bump LEVEL_TABLE_VERSION whenever thresholds or names change.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

LEVEL_TABLE_VERSION = 1

LEVEL_NAMES = {
    1: "Newcomer",
    50: "First Words",
    100: "Word Collector",
    150: "Curious Learner",
    200: "Phrase Builder",
    300: "Sentence Starter",
    400: "Steady Reader",
    500: "Grammar Explorer",
    650: "Conversationalist",
    800: "Article Tamer",
    1000: "Story Reader",
    1200: "Verb Wrangler",
    1400: "Case Navigator",
    1650: "Dialogue Partner",
    1900: "Text Explorer",
    2200: "Idiom Hunter",
    2500: "Confident Speaker",
    2850: "Paragraph Crafter",
    3200: "Culture Enthusiast",
    3600: "Fluent Reader",
    4000: "Compound Word Master",
    4500: "Debater",
    5000: "Advanced Learner",
    5500: "Nuance Seeker",
    6000: "Literature Reader",
    6500: "Dialect Listener",
    7000: "Eloquent Writer",
    7500: "Language Artist",
    8000: "Near Native",
    8500: "Word Virtuoso",
    9000: "Sprachmeister",
    9400: "Grand Scholar",
    9700: "Living Dictionary",
    9999: "Legend",
}

# CEFR equivalents for reference (approximate), inclusive level ranges
CEFR_RANGES = {
    "A1": (1, 499),
    "A2": (500, 1399),
    "B1": (1400, 2499),
    "B2": (2500, 4999),
    "C1": (5000, 7999),
    "C2": (8000, 9999),
}


@dataclass(frozen=True)
class LevelTable:
    thresholds: Tuple[int, ...]
    names: Mapping[int, str]
    cefr_ranges: Mapping[str, Tuple[int, int]]
    version: int = LEVEL_TABLE_VERSION

    @classmethod
    def default(cls) -> "LevelTable":
        thresholds = tuple(sorted(LEVEL_NAMES))
        return cls(
            thresholds=thresholds,
            names=MappingProxyType(dict(LEVEL_NAMES)),
            cefr_ranges=MappingProxyType(dict(CEFR_RANGES)),
        )

    @property
    def first(self) -> int:
        return self.thresholds[0]

    @property
    def last(self) -> int:
        return self.thresholds[-1]


LEVEL_TABLE = LevelTable.default()
