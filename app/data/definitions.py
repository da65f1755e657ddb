"""
Static lookup data for the definition pipeline.

DEFINITION_OVERRIDES pins translations for words the generator gets wrong.
Keys are lowercase German words. Extend freely, the pipeline logic does not
need to change.
"""
import re

DEFINITIONS_DATA_VERSION = 1

DEFINITION_OVERRIDES = {
    "herbst": "autumn",
    "kneipe": "pub",
    "entscheiden": "decide",
    "hälfte": "half",
    "tankstelle": "gas station",
    "nachrichtenstelle": "news office",
    "vögeln": "birds",
    "blumen": "flowers",
    "sonne": "sun",
    "jahr": "year",
    "zeit": "time",
    "frühling": "spring",
    "kindergarten": "kindergarten",
    "kita": "daycare",
    "kinder": "children",
    "erwachsenen": "adults",
    "essen": "food",
    "trinken": "drink",
    "wohnen": "to live",
    "kaufen": "to buy",
    "verkaufen": "to sell",
}

# Known garbage produced by the generator
NONSENSE_PATTERNS = (
    re.compile(r"^[a-z],\s"),  # "h, Kneipe means ..."
    re.compile(r"efer\s"),  # "efer Bäume zu ..."
)

TRANSLATION_UNAVAILABLE = "translation unavailable"
NO_DEFINITION_AVAILABLE = "No definition available for this word."
