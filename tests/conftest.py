"""
Shared fixtures.

SMALL_LEXICON mirrors the valences of the bundled VADER lexicon for the
handful of words the exact-number tests use, so expected values can be
worked out by hand.
"""
import pytest

from vaderlite.core.analyzer import SentimentIntensityAnalyzer
from vaderlite.core.lexicon import Lexicon

SMALL_LEXICON = {
    "good": 1.9,
    "bad": -2.5,
    "great": 3.1,
    "smart": 1.7,
    "handsome": 2.2,
    "funny": 1.9,
    "horrible": -2.5,
    "sux": -1.5,
    "shit": -2.6,
    "kind": 2.4,
    "doubt": -1.5,
    "excellent": 2.7,
    ":)": 2.0,
}

SMALL_EMOJI_LEXICON = {
    "😀": "grinning face",
    "💘": "heart with arrow",
}


@pytest.fixture
def small_lexicon():
    return Lexicon.from_mapping(SMALL_LEXICON)


@pytest.fixture
def analyzer():
    """Analyzer over the small lexicon; never touches the bundled data."""
    return SentimentIntensityAnalyzer(lexicon=SMALL_LEXICON, emoji_lexicon={})


@pytest.fixture
def emoji_analyzer():
    lexicon = dict(SMALL_LEXICON, grinning=1.5)
    return SentimentIntensityAnalyzer(lexicon=lexicon, emoji_lexicon=SMALL_EMOJI_LEXICON)
