"""
vaderlite — rule-based sentiment intensity scoring for short informal text.

    from vaderlite import polarity_scores
    polarity_scores("VADER is smart, handsome, and funny!").compound   # 0.8439
"""
__version__ = "0.1.0"

from vaderlite.core.analyzer import (  # noqa: E402
    SentimentIntensityAnalyzer,
    get_default_analyzer,
    polarity_scores,
)
from vaderlite.core.lexicon import EmojiLexicon, Lexicon, LexiconLoadError  # noqa: E402
from vaderlite.core.scoring import SentimentScores  # noqa: E402
from vaderlite.utils.constants import RuleTables  # noqa: E402

__all__ = [
    "EmojiLexicon",
    "Lexicon",
    "LexiconLoadError",
    "RuleTables",
    "SentimentIntensityAnalyzer",
    "SentimentScores",
    "get_default_analyzer",
    "polarity_scores",
]
