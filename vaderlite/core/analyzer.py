# coding: utf-8
"""
Public analyzer — the linear scoring pipeline:

    text → emoji translation → ParsedText → per-token valences
         → "but" adjustment → SentimentScores

Usage:
    analyzer = SentimentIntensityAnalyzer()
    scores = analyzer.polarity_scores("VADER is smart, handsome, and funny!")
    # → SentimentScores(neg=0.0, neu=0.248, pos=0.752, compound=0.8439)
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Mapping, Optional

from vaderlite import config
from vaderlite.core.lexicon import EmojiLexicon, Lexicon, load_emoji_lexicon, load_lexicon
from vaderlite.core.scoring import SentimentScores, score_valence
from vaderlite.core.valence import ValenceRuleEngine, but_check
from vaderlite.utils.constants import RuleTables
from vaderlite.utils.emoji import translate_emoji
from vaderlite.utils.text import ParsedText

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Process-wide data (loaded once, shared read-only)
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    return load_lexicon(config.LEXICON_PATH)


@lru_cache(maxsize=1)
def default_emoji_lexicon() -> EmojiLexicon:
    return load_emoji_lexicon(config.EMOJI_LEXICON_PATH)


class SentimentIntensityAnalyzer:
    """
    Rule-based sentiment intensity scorer.

    Args:
        lexicon:        word → valence table; defaults to the configured lexicon.
        emoji_lexicon:  emoji → description table; defaults likewise.
        rules:          booster / negation / idiom tables.
        extra_lexicon:  terms merged over `lexicon` (extra wins on conflict),
                        e.g. domain or auto-learned keywords.
    """

    def __init__(self,
                 lexicon: Optional[Mapping[str, float]] = None,
                 emoji_lexicon: Optional[Mapping[str, str]] = None,
                 rules: Optional[RuleTables] = None,
                 extra_lexicon: Optional[Mapping[str, float]] = None):
        if lexicon is None:
            lexicon = default_lexicon()
        elif not isinstance(lexicon, Lexicon):
            lexicon = Lexicon.from_mapping(lexicon)
        if extra_lexicon:
            lexicon = lexicon.merged(extra_lexicon)
            logger.info("Merged %d extra lexicon terms", len(extra_lexicon))

        self.lexicon: Lexicon = lexicon
        self.emoji_lexicon: Mapping[str, str] = (
            default_emoji_lexicon() if emoji_lexicon is None else emoji_lexicon
        )
        self.rules: RuleTables = rules or RuleTables.default()
        self._engine = ValenceRuleEngine(self.lexicon, self.rules)

    def parse(self, text: str) -> ParsedText:
        return ParsedText.from_text(translate_emoji(text, self.emoji_lexicon))

    def polarity_scores(self, text: str) -> SentimentScores:
        """
        compound ∈ [-1.0, +1.0]  — overall sentiment
        pos/neg/neu ∈ [0.0, 1.0] — proportions (sum ≈ 1.0)
        """
        parsed = self.parse(text)
        sentiments = self._engine.valences(parsed)
        sentiments = but_check(parsed.tokens, sentiments)
        return score_valence(sentiments, parsed.punctuation_amplifier)


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_default_analyzer() -> SentimentIntensityAnalyzer:
    return SentimentIntensityAnalyzer()


def polarity_scores(text: str) -> SentimentScores:
    """Module-level convenience function using the default analyzer."""
    return get_default_analyzer().polarity_scores(text)
