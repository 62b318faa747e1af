# coding: utf-8
"""
Aggregator / normalizer: per-token valences → SentimentScores.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Tuple

from vaderlite.utils.constants import NORMALIZATION_ALPHA

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05


@dataclass(frozen=True)
class SentimentScores:
    """
    neg / neu / pos ∈ [0, 1] — proportions (sum ≈ 1 when any token carried mass)
    compound ∈ [-1, 1]      — overall sentiment
    """

    neg: float = 0.0
    neu: float = 0.0
    pos: float = 0.0
    compound: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    @property
    def label(self) -> str:
        if self.compound >= POSITIVE_THRESHOLD:
            return "Positive"
        elif self.compound <= NEGATIVE_THRESHOLD:
            return "Negative"
        return "Neutral"


def normalize(score: float, alpha: float = NORMALIZATION_ALPHA) -> float:
    """Normalize score to [-1, 1]: score / sqrt(score² + alpha)."""
    if score == 0.0:
        return 0.0
    val = score / math.sqrt(score * score + alpha)
    return max(-1.0, min(1.0, val))


def sift_sentiment_scores(sentiments: Sequence[float]) -> Tuple[float, float, int]:
    # ±1 floor: any sentiment-bearing token counts for at least unit mass
    pos_sum = sum(s + 1 for s in sentiments if s > 0)
    neg_sum = sum(s - 1 for s in sentiments if s < 0)
    neu_count = sum(1 for s in sentiments if s == 0.0)
    return float(pos_sum), float(neg_sum), neu_count


def score_valence(sentiments: Sequence[float], punct_amplifier: float) -> SentimentScores:
    if not sentiments:
        return SentimentScores()

    # Raw sum + punctuation emphasis; a zero sum takes the negative side
    sum_s = float(sum(sentiments))
    if sum_s > 0:
        sum_s += punct_amplifier
    else:
        sum_s -= punct_amplifier

    compound = normalize(sum_s)

    pos_sum, neg_sum, neu_count = sift_sentiment_scores(sentiments)

    # Punctuation reinforces whichever polarity already dominates
    if pos_sum > abs(neg_sum):
        pos_sum += punct_amplifier
    elif pos_sum < abs(neg_sum):
        neg_sum -= punct_amplifier

    total = pos_sum + abs(neg_sum) + neu_count
    return SentimentScores(
        neg=abs(neg_sum / total),
        neu=abs(neu_count / total),
        pos=abs(pos_sum / total),
        compound=compound,
    )
