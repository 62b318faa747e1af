# coding: utf-8
"""
Valence rule engine and contrastive ("but") adjuster.

For every token the engine resolves a lexicon valence and runs the fixed
rule chain:

  1. booster words (and the "kind of" bigram) score 0 themselves
  2. ALL CAPS emphasis under a mixed-caps text            ±C_INCR
  3. lookback over distances 1..3, each step:
       booster/damper scalar of the context token, damped by distance
       negation check anchored at that distance
       (distance 3 only) special idioms + multi-word boosters
  4. "least" comparison check

The lookback is a tiny state machine: LOOKBACK_STEPS lists each distance
with its damping factor and its negation rule.
"""
from __future__ import annotations

from typing import Callable, List, NamedTuple, Sequence, Tuple, Union

from vaderlite.core.lexicon import Lexicon
from vaderlite.utils.constants import (
    BUT_AFTER_WEIGHT,
    BUT_BEFORE_WEIGHT,
    C_INCR,
    LOOKBACK_DAMPING,
    N_SCALAR,
    NEVER_SCALAR,
    RuleTables,
)
from vaderlite.utils.text import ParsedText, Token

Keys = Sequence[str]

_NEVER_TARGETS = ("so", "this")
_WITHOUT_DOUBT = ("without", "doubt")


# ---------------------------------------------------------------------------
# Booster / damper scalar
# ---------------------------------------------------------------------------

def scalar_inc_dec(token: Token, valence: float, has_mixed_caps: bool,
                   rules: RuleTables) -> float:
    """
    Scalar contributed by a context token: its booster value, sign-flipped
    for a negative head word, plus caps emphasis when the booster itself
    is shouted.
    """
    scalar = rules.boosters.get(token.key)
    if scalar is None:
        return 0.0
    if valence < 0:
        scalar *= -1
    if token.is_all_caps and has_mixed_caps:
        if valence > 0:
            scalar += C_INCR
        elif valence < 0:
            scalar -= C_INCR
    return scalar


# ---------------------------------------------------------------------------
# Negation checks, one per lookback distance
# ---------------------------------------------------------------------------

def _negation_at_1(valence: float, keys: Keys, i: int, rules: RuleTables) -> float:
    if rules.is_negation(keys[i - 1]):
        return valence * N_SCALAR
    return valence


def _negation_at_2(valence: float, keys: Keys, i: int, rules: RuleTables) -> float:
    first, second = keys[i - 2], keys[i - 1]
    if first == "never" and second in _NEVER_TARGETS:
        return valence * NEVER_SCALAR
    if (first, second) == _WITHOUT_DOUBT:
        return valence
    if rules.is_negation(first):
        return valence * N_SCALAR
    return valence


def _ordered_in(span: Keys, first: str, seconds: Sequence[str]) -> bool:
    """`first` followed, not necessarily adjacently, by one of `seconds`."""
    if first not in span:
        return False
    after = span[list(span).index(first) + 1:]
    return any(s in after for s in seconds)


def _negation_at_3(valence: float, keys: Keys, i: int, rules: RuleTables) -> float:
    span = keys[i - 3:i]
    # "has never been this good"
    if _ordered_in(span, "never", _NEVER_TARGETS):
        return valence * NEVER_SCALAR
    if _ordered_in(span, "without", ("doubt",)):
        return valence
    if rules.is_negation(span[0]):
        return valence * N_SCALAR
    return valence


class LookbackStep(NamedTuple):
    distance: int
    damping: float
    negation_check: Callable[[float, Keys, int, RuleTables], float]


LOOKBACK_STEPS: Tuple[LookbackStep, ...] = (
    LookbackStep(1, LOOKBACK_DAMPING[1], _negation_at_1),
    LookbackStep(2, LOOKBACK_DAMPING[2], _negation_at_2),
    LookbackStep(3, LOOKBACK_DAMPING[3], _negation_at_3),
)


# ---------------------------------------------------------------------------
# Idioms and "least"
# ---------------------------------------------------------------------------

def _contains_phrase(window: Keys, phrase: Tuple[str, ...]) -> bool:
    n = len(phrase)
    return any(tuple(window[j:j + n]) == phrase for j in range(len(window) - n + 1))


def special_idioms_check(valence: float, keys: Keys, i: int, rules: RuleTables) -> float:
    """
    Override with a fixed idiom valence when an idiom sits in tokens
    i-3 .. i+2 (first match wins), then add every multi-word booster
    ("kind of", "sort of", ...) found among the three tokens before i.
    """
    window = keys[max(0, i - 3):i + 3]
    for phrase, value in rules.idiom_phrases:
        if _contains_phrase(window, phrase):
            valence = value
            break

    preceding = keys[max(0, i - 3):i]
    for phrase, scalar in rules.multiword_boosters:
        if _contains_phrase(preceding, phrase):
            valence += scalar
    return valence


def least_check(valence: float, keys: Keys, i: int, lexicon: Lexicon) -> float:
    # "least compelling" negates; "at least" / "very least" do not
    if i > 0 and keys[i - 1] == "least" and keys[i - 1] not in lexicon:
        if i > 1 and keys[i - 2] in ("at", "very"):
            return valence
        return valence * N_SCALAR
    return valence


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class ValenceRuleEngine:
    """Per-token valence resolution over one ParsedText. Holds no per-call state."""

    def __init__(self, lexicon: Lexicon, rules: RuleTables):
        self.lexicon = lexicon
        self.rules = rules

    def is_modifier(self, tokens: Sequence[Token], i: int) -> bool:
        """Booster words and the "kind of" bigram carry no valence of their own."""
        key = tokens[i].key
        if key in self.rules.boosters:
            return True
        return key == "kind" and i + 1 < len(tokens) and tokens[i + 1].key == "of"

    def sentiment_valence(self, parsed: ParsedText, i: int, keys: Keys) -> float:
        tokens = parsed.tokens
        token = tokens[i]
        valence = self.lexicon.get(token)
        if valence is None:
            return 0.0

        # ALL CAPS emphasis (while other words are not)
        if token.is_all_caps and parsed.has_mixed_caps:
            if valence > 0:
                valence += C_INCR
            elif valence < 0:
                valence -= C_INCR

        for step in LOOKBACK_STEPS:
            d = step.distance
            if i < d:
                break
            context = tokens[i - d]
            if context in self.lexicon:
                continue
            s = scalar_inc_dec(context, valence, parsed.has_mixed_caps, self.rules)
            valence += s * step.damping
            valence = step.negation_check(valence, keys, i, self.rules)
            if d == 3:
                valence = special_idioms_check(valence, keys, i, self.rules)

        return least_check(valence, keys, i, self.lexicon)

    def valences(self, parsed: ParsedText) -> List[float]:
        keys = parsed.keys
        sentiments: List[float] = []
        for i in range(len(parsed.tokens)):
            if self.is_modifier(parsed.tokens, i):
                sentiments.append(0.0)
            else:
                sentiments.append(self.sentiment_valence(parsed, i, keys))
        return sentiments


# ---------------------------------------------------------------------------
# Contrastive conjunction ("but") weighting
# ---------------------------------------------------------------------------

def but_check(tokens: Sequence[Union[Token, str]], sentiments: Sequence[float]) -> List[float]:
    """
    Halve valences before the first "but" and weight those after by 1.5.
    Later occurrences of "but" have no further effect.
    """
    keys = [t.key if isinstance(t, Token) else t.lower() for t in tokens]
    try:
        but_idx = keys.index("but")
    except ValueError:
        return list(sentiments)

    result = list(sentiments)
    for i, s in enumerate(sentiments):
        if i < but_idx:
            result[i] = s * BUT_BEFORE_WEIGHT
        elif i > but_idx:
            result[i] = s * BUT_AFTER_WEIGHT
    return result
