# coding: utf-8
"""
Numeric constants and static rule tables for the VADER-style scorer.

All tables are read-only and shared by every analyzer instance. Keys are
lower-case; tokens are compared through their pre-lowered ``Token.key``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

# ---------------------------------------------------------------------------
# Constants (empirically derived, Hutto & Gilbert 2014)
# ---------------------------------------------------------------------------

# Booster additive increment/decrement
B_INCR = 0.293
B_DECR = -0.293

# ALL CAPS amplification increment
C_INCR = 0.733

# Negation scalar
N_SCALAR = -0.740

# Punctuation emphasis per "?" / "!"
QMARK_INCR = 0.180
EMARK_INCR = 0.292

# Beyond these counts extra marks add nothing (or a flat cap for "?")
MAX_EMARK = 4
MAX_QMARK = 3
MAX_QMARK_INCR = 0.96

# Normalization alpha: approximates the max expected raw sum
NORMALIZATION_ALPHA = 15.0

# Booster damping by distance from the head word
LOOKBACK_DAMPING: Mapping[int, float] = MappingProxyType({1: 1.0, 2: 0.95, 3: 0.9})

# "never so good" / "never this good" reads as emphasis, not negation
NEVER_SCALAR = 1.25

# Contrastive weighting around the first "but"
BUT_BEFORE_WEIGHT = 0.5
BUT_AFTER_WEIGHT = 1.5

# ---------------------------------------------------------------------------
# Negation words
# ---------------------------------------------------------------------------
NEGATE: FrozenSet[str] = frozenset([
    "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
    "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
    "dont", "hadnt", "hasnt", "havent", "isnt", "mightnt", "mustnt", "neither",
    "don't", "hadn't", "hasn't", "haven't", "isn't", "mightn't", "mustn't",
    "neednt", "needn't", "never", "none", "nope", "nor", "not", "nothing", "nowhere",
    "oughtnt", "shant", "shouldnt", "uhuh", "wasnt", "werent",
    "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
    "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom", "despite",
])

# Any token containing this fragment negates, listed or not
NEGATION_CONTRACTION = "n't"

# ---------------------------------------------------------------------------
# Booster / dampener dictionary (additive scalars)
# ---------------------------------------------------------------------------
BOOSTER_DICT: Mapping[str, float] = MappingProxyType({
    # Intensifiers
    "absolutely": B_INCR, "amazingly": B_INCR, "awfully": B_INCR,
    "completely": B_INCR, "considerably": B_INCR, "decidedly": B_INCR,
    "deeply": B_INCR, "effing": B_INCR, "enormously": B_INCR,
    "entirely": B_INCR, "especially": B_INCR, "exceptionally": B_INCR,
    "extremely": B_INCR, "fabulously": B_INCR, "flipping": B_INCR,
    "flippin": B_INCR, "fricking": B_INCR, "frickin": B_INCR,
    "frigging": B_INCR, "friggin": B_INCR, "fully": B_INCR,
    "fucking": B_INCR, "greatly": B_INCR, "hella": B_INCR,
    "highly": B_INCR, "hugely": B_INCR, "incredibly": B_INCR,
    "intensely": B_INCR, "majorly": B_INCR, "more": B_INCR,
    "most": B_INCR, "particularly": B_INCR, "purely": B_INCR,
    "quite": B_INCR, "really": B_INCR, "remarkably": B_INCR,
    "so": B_INCR, "substantially": B_INCR, "thoroughly": B_INCR,
    "totally": B_INCR, "tremendously": B_INCR, "uber": B_INCR,
    "unbelievably": B_INCR, "unusually": B_INCR, "utterly": B_INCR,
    "very": B_INCR,
    # Diminishers
    "almost": B_DECR, "barely": B_DECR, "hardly": B_DECR,
    "just enough": B_DECR, "kind of": B_DECR, "kinda": B_DECR,
    "kindof": B_DECR, "kind-of": B_DECR, "less": B_DECR,
    "little": B_DECR, "marginally": B_DECR, "occasionally": B_DECR,
    "partly": B_DECR, "scarcely": B_DECR, "slightly": B_DECR,
    "somewhat": B_DECR, "sort of": B_DECR, "sorta": B_DECR,
    "sortof": B_DECR, "sort-of": B_DECR,
})

# ---------------------------------------------------------------------------
# Special-case idioms containing lexicon words (fixed valence override)
# ---------------------------------------------------------------------------
SPECIAL_CASE_IDIOMS: Mapping[str, float] = MappingProxyType({
    "the shit": 3.0,
    "the bomb": 3.0,
    "bad ass": 1.5,
    "bus stop": 0.0,
    "yeah right": -2.0,
    "kiss of death": -1.5,
    "to die for": 3.0,
    "beating heart": 3.1,
    "broken heart": -2.9,
})


# ---------------------------------------------------------------------------
# Rule table bundle
# ---------------------------------------------------------------------------

def _freeze(table: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({str(k).lower(): float(v) for k, v in table.items()})


@dataclass(frozen=True, eq=False)
class RuleTables:
    """
    Immutable bundle of the booster, negation and idiom tables.

    Pass a customised instance to an analyzer to score with domain boosters
    or idioms; the module-level defaults are never mutated.
    """

    boosters: Mapping[str, float] = field(default_factory=lambda: BOOSTER_DICT)
    negations: FrozenSet[str] = NEGATE
    idioms: Mapping[str, float] = field(default_factory=lambda: SPECIAL_CASE_IDIOMS)
    # Derived: booster phrases spanning several tokens, as token tuples
    multiword_boosters: Tuple[Tuple[Tuple[str, ...], float], ...] = field(
        init=False, repr=False, compare=False
    )
    idiom_phrases: Tuple[Tuple[Tuple[str, ...], float], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "multiword_boosters", tuple(
            (tuple(phrase.split()), scalar)
            for phrase, scalar in self.boosters.items()
            if len(phrase.split()) > 1
        ))
        object.__setattr__(self, "idiom_phrases", tuple(
            (tuple(phrase.split()), value) for phrase, value in self.idioms.items()
        ))

    @classmethod
    def default(cls) -> "RuleTables":
        return _DEFAULT_RULES

    @classmethod
    def build(cls,
              boosters: Optional[Mapping[str, float]] = None,
              negations: Optional[FrozenSet[str]] = None,
              idioms: Optional[Mapping[str, float]] = None) -> "RuleTables":
        """Build tables from plain dicts/sets, lower-casing every key."""
        return cls(
            boosters=_freeze(boosters) if boosters is not None else BOOSTER_DICT,
            negations=(frozenset(w.lower() for w in negations)
                       if negations is not None else NEGATE),
            idioms=_freeze(idioms) if idioms is not None else SPECIAL_CASE_IDIOMS,
        )

    def is_negation(self, key: str) -> bool:
        return key in self.negations or NEGATION_CONTRACTION in key


_DEFAULT_RULES = RuleTables()
