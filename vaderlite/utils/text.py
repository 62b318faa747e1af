# coding: utf-8
"""
Tokenizer / text parser.

    parsed = ParsedText.from_text("WOAH!!! ,Who? DO u Think you're?? :)")
    parsed.tokens            # (Token('WOAH'), Token('Who'), ..., Token(':)'))
    parsed.has_mixed_caps    # True
    parsed.punctuation_amplifier

Tokens are whitespace-delimited. Enclosing punctuation is stripped from
word-like tokens; short emoticons such as ":)" or ":^(" survive intact.
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from vaderlite.utils.constants import (
    EMARK_INCR,
    MAX_EMARK,
    MAX_QMARK,
    MAX_QMARK_INCR,
    QMARK_INCR,
)

PUNCTUATION = string.punctuation


@dataclass(frozen=True)
class Token:
    """A slice of text plus its lower-cased lookup key."""

    text: str
    key: str
    is_all_caps: bool

    @classmethod
    def of(cls, text: str) -> "Token":
        # str.isupper(): every cased char is upper and at least one exists
        return cls(text=text, key=text.lower(), is_all_caps=len(text) > 1 and text.isupper())

    def __str__(self) -> str:
        return self.text


def strip_punc_if_word(word_or_emoticon: str) -> str:
    """
    Remove enclosing punctuation: "hello!!!" -> "hello", ",don't??" -> "don't".
    Keeps emoticons whose core would shrink to a single char: ":^)" -> ":^)".
    """
    stripped = word_or_emoticon.strip(PUNCTUATION)
    if len(stripped) <= 1:
        return word_or_emoticon
    return stripped


def tokenize(text: str) -> List[str]:
    return [strip_punc_if_word(tok) for tok in text.split() if len(tok) > 1]


def has_mixed_caps(tokens: Iterable[Token]) -> bool:
    """True once both an ALL CAPS token and a non-caps token have been seen."""
    has_caps = has_non_caps = False
    for tok in tokens:
        if tok.is_all_caps:
            has_caps = True
        else:
            has_non_caps = True
        if has_caps and has_non_caps:
            return True
    return False


def punctuation_emphasis(text: str) -> float:
    """Emphasis from "!" (capped at MAX_EMARK) and "?" (flat past MAX_QMARK)."""
    emark_emph = min(text.count("!"), MAX_EMARK) * EMARK_INCR

    qmark_count = text.count("?")
    if qmark_count > MAX_QMARK:
        qmark_emph = MAX_QMARK_INCR
    else:
        qmark_emph = qmark_count * QMARK_INCR

    return emark_emph + qmark_emph


@dataclass(frozen=True)
class ParsedText:
    """Tokens of one input plus the two text-level emphasis properties."""

    tokens: Tuple[Token, ...]
    has_mixed_caps: bool
    punctuation_amplifier: float

    @classmethod
    def from_text(cls, text: str) -> "ParsedText":
        tokens = tuple(Token.of(t) for t in tokenize(text))
        return cls(
            tokens=tokens,
            has_mixed_caps=has_mixed_caps(tokens),
            punctuation_amplifier=punctuation_emphasis(text),
        )

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(t.key for t in self.tokens)

    @property
    def words(self) -> List[str]:
        return [t.text for t in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)
