# coding: utf-8
"""
Emoji translator — swaps each known emoji character for its description.

    translate_emoji("heyyyy 😀 what're you up to???", emojis)
    # → "heyyyy grinning face what're you up to???"

Matching is per character, so emoji glued to words or to each other
("woah😀😀") are each replaced. Unknown characters pass through unchanged.
"""
from __future__ import annotations

from typing import List, Mapping


def translate_emoji(text: str, emoji_lexicon: Mapping[str, str]) -> str:
    if not emoji_lexicon:
        return text

    out: List[str] = []
    prev_space = True       # start of text counts as a boundary
    after_emoji = False
    for ch in text:
        description = emoji_lexicon.get(ch)
        if description is not None:
            if not prev_space:
                out.append(" ")
            out.append(description)
            prev_space = False
            after_emoji = True
            continue

        is_space = ch.isspace()
        if after_emoji and not is_space:
            out.append(" ")
        out.append(ch)
        prev_space = is_space
        after_emoji = False

    return "".join(out)
