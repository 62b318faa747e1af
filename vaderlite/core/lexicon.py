# coding: utf-8
"""
Lexicon store — word valences and emoji descriptions.

Both tables are read once and shared read-only by every scoring call.
The default data is the lexicon pair shipped with the ``vaderSentiment``
distribution; any file in the same tab-separated format can replace it:

    vader_lexicon.txt        word<TAB>mean valence<TAB>std<TAB>[ratings]
    emoji_utf8_lexicon.txt   emoji<TAB>description

Malformed data raises LexiconLoadError at load time, never during scoring.
"""
from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from vaderlite.utils.text import Token

logger = logging.getLogger(__name__)

DATA_PACKAGE = "vaderSentiment"
LEXICON_FILE = "vader_lexicon.txt"
EMOJI_LEXICON_FILE = "emoji_utf8_lexicon.txt"

PathLike = Union[str, Path]


class LexiconLoadError(ValueError):
    """A lexicon source is missing or has an unparseable entry."""

    def __init__(self, source: str, message: str, line_no: Optional[int] = None):
        self.source = source
        self.line_no = line_no
        where = f"{source}:{line_no}" if line_no is not None else source
        super().__init__(f"{where}: {message}")


def _iter_rows(raw: str, source: str, min_columns: int) -> Iterator[Tuple[int, list]]:
    for line_no, line in enumerate(raw.splitlines(), start=1):
        if not line.strip():
            continue
        cols = line.split("\t")
        if len(cols) < min_columns or not cols[0]:
            raise LexiconLoadError(source, f"expected {min_columns} tab-separated columns", line_no)
        yield line_no, cols


def _read_text(path: PathLike) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise LexiconLoadError(str(path), f"cannot read lexicon file ({e})") from e


def _read_packaged(filename: str) -> str:
    try:
        return resources.files(DATA_PACKAGE).joinpath(filename).read_text(encoding="utf-8")
    except (ModuleNotFoundError, OSError) as e:
        raise LexiconLoadError(f"{DATA_PACKAGE}/{filename}", f"packaged lexicon unavailable ({e})") from e


def _key_of(word: Union[Token, str]) -> str:
    return word.key if isinstance(word, Token) else word.lower()


# ---------------------------------------------------------------------------
# Word → valence
# ---------------------------------------------------------------------------

class Lexicon(Mapping[str, float]):
    """
    Case-insensitive, immutable word → valence mapping.

    Keys are lower-cased once here; lookups take a Token (pre-lowered key)
    or a plain string.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, float]] = None, source: str = "<mapping>"):
        table: Dict[str, float] = {}
        for word, valence in (entries or {}).items():
            key = word.lower()
            if key in table:
                logger.debug("%s: duplicate entry %r after lower-casing, keeping first", source, word)
                continue
            table[key] = float(valence)
        self._entries = table

    # -- construction -------------------------------------------------------
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "Lexicon":
        return cls(mapping)

    @classmethod
    def from_text(cls, raw: str, source: str = "<text>") -> "Lexicon":
        entries: Dict[str, float] = {}
        for line_no, cols in _iter_rows(raw, source, min_columns=2):
            word = cols[0]
            try:
                valence = float(cols[1])
            except ValueError:
                raise LexiconLoadError(source, f"valence {cols[1]!r} for {word!r} is not a number", line_no) from None
            entries.setdefault(word, valence)
        lexicon = cls(entries, source=source)
        logger.info("Loaded %d lexicon entries from %s", len(lexicon), source)
        return lexicon

    @classmethod
    def from_file(cls, path: PathLike) -> "Lexicon":
        return cls.from_text(_read_text(path), source=str(path))

    @classmethod
    def packaged(cls) -> "Lexicon":
        """The VADER lexicon bundled with the vaderSentiment distribution."""
        return cls.from_text(_read_packaged(LEXICON_FILE), source=f"{DATA_PACKAGE}/{LEXICON_FILE}")

    def merged(self, extra: Mapping[str, float]) -> "Lexicon":
        """New lexicon with `extra` terms added; extra wins on conflict."""
        combined = dict(self._entries)
        combined.update({w.lower(): float(v) for w, v in extra.items()})
        return Lexicon(combined, source="<merged>")

    # -- lookup -------------------------------------------------------------
    def get(self, word, default=None):  # type: ignore[override]
        return self._entries.get(_key_of(word), default)

    def __contains__(self, word) -> bool:  # type: ignore[override]
        return isinstance(word, (Token, str)) and _key_of(word) in self._entries

    def __getitem__(self, word: Union[Token, str]) -> float:
        return self._entries[_key_of(word)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon({len(self._entries)} entries)"


# ---------------------------------------------------------------------------
# Emoji → description
# ---------------------------------------------------------------------------

class EmojiLexicon(Mapping[str, str]):
    """Case-sensitive emoji character → description mapping."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries: Dict[str, str] = dict(entries or {})

    @classmethod
    def from_text(cls, raw: str, source: str = "<text>") -> "EmojiLexicon":
        entries: Dict[str, str] = {}
        for line_no, cols in _iter_rows(raw, source, min_columns=2):
            description = cols[1].strip()
            if not description:
                raise LexiconLoadError(source, f"empty description for {cols[0]!r}", line_no)
            entries.setdefault(cols[0], description)
        logger.info("Loaded %d emoji descriptions from %s", len(entries), source)
        return cls(entries)

    @classmethod
    def from_file(cls, path: PathLike) -> "EmojiLexicon":
        return cls.from_text(_read_text(path), source=str(path))

    @classmethod
    def packaged(cls) -> "EmojiLexicon":
        return cls.from_text(
            _read_packaged(EMOJI_LEXICON_FILE), source=f"{DATA_PACKAGE}/{EMOJI_LEXICON_FILE}"
        )

    def get(self, emoji, default=None):  # type: ignore[override]
        return self._entries.get(emoji, default)

    def __getitem__(self, emoji: str) -> str:
        return self._entries[emoji]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EmojiLexicon({len(self._entries)} entries)"


def load_lexicon(path: Optional[PathLike] = None) -> Lexicon:
    return Lexicon.from_file(path) if path else Lexicon.packaged()


def load_emoji_lexicon(path: Optional[PathLike] = None) -> EmojiLexicon:
    return EmojiLexicon.from_file(path) if path else EmojiLexicon.packaged()
