"""Deterministic sentence extractor driven by a symbol catalog."""

from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from ..core.abc import Logger, TextSource
from ..core.errors import ConfigurationError, DocumentLoadError
from ..core.types import SentenceSpan
from ..core.util import describe_char, is_ascii_alnum
from ..symbols.catalog import SymbolCatalog, resolve
from ..symbols.types import PAIRED_TYPES, TERMINATOR_TYPES, SymbolType
from .reader import read_document

# Tokens whose final full stop does not end a sentence
DEFAULT_ABBREVIATIONS = (
    "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Sr.", "Jr.", "St.",
    "vs.", "e.g.", "i.e.", "cf.",
)

# Words written with a leading apostrophe rather than an opening quote
ELIDED_WORDS = frozenset((
    "tis", "twas", "twere", "twill", "em", "cause", "til", "round", "n",
))
_MAX_ELISION = max(len(w) for w in ELIDED_WORDS)


class _Cursor:
    """Forward-only character reader over text chunks with bounded lookahead."""

    def __init__(self, source: TextSource):
        self._chunks = iter((source,)) if isinstance(source, str) else iter(source)
        self._chunk = ""
        self._pos = 0
        self.line = 1        # line of the next character (1-based)
        self.column = 0      # column of the next character (0-based)

    def peek(self, offset: int = 0) -> Optional[str]:
        while self._pos + offset >= len(self._chunk):
            chunk = next(self._chunks, None)
            if chunk is None:
                return None
            if not isinstance(chunk, str):
                raise TypeError(f"Text chunks must be str, got {type(chunk).__name__}")
            self._chunk = self._chunk[self._pos:] + chunk
            self._pos = 0
        return self._chunk[self._pos + offset]

    def next(self) -> Optional[str]:
        ch = self.peek()
        if ch is None:
            return None
        self._pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch


class SentenceExtractor:
    """
    Split document text into sentences using catalog terminators.

    A run of terminator characters (e.g. "?!") ends one sentence, together
    with any closing brackets or quotes right after it. A single ASCII full
    stop between ASCII letters or digits ("3.14", "example.com") does not
    split, nor does a single full stop closing a known abbreviation ("Dr.").
    Full-width terminators always split.

    With track_pairs enabled, terminators inside an open bracket or quote
    do not split; the sentence ends once a terminator run is followed by
    the closer of the outermost pair. An apostrophe starting a decade
    ("'90s") or an elided word ("'Twas") does not open a quote.
    """

    def __init__(self, catalog: Optional[SymbolCatalog], *,
                 track_pairs: bool = False,
                 abbreviations: Optional[Iterable[str]] = DEFAULT_ABBREVIATIONS,
                 logger: Optional[Logger] = None):
        """
        Initialize extractor from a resolved catalog.

        Args:
            catalog: Resolved symbol catalog (required)
            track_pairs: Suppress terminators inside open brackets/quotes
            abbreviations: Tokens ending in a full stop that do not end a sentence
            logger: Optional structured logger

        Raises:
            ConfigurationError: If no catalog is given
        """
        if catalog is None:
            raise ConfigurationError("Symbol catalog is not configured", element="symbols")

        self.catalog = catalog
        self.track_pairs = track_pairs
        self.abbreviations: FrozenSet[str] = frozenset(abbreviations or ())
        self.log = logger

        # Roles missing from the catalog fall back to the default table
        self.terminator_chars: Tuple[str, ...] = tuple(
            catalog.value_or_default(role) for role in TERMINATOR_TYPES)
        self.terminators: FrozenSet[str] = frozenset(self.terminator_chars)
        self.full_stop = catalog.value_or_default(SymbolType.FULL_STOP)

        self._openers: Dict[str, str] = {}   # opening char -> closing char
        self._closers: Dict[str, str] = {}   # closing char -> opening char
        for left, right in PAIRED_TYPES:
            opening = catalog.lookup_by_role(left)
            closing = catalog.lookup_by_role(right)
            if opening is None or closing is None:
                continue
            if opening.value in self.terminators or closing.value in self.terminators:
                continue
            self._openers[opening.value] = closing.value
            self._closers[closing.value] = opening.value

        # A single quote that both opens and closes doubles as the apostrophe
        single = catalog.lookup_by_role(SymbolType.LEFT_SINGLE_QUOTATION_MARK)
        self._apostrophe: Optional[str] = None
        if single is not None and self._openers.get(single.value) == single.value:
            self._apostrophe = single.value

        if self.log:
            for ch in self.terminator_chars:
                self.log.info("terminator_added", char=describe_char(ch))

    def extract(self, source: TextSource, file_name: Optional[str] = None) -> Iterator[SentenceSpan]:
        """
        Lazily split text into sentence spans.

        Args:
            source: Document text, or an iterable of text chunks such as an open file
            file_name: Optional source name recorded on each span

        Returns:
            Iterator[SentenceSpan]: Sentences in document order; each call
            starts a fresh scan
        """
        if source is None:
            raise DocumentLoadError("Input text is None", file_name=file_name)
        return self._scan(_Cursor(source), file_name)

    def extract_file(self, path: Union[str, Path], encoding: str = "utf-8") -> Iterator[SentenceSpan]:
        """
        Read a document and split it into sentence spans.

        The file is read and decoded before this returns, so read and
        encoding failures are raised here rather than mid-iteration.

        Raises:
            DocumentLoadError: If the file is missing or unreadable
            EncodingError: If the file does not decode with the given encoding
        """
        text = read_document(path, encoding)
        return self.extract(text, file_name=str(path))

    def segment(self, text: str) -> List[str]:
        """Sentence contents of text, without position metadata."""
        return [span.content for span in self.extract(text)]

    def _scan(self, cursor: _Cursor, file_name: Optional[str]) -> Iterator[SentenceSpan]:
        buffer: List[str] = []
        start: Optional[Tuple[int, int]] = None
        open_pairs: List[str] = []   # closing chars expected, innermost last
        blank_run = 0                # newlines seen since the last visible char

        while True:
            line, column = cursor.line, cursor.column
            ch = cursor.next()
            if ch is None:
                break

            if start is None:
                if ch.isspace():
                    continue
                start = (line, column)

            if ch not in self.terminators:
                if ch.isspace():
                    if ch == "\n":
                        blank_run += 1
                        # An unclosed pair does not survive a blank line
                        if blank_run >= 2:
                            open_pairs.clear()
                else:
                    blank_run = 0
                    if self.track_pairs:
                        self._track_pair(ch, buffer[-1] if buffer else None, cursor, open_pairs)
                buffer.append(ch)
                continue

            buffer.append(ch)
            blank_run = 0
            run = 1
            while cursor.peek() is not None and cursor.peek() in self.terminators:
                buffer.append(cursor.next())
                run += 1
            absorbed = self._absorb_closers(cursor, buffer, open_pairs)

            if self._is_boundary(cursor.peek(), buffer, run, absorbed, open_pairs):
                yield self._span(buffer, start, file_name)
                buffer = []
                start = None
                open_pairs = []

        if start is not None:
            yield self._span(buffer, start, file_name)

    def _can_open(self, prev: Optional[str]) -> bool:
        """A symmetric quote opens at the start, after whitespace, or after another opener."""
        return prev is None or prev.isspace() or prev in self._openers

    def _is_elision(self, ch: str, cursor: _Cursor) -> bool:
        """An apostrophe starting a decade ('90s) or a known elided word ('Twas)."""
        if ch != self._apostrophe:
            return False
        word: List[str] = []
        while len(word) <= _MAX_ELISION:
            nxt = cursor.peek(len(word))
            if nxt is None or not nxt.isalnum():
                break
            word.append(nxt)
        if not word:
            return False
        return word[0].isdigit() or "".join(word).lower() in ELIDED_WORDS

    def _track_pair(self, ch: str, prev: Optional[str], cursor: _Cursor,
                    open_pairs: List[str]) -> None:
        symmetric = self._openers.get(ch) == ch
        opening = self._can_open(prev) and not self._is_elision(ch, cursor)
        if ch in open_pairs and (not symmetric or not self._can_open(prev)):
            # Unwind to the matching opener; unclosed inner pairs are dropped
            while open_pairs.pop() != ch:
                pass
            return
        if ch in self._openers and (not symmetric or opening):
            open_pairs.append(self._openers[ch])

    def _absorb_closers(self, cursor: _Cursor, buffer: List[str], open_pairs: List[str]) -> int:
        absorbed = 0
        while True:
            ch = cursor.peek()
            if ch is None or ch not in self._closers:
                break
            if self.track_pairs:
                if ch not in open_pairs:
                    break
                while open_pairs.pop() != ch:
                    pass
            buffer.append(cursor.next())
            absorbed += 1
        return absorbed

    def _is_boundary(self, next_ch: Optional[str], buffer: List[str], run: int,
                     absorbed: int, open_pairs: List[str]) -> bool:
        if self.track_pairs and open_pairs:
            return False
        if run == 1 and absorbed == 0 and buffer[-1] == self.full_stop:
            if self._joins_ascii_words(buffer, next_ch):
                return False
            return not self._ends_with_abbreviation(buffer)
        return True

    @staticmethod
    def _joins_ascii_words(buffer: List[str], next_ch: Optional[str]) -> bool:
        """An ASCII full stop between ASCII letters or digits ("3.14", "example.com")."""
        return (buffer[-1] == "." and len(buffer) > 1
                and is_ascii_alnum(buffer[-2])
                and next_ch is not None and is_ascii_alnum(next_ch))

    def _ends_with_abbreviation(self, buffer: List[str]) -> bool:
        if not self.abbreviations:
            return False
        i = len(buffer)
        while i > 0 and not buffer[i - 1].isspace():
            i -= 1
        token = "".join(buffer[i:]).lstrip("".join(self._openers))
        return token in self.abbreviations

    @staticmethod
    def _span(buffer: List[str], start: Tuple[int, int], file_name: Optional[str]) -> SentenceSpan:
        line, column = start
        return SentenceSpan(
            content="".join(buffer).strip(),
            line_number=line,
            start_offset=column,
            file_name=file_name,
        )


def create_sentence_extractor(lang: str = "en", variant: Optional[str] = None, *,
                              track_pairs: bool = False,
                              logger: Optional[Logger] = None) -> SentenceExtractor:
    """Create an extractor for a built-in language/variant without overrides."""
    return SentenceExtractor(resolve(lang, variant, logger=logger),
                             track_pairs=track_pairs, logger=logger)
