"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, Iterable, Iterator, Optional, Union, Any

from .types import SentenceSpan

# A whole document, or lazily-read chunks of it (an open text file, a list of lines)
TextSource = Union[str, Iterable[str]]


class Segmenter(Protocol):
    """Host-injected sentence segmenter. SentenceExtractor is the built-in implementation."""

    def extract(self, source: TextSource, file_name: Optional[str] = None) -> Iterator[SentenceSpan]:
        """
        Lazily split text into sentence spans.

        Args:
            source: Document text or an iterable of text chunks
            file_name: Optional source name recorded on each span

        Returns:
            Iterator[SentenceSpan]: Sentences in document order
        """
        ...

    def extract_file(self, path: str, encoding: str = "utf-8") -> Iterator[SentenceSpan]:
        """Read a document from disk and split it into sentence spans."""
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...
