"""Data types and result structures for punctseg operations."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class SentenceSpan:
    """A sentence extracted from document text."""
    content: str                     # Sentence text, surrounding whitespace trimmed
    line_number: int                 # 1-based line of the first character
    start_offset: int = 0            # 0-based column of the first character in that line
    file_name: Optional[str] = None  # Source document, when known

    def __str__(self) -> str:
        if self.file_name:
            return f"{self.file_name}:{self.line_number}: {self.content}"
        return f"{self.line_number}: {self.content}"


@dataclass
class DocumentResult:
    """Outcome of extracting sentences from one document in a batch."""
    file_name: str
    sentences: List[SentenceSpan] = field(default_factory=list)
    error: Optional[str] = None      # Failure message; sentences is empty when set

    @property
    def ok(self) -> bool:
        """Whether the document was read and segmented."""
        return self.error is None
