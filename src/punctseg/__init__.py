"""
punctseg - Language-aware symbol catalogs and sentence extraction.

Resolves which characters act as terminators, brackets and quotes for a
language/variant, and uses that catalog to split document text into
sentences for downstream rule checkers.
"""

__version__ = "0.1.0"

from .core.errors import (
    PunctsegError,
    ConfigurationError,
    DocumentLoadError,
    EncodingError,
)
from .core.types import SentenceSpan
from .symbols import Symbol, SymbolType, SymbolCatalog, resolve
from .segmenters.sentence import SentenceExtractor

__all__ = [
    "PunctsegError",
    "ConfigurationError",
    "DocumentLoadError",
    "EncodingError",
    "SentenceSpan",
    "Symbol",
    "SymbolType",
    "SymbolCatalog",
    "resolve",
    "SentenceExtractor",
]
