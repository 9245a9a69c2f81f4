"""Symbol catalog: per-language character roles with override semantics."""

from .types import Symbol, SymbolType, TERMINATOR_TYPES, DIGIT_TYPES, PAIRED_TYPES
from .tables import (
    DEFAULT_SYMBOLS,
    RUSSIAN_SYMBOLS,
    JAPANESE_SYMBOLS,
    JAPANESE_ZENKAKU2_SYMBOLS,
    JAPANESE_HANKAKU_SYMBOLS,
)
from .catalog import SymbolCatalog, resolve

__all__ = [
    "Symbol",
    "SymbolType",
    "TERMINATOR_TYPES",
    "DIGIT_TYPES",
    "PAIRED_TYPES",
    "DEFAULT_SYMBOLS",
    "RUSSIAN_SYMBOLS",
    "JAPANESE_SYMBOLS",
    "JAPANESE_ZENKAKU2_SYMBOLS",
    "JAPANESE_HANKAKU_SYMBOLS",
    "SymbolCatalog",
    "resolve",
]
