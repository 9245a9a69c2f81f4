"""Per-configuration symbol catalog with override semantics."""

from typing import Dict, Iterable, KeysView, Optional, Union

from ..core.abc import Logger
from ..core.util import describe_char
from .tables import DEFAULT_SYMBOLS, select_table
from .types import Symbol, SymbolType

Role = Union[SymbolType, str]


class SymbolCatalog:
    """
    Resolved symbol settings for one language/variant configuration.

    Symbols are indexed twice: by role and by character value. Both indexes
    are filled through override(), so custom symbols replace built-in ones
    the same way built-ins are loaded. A catalog owns its indexes; use
    clone() to seed several configurations that later diverge.
    """

    def __init__(self, lang: str, variant: Optional[str] = None,
                 custom_symbols: Iterable[Symbol] = (), *,
                 logger: Optional[Logger] = None):
        """
        Build a catalog from the built-in table for lang/variant plus overrides.

        Args:
            lang: Language code ("ja", "ru", anything else uses the default table)
            variant: Optional variant name ("hankaku", "zenkaku", "zenkaku2" for ja)
            custom_symbols: Symbols applied in order after the built-in table
            logger: Optional structured logger
        """
        self._by_role: Dict[SymbolType, Symbol] = {}
        self._by_value: Dict[str, Symbol] = {}
        self.lang = lang or ""
        self.log = logger

        table_name, table, self.variant = select_table(self.lang, variant)
        if self.log:
            self.log.info("symbol_table_selected",
                          lang=self.lang, variant=self.variant, table=table_name)

        for symbol in table.values():
            self.override(symbol)
        for symbol in custom_symbols:
            if self.log:
                self.log.info("symbol_overridden",
                              type=symbol.type.name, value=describe_char(symbol.value))
            self.override(symbol)

    def override(self, symbol: Symbol) -> None:
        """
        Insert or replace a symbol definition.

        The role entry and the value entry both point at the new symbol. If
        the role previously had a different value, that old value keeps its
        entry in the value index.
        """
        self._by_role[symbol.type] = symbol
        self._by_value[symbol.value] = symbol

    @property
    def names(self) -> KeysView:
        """Configured roles."""
        return self._by_role.keys()

    def lookup_by_role(self, role: Role) -> Optional[Symbol]:
        """Get the symbol configured for a role, or None."""
        return self._by_role.get(SymbolType.coerce(role))

    def lookup_by_value(self, value: str) -> Optional[Symbol]:
        """Get the symbol registered for a character value, or None."""
        return self._by_value.get(value)

    def value_or_default(self, role: Role) -> str:
        """
        Character for a role, falling back to the default table.

        Callers always get a usable character, even from a catalog that
        does not configure the role.
        """
        role = SymbolType.coerce(role)
        symbol = self._by_role.get(role)
        if symbol is not None:
            return symbol.value
        return DEFAULT_SYMBOLS[role].value

    def contains_value(self, value: str) -> bool:
        """Whether a character value is registered."""
        return value in self._by_value

    def clone(self) -> "SymbolCatalog":
        """Independent copy; overrides on either side do not affect the other."""
        clone = SymbolCatalog.__new__(SymbolCatalog)
        clone.__dict__.update(self.__dict__)
        clone._by_role = dict(self._by_role)
        clone._by_value = dict(self._by_value)
        return clone

    __copy__ = clone

    def __deepcopy__(self, memo: dict) -> "SymbolCatalog":
        # Symbols are immutable, so copying the indexes is enough
        return self.clone()

    def __contains__(self, role: Role) -> bool:
        return self.lookup_by_role(role) is not None

    def __len__(self) -> int:
        return len(self._by_role)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SymbolCatalog):
            return NotImplemented
        return (self.lang == other.lang
                and self.variant == other.variant
                and self._by_role == other._by_role)

    # Mutable through override(), so not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return (f"SymbolCatalog(lang={self.lang!r}, variant={self.variant!r}, "
                f"symbols={len(self._by_role)})")


def resolve(lang: str, variant: Optional[str] = None,
            overrides: Iterable[Symbol] = (), *,
            logger: Optional[Logger] = None) -> SymbolCatalog:
    """
    Resolve the catalog for a language/variant and apply custom symbols.

    Never fails: unknown languages use the default table and unknown
    Japanese variants fall back to "zenkaku".

    Args:
        lang: Language code
        variant: Optional variant name
        overrides: Custom symbols applied in list order
        logger: Optional structured logger receiving the selection trace

    Returns:
        SymbolCatalog: Newly built, caller-owned catalog
    """
    return SymbolCatalog(lang, variant, overrides, logger=logger)
