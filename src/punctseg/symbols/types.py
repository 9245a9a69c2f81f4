"""Symbol roles and the Symbol value type."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from ..core.util import single_char


class SymbolType(Enum):
    """Semantic role a character plays in a document."""
    SPACE = "SPACE"
    EXCLAMATION_MARK = "EXCLAMATION_MARK"
    NUMBER_SIGN = "NUMBER_SIGN"
    DOLLAR_SIGN = "DOLLAR_SIGN"
    PERCENT_SIGN = "PERCENT_SIGN"
    QUESTION_MARK = "QUESTION_MARK"
    AMPERSAND = "AMPERSAND"
    LEFT_PARENTHESIS = "LEFT_PARENTHESIS"
    RIGHT_PARENTHESIS = "RIGHT_PARENTHESIS"
    ASTERISK = "ASTERISK"
    COMMA = "COMMA"
    FULL_STOP = "FULL_STOP"
    PLUS_SIGN = "PLUS_SIGN"
    HYPHEN_SIGN = "HYPHEN_SIGN"
    SLASH = "SLASH"
    COLON = "COLON"
    SEMICOLON = "SEMICOLON"
    LESS_THAN_SIGN = "LESS_THAN_SIGN"
    EQUAL_SIGN = "EQUAL_SIGN"
    GREATER_THAN_SIGN = "GREATER_THAN_SIGN"
    AT_MARK = "AT_MARK"
    LEFT_SQUARE_BRACKET = "LEFT_SQUARE_BRACKET"
    RIGHT_SQUARE_BRACKET = "RIGHT_SQUARE_BRACKET"
    BACKSLASH = "BACKSLASH"
    CIRCUMFLEX_ACCENT = "CIRCUMFLEX_ACCENT"
    LOW_LINE = "LOW_LINE"
    LEFT_CURLY_BRACKET = "LEFT_CURLY_BRACKET"
    RIGHT_CURLY_BRACKET = "RIGHT_CURLY_BRACKET"
    VERTICAL_BAR = "VERTICAL_BAR"
    TILDE = "TILDE"
    LEFT_SINGLE_QUOTATION_MARK = "LEFT_SINGLE_QUOTATION_MARK"
    RIGHT_SINGLE_QUOTATION_MARK = "RIGHT_SINGLE_QUOTATION_MARK"
    LEFT_DOUBLE_QUOTATION_MARK = "LEFT_DOUBLE_QUOTATION_MARK"
    RIGHT_DOUBLE_QUOTATION_MARK = "RIGHT_DOUBLE_QUOTATION_MARK"
    DIGIT_ZERO = "DIGIT_ZERO"
    DIGIT_ONE = "DIGIT_ONE"
    DIGIT_TWO = "DIGIT_TWO"
    DIGIT_THREE = "DIGIT_THREE"
    DIGIT_FOUR = "DIGIT_FOUR"
    DIGIT_FIVE = "DIGIT_FIVE"
    DIGIT_SIX = "DIGIT_SIX"
    DIGIT_SEVEN = "DIGIT_SEVEN"
    DIGIT_EIGHT = "DIGIT_EIGHT"
    DIGIT_NINE = "DIGIT_NINE"

    @classmethod
    def coerce(cls, role: Union["SymbolType", str]) -> "SymbolType":
        """
        Accept a SymbolType or its name as written in configuration files.

        Raises:
            ValueError: If the name is not a known role
        """
        if isinstance(role, cls):
            return role
        try:
            return cls[str(role).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown symbol type: {role!r}")


# Roles that end a sentence
TERMINATOR_TYPES = (
    SymbolType.FULL_STOP,
    SymbolType.QUESTION_MARK,
    SymbolType.EXCLAMATION_MARK,
)

DIGIT_TYPES = (
    SymbolType.DIGIT_ZERO,
    SymbolType.DIGIT_ONE,
    SymbolType.DIGIT_TWO,
    SymbolType.DIGIT_THREE,
    SymbolType.DIGIT_FOUR,
    SymbolType.DIGIT_FIVE,
    SymbolType.DIGIT_SIX,
    SymbolType.DIGIT_SEVEN,
    SymbolType.DIGIT_EIGHT,
    SymbolType.DIGIT_NINE,
)

# (opening, closing) role pairs
PAIRED_TYPES = (
    (SymbolType.LEFT_PARENTHESIS, SymbolType.RIGHT_PARENTHESIS),
    (SymbolType.LEFT_SQUARE_BRACKET, SymbolType.RIGHT_SQUARE_BRACKET),
    (SymbolType.LEFT_CURLY_BRACKET, SymbolType.RIGHT_CURLY_BRACKET),
    (SymbolType.LEFT_SINGLE_QUOTATION_MARK, SymbolType.RIGHT_SINGLE_QUOTATION_MARK),
    (SymbolType.LEFT_DOUBLE_QUOTATION_MARK, SymbolType.RIGHT_DOUBLE_QUOTATION_MARK),
)


@dataclass(frozen=True)
class Symbol:
    """
    A character bound to a semantic role.

    invalid_chars lists characters that should not be used in this role
    (style-consistency checks); the space flags say whether a space is
    expected before/after the symbol.
    """
    type: SymbolType
    value: str
    invalid_chars: Tuple[str, ...] = ()
    needs_before_space: bool = False
    needs_after_space: bool = False

    def __init__(self, type: Union[SymbolType, str], value: str,
                 invalid_chars: Union[str, Iterable[str]] = (),
                 needs_before_space: bool = False,
                 needs_after_space: bool = False):
        object.__setattr__(self, "type", SymbolType.coerce(type))
        object.__setattr__(self, "value", single_char(value, "Symbol value"))
        object.__setattr__(self, "invalid_chars",
                           tuple(single_char(c, "Invalid char") for c in invalid_chars))
        object.__setattr__(self, "needs_before_space", bool(needs_before_space))
        object.__setattr__(self, "needs_after_space", bool(needs_after_space))

    def is_invalid(self, ch: str) -> bool:
        """Whether ch is listed as an invalid alternative for this role."""
        return ch in self.invalid_chars
