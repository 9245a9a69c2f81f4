"""Built-in symbol tables, one per language/variant.

The tables are read-only and built once at import time. Catalogs copy the
entries they need and never modify these mappings.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .types import Symbol, SymbolType as T

SymbolTable = Mapping[T, Symbol]


def _table(*symbols: Symbol) -> SymbolTable:
    """Build a read-only role->symbol mapping; later entries replace earlier ones."""
    table = {}
    for symbol in symbols:
        table[symbol.type] = symbol
    return MappingProxyType(table)


def _derive(base: SymbolTable, *replacements: Symbol) -> SymbolTable:
    """Copy a table replacing selected roles, keeping the original ordering."""
    table = dict(base)
    for symbol in replacements:
        table[symbol.type] = symbol
    return MappingProxyType(table)


DEFAULT_SYMBOLS = _table(
    # Common symbols
    Symbol(T.SPACE, " ", ""),
    Symbol(T.EXCLAMATION_MARK, "!", "！"),
    Symbol(T.NUMBER_SIGN, "#", "＃"),
    Symbol(T.DOLLAR_SIGN, "$", "＄"),
    Symbol(T.PERCENT_SIGN, "%", "％"),
    Symbol(T.QUESTION_MARK, "?", "？"),
    Symbol(T.AMPERSAND, "&", "＆"),
    Symbol(T.LEFT_PARENTHESIS, "(", "（", True, False),
    Symbol(T.RIGHT_PARENTHESIS, ")", "）", False, True),
    Symbol(T.ASTERISK, "*", "＊"),
    Symbol(T.COMMA, ",", "，、", False, True),
    Symbol(T.FULL_STOP, ".", "．。"),
    Symbol(T.PLUS_SIGN, "+", "＋"),
    Symbol(T.HYPHEN_SIGN, "-", "ー"),
    Symbol(T.SLASH, "/", "／"),
    Symbol(T.COLON, ":", "："),
    Symbol(T.SEMICOLON, ";", "；"),
    Symbol(T.LESS_THAN_SIGN, "<", "＜"),
    Symbol(T.EQUAL_SIGN, "=", "＝"),
    Symbol(T.GREATER_THAN_SIGN, ">", "＞"),
    Symbol(T.AT_MARK, "@", "＠"),
    Symbol(T.LEFT_SQUARE_BRACKET, "[", "", True, False),
    Symbol(T.RIGHT_SQUARE_BRACKET, "]", "", False, True),
    Symbol(T.BACKSLASH, "\\", ""),
    Symbol(T.CIRCUMFLEX_ACCENT, "^", ""),
    Symbol(T.LOW_LINE, "_", ""),
    Symbol(T.LEFT_CURLY_BRACKET, "{", "｛", True, False),
    Symbol(T.RIGHT_CURLY_BRACKET, "}", "｝", False, True),
    Symbol(T.VERTICAL_BAR, "|", "｜"),
    Symbol(T.TILDE, "~", "〜"),
    Symbol(T.LEFT_SINGLE_QUOTATION_MARK, "'", ""),
    Symbol(T.RIGHT_SINGLE_QUOTATION_MARK, "'", ""),
    Symbol(T.LEFT_DOUBLE_QUOTATION_MARK, '"', "«"),
    Symbol(T.RIGHT_DOUBLE_QUOTATION_MARK, '"', "»"),
    # Digits
    Symbol(T.DIGIT_ZERO, "0", ""),
    Symbol(T.DIGIT_ONE, "1", ""),
    Symbol(T.DIGIT_TWO, "2", ""),
    Symbol(T.DIGIT_THREE, "3", ""),
    Symbol(T.DIGIT_FOUR, "4", ""),
    Symbol(T.DIGIT_FIVE, "5", ""),
    Symbol(T.DIGIT_SIX, "6", ""),
    Symbol(T.DIGIT_SEVEN, "7", ""),
    Symbol(T.DIGIT_EIGHT, "8", ""),
    Symbol(T.DIGIT_NINE, "9", ""),
)

RUSSIAN_SYMBOLS = _derive(
    DEFAULT_SYMBOLS,
    Symbol(T.NUMBER_SIGN, "№", "#＃", True, False),
    Symbol(T.LEFT_DOUBLE_QUOTATION_MARK, "«", '"', True, False),
    Symbol(T.RIGHT_DOUBLE_QUOTATION_MARK, "»", '"', False, True),
)

JAPANESE_SYMBOLS = _table(
    # Common symbols
    Symbol(T.SPACE, "　", ""),
    Symbol(T.EXCLAMATION_MARK, "！", "!"),
    Symbol(T.NUMBER_SIGN, "＃", "#"),
    Symbol(T.DOLLAR_SIGN, "＄", "$"),
    Symbol(T.PERCENT_SIGN, "％", ""),
    Symbol(T.QUESTION_MARK, "？", "?"),
    Symbol(T.AMPERSAND, "＆", ""),
    Symbol(T.LEFT_PARENTHESIS, "（", "("),
    Symbol(T.RIGHT_PARENTHESIS, "）", ")"),
    Symbol(T.ASTERISK, "＊", ""),  # "*" stays valid for markdown emphasis
    Symbol(T.COMMA, "、", ",，"),
    Symbol(T.FULL_STOP, "。", ".．"),
    Symbol(T.PLUS_SIGN, "＋", ""),
    Symbol(T.HYPHEN_SIGN, "ー", ""),
    Symbol(T.SLASH, "／", ""),
    Symbol(T.COLON, "：", ""),
    Symbol(T.SEMICOLON, "；", ""),
    Symbol(T.LESS_THAN_SIGN, "＜", ""),
    Symbol(T.EQUAL_SIGN, "＝", ""),
    Symbol(T.GREATER_THAN_SIGN, "＞", ""),
    Symbol(T.AT_MARK, "＠", ""),
    Symbol(T.LEFT_SQUARE_BRACKET, "「", ""),
    Symbol(T.RIGHT_SQUARE_BRACKET, "」", ""),
    Symbol(T.BACKSLASH, "¥", "\\"),
    Symbol(T.CIRCUMFLEX_ACCENT, "＾", ""),
    Symbol(T.LOW_LINE, "＿", ""),
    Symbol(T.LEFT_CURLY_BRACKET, "｛", ""),
    Symbol(T.RIGHT_CURLY_BRACKET, "｝", ""),
    Symbol(T.VERTICAL_BAR, "｜", "|"),
    Symbol(T.TILDE, "〜", "~"),
    Symbol(T.LEFT_SINGLE_QUOTATION_MARK, "‘", ""),
    Symbol(T.RIGHT_SINGLE_QUOTATION_MARK, "’", ""),
    Symbol(T.LEFT_DOUBLE_QUOTATION_MARK, "“", ""),
    Symbol(T.RIGHT_DOUBLE_QUOTATION_MARK, "”", ""),
    # Digits
    Symbol(T.DIGIT_ZERO, "0", ""),
    Symbol(T.DIGIT_ONE, "1", ""),
    Symbol(T.DIGIT_TWO, "2", ""),
    Symbol(T.DIGIT_THREE, "3", ""),
    Symbol(T.DIGIT_FOUR, "4", ""),
    Symbol(T.DIGIT_FIVE, "5", ""),
    Symbol(T.DIGIT_SIX, "6", ""),
    Symbol(T.DIGIT_SEVEN, "7", ""),
    Symbol(T.DIGIT_EIGHT, "8", ""),
    Symbol(T.DIGIT_NINE, "9", ""),
)

JAPANESE_ZENKAKU2_SYMBOLS = _derive(
    JAPANESE_SYMBOLS,
    Symbol(T.FULL_STOP, "．", "。."),
    Symbol(T.COMMA, "，", "、,"),
)

JAPANESE_HANKAKU_SYMBOLS = _table(
    Symbol(T.SPACE, " ", "　"),
    Symbol(T.EXCLAMATION_MARK, "!", "！"),
    Symbol(T.NUMBER_SIGN, "#", "＃"),
    Symbol(T.DOLLAR_SIGN, "$", "＄"),
    Symbol(T.PERCENT_SIGN, "%", "％"),
    Symbol(T.QUESTION_MARK, "?", "？"),
    Symbol(T.AMPERSAND, "&", "＆"),
    Symbol(T.LEFT_PARENTHESIS, "(", "（", True, False),
    Symbol(T.RIGHT_PARENTHESIS, ")", "）", False, True),
    Symbol(T.ASTERISK, "*", "＊"),
    Symbol(T.COMMA, ",", "，、", False, True),
    Symbol(T.FULL_STOP, ".", "．。"),
    Symbol(T.PLUS_SIGN, "+", "＋"),
    Symbol(T.HYPHEN_SIGN, "-", "ー"),
    Symbol(T.SLASH, "/", "／"),
    Symbol(T.COLON, ":", "："),
    Symbol(T.SEMICOLON, ";", "；"),
    Symbol(T.LESS_THAN_SIGN, "<", "＜"),
    Symbol(T.EQUAL_SIGN, "=", "＝"),
    Symbol(T.GREATER_THAN_SIGN, ">", "＞"),
    Symbol(T.AT_MARK, "@", "＠"),
    Symbol(T.LEFT_SQUARE_BRACKET, "[", "", True, False),
    Symbol(T.RIGHT_SQUARE_BRACKET, "]", "", False, True),
    Symbol(T.BACKSLASH, "\\", ""),
    Symbol(T.CIRCUMFLEX_ACCENT, "^", ""),
    Symbol(T.LOW_LINE, "_", ""),
    Symbol(T.LEFT_CURLY_BRACKET, "{", "｛", True, False),
    Symbol(T.RIGHT_CURLY_BRACKET, "}", "｝", False, True),
    Symbol(T.VERTICAL_BAR, "|", "｜"),
    Symbol(T.TILDE, "~", "〜"),
    Symbol(T.LEFT_SINGLE_QUOTATION_MARK, "'", ""),
    Symbol(T.RIGHT_SINGLE_QUOTATION_MARK, "'", ""),
    Symbol(T.LEFT_DOUBLE_QUOTATION_MARK, '"', ""),
    Symbol(T.RIGHT_DOUBLE_QUOTATION_MARK, '"', ""),
    # Digits
    Symbol(T.DIGIT_ZERO, "0", "０"),
    Symbol(T.DIGIT_ONE, "1", "１"),
    Symbol(T.DIGIT_TWO, "2", "２"),
    Symbol(T.DIGIT_THREE, "3", "３"),
    Symbol(T.DIGIT_FOUR, "4", "４"),
    Symbol(T.DIGIT_FIVE, "5", "５"),
    Symbol(T.DIGIT_SIX, "6", "６"),
    Symbol(T.DIGIT_SEVEN, "7", "７"),
    Symbol(T.DIGIT_EIGHT, "8", "８"),
    Symbol(T.DIGIT_NINE, "9", "９"),
)

JAPANESE_VARIANTS = {
    "zenkaku": JAPANESE_SYMBOLS,
    "zenkaku2": JAPANESE_ZENKAKU2_SYMBOLS,
    "hankaku": JAPANESE_HANKAKU_SYMBOLS,
}
JAPANESE_PRIMARY_VARIANT = "zenkaku"


def select_table(lang: str, variant: Optional[str]) -> Tuple[str, SymbolTable, str]:
    """
    Pick the built-in table for a language and variant.

    Unknown languages get the default table. For Japanese an unset or
    unrecognized variant becomes "zenkaku"; other languages keep the
    variant as given ("" when unset).

    Returns:
        tuple: (table_name, table, resolved_variant)
    """
    variant = variant or ""
    if lang == "ja":
        if variant not in JAPANESE_VARIANTS:
            variant = JAPANESE_PRIMARY_VARIANT
        return f"ja/{variant}", JAPANESE_VARIANTS[variant], variant
    if lang == "ru":
        return "ru", RUSSIAN_SYMBOLS, variant
    return "default", DEFAULT_SYMBOLS, variant
