"""Small character utility functions."""


def describe_char(ch: str) -> str:
    """Readable form of a character for log messages, e.g. 'U+3002 "。"'."""
    return f'U+{ord(ch):04X} "{ch}"'


def is_ascii_alnum(ch: str) -> bool:
    """True for ASCII letters and digits only (full-width forms excluded)."""
    return ch.isascii() and ch.isalnum()


def single_char(value: str, what: str = "value") -> str:
    """Validate that a string holds exactly one character and return it."""
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value
