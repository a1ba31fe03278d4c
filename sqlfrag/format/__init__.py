"""sqlfrag placeholder formats: generic ``?`` marks → driver syntax."""
from sqlfrag.format.config import PlaceholderConfig
from sqlfrag.format.placeholders import (
    AT_P,
    COLON,
    DOLLAR,
    PLACEHOLDER,
    QUESTION,
    PlaceholderFormat,
    PositionalNumbered,
    Sequential,
    placeholders,
    replace_placeholders,
)
from sqlfrag.format.registry import PlaceholderFormatFactory

__all__ = [
    "AT_P",
    "COLON",
    "DOLLAR",
    "PLACEHOLDER",
    "QUESTION",
    "PlaceholderConfig",
    "PlaceholderFormat",
    "PlaceholderFormatFactory",
    "PositionalNumbered",
    "Sequential",
    "placeholders",
    "replace_placeholders",
]
