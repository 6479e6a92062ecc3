"""Text offsets and ranges."""

from radixcheck.text.text import ZERO, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
