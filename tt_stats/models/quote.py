"""Data model for typing test quotes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """A quote to type, with its attribution."""

    text: str
    attribution: str = ""
