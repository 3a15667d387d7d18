"""Parsers package."""

from rsst.parsers.schema import RULES, decode, decode_feed

__all__ = [
    "RULES",
    "decode",
    "decode_feed",
]
