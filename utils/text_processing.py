"""
Text processing utilities for the Misinformation Detection Dashboard
"""
import re
from typing import Optional

from config import EXCESSIVE_PUNCTUATION_PATTERN, CAPS_WORD_PATTERN

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9\s]')
_EXCESSIVE_PUNCTUATION = re.compile(EXCESSIVE_PUNCTUATION_PATTERN)
_CAPS_WORD = re.compile(CAPS_WORD_PATTERN)


class TextProcessor:
    """Text processing utilities"""

    @staticmethod
    def normalize_for_matching(text: str) -> str:
        """Lower-case text and replace everything but a-z, 0-9 and whitespace with a space"""
        if not text:
            return ""
        # str.lower() folds a few non-ASCII letters (Kelvin sign, dotted I) into a-z
        return _NON_ALPHANUMERIC.sub(' ', text.lower())

    @staticmethod
    def count_occurrences(text: str, phrase: str) -> int:
        """Count non-overlapping occurrences of phrase in text"""
        if not text or not phrase:
            return 0
        return text.count(phrase)

    @staticmethod
    def count_excessive_punctuation(text: str) -> int:
        """Count runs of three or more '!' or '?' characters"""
        if not text:
            return 0
        return len(_EXCESSIVE_PUNCTUATION.findall(text))

    @staticmethod
    def count_caps_words(text: str) -> int:
        """Count whole words of three or more upper-case letters (case-sensitive)"""
        if not text:
            return 0
        return len(_CAPS_WORD.findall(text))

    @staticmethod
    def count_words(text: str) -> int:
        """Number of whitespace-delimited tokens"""
        if not text:
            return 0
        return len(text.split())

    @staticmethod
    def truncate_text(text: Optional[str], max_length: int = 80, ellipsis: str = "...") -> str:
        """Truncate text so the result, ellipsis included, fits in max_length"""
        if text is None:
            return ""
        if len(text) <= max_length:
            return text
        return text[:max(0, max_length - len(ellipsis))] + ellipsis

    @staticmethod
    def to_utf8(text: Optional[str]) -> str:
        """Drop characters that cannot be represented as UTF-8 (lone surrogates)"""
        if text is None:
            return ""
        return text.encode('utf-8', errors='ignore').decode('utf-8')
