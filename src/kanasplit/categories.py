from __future__ import annotations

from enum import Enum
from typing import Literal

Mode = Literal["full", "compact"]

MODES: tuple[str, ...] = ("full", "compact")


class Category(str, Enum):
    """
    Script/category label for one character (and for a run of them).

    Values are the external label strings, so members compare equal to them:
    `Category.KANJI == "kanji"`.
    """

    EN = "en"
    JA = "ja"
    EN_NUM = "englishNumeral"
    JA_NUM = "japaneseNumeral"
    EN_PUNC = "englishPunctuation"
    JA_PUNC = "japanesePunctuation"
    KANJI = "kanji"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    SPACE = "space"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


FULL_CATEGORIES: frozenset[Category] = frozenset(Category)

# Compact mode reclassifies into these three; it is not a relabelling of full mode.
COMPACT_CATEGORIES: frozenset[Category] = frozenset(
    {Category.EN, Category.JA, Category.OTHER}
)
