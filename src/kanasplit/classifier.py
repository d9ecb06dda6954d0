from __future__ import annotations

from kanasplit.categories import MODES, Category, Mode
from kanasplit.chars import (
    is_en_num,
    is_en_space,
    is_english_punctuation,
    is_hiragana,
    is_ja_num,
    is_ja_space,
    is_japanese,
    is_japanese_punctuation,
    is_kanji,
    is_katakana,
    is_romaji,
    is_scalar,
)


def _classify_compact(char: str) -> Category:
    if is_ja_num(char):
        return Category.OTHER
    if is_en_num(char):
        return Category.OTHER
    if is_en_space(char):
        return Category.EN
    if is_english_punctuation(char):
        return Category.OTHER
    if is_ja_space(char):
        return Category.JA
    if is_japanese_punctuation(char):
        return Category.OTHER
    if is_japanese(char):
        return Category.JA
    if is_romaji(char):
        return Category.EN
    return Category.OTHER


def _classify_full(char: str) -> Category:
    if is_ja_space(char):
        return Category.SPACE
    if is_en_space(char):
        return Category.SPACE
    if is_ja_num(char):
        return Category.JA_NUM
    if is_en_num(char):
        return Category.EN_NUM
    if is_english_punctuation(char):
        return Category.EN_PUNC
    if is_japanese_punctuation(char):
        return Category.JA_PUNC
    if is_kanji(char):
        return Category.KANJI
    if is_hiragana(char):
        return Category.HIRAGANA
    if is_katakana(char):
        return Category.KATAKANA
    if is_japanese(char):
        return Category.JA
    if is_romaji(char):
        return Category.EN
    return Category.OTHER


def classify(char: str, mode: Mode = "full") -> Category:
    """
    Classify one character.

    The checks run top to bottom and the first match wins; several of the
    underlying ranges overlap (e.g. U+3000 is both a space and CJK punctuation),
    so the order decides the result.

    - full: eleven categories (kanji/hiragana/katakana, numerals, punctuation, space, ...)
    - compact: en/ja/other; ASCII space joins English runs, U+3000 joins
      Japanese runs, numerals and punctuation become other.
    """
    if not is_scalar(char):
        raise ValueError(f"Expected a single character, got {char!r}")
    if mode == "compact":
        return _classify_compact(char)
    if mode == "full":
        return _classify_full(char)
    raise ValueError(f"Unknown mode: {mode!r} (expected one of {MODES})")


def classify_label(char: str, mode: Mode = "full") -> str:
    return classify(char, mode).value
