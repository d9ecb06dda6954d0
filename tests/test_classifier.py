from __future__ import annotations

import pytest

from kanasplit import COMPACT_CATEGORIES, Category, classify, classify_label


@pytest.mark.parametrize(
    "char,expected",
    [
        ("A", "en"),
        ("z", "en"),
        ("@", "en"),
        ("ā", "en"),
        ("5", "englishNumeral"),
        ("５", "japaneseNumeral"),
        ("!", "englishPunctuation"),
        ("“", "englishPunctuation"),
        ("。", "japanesePunctuation"),
        ("「", "japanesePunctuation"),
        ("ー", "japanesePunctuation"),
        ("漢", "kanji"),
        ("ひ", "hiragana"),
        ("カ", "katakana"),
        ("Ｓ", "ja"),
        ("ｱ", "ja"),
        ("㐀", "ja"),
        (" ", "space"),
        ("　", "space"),
        ("é", "other"),
        ("😀", "other"),
    ],
)
def test_classify_full(char: str, expected: str) -> None:
    assert classify(char, "full") == expected
    assert classify_label(char, "full") == expected


@pytest.mark.parametrize(
    "char,expected",
    [
        ("A", "en"),
        (" ", "en"),
        ("　", "ja"),
        ("漢", "ja"),
        ("ひ", "ja"),
        ("カ", "ja"),
        ("Ｓ", "ja"),
        ("5", "other"),
        ("５", "other"),
        ("!", "other"),
        ("。", "other"),
        ("é", "other"),
    ],
)
def test_classify_compact(char: str, expected: str) -> None:
    assert classify(char, "compact") == expected


def test_classify_defaults_to_full_mode():
    assert classify("A") is Category.EN
    assert classify("５") is Category.JA_NUM


def test_spaces_differ_between_modes():
    assert classify(" ", "full") is classify("　", "full") is Category.SPACE
    assert classify(" ", "compact") is Category.EN
    assert classify("　", "compact") is Category.JA


def test_compact_mode_stays_within_three_categories():
    sample = "5romaji here...!?漢字ひらがなカタ　カナ４「ＳＨＩＯ」。！é😀\n\t~ー・"
    for ch in sample:
        assert classify(ch, "compact") in COMPACT_CATEGORIES


def test_classify_is_repeatable():
    for ch in "aあア亜１1 　。":
        assert {classify(ch, "full") for _ in range(3)} == {classify(ch, "full")}
        assert {classify(ch, "compact") for _ in range(3)} == {
            classify(ch, "compact")
        }


def test_classify_surrogate_pair_as_one_scalar():
    assert classify("\ud83d\ude00") is Category.OTHER
    assert classify("\ud840\udc00") is Category.OTHER


def test_classify_rejects_strings_that_are_not_one_char():
    with pytest.raises(ValueError):
        classify("ab")
    with pytest.raises(ValueError):
        classify("")


def test_classify_rejects_unknown_mode():
    with pytest.raises(ValueError):
        classify("a", "fast")  # type: ignore[arg-type]


def test_category_str_is_label():
    assert str(Category.EN_PUNC) == "englishPunctuation"
    assert Category("kanji") is Category.KANJI
