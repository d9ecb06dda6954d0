from __future__ import annotations

from typing import Iterator

# Inclusive code point ranges.
Range = tuple[int, int]

EN_SPACE = 0x0020
JA_SPACE = 0x3000

LATIN_NUMBERS: Range = (0x0030, 0x0039)
ZENKAKU_NUMBERS: Range = (0xFF10, 0xFF19)
ZENKAKU_UPPERCASE: Range = (0xFF21, 0xFF3A)
ZENKAKU_LOWERCASE: Range = (0xFF41, 0xFF5A)
ZENKAKU_PUNCTUATION_1: Range = (0xFF01, 0xFF0F)
ZENKAKU_PUNCTUATION_2: Range = (0xFF1A, 0xFF1F)
ZENKAKU_PUNCTUATION_3: Range = (0xFF3B, 0xFF3F)
ZENKAKU_PUNCTUATION_4: Range = (0xFF5B, 0xFF60)
ZENKAKU_SYMBOLS_CURRENCY: Range = (0xFFE0, 0xFFEE)

HIRAGANA_CHARS: Range = (0x3040, 0x309F)
KATAKANA_CHARS: Range = (0x30A0, 0x30FF)
HANKAKU_KATAKANA: Range = (0xFF66, 0xFF9F)
KATAKANA_PUNCTUATION: Range = (0x30FB, 0x30FC)  # ・ ー
KANA_PUNCTUATION: Range = (0xFF61, 0xFF65)  # half-width ｡｢｣､･
CJK_SYMBOLS_PUNCTUATION: Range = (0x3000, 0x303F)
COMMON_CJK: Range = (0x4E00, 0x9FFF)
RARE_CJK: Range = (0x3400, 0x4DBF)

KANJI: Range = (0x4E00, 0x9FAF)
HIRAGANA: Range = (0x3041, 0x3096)
KATAKANA: Range = (0x30A1, 0x30FC)
PROLONGED_SOUND_MARK = 0x30FC

KANA_RANGES: tuple[Range, ...] = (
    HIRAGANA_CHARS,
    KATAKANA_CHARS,
    KANA_PUNCTUATION,
    HANKAKU_KATAKANA,
)

JA_PUNCTUATION_RANGES: tuple[Range, ...] = (
    CJK_SYMBOLS_PUNCTUATION,
    KANA_PUNCTUATION,
    KATAKANA_PUNCTUATION,
    ZENKAKU_PUNCTUATION_1,
    ZENKAKU_PUNCTUATION_2,
    ZENKAKU_PUNCTUATION_3,
    ZENKAKU_PUNCTUATION_4,
    ZENKAKU_SYMBOLS_CURRENCY,
)

JAPANESE_RANGES: tuple[Range, ...] = (
    *KANA_RANGES,
    *JA_PUNCTUATION_RANGES,
    ZENKAKU_UPPERCASE,
    ZENKAKU_LOWERCASE,
    ZENKAKU_NUMBERS,
    COMMON_CJK,
    RARE_CJK,
)

MODERN_ENGLISH: Range = (0x0000, 0x007F)
HEPBURN_MACRON_RANGES: tuple[Range, ...] = (
    (0x0100, 0x0101),  # Ā ā
    (0x0112, 0x0113),  # Ē ē
    (0x012A, 0x012B),  # Ī ī
    (0x014C, 0x014D),  # Ō ō
    (0x016A, 0x016B),  # Ū ū
)
SMART_QUOTE_RANGES: tuple[Range, ...] = (
    (0x2018, 0x2019),  # ‘ ’
    (0x201C, 0x201D),  # “ ”
)

ROMAJI_RANGES: tuple[Range, ...] = (MODERN_ENGLISH, *HEPBURN_MACRON_RANGES)

EN_PUNCTUATION_RANGES: tuple[Range, ...] = (
    (0x0020, 0x002F),
    (0x003A, 0x003F),
    (0x005B, 0x0060),
    (0x007B, 0x007E),
    *SMART_QUOTE_RANGES,
)


def _is_high_surrogate(ch: str) -> bool:
    return 0xD800 <= ord(ch) <= 0xDBFF


def _is_low_surrogate(ch: str) -> bool:
    return 0xDC00 <= ord(ch) <= 0xDFFF


def iter_scalars(text: str) -> Iterator[str]:
    """
    Yield `text` one Unicode scalar at a time.

    A str is already a sequence of code points, except when it was assembled
    from UTF-16 code units: a high surrogate directly followed by a low
    surrogate is then yielded as a single two-code-point item. Joining the
    yielded items always gives back `text`.
    """
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if _is_high_surrogate(ch) and i + 1 < n and _is_low_surrogate(text[i + 1]):
            yield text[i : i + 2]
            i += 2
            continue
        yield ch
        i += 1


def _code_point(char: str) -> int | None:
    # None unless `char` is exactly one scalar as yielded by `iter_scalars`.
    if len(char) == 1:
        return ord(char)
    if len(char) == 2 and _is_high_surrogate(char[0]) and _is_low_surrogate(char[1]):
        return 0x10000 + ((ord(char[0]) - 0xD800) << 10) + (ord(char[1]) - 0xDC00)
    return None


def scalar_value(char: str) -> int:
    """Return the scalar value of one scalar item (decoding a surrogate pair)."""
    cp = _code_point(char)
    if cp is None:
        raise ValueError(f"Expected a single character, got {char!r}")
    return cp


def is_scalar(char: str) -> bool:
    return _code_point(char) is not None


def _in_ranges(cp: int, ranges: tuple[Range, ...]) -> bool:
    for start, end in ranges:
        if start <= cp <= end:
            return True
    return False


def is_en_space(char: str) -> bool:
    return _code_point(char) == EN_SPACE


def is_ja_space(char: str) -> bool:
    return _code_point(char) == JA_SPACE


def is_en_num(char: str) -> bool:
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, (LATIN_NUMBERS,))


def is_ja_num(char: str) -> bool:
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, (ZENKAKU_NUMBERS,))


def is_english_punctuation(char: str) -> bool:
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, EN_PUNCTUATION_RANGES)


def is_japanese_punctuation(char: str) -> bool:
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, JA_PUNCTUATION_RANGES)


def is_kanji(char: str) -> bool:
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, (KANJI,))


def is_hiragana(char: str) -> bool:
    cp = _code_point(char)
    if cp is None:
        return False
    # ー is shared by both syllabaries.
    return cp == PROLONGED_SOUND_MARK or _in_ranges(cp, (HIRAGANA,))


def is_katakana(char: str) -> bool:
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, (KATAKANA,))


def is_japanese(char: str) -> bool:
    """Kana, kanji, Japanese punctuation and full-width Latin letters/digits."""
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, JAPANESE_RANGES)


def is_romaji(char: str) -> bool:
    """ASCII plus the macron vowels used in Hepburn romanization."""
    cp = _code_point(char)
    return cp is not None and _in_ranges(cp, ROMAJI_RANGES)
