"""Character classification for width and script conversion.

Every predicate takes a single character (or ``None`` when there is no
character, e.g. past the end of the input) and is a closed-range test
against fixed code point boundaries.
"""

from typing import Optional

HANKAKU_ASCII_FIRST = '!'
HANKAKU_ASCII_LAST = '~'
ZENKAKU_ASCII_FIRST = '！'
ZENKAKU_ASCII_LAST = '～'

HANKAKU_SPACE = ' '
ZENKAKU_SPACE = '\u3000'

HANKAKU_NUMBER_FIRST = '0'
HANKAKU_NUMBER_LAST = '9'
HANKAKU_UPPER_FIRST = 'A'
HANKAKU_UPPER_LAST = 'Z'
HANKAKU_LOWER_FIRST = 'a'
HANKAKU_LOWER_LAST = 'z'

ZENKAKU_NUMBER_FIRST = '０'
ZENKAKU_NUMBER_LAST = '９'
ZENKAKU_UPPER_FIRST = 'Ａ'
ZENKAKU_UPPER_LAST = 'Ｚ'
ZENKAKU_LOWER_FIRST = 'ａ'
ZENKAKU_LOWER_LAST = 'ｚ'

# Hiragana ぁ..ゖ and katakana ァ..ヶ line up one-to-one
ZENKAKU_HIRAGANA_FIRST = 'ぁ'
ZENKAKU_HIRAGANA_LAST_FOR_CONVERT = 'ゖ'
ZENKAKU_KATAKANA_FIRST = 'ァ'
ZENKAKU_KATAKANA_LAST_FOR_CONVERT = 'ヶ'

# ｡ .. ﾟ (includes the voiced/aspirated marks)
HANKAKU_KATAKANA_FIRST = '｡'
HANKAKU_KATAKANA_LAST = 'ﾟ'

OFFSET_HANKAKU_ASCII_TO_ZENKAKU_ASCII = ord(ZENKAKU_ASCII_FIRST) - ord(HANKAKU_ASCII_FIRST)
OFFSET_ZENKAKU_HIRAGANA_TO_ZENKAKU_KATAKANA = ord(ZENKAKU_KATAKANA_FIRST) - ord(ZENKAKU_HIRAGANA_FIRST)


def _within(ch: Optional[str], first: str, last: str) -> bool:
    return ch is not None and first <= ch <= last


def is_hankaku_ascii(ch: Optional[str]) -> bool:
    return _within(ch, HANKAKU_ASCII_FIRST, HANKAKU_ASCII_LAST)


def is_zenkaku_ascii(ch: Optional[str]) -> bool:
    return _within(ch, ZENKAKU_ASCII_FIRST, ZENKAKU_ASCII_LAST)


def is_hankaku_space(ch: Optional[str]) -> bool:
    return ch == HANKAKU_SPACE


def is_zenkaku_space(ch: Optional[str]) -> bool:
    return ch == ZENKAKU_SPACE


def is_hankaku_letter(ch: Optional[str]) -> bool:
    """Latin letters A-Z and a-z."""
    return (_within(ch, HANKAKU_UPPER_FIRST, HANKAKU_UPPER_LAST)
            or _within(ch, HANKAKU_LOWER_FIRST, HANKAKU_LOWER_LAST))


def is_zenkaku_letter(ch: Optional[str]) -> bool:
    """Full-width Latin letters Ａ-Ｚ and ａ-ｚ."""
    return (_within(ch, ZENKAKU_UPPER_FIRST, ZENKAKU_UPPER_LAST)
            or _within(ch, ZENKAKU_LOWER_FIRST, ZENKAKU_LOWER_LAST))


def is_hankaku_number(ch: Optional[str]) -> bool:
    return _within(ch, HANKAKU_NUMBER_FIRST, HANKAKU_NUMBER_LAST)


def is_zenkaku_number(ch: Optional[str]) -> bool:
    return _within(ch, ZENKAKU_NUMBER_FIRST, ZENKAKU_NUMBER_LAST)


def is_hankaku_katakana(ch: Optional[str]) -> bool:
    """Half-width katakana block, punctuation and diacritic marks included."""
    return _within(ch, HANKAKU_KATAKANA_FIRST, HANKAKU_KATAKANA_LAST)


def is_zenkaku_hiragana_with_katakana_equivalent(ch: Optional[str]) -> bool:
    return _within(ch, ZENKAKU_HIRAGANA_FIRST, ZENKAKU_HIRAGANA_LAST_FOR_CONVERT)


def is_zenkaku_katakana_with_hiragana_equivalent(ch: Optional[str]) -> bool:
    return _within(ch, ZENKAKU_KATAKANA_FIRST, ZENKAKU_KATAKANA_LAST_FOR_CONVERT)
