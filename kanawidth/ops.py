"""Conversion operation flags and the mnemonic letter notation.

The bit values match PHP's ``mb_convert_kana`` so masks stay interchangeable
with code that stores them as plain integers.
"""

import enum
from types import MappingProxyType

from kanawidth.logger import logger


class ConversionOp(enum.IntFlag):
    """Independently combinable conversion directives."""

    HAN_ASCII_TO_ZEN_ASCII = 0x00000001
    HAN_LETTER_TO_ZEN_LETTER = 0x00000002
    HAN_NUMBER_TO_ZEN_NUMBER = 0x00000004
    HAN_SPACE_TO_ZEN_SPACE = 0x00000008
    ZEN_ASCII_TO_HAN_ASCII = 0x00000010
    ZEN_LETTER_TO_HAN_LETTER = 0x00000020
    ZEN_NUMBER_TO_HAN_NUMBER = 0x00000040
    ZEN_SPACE_TO_HAN_SPACE = 0x00000080
    HAN_KATA_TO_ZEN_KATA = 0x00000100
    HAN_KATA_TO_ZEN_HIRA = 0x00000200
    ZEN_KATA_TO_HAN_KATA = 0x00001000
    ZEN_HIRA_TO_HAN_KATA = 0x00002000
    ZEN_HIRA_TO_ZEN_KATA = 0x00010000
    ZEN_KATA_TO_ZEN_HIRA = 0x00020000

    # Modifier for HAN_KATA_TO_ZEN_KATA / HAN_KATA_TO_ZEN_HIRA: leave a
    # trailing half-width diacritic mark as its own character.
    KEEP_DIACRITIC_MARKS_APART = 0x00100000


MNEMONIC_LOOKUP = MappingProxyType({
    'A': ConversionOp.HAN_ASCII_TO_ZEN_ASCII,
    'a': ConversionOp.ZEN_ASCII_TO_HAN_ASCII,
    'C': ConversionOp.ZEN_HIRA_TO_ZEN_KATA,
    'c': ConversionOp.ZEN_KATA_TO_ZEN_HIRA,
    'H': ConversionOp.HAN_KATA_TO_ZEN_HIRA,
    'h': ConversionOp.ZEN_HIRA_TO_HAN_KATA,
    'K': ConversionOp.HAN_KATA_TO_ZEN_KATA,
    'k': ConversionOp.ZEN_KATA_TO_HAN_KATA,
    'N': ConversionOp.HAN_NUMBER_TO_ZEN_NUMBER,
    'n': ConversionOp.ZEN_NUMBER_TO_HAN_NUMBER,
    'R': ConversionOp.HAN_LETTER_TO_ZEN_LETTER,
    'r': ConversionOp.ZEN_LETTER_TO_HAN_LETTER,
    'S': ConversionOp.HAN_SPACE_TO_ZEN_SPACE,
    's': ConversionOp.ZEN_SPACE_TO_HAN_SPACE,
})


def parse_ops(mnemonic: str) -> ConversionOp:
    """Fold a mnemonic string such as ``"KVa"`` into a ``ConversionOp`` mask.

    Letters outside ``MNEMONIC_LOOKUP`` contribute nothing; they are not an
    error.

    Args:
        mnemonic: String of single-letter operation codes

    Returns:
        The OR of every recognised letter's flag (empty mask if none)
    """
    ops = ConversionOp(0)
    for letter in mnemonic:
        flag = MNEMONIC_LOOKUP.get(letter)
        if flag is None:
            logger.debug(f"Ignoring unrecognized conversion letter {letter!r}")
            continue
        ops |= flag
    return ops


def to_mnemonic(ops: int) -> str:
    """Render *ops* back into mnemonic letters (modifier bits have no letter)."""
    return "".join(
        letter for letter, flag in MNEMONIC_LOOKUP.items() if int(ops) & flag
    )
