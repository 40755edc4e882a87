"""Tests for operation flags and mnemonic parsing."""
import pytest
from unittest.mock import patch
from kanawidth.ops import ConversionOp, MNEMONIC_LOOKUP, parse_ops, to_mnemonic


class TestConversionOp:
    """Test that flag values stay bit-compatible with mb_convert_kana."""

    @pytest.mark.parametrize("flag, value", [
        (ConversionOp.HAN_ASCII_TO_ZEN_ASCII, 0x1),
        (ConversionOp.HAN_LETTER_TO_ZEN_LETTER, 0x2),
        (ConversionOp.HAN_NUMBER_TO_ZEN_NUMBER, 0x4),
        (ConversionOp.HAN_SPACE_TO_ZEN_SPACE, 0x8),
        (ConversionOp.ZEN_ASCII_TO_HAN_ASCII, 0x10),
        (ConversionOp.ZEN_LETTER_TO_HAN_LETTER, 0x20),
        (ConversionOp.ZEN_NUMBER_TO_HAN_NUMBER, 0x40),
        (ConversionOp.ZEN_SPACE_TO_HAN_SPACE, 0x80),
        (ConversionOp.HAN_KATA_TO_ZEN_KATA, 0x100),
        (ConversionOp.HAN_KATA_TO_ZEN_HIRA, 0x200),
        (ConversionOp.ZEN_KATA_TO_HAN_KATA, 0x1000),
        (ConversionOp.ZEN_HIRA_TO_HAN_KATA, 0x2000),
        (ConversionOp.ZEN_HIRA_TO_ZEN_KATA, 0x10000),
        (ConversionOp.ZEN_KATA_TO_ZEN_HIRA, 0x20000),
        (ConversionOp.KEEP_DIACRITIC_MARKS_APART, 0x100000),
    ])
    def test_values(self, flag, value):
        assert int(flag) == value

    def test_flags_are_distinct_bits(self):
        seen = 0
        for flag in ConversionOp:
            assert seen & flag == 0
            seen |= flag

    def test_flags_combine_with_plain_ints(self):
        combined = ConversionOp.HAN_KATA_TO_ZEN_KATA | 0x10
        assert combined == 0x110


class TestParseOps:
    """Test mnemonic string parsing."""

    def test_single_letters(self):
        for letter, flag in MNEMONIC_LOOKUP.items():
            assert parse_ops(letter) == flag

    def test_fourteen_letters(self):
        assert sorted(MNEMONIC_LOOKUP) == sorted("AaCcHhKkNnRrSs")

    def test_all_letters(self):
        assert parse_ops("AaCcHhKkNnRrSs") == 0x333FF

    def test_unknown_letter_contributes_nothing(self):
        assert parse_ops("KV") == parse_ops("K") == ConversionOp.HAN_KATA_TO_ZEN_KATA

    def test_only_unknown_letters(self):
        assert parse_ops("VXYZ!") == 0

    def test_empty(self):
        assert parse_ops("") == 0

    def test_repeated_letters(self):
        assert parse_ops("KKK") == ConversionOp.HAN_KATA_TO_ZEN_KATA

    def test_no_letter_for_modifier(self):
        assert ConversionOp.KEEP_DIACRITIC_MARKS_APART not in set(MNEMONIC_LOOKUP.values())

    def test_unknown_letter_logged_at_debug(self):
        with patch('kanawidth.ops.logger') as mock_logger:
            parse_ops("KV")
        mock_logger.debug.assert_called_once()
        assert "'V'" in mock_logger.debug.call_args[0][0]

    def test_lookup_is_read_only(self):
        with pytest.raises(TypeError):
            MNEMONIC_LOOKUP['V'] = ConversionOp.HAN_KATA_TO_ZEN_KATA


class TestToMnemonic:
    """Test rendering masks back into letters."""

    def test_single_flag(self):
        assert to_mnemonic(ConversionOp.ZEN_KATA_TO_HAN_KATA) == "k"

    def test_table_order(self):
        assert to_mnemonic(ConversionOp.HAN_KATA_TO_ZEN_KATA | ConversionOp.ZEN_ASCII_TO_HAN_ASCII) == "aK"

    def test_modifier_has_no_letter(self):
        assert to_mnemonic(ConversionOp.KEEP_DIACRITIC_MARKS_APART) == ""

    @pytest.mark.parametrize("mnemonic", ["KVa", "Hc", "AaCcHhKkNnRrSs", "ns"])
    def test_parse_then_render(self, mnemonic):
        assert parse_ops(to_mnemonic(parse_ops(mnemonic))) == parse_ops(mnemonic)
