"""Width and script conversion of Japanese text.

``convert_kana`` scans its input once, left to right, and runs every
character through a fixed chain of rules. The first rule that changes the
character wins; the remaining rules are skipped for that character. The
half-width katakana rule may also consume the following character when it
is a diacritic mark that fuses with the current one.
"""

from typing import Callable, FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from kanawidth import charclass
from kanawidth.logger import logger
from kanawidth.ops import ConversionOp, parse_ops, to_mnemonic
from kanawidth.tables import (
    HANKAKU_ASPIRATED_MARK,
    HANKAKU_DIACRITIC_SUFFIXES,
    HANKAKU_TO_ZENKAKU_KATAKANA_ASPIRATED,
    HANKAKU_TO_ZENKAKU_KATAKANA_UNVOICED,
    HANKAKU_TO_ZENKAKU_KATAKANA_VOICED,
    HANKAKU_VOICED_MARK,
    ZENKAKU_TO_HANKAKU_KATAKANA,
)

Ops = Union[int, str, None]

_ASCII_OFFSET = charclass.OFFSET_HANKAKU_ASCII_TO_ZENKAKU_ASCII
_KANA_OFFSET = charclass.OFFSET_ZENKAKU_HIRAGANA_TO_ZENKAKU_KATAKANA


# ──────────────────────────────────────────────────────────────────────────────
# SINGLE CHARACTER CONVERSIONS
# Each returns its input unchanged when it does not apply.
# ──────────────────────────────────────────────────────────────────────────────
def _shift(ch: str, offset: int) -> str:
    return chr(ord(ch) + offset)


def convert_hankaku_ascii_to_zenkaku_ascii(ch: str) -> str:
    """Visible ASCII and the ASCII space to their full-width forms."""
    if charclass.is_hankaku_ascii(ch):
        return _shift(ch, _ASCII_OFFSET)
    if charclass.is_hankaku_space(ch):
        return charclass.ZENKAKU_SPACE
    return ch


def convert_zenkaku_ascii_to_hankaku_ascii(ch: str) -> str:
    """Full-width ASCII and the ideographic space to plain ASCII."""
    if charclass.is_zenkaku_ascii(ch):
        return _shift(ch, -_ASCII_OFFSET)
    if charclass.is_zenkaku_space(ch):
        return charclass.HANKAKU_SPACE
    return ch


def convert_hankaku_letter_to_zenkaku_letter(ch: str) -> str:
    if charclass.is_hankaku_letter(ch):
        return _shift(ch, _ASCII_OFFSET)
    return ch


def convert_zenkaku_letter_to_hankaku_letter(ch: str) -> str:
    if charclass.is_zenkaku_letter(ch):
        return _shift(ch, -_ASCII_OFFSET)
    return ch


def convert_hankaku_number_to_zenkaku_number(ch: str) -> str:
    if charclass.is_hankaku_number(ch):
        return _shift(ch, _ASCII_OFFSET)
    return ch


def convert_zenkaku_number_to_hankaku_number(ch: str) -> str:
    if charclass.is_zenkaku_number(ch):
        return _shift(ch, -_ASCII_OFFSET)
    return ch


def convert_hankaku_space_to_zenkaku_space(ch: str) -> str:
    return charclass.ZENKAKU_SPACE if charclass.is_hankaku_space(ch) else ch


def convert_zenkaku_space_to_hankaku_space(ch: str) -> str:
    return charclass.HANKAKU_SPACE if charclass.is_zenkaku_space(ch) else ch


def convert_zenkaku_hiragana_to_zenkaku_katakana(ch: str) -> str:
    if charclass.is_zenkaku_hiragana_with_katakana_equivalent(ch):
        return _shift(ch, _KANA_OFFSET)
    return ch


def convert_zenkaku_katakana_to_zenkaku_hiragana(ch: str) -> str:
    if charclass.is_zenkaku_katakana_with_hiragana_equivalent(ch):
        return _shift(ch, -_KANA_OFFSET)
    return ch


def convert_unvoiced_hankaku_kana_to_zenkaku(ch: str) -> str:
    return HANKAKU_TO_ZENKAKU_KATAKANA_UNVOICED.get(ch, ch)


def convert_diacritic_hankaku_kana_to_zenkaku(ch: str, mark: Optional[str]) -> str:
    """Fuse a half-width base character with the diacritic *mark* after it.

    Returns *ch* unchanged when *mark* is not a diacritic or the pair is not
    a registered voiced/aspirated combination.
    """
    if mark == HANKAKU_VOICED_MARK and ch in HANKAKU_TO_ZENKAKU_KATAKANA_VOICED:
        return HANKAKU_TO_ZENKAKU_KATAKANA_VOICED[ch]
    if mark == HANKAKU_ASPIRATED_MARK and ch in HANKAKU_TO_ZENKAKU_KATAKANA_ASPIRATED:
        return HANKAKU_TO_ZENKAKU_KATAKANA_ASPIRATED[ch]
    return ch


def convert_zenkaku_katakana_to_hankaku_katakana(ch: str) -> str:
    return ZENKAKU_TO_HANKAKU_KATAKANA.get(ch, ch)


def determine_hankaku_diacritic_suffix(ch: str) -> Optional[str]:
    """Half-width mark that must follow *ch* once it is made half-width, if any."""
    return HANKAKU_DIACRITIC_SUFFIXES.get(ch)


# ──────────────────────────────────────────────────────────────────────────────
# RULE CHAIN
# ──────────────────────────────────────────────────────────────────────────────
class RuleResult(NamedTuple):
    """Outcome of a rule that changed the current character."""
    char: str
    suffix: Optional[str] = None   # half-width diacritic mark to emit after char
    consumed: int = 0              # lookahead characters swallowed by the rule


Rule = Callable[[str, Optional[str], int], Optional[RuleResult]]


def _changed(ch: str, converted: str, suffix: Optional[str] = None) -> Optional[RuleResult]:
    if converted == ch:
        return None
    return RuleResult(converted, suffix)


def _flag_rule(flag: ConversionOp, convert: Callable[[str], str]) -> Rule:
    """Rule that applies a single-character conversion when *flag* is set."""
    def rule(ch: str, lookahead: Optional[str], ops: int) -> Optional[RuleResult]:
        if not ops & flag:
            return None
        return _changed(ch, convert(ch))
    rule.__name__ = f"_{flag.name.lower()}_rule"
    return rule


def _hankaku_katakana_rule(ch: str, lookahead: Optional[str], ops: int) -> Optional[RuleResult]:
    if not ops & (ConversionOp.HAN_KATA_TO_ZEN_KATA | ConversionOp.HAN_KATA_TO_ZEN_HIRA):
        return None

    converted = ch
    consumed = 0
    if not ops & ConversionOp.KEEP_DIACRITIC_MARKS_APART:
        converted = convert_diacritic_hankaku_kana_to_zenkaku(ch, lookahead)
        if converted != ch:
            # The mark is part of the fused glyph now
            consumed = 1
    if converted == ch:
        converted = convert_unvoiced_hankaku_kana_to_zenkaku(ch)
    if converted == ch:
        return None

    if not ops & ConversionOp.HAN_KATA_TO_ZEN_KATA:
        converted = convert_zenkaku_katakana_to_zenkaku_hiragana(converted)
    return RuleResult(converted, consumed=consumed)


def _zenkaku_katakana_to_hankaku_rule(ch: str, lookahead: Optional[str], ops: int) -> Optional[RuleResult]:
    if not ops & ConversionOp.ZEN_KATA_TO_HAN_KATA:
        return None
    return _changed(
        ch,
        convert_zenkaku_katakana_to_hankaku_katakana(ch),
        determine_hankaku_diacritic_suffix(ch),
    )


def _zenkaku_hiragana_rule(ch: str, lookahead: Optional[str], ops: int) -> Optional[RuleResult]:
    if not ops & (ConversionOp.ZEN_HIRA_TO_ZEN_KATA | ConversionOp.ZEN_HIRA_TO_HAN_KATA):
        return None
    # Katakana that already has a hiragana twin is never routed through here
    if charclass.is_zenkaku_katakana_with_hiragana_equivalent(ch):
        return None

    katakana = convert_zenkaku_hiragana_to_zenkaku_katakana(ch)
    if not ops & ConversionOp.ZEN_HIRA_TO_HAN_KATA:
        return _changed(ch, katakana)
    return _changed(
        ch,
        convert_zenkaku_katakana_to_hankaku_katakana(katakana),
        determine_hankaku_diacritic_suffix(katakana),
    )


_RULE_CHAIN: Tuple[Rule, ...] = (
    _flag_rule(ConversionOp.HAN_ASCII_TO_ZEN_ASCII, convert_hankaku_ascii_to_zenkaku_ascii),
    _flag_rule(ConversionOp.HAN_LETTER_TO_ZEN_LETTER, convert_hankaku_letter_to_zenkaku_letter),
    _flag_rule(ConversionOp.HAN_NUMBER_TO_ZEN_NUMBER, convert_hankaku_number_to_zenkaku_number),
    _flag_rule(ConversionOp.HAN_SPACE_TO_ZEN_SPACE, convert_hankaku_space_to_zenkaku_space),
    _hankaku_katakana_rule,
    _flag_rule(ConversionOp.ZEN_ASCII_TO_HAN_ASCII, convert_zenkaku_ascii_to_hankaku_ascii),
    _flag_rule(ConversionOp.ZEN_LETTER_TO_HAN_LETTER, convert_zenkaku_letter_to_hankaku_letter),
    _flag_rule(ConversionOp.ZEN_NUMBER_TO_HAN_NUMBER, convert_zenkaku_number_to_hankaku_number),
    _flag_rule(ConversionOp.ZEN_SPACE_TO_HAN_SPACE, convert_zenkaku_space_to_hankaku_space),
    _zenkaku_katakana_to_hankaku_rule,
    _zenkaku_hiragana_rule,
    _flag_rule(ConversionOp.ZEN_KATA_TO_ZEN_HIRA, convert_zenkaku_katakana_to_zenkaku_hiragana),
)


def apply_rules(ch: str, lookahead: Optional[str], ops: int) -> Optional[RuleResult]:
    """Run *ch* through the rule chain; ``None`` means it passes through as is."""
    for rule in _RULE_CHAIN:
        result = rule(ch, lookahead, ops)
        if result is not None:
            return result
    return None


# ──────────────────────────────────────────────────────────────────────────────
# SCANNING
# ──────────────────────────────────────────────────────────────────────────────
class _ScanState:
    """Cursor over the input plus the output buffer for one conversion."""

    __slots__ = ("text", "cursor", "output")

    def __init__(self, text: str):
        self.text = text
        self.cursor = 0
        self.output: List[str] = []

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.text)

    @property
    def current(self) -> str:
        return self.text[self.cursor]

    @property
    def lookahead(self) -> Optional[str]:
        nxt = self.cursor + 1
        return self.text[nxt] if nxt < len(self.text) else None

    def emit(self, ch: str) -> None:
        self.output.append(ch)

    def advance(self, stride: int = 1) -> None:
        self.cursor += stride

    def result(self) -> str:
        return "".join(self.output)


def _resolve_ops(ops: Ops) -> int:
    if ops is None:
        return 0
    if isinstance(ops, str):
        return int(parse_ops(ops))
    if isinstance(ops, int):
        return int(ops)
    raise TypeError(
        f"ops must be an int, ConversionOp or mnemonic string, not {type(ops).__name__}"
    )


def _scan(text: str, ops: int, ignore: FrozenSet[str]) -> str:
    state = _ScanState(text)
    while not state.exhausted:
        ch = state.current

        # Ignored characters skip the chain, but can still be swallowed as
        # the lookahead of the character before them.
        if ch in ignore:
            state.emit(ch)
            state.advance()
            continue

        result = apply_rules(ch, state.lookahead, ops)
        if result is None:
            state.emit(ch)
            state.advance()
            continue

        state.emit(result.char)
        if result.suffix is not None:
            state.emit(result.suffix)
        state.advance(1 + result.consumed)

    return state.result()


def convert_kana(text: str, ops: Ops, ignore: Optional[Iterable[str]] = "") -> str:
    """Convert *text* according to the requested operations.

    Args:
        text: Input string; any character is legal, unknown ones pass through
        ops: ``ConversionOp`` mask (or plain int), or a mnemonic string such
            as ``"KVa"``; zero, negative and ``None`` leave *text* untouched
        ignore: Characters that are copied verbatim and never converted

    Returns:
        The converted string
    """
    if not text:
        return ""

    mask = _resolve_ops(ops)
    if mask <= 0:
        return text

    return _scan(text, mask, frozenset(ignore or ""))


class KanaConverter:
    """Converter bound to one operation mask and ignore set.

    Parses the mask once, which pays off when the same conversion runs over
    many strings (e.g. every line of a file).
    """

    def __init__(self, ops: Ops, ignore: Optional[Iterable[str]] = ""):
        self._ops = _resolve_ops(ops)
        self._ignore = frozenset(ignore or "")
        logger.debug(
            f"KanaConverter configured: ops=0x{max(self._ops, 0):x} "
            f"({to_mnemonic(max(self._ops, 0)) or '-'}), ignore={sorted(self._ignore)}"
        )

    @property
    def ops(self) -> int:
        return self._ops

    @property
    def ignore(self) -> FrozenSet[str]:
        return self._ignore

    @property
    def mnemonic(self) -> str:
        return to_mnemonic(max(self._ops, 0))

    def convert(self, text: str) -> str:
        if not text:
            return ""
        if self._ops <= 0:
            return text
        return _scan(text, self._ops, self._ignore)

    def convert_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Lazily convert each line; line endings pass through untouched."""
        for line in lines:
            yield self.convert(line)

    def __repr__(self) -> str:
        return f"KanaConverter(ops=0x{max(self._ops, 0):x}, ignore={''.join(sorted(self._ignore))!r})"
