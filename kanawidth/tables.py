"""Half-width / full-width katakana lookup tables.

All five tables are derived from ``_KATAKANA_ROWS`` once, at import time,
and handed out as read-only mappings.
"""

from types import MappingProxyType
from typing import Dict, Mapping

# Diacritic marks (dakuten / handakuten) as separate half-width characters
HANKAKU_VOICED_MARK = 'ﾞ'
HANKAKU_ASPIRATED_MARK = 'ﾟ'

# half-width | full-width | full-width + voiced mark | full-width + aspirated mark
_KATAKANA_ROWS = """
｡ 。
｢ 「
｣ 」
､ 、
･ ・
ｦ ヲ
ｧ ァ
ｨ ィ
ｩ ゥ
ｪ ェ
ｫ ォ
ｬ ャ
ｭ ュ
ｮ ョ
ｯ ッ
ｰ ー
ｱ ア
ｲ イ
ｳ ウ ヴ
ｴ エ
ｵ オ
ｶ カ ガ
ｷ キ ギ
ｸ ク グ
ｹ ケ ゲ
ｺ コ ゴ
ｻ サ ザ
ｼ シ ジ
ｽ ス ズ
ｾ セ ゼ
ｿ ソ ゾ
ﾀ タ ダ
ﾁ チ ヂ
ﾂ ツ ヅ
ﾃ テ デ
ﾄ ト ド
ﾅ ナ
ﾆ ニ
ﾇ ヌ
ﾈ ネ
ﾉ ノ
ﾊ ハ バ パ
ﾋ ヒ ビ ピ
ﾌ フ ブ プ
ﾍ ヘ ベ ペ
ﾎ ホ ボ ポ
ﾏ マ
ﾐ ミ
ﾑ ム
ﾒ メ
ﾓ モ
ﾔ ヤ
ﾕ ユ
ﾖ ヨ
ﾗ ラ
ﾘ リ
ﾙ ル
ﾚ レ
ﾛ ロ
ﾜ ワ
ﾝ ン
ﾞ ゛
ﾟ ゜
"""

# Full-width katakana without a half-width form of their own
_ZENKAKU_ONLY_KATAKANA = {
    'ヮ': 'ﾜ',
    'ヰ': 'ｲ',
    'ヱ': 'ｴ',
}


def _build_tables():
    unvoiced: Dict[str, str] = {}
    voiced: Dict[str, str] = {}
    aspirated: Dict[str, str] = {}
    zen_to_han: Dict[str, str] = {}
    suffixes: Dict[str, str] = {}

    for row in _KATAKANA_ROWS.strip().splitlines():
        han, zen, *marked = row.split()
        unvoiced[han] = zen
        zen_to_han[zen] = han

        if len(marked) > 0:
            voiced[han] = marked[0]
            zen_to_han[marked[0]] = han
            suffixes[marked[0]] = HANKAKU_VOICED_MARK
        if len(marked) > 1:
            aspirated[han] = marked[1]
            zen_to_han[marked[1]] = han
            suffixes[marked[1]] = HANKAKU_ASPIRATED_MARK

    zen_to_han.update(_ZENKAKU_ONLY_KATAKANA)
    return unvoiced, voiced, aspirated, zen_to_han, suffixes


def _freeze(table: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(table)


(
    HANKAKU_TO_ZENKAKU_KATAKANA_UNVOICED,
    HANKAKU_TO_ZENKAKU_KATAKANA_VOICED,
    HANKAKU_TO_ZENKAKU_KATAKANA_ASPIRATED,
    ZENKAKU_TO_HANKAKU_KATAKANA,
    HANKAKU_DIACRITIC_SUFFIXES,
) = (_freeze(table) for table in _build_tables())
