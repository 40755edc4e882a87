"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanawidth.logger import setup_logging
from kanawidth.tables import (
    HANKAKU_TO_ZENKAKU_KATAKANA_ASPIRATED,
    HANKAKU_TO_ZENKAKU_KATAKANA_VOICED,
)


@pytest.fixture
def voiced_pairs():
    """Every half-width (base, voiced mark) pair with its fused full-width glyph."""
    return [(base + 'ﾞ', zen) for base, zen in HANKAKU_TO_ZENKAKU_KATAKANA_VOICED.items()]


@pytest.fixture
def aspirated_pairs():
    """Every half-width (base, aspirated mark) pair with its fused full-width glyph."""
    return [(base + 'ﾟ', zen) for base, zen in HANKAKU_TO_ZENKAKU_KATAKANA_ASPIRATED.items()]


@pytest.fixture
def mixed_text():
    """Typical form input: half-width katakana, full-width ASCII, both spaces."""
    return "ﾃﾞｰﾀﾍﾞｰｽ　ＡＢＣ１２３ ﾊﾟｽﾜｰﾄﾞ"


@pytest.fixture
def reset_logging():
    """Restore the default log handlers after a test rebinds them to captured streams."""
    yield
    setup_logging()
