import os

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Environment variables read by the command-line script (after load_dotenv)
DEFAULT_OPS_ENV = "KANAWIDTH_DEFAULT_OPS"
IGNORE_CHARS_ENV = "KANAWIDTH_IGNORE_CHARS"
LOG_LEVEL_ENV = "KANAWIDTH_LOG_LEVEL"

# Used when DEFAULT_OPS_ENV is unset: fuse half-width katakana to full-width,
# fold full-width ASCII and spaces back to half-width.
DEFAULT_OPS = "KVas"

from .ops import ConversionOp, MNEMONIC_LOOKUP, parse_ops, to_mnemonic
from .converter import KanaConverter, convert_kana

__all__ = [
    'BASE_DIR',
    'DEFAULT_OPS',
    'DEFAULT_OPS_ENV',
    'IGNORE_CHARS_ENV',
    'LOG_LEVEL_ENV',
    'ConversionOp',
    'MNEMONIC_LOOKUP',
    'parse_ops',
    'to_mnemonic',
    'KanaConverter',
    'convert_kana',
]
