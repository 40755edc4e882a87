#!/usr/bin/env python3
import argparse
import logging
import os
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv

from kanawidth import DEFAULT_OPS, DEFAULT_OPS_ENV, IGNORE_CHARS_ENV, LOG_LEVEL_ENV
from kanawidth.charclass import is_hankaku_katakana
from kanawidth.converter import KanaConverter
from kanawidth.logger import logger, setup_logging
from kanawidth.ops import ConversionOp

load_dotenv()


def parse_ops_argument(value: str):
    """Accept either an integer mask ("0x100", "256") or mnemonic letters ("KVa")."""
    try:
        return int(value, 0)
    except ValueError:
        return value


def convert_stream(source: TextIO, target: TextIO, converter: KanaConverter) -> dict:
    """
    Convert *source* line by line into *target*.

    Args:
        source: Readable text stream
        target: Writable text stream
        converter: Configured converter

    Returns:
        Statistics about the run (lines, characters, half-width katakana seen)
    """
    stats = {"lines": 0, "chars": 0, "hankaku_katakana": 0}
    for line in source:
        stats["lines"] += 1
        stats["chars"] += len(line)
        stats["hankaku_katakana"] += sum(1 for ch in line if is_hankaku_katakana(ch))
        target.write(converter.convert(line))
    return stats


def build_converter(ops: Optional[str], ignore: Optional[str], keep_marks_apart: bool) -> KanaConverter:
    ops_value = parse_ops_argument(ops if ops is not None else os.getenv(DEFAULT_OPS_ENV, DEFAULT_OPS))
    ignore_chars = ignore if ignore is not None else os.getenv(IGNORE_CHARS_ENV, "")

    converter = KanaConverter(ops_value, ignore_chars)
    if keep_marks_apart:
        converter = KanaConverter(converter.ops | int(ConversionOp.KEEP_DIACRITIC_MARKS_APART), ignore_chars)
    return converter


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert Japanese text between half-width and full-width forms"
    )
    parser.add_argument(
        "input", nargs="?", default="-",
        help="UTF-8 text file to convert ('-' or omitted reads stdin)"
    )
    parser.add_argument(
        "-o", "--output", default=None,
        help="Where to write the converted text (defaults to stdout)"
    )
    parser.add_argument(
        "--ops", default=None,
        help=f"Mnemonic letters (e.g. 'KVa') or integer mask; "
             f"defaults to ${DEFAULT_OPS_ENV} or '{DEFAULT_OPS}'"
    )
    parser.add_argument(
        "--ignore", default=None,
        help=f"Characters to leave untouched; defaults to ${IGNORE_CHARS_ENV}"
    )
    parser.add_argument(
        "--keep-marks-apart", action="store_true",
        help="Do not fuse half-width diacritic marks into the preceding katakana"
    )
    args = parser.parse_args(argv)

    level = getattr(logging, os.getenv(LOG_LEVEL_ENV, "INFO").upper(), logging.INFO)
    # Converted text owns stdout when no output file is given
    setup_logging(level, info_stream=sys.stderr if args.output is None else sys.stdout)

    converter = build_converter(args.ops, args.ignore, args.keep_marks_apart)
    logger.info(f"🔤 Converting with {converter!r} ({converter.mnemonic or 'no-op'})")

    try:
        source = sys.stdin if args.input == "-" else open(args.input, "r", encoding="utf-8")
    except OSError as e:
        logger.error(f"❌ Cannot read {args.input}: {e}")
        return 1

    try:
        if args.output is None:
            stats = convert_stream(source, sys.stdout, converter)
        else:
            with open(args.output, "w", encoding="utf-8") as target:
                stats = convert_stream(source, target, converter)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"❌ Conversion failed: {e}")
        return 1
    finally:
        if source is not sys.stdin:
            source.close()

    logger.info(f"✅ Converted {stats['lines']} lines ({stats['chars']} characters)")
    if stats["hankaku_katakana"]:
        logger.info(f"📊 Half-width katakana characters in input: {stats['hankaku_katakana']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
