from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from kanasplit.categories import MODES
from kanasplit.chars import iter_scalars
from kanasplit.classifier import classify_label
from kanasplit.config import TokenizeOptions
from kanasplit.grouper import Token, tokenize_with_options

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kanasplit",
        description="Split mixed English/Japanese text into script-category runs.",
    )
    p.set_defaults(loglevel=logging.WARNING)
    p.add_argument(
        "--error",
        action="store_const",
        const=logging.ERROR,
        dest="loglevel",
        help="error log level only [warn]",
    )
    p.add_argument(
        "--info",
        action="store_const",
        const=logging.INFO,
        dest="loglevel",
        help="info log level [warn]",
    )
    p.add_argument(
        "--debug",
        action="store_const",
        const=logging.DEBUG,
        dest="loglevel",
        help="debug log level [warn]",
    )
    p.add_argument(
        "--logfile", metavar="FILE", help="log to file instead of <STDERR>"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    tok = sub.add_parser("tokenize", help="Split text into tokens and print JSON.")
    src = tok.add_mutually_exclusive_group()
    src.add_argument("--text", default=None, help="Input text.")
    src.add_argument(
        "--input", default=None, help="UTF-8 text file (default: read <STDIN>)."
    )
    tok.add_argument(
        "--output", default=None, help="Output .json path (default: <STDOUT>)."
    )
    tok.add_argument(
        "--compact",
        action="store_true",
        help="Use the en/ja/other categories only.",
    )
    tok.add_argument(
        "--detailed",
        action="store_true",
        help='Emit {"category", "value"} objects instead of plain strings.',
    )
    tok.add_argument(
        "--per-line",
        action="store_true",
        help="Tokenize each input line separately (line breaks are dropped).",
    )

    cls = sub.add_parser("classify", help="Print the category of each character.")
    cls.add_argument("--char", required=True, help="Character(s) to classify.")
    cls.add_argument("--mode", choices=list(MODES), default="full")

    return p


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.input is not None:
        path = Path(args.input)
        logger.info("Reading %s", str(path))
        return path.read_text(encoding="utf-8")
    return sys.stdin.read()


def _jsonable(tokens: list[str] | list[Token]) -> list[Any]:
    return [t.to_dict() if isinstance(t, Token) else t for t in tokens]


def _write_json(payload: Any, output: str | None) -> None:
    out = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    if output is None:
        sys.stdout.write(out)
        return
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(out, encoding="utf-8")
    logger.info("Wrote: %s", str(path))


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        filename=args.logfile,
        level=args.loglevel,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.cmd == "tokenize":
        options = TokenizeOptions(compact=args.compact, detailed=args.detailed)
        text = _read_text(args)
        logger.info("Tokenize: %d chars (mode=%s)", len(text), options.mode)
        if args.per_line:
            payload: Any = [
                _jsonable(tokenize_with_options(line, options))
                for line in text.splitlines()
            ]
        else:
            payload = _jsonable(tokenize_with_options(text, options))
        _write_json(payload, args.output)
        return 0
    if args.cmd == "classify":
        if not args.char:
            p.error("--char must not be empty")
        chars = list(iter_scalars(args.char))
        if len(chars) == 1:
            print(classify_label(chars[0], args.mode))
            return 0
        for ch in chars:
            print(f"{ch}\t{classify_label(ch, args.mode)}")
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")
