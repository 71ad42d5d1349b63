from __future__ import annotations

import argparse
import logging

from .codegen import generate_cpp
from .config import Config
from .lexer import NoInputError, format_tokens, tokenize_source
from .parser import Parser

logger = logging.getLogger(__name__)


def build_arg_parser():
    ap = argparse.ArgumentParser(prog="dekhao2cpp", description="dekhao -> C++ translator")
    ap.add_argument("source", nargs="?", default=Config.SOURCE_FILE, help="input dekhao file")
    ap.add_argument("-o", "--output", default=Config.TARGET_FILE, help="where to write the generated C++")
    ap.add_argument("--no-tokens", action="store_true", help="do not print the token dump")
    ap.add_argument("--no-write", action="store_true", help="print the C++ code only")
    ap.add_argument("-v", "--verbose", action="store_true", help="log skipped lines")
    return ap


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=Config.LOG_FORMAT,
    )

    try:
        # undecodable bytes become U+FFFD; lines are split on "\n" by the lexer
        with open(args.source, encoding="utf-8", errors="replace", newline="") as f:
            data = f.read()
    except OSError:
        raise SystemExit(f"Error: cannot open {args.source}")

    try:
        tokens = tokenize_source(data)
    except NoInputError:
        raise SystemExit("No tokens (or failed to read input).")

    if not args.no_tokens:
        print("Tokens:")
        print(format_tokens(tokens))

    parser = Parser(tokens)
    program = generate_cpp(parser.parse())
    if parser.skipped:
        logger.info("%d line(s) skipped", len(parser.skipped))
    cpp_code = program.render()

    print("===== Generated C++ =====")
    print(cpp_code)

    if args.no_write:
        return
    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(cpp_code)
    except OSError as e:
        logger.warning("could not write %s: %s", args.output, e)
        return
    print(f"Written to {args.output}")


if __name__ == "__main__":
    main()
