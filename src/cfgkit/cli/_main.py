from __future__ import annotations

import sys
import argparse

from cfgkit.config import Config
from cfgkit.cli._application import Application

def _load_config(parser: argparse.ArgumentParser, filename: str | None) -> Config:
    if filename is None:
        return Config().apply()

    try:
        return Config.load(filename).apply()
    except (OSError, ValueError, TypeError) as e:
        # tomllib.TOMLDecodeError is a ValueError
        parser.error(f"could not load config '{filename}': {e}")

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cfgkit",
        description="Read a context free grammar and test words against it with CYK.")
    parser.add_argument("file", nargs="?",
        help="read the session from this file instead of standard input")
    parser.add_argument("--config", metavar="FILE",
        help="TOML file with log_dir, log_level, input_separator, epsilon_token")
    parser.add_argument("--debug", action="store_true",
        help="log every normalization pass and prediction")
    parser.add_argument("--show-grammar", action="store_true",
        help="print the normalized grammar before testing words")
    args = parser.parse_args(argv)

    config = _load_config(parser, args.config)
    if args.file is None:
        return Application(config, sys.stdin, sys.stdout, args.debug, args.show_grammar).run()

    try:
        f = open(args.file, 'r')
    except OSError as e:
        parser.error(f"could not read '{args.file}': {e}")

    with f:
        return Application(config, f, sys.stdout, args.debug, args.show_grammar).run()

if __name__ == "__main__":
    sys.exit(main())
