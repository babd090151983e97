"""Interactive REPL and command-line entry point for Lispy, powered by prompt_toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from lispy import __version__
from lispy.errors import LispyLoadError, LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.reader import lex
from lispy.types.value import Error

logger = logging.getLogger(__name__)

BANNER = f"Lispy v{__version__}, Ctrl-D to exit"
PROMPT = "lispy> "
CONTINUATION = "...    "

_OPENERS = {"lparen", "lbrace"}
_CLOSERS = {"rparen", "rbrace"}


def needs_more_input(text: str) -> bool:
    """Return True while `text` still has unclosed ( or { delimiters."""
    depth = 0
    try:
        for tok_type, _ in lex(text):
            if tok_type in _OPENERS:
                depth += 1
            elif tok_type in _CLOSERS:
                depth -= 1
    except LispySyntaxError:
        # Let evaluation report it
        return False
    return depth > 0


def run_source(interp: Interpreter, text: str) -> bool:
    """Evaluate `text` and print each top-level result. Returns False on failure."""
    try:
        for result in interp.iter_eval(text):
            print(result)
    except LispySyntaxError as exc:
        print(f"Syntax error: {exc}", file=sys.stderr)
        return False
    except RecursionError:
        logger.error("Evaluation exceeded the recursion limit (%d)", sys.getrecursionlimit())
        print("Error: maximum recursion depth exceeded", file=sys.stderr)
        return False
    return True


def repl(interp: Interpreter) -> None:
    """Interactive read-eval-print loop."""
    session: PromptSession[str] = PromptSession(history=InMemoryHistory())

    print(BANNER)

    while True:
        try:
            text = session.prompt(PROMPT)
            while needs_more_input(text):
                text += "\n" + session.prompt(CONTINUATION)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        if not text.strip():
            continue

        run_source(interp, text)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="lispy",
        description="Lispy: a small Lisp with literal lists and curried closures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Interactive mode
  %(prog)s lib.lspy main.lspy   # Load files in order
  %(prog)s -i lib.lspy          # Load a file, then start the REPL
  %(prog)s --no-prelude         # REPL with builtins only
        """,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Source files to load, in order",
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start the REPL after loading files",
    )
    parser.add_argument(
        "--no-prelude",
        action="store_true",
        help="Do not load the standard prelude",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        interp = Interpreter(prelude=None if args.no_prelude else "auto")
    except LispyLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in args.files:
        try:
            result = interp.load(path)
        except RecursionError:
            logger.error("Loading %s exceeded the recursion limit", path)
            return 1
        if isinstance(result, Error):
            print(f"Error: {result}", file=sys.stderr)
            return 1

    if args.interactive or not args.files:
        repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
