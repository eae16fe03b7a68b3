"""Command-line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import sys
from pprint import pformat
from typing import Optional, Sequence, TextIO

from yalox.errors import LoxError
from yalox.interpreter import Interpreter
from yalox.parser import parse
from yalox.scanner import scan_tokens

USAGE = "Usage: jlox [script]"
EXIT_USAGE = 1
EXIT_ERROR = 65


def run(source: str, out: Optional[TextIO] = None) -> None:
    """Scan, parse and interpret one piece of source text.

    Parse errors propagate as LoxError; runtime errors are reported in the
    ``Res:`` line instead of being raised.
    """
    out = out if out is not None else sys.stdout
    print(f'Source: "{source}"', file=out)

    statements = parse(scan_tokens(source))
    print(f"Ast: {pformat(statements)}", file=out)

    interpreter = Interpreter(statements, out)
    try:
        interpreter.interpret()
    except LoxError as err:
        print(f"Res: Err({err})", file=out)
    else:
        print("Res: Ok", file=out)


def run_file(path: str, out: Optional[TextIO] = None) -> None:
    """Run the script stored at ``path``."""
    with open(path, encoding="utf-8") as handle:
        source = handle.read()
    run(source, out)


def run_prompt(stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Read and run one line at a time until end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        out.write("> ")
        out.flush()
        line = stdin.readline()
        if not line:
            break
        try:
            run(line, out)
        except LoxError as err:
            print(f"Runtime error: {err}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interpreter; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) > 1:
        print(USAGE)
        return EXIT_USAGE

    try:
        if args:
            run_file(args[0])
        else:
            run_prompt()
    except (LoxError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_ERROR

    print("Interpreter executed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())