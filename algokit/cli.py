"""Command line front end: topological sort and bracket checking on stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.brackets import brackets_balanced
from algokit.graphs import CycleError, topsort


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "topsort",
        help="read 'n m' and m edges 'a b' (nodes 1..n); print an order or -1",
    )
    commands.add_parser(
        "brackets",
        help="read a string and an optional length; print 1 if balanced, else 0",
    )
    return parser


def _run_topsort(tokens: list[str]) -> str:
    numbers = [int(token) for token in tokens]
    if len(numbers) < 2:
        raise ValueError("expected node and edge counts")
    n, m = numbers[0], numbers[1]
    pairs = numbers[2:]
    if m < 0 or len(pairs) < 2 * m:
        raise ValueError(f"expected {m} edges")
    edges = [(pairs[2 * i] - 1, pairs[2 * i + 1] - 1) for i in range(m)]
    try:
        order = topsort(n, edges)
    except CycleError:
        return "-1"
    return " ".join(str(node + 1) for node in order)


def _run_brackets(tokens: list[str]) -> str:
    if not tokens:
        raise ValueError("expected a string to check")
    text = tokens[0]
    if len(tokens) > 1:
        length = int(tokens[1])
        if length < 0:
            raise ValueError("length must be non-negative")
        text = text[:length]
    return "1" if brackets_balanced(text) else "0"


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command on standard input and print its result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    runner = _run_topsort if args.command == "topsort" else _run_brackets
    try:
        output = runner(tokens)
    except ValueError as error:
        parser.error(str(error))
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())