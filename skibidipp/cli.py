"""Command line: compile a source file to NASM and evaluate it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from skibidipp.codegen import generate_nasm
from skibidipp.lexer import LexError, Token, lex
from skibidipp.parser import Parser
from skibidipp.syntax import BinaryOp, Exit, Expr, Number, Print, StringLiteral


class CompileError(Exception):
    """Raised when no statement can be parsed at some position."""


def parse_program(tokens: Sequence[Token]) -> list[Expr]:
    """Parse statements until the tokens run out."""
    parser = Parser(tokens)
    statements: list[Expr] = []
    while not parser.is_finished():
        statement = parser.parse_console_print_expr() or parser.parse_exit_expr()
        if statement is None:
            raise CompileError(
                f"No valid expression found at token position {parser.position}"
            )
        statements.append(statement)
    return statements


def evaluate(expr: Expr) -> int:
    """Evaluate an expression, printing whatever it prints."""
    match expr:
        case Number(value):
            return value
        case StringLiteral(value):
            print(value)
            return 0
        case BinaryOp(op, left, right):
            return op.apply(evaluate(left), evaluate(right))
        case Print(Number(value) | StringLiteral(value)):
            print(value)
            return 0
        case Print(_):
            print("Unsupported print expression")
            return 0
        case Exit(inner):
            return evaluate(inner)
    raise TypeError(f"not an expression: {expr!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    arg_parser = argparse.ArgumentParser(prog="skibidipp")
    arg_parser.add_argument("source", nargs="?", default="examples/sample.spp")
    arg_parser.add_argument("--build-dir", default="build")
    args = arg_parser.parse_args(argv)

    try:
        source = Path(args.source).read_text(encoding="utf-8")
    except OSError:
        print(f"Error: The file '{args.source}' could not be found.", file=sys.stderr)
        return 1

    try:
        statements = parse_program(lex(source))
    except (LexError, CompileError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    build_dir = Path(args.build_dir)
    if not build_dir.exists():
        print(
            f"Error: Output directory '{args.build_dir}' does not exist.",
            file=sys.stderr,
        )
        return 1

    generate_nasm(statements, build_dir / "out.asm")

    for statement in statements:
        print(f"Evaluation result: {evaluate(statement)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())