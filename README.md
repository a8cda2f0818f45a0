# skibidipp

A tiny compiler for a toy language. It reads a source file, lexes and parses
its statements, writes x86-64 Linux NASM assembly, and evaluates each
statement.

## The language

A program is a sequence of two kinds of statement:

```
console.print("Hello, world");
exit(3 + 4 * 2);
```

- `console.print(expr);` prints a string literal or a number.
- `exit(expr);` ends the program with the given code.

Expressions take non-negative integer literals (up to 2147483647), string
literals in double quotes (no escapes), `+ - * /` and parentheses. `*` and
`/` bind tighter than `+` and `-`, and all four are left-associative.
Whitespace is ignored. Arithmetic works on 32-bit signed integers: division
truncates toward zero, dividing by zero raises `ZeroDivisionError`, and a
result outside the 32-bit range raises `OverflowError`.

## Usage

```
pip install .
skibidipp [SOURCE] [--build-dir DIR]
```

`SOURCE` defaults to `examples/sample.spp` and `--build-dir` to `build`. The
build directory must already exist; the assembly is written to
`DIR/out.asm`. The command then prints `Evaluation result: N` for each
statement, after whatever that statement prints itself.

The command exits with status 1 and a message on stderr when the source file
cannot be read, when it fails to lex or parse, or when the build directory
does not exist. A failure to write `out.asm` is reported on stderr but does
not stop evaluation.

To build an executable on Linux:

```
nasm -f elf64 build/out.asm -o build/out.o
ld build/out.o -o build/out
```

## Library use

```python
from skibidipp.lexer import lex
from skibidipp.cli import parse_program, evaluate
from skibidipp.codegen import render_nasm

exprs = parse_program(lex('console.print("hi"); exit(2 * 3);'))
print(render_nasm(exprs))
print([evaluate(e) for e in exprs])
```

- `skibidipp.lexer.lex(source)` returns a list of `Token` objects, each with a
  `TokenKind` and an optional value. It raises `skibidipp.lexer.LexError` on
  an unknown character, an unterminated string or a number literal out of
  range.
- `skibidipp.parser.Parser(tokens)` reads one statement at a time through
  `parse_console_print_expr()` and `parse_exit_expr()`, which return a node
  or `None`; `is_finished()` and `position` report progress.
- `skibidipp.cli.parse_program(tokens)` parses every statement and raises
  `skibidipp.cli.CompileError` when one cannot be parsed.
- `skibidipp.cli.evaluate(expr)` evaluates a node and returns its value,
  printing what print statements print.
- `skibidipp.codegen.render_nasm(exprs)` returns the assembly text;
  `generate_nasm(exprs, output_path)` also writes it to `output_path`.
- The syntax tree lives in `skibidipp.syntax`: `Number`, `StringLiteral`,
  `BinaryOp`, `Print`, `Exit`, and the `BinOp` enum with `apply(left, right)`.

## Limits of the generated assembly

The assembly covers only the simplest statements. Only
`console.print` of a string literal and `exit` of a plain number produce
code; printing a number or an arithmetic expression, and exiting with an
expression, emit nothing. Each of those statements is still evaluated by the
command. When the program has no `exit`, the assembly ends with an exit of
status 0.

## Tests

```
pip install .[test]
pytest
```