"""NASM x86-64 assembly generation."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence, Union

from skibidipp.syntax import Exit, Expr, Number, Print, StringLiteral

_DEFAULT_EXIT = (
    "    ; Default exit\n"
    "    mov rax, 60\n"
    "    xor rdi, rdi\n"
    "    syscall\n"
)


def _print_strings(exprs: Sequence[Expr]):
    for expr in exprs:
        if isinstance(expr, Print) and isinstance(expr.expr, StringLiteral):
            yield expr.expr.value


def render_nasm(exprs: Sequence[Expr]) -> str:
    """Return NASM source for the given statements."""
    data_lines = []
    labels: dict[str, str] = {}
    for counter, text in enumerate(_print_strings(exprs)):
        label = f"msg{counter}"
        labels.setdefault(text, label)
        data_lines.append(f'{label} db "{text}", 10, 0\n')

    parts = []
    if data_lines:
        parts.append("section .data\n")
        parts.extend(data_lines)
        parts.append("\n")
    parts.append("section .text\nglobal _start\n\n_start:\n")

    for expr in exprs:
        if isinstance(expr, Print) and isinstance(expr.expr, StringLiteral):
            text = expr.expr.value
            parts.append(
                f"    ; Print: {text}\n"
                "    mov rax, 1          ; sys_write\n"
                "    mov rdi, 1          ; stdout\n"
                f"    mov rsi, {labels[text]}\n"
                f"    mov rdx, {len(text.encode('utf-8')) + 1}\n"
                "    syscall\n\n"
            )
        elif isinstance(expr, Exit) and isinstance(expr.expr, Number):
            parts.append(
                "    ; Exit program\n"
                "    mov rax, 60         ; sys_exit\n"
                f"    mov rdi, {expr.expr.value}\n"
                "    syscall\n\n"
            )

    if not any(isinstance(expr, Exit) for expr in exprs):
        parts.append(_DEFAULT_EXIT)
    return "".join(parts)


def generate_nasm(exprs: Sequence[Expr], output_path: Union[str, Path]) -> str:
    """Render NASM source, write it to ``output_path`` and return it.

    A failed write is reported on stderr; the rendered text is still returned.
    """
    asm = render_nasm(exprs)
    try:
        Path(output_path).write_text(asm, encoding="utf-8")
    except OSError as exc:
        print(f"Error writing to file: {exc}", file=sys.stderr)
    return asm