from skibidipp.codegen import generate_nasm, render_nasm
from skibidipp.syntax import BinaryOp, BinOp, Exit, Number, Print, StringLiteral


def test_print_string_emits_data_and_write():
    asm = render_nasm([Print(StringLiteral("hello"))])
    assert asm.startswith("section .data\n")
    assert 'msg0 db "hello", 10, 0\n' in asm
    assert "    mov rsi, msg0\n" in asm
    assert "    mov rdx, 6\n" in asm
    assert "    ; Print: hello\n" in asm


def test_no_strings_means_no_data_section():
    asm = render_nasm([Exit(Number(3))])
    assert "section .data" not in asm
    assert asm.startswith("section .text\nglobal _start\n\n_start:\n")
    assert "    mov rdi, 3\n" in asm


def test_default_exit_added_without_exit():
    asm = render_nasm([Print(StringLiteral("x"))])
    assert asm.endswith("    ; Default exit\n    mov rax, 60\n    xor rdi, rdi\n    syscall\n")


def test_default_exit_omitted_with_exit():
    asm = render_nasm([Exit(Number(0))])
    assert "; Default exit" not in asm
    assert "mov rax, 60         ; sys_exit" in asm


def test_non_number_exit_still_suppresses_default():
    asm = render_nasm([Exit(BinaryOp(BinOp.ADD, Number(1), Number(2)))])
    assert "; Default exit" not in asm
    assert "; Exit program" not in asm


def test_duplicate_strings_share_first_label():
    asm = render_nasm([Print(StringLiteral("a")), Print(StringLiteral("a"))])
    assert 'msg1 db "a", 10, 0' in asm
    assert asm.count("    mov rsi, msg0\n") == 2
    assert "mov rsi, msg1" not in asm


def test_statement_order_preserved():
    asm = render_nasm([Print(StringLiteral("first")), Print(StringLiteral("second"))])
    assert asm.index("; Print: first") < asm.index("; Print: second")


def test_generate_writes_file(tmp_path):
    target = tmp_path / "out.asm"
    exprs = [Print(StringLiteral("hi")), Exit(Number(0))]
    asm = generate_nasm(exprs, target)
    assert target.read_text(encoding="utf-8") == asm
    assert asm == render_nasm(exprs)


def test_generate_reports_write_failure(tmp_path, capsys):
    target = tmp_path / "missing" / "out.asm"
    exprs = [Exit(Number(1))]
    asm = generate_nasm(exprs, target)
    assert asm == render_nasm(exprs)
    assert "Error writing to file:" in capsys.readouterr().err