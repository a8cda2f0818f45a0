"""A toy-language compiler: lexer, parser, evaluator and x86-64 NASM generator."""

__version__ = "0.1.0"