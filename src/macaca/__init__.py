# src/macaca/__init__.py
"""
Macaca: a small tree-walking interpreter.

Pipeline: ``Lexer`` -> ``Parser`` -> ``Evaluator``::

    from macaca import run
    run("let add = fn(a, b) { a + b }; add(2, 3)").inspect()   # '5'
"""

from .lexer import Lexer
from .parser import Parser
from .environment import Environment
from .evaluator import Evaluator, evaluate
from .error_reporter import MacacaError, MacacaSyntaxError, ParseError, ParserErrors

__version__ = "0.1.0"


def parse(source, filename="<stdin>"):
    """Parse ``source`` into a Program, raising ParserErrors on diagnostics."""
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    if parser.errors:
        raise ParserErrors(parser.errors)
    return program


def run(source, env=None, filename="<stdin>", **kwargs):
    """Parse and evaluate ``source``; returns the terminal object."""
    program = parse(source, filename)
    return Evaluator(program, env, **kwargs).eval()


__all__ = [
    "Lexer", "Parser", "Environment", "Evaluator", "evaluate",
    "MacacaError", "MacacaSyntaxError", "ParseError", "ParserErrors",
    "parse", "run", "__version__",
]
