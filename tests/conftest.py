"""
Pytest configuration for Macaca tests.
"""
import os
import sys

import pytest

# Make `import macaca` work without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)

from macaca.environment import Environment
from macaca.evaluator import Evaluator
from macaca.lexer import Lexer
from macaca.parser import Parser


def _parse(source):
	parser = Parser(Lexer(source))
	program = parser.parse_program()
	assert parser.errors == [], [str(e) for e in parser.errors]
	return program


@pytest.fixture
def parse():
	"""Parse source, failing the test on any parser diagnostic."""
	return _parse


@pytest.fixture
def run():
	"""Evaluate source in a fresh session (or in ``env`` when given)."""
	def _run(source, env=None, **kwargs):
		return Evaluator(_parse(source), env if env is not None else Environment(), **kwargs).eval()
	return _run
