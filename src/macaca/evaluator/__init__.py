# src/macaca/evaluator/__init__.py
from .core import Evaluator, evaluate
from .utils import is_error, is_truthy

__all__ = ['Evaluator', 'evaluate', 'is_error', 'is_truthy']
