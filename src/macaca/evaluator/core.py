# src/macaca/evaluator/core.py
import sys
from contextlib import contextmanager

from .. import macaca_ast
from ..config import config as macaca_config
from ..environment import Environment
from ..object import Integer, String, EvaluationError, native_bool_to_boolean_object
from .utils import debug_log, new_summary, NULL
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin

_UNSET = object()


@contextmanager
def recursion_headroom(limit):
    """Raise the interpreter recursion limit to ``limit`` for the duration.

    Each Macaca call costs about a dozen host frames. A ``limit`` at or below
    the current one is left alone.
    """
    previous = sys.getrecursionlimit()
    if limit is None or limit <= previous:
        yield
        return
    sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    """Tree-walking evaluator for one session.

    ``Evaluator(program, env).eval()`` runs a whole program; ``eval_node``
    evaluates any node against an explicit environment. ``max_steps`` bounds
    the number of nodes evaluated and ``recursion_limit`` the host stack
    depth; both default to the configured values. ``debug_mode`` turns on
    debug logging for this session only.
    """

    def __init__(self, program=None, env=None, max_steps=_UNSET,
                 recursion_limit=_UNSET, debug_mode=False):
        FunctionEvaluatorMixin.__init__(self)
        self.program = program
        self.env = env if env is not None else Environment()
        self.max_steps = macaca_config.max_steps if max_steps is _UNSET else max_steps
        self.recursion_limit = (macaca_config.recursion_limit
                                if recursion_limit is _UNSET else recursion_limit)
        self.debug_mode = debug_mode
        self.summary = new_summary()
        self._budget_error = None

    def eval(self):
        if self.program is None:
            return NULL
        with recursion_headroom(self.recursion_limit):
            return self.eval_node(self.program, self.env)

    def debug_log(self, message, data=None, level='debug'):
        enabled = True if self.debug_mode else None
        debug_log(message, data, level=level, enabled=enabled)

    def _charge_step(self):
        self.summary['steps'] += 1
        if self.max_steps is not None and self.summary['steps'] > self.max_steps:
            if self._budget_error is None:
                self.debug_log("Step budget exhausted", self.max_steps, level='warning')
                self._budget_error = EvaluationError(
                    f"evaluation budget exceeded: {self.max_steps} steps"
                )
            return self._budget_error
        return None

    def eval_node(self, node, env):
        if node is None:
            return NULL

        exhausted = self._charge_step()
        if exhausted is not None:
            return exhausted

        node_type = type(node)

        # === STATEMENTS ===
        if node_type == macaca_ast.Program:
            return self.eval_program(node.statements, env)

        elif node_type == macaca_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == macaca_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == macaca_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        elif node_type == macaca_ast.LetStatement:
            return self.eval_let_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == macaca_ast.IntegerLiteral:
            return Integer(node.value)

        elif node_type == macaca_ast.StringLiteral:
            return String(node.value)

        elif node_type == macaca_ast.Boolean:
            return native_bool_to_boolean_object(node.value)

        elif node_type == macaca_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == macaca_ast.PrefixExpression:
            return self.eval_prefix_expression(node, env)

        elif node_type == macaca_ast.InfixExpression:
            return self.eval_infix_expression(node, env)

        elif node_type == macaca_ast.IfExpression:
            return self.eval_if_expression(node, env)

        elif node_type == macaca_ast.FunctionLiteral:
            return self.eval_function_literal(node, env)

        elif node_type == macaca_ast.CallExpression:
            return self.eval_call_expression(node, env)

        elif node_type == macaca_ast.ArrayLiteral:
            return self.eval_array_literal(node, env)

        elif node_type == macaca_ast.HashLiteral:
            return self.eval_hash_literal(node, env)

        elif node_type == macaca_ast.IndexExpression:
            return self.eval_index_expression(node, env)

        self.debug_log("  Unknown node type", node_type.__name__, level='warning')
        return EvaluationError(f"unknown node type: {node_type.__name__}")


# Global Entry Point
def evaluate(program, env=None, max_steps=_UNSET, debug_mode=False):
    return Evaluator(program, env, max_steps=max_steps, debug_mode=debug_mode).eval()
