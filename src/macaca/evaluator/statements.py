# src/macaca/evaluator/statements.py
from ..object import ReturnValue
from .utils import is_error, is_signal, NULL


class StatementEvaluatorMixin:
    """Handles evaluation of statements and statement sequences."""

    def eval_program(self, statements, env):
        self.debug_log("eval_program", f"Processing {len(statements)} statements")

        result = NULL
        for i, stmt in enumerate(statements):
            self.debug_log(f"  Statement {i+1}", type(stmt).__name__)
            res = self.eval_node(stmt, env)
            self.summary['evaluated_statements'] += 1

            if isinstance(res, ReturnValue):
                self.debug_log("  ReturnValue encountered", res.value)
                return res.value
            if is_error(res):
                self.debug_log("  Error encountered", res.message)
                self.summary['errors'] += 1
                return res
            result = res

        self.debug_log("eval_program completed", result)
        return result

    def eval_block_statement(self, block, env):
        self.debug_log("eval_block_statement", f"len={len(block.statements)}")

        result = NULL
        for stmt in block.statements:
            res = self.eval_node(stmt, env)
            self.summary['evaluated_statements'] += 1

            # ReturnValue stays wrapped so the enclosing call can unwrap it
            if is_signal(res):
                self.debug_log("  Block interrupted", res)
                return res
            result = res

        return result

    def eval_let_statement(self, node, env):
        self.debug_log("eval_let_statement", f"let {node.name.value}")

        value = self.eval_node(node.value, env)
        if is_signal(value):
            return value

        env.set(node.name.value, value)
        return NULL

    def eval_return_statement(self, node, env):
        val = self.eval_node(node.return_value, env)
        if is_signal(val):
            return val
        return ReturnValue(val)
