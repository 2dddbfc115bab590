# src/macaca/evaluator/functions.py
from ..builtins import BUILTINS
from ..object import Function, Builtin, ReturnValue, EvaluationError
from .utils import is_signal


class FunctionEvaluatorMixin:
    """Handles function literals, calls and the builtin table."""

    def __init__(self):
        # shared, read-only
        self.builtins = BUILTINS
        self.call_depth = 0

    def eval_function_literal(self, node, env):
        # the body is not checked until the function is called
        return Function(node.parameters, node.body, env)

    def eval_call_expression(self, node, env):
        self.debug_log("CallExpression node", f"Calling {node.function}")

        fn = self.eval_node(node.function, env)
        if is_signal(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if is_signal(args):
            return args

        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        if isinstance(fn, Function):
            if len(fn.parameters) != len(args):
                return EvaluationError(
                    f"wrong number of arguments: want={len(fn.parameters)}, got={len(args)}"
                )

            new_env = self.extend_function_env(fn, args)
            self.summary['function_calls'] += 1
            self.call_depth += 1
            self.summary['max_call_depth'] = max(self.summary['max_call_depth'], self.call_depth)
            try:
                res = self.eval_node(fn.body, new_env)
            finally:
                self.call_depth -= 1
            return self.unwrap_return_value(res)

        if isinstance(fn, Builtin):
            self.debug_log("  Calling builtin function", fn.name)
            self.summary['builtin_calls'] += 1
            return fn.fn(*args)

        return EvaluationError(f"not a function: {fn.type()}")

    def extend_function_env(self, fn, args):
        return fn.env.extend(
            (param.value, arg) for param, arg in zip(fn.parameters, args)
        )

    def unwrap_return_value(self, obj):
        if isinstance(obj, ReturnValue):
            return obj.value
        return obj
