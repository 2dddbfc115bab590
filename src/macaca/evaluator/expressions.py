# src/macaca/evaluator/expressions.py
from ..object import (
    Integer, String, Array, Hash, HashPair, Hashable, Boolean as BooleanObj,
    EvaluationError, native_bool_to_boolean_object, to_int64,
)
from .utils import is_signal, is_truthy, NULL, TRUE, FALSE


def _truncating_div(left, right):
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _objects_equal(left, right):
    if isinstance(left, BooleanObj) and isinstance(right, BooleanObj):
        return left.value == right.value
    return left is right


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: literals, operators, identifiers, collections."""

    def eval_identifier(self, node, env):
        val = env.get(node.value)
        if val is not None:
            return val

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            return builtin

        self.debug_log("  Identifier not found", node.value)
        return EvaluationError(f"identifier not found: {node.value}")

    # === Operators ===

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if is_signal(right):
            return right

        operator = node.operator
        if operator == "!":
            return FALSE if is_truthy(right) else TRUE
        if operator == "-":
            if not isinstance(right, Integer):
                return EvaluationError(f"unknown operator: -{right.type()}")
            return Integer(to_int64(-right.value))
        return EvaluationError(f"unknown operator: {operator}{right.type()}")

    def eval_infix_expression(self, node, env):
        # operands are evaluated left to right
        left = self.eval_node(node.left, env)
        if is_signal(left):
            return left

        right = self.eval_node(node.right, env)
        if is_signal(right):
            return right

        return self.eval_infix_operator(node.operator, left, right)

    def eval_infix_operator(self, operator, left, right):
        if isinstance(left, Integer) and isinstance(right, Integer):
            return self.eval_integer_infix(operator, left, right)
        if isinstance(left, String) and isinstance(right, String):
            return self.eval_string_infix(operator, left, right)
        if operator == "==":
            return native_bool_to_boolean_object(_objects_equal(left, right))
        if operator == "!=":
            return native_bool_to_boolean_object(not _objects_equal(left, right))
        if left.type() != right.type():
            return EvaluationError(f"type mismatch: {left.type()} {operator} {right.type()}")
        return EvaluationError(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(to_int64(left_val + right_val))
        elif operator == "-":
            return Integer(to_int64(left_val - right_val))
        elif operator == "*":
            return Integer(to_int64(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return EvaluationError("division by zero")
            return Integer(to_int64(_truncating_div(left_val, right_val)))
        elif operator == "<":
            return native_bool_to_boolean_object(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean_object(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean_object(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean_object(left_val != right_val)

        return EvaluationError(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        return EvaluationError(f"unknown operator: {left.type()} {operator} {right.type()}")

    # === Control flow ===

    def eval_if_expression(self, node, env):
        condition = self.eval_node(node.condition, env)
        if is_signal(condition):
            return condition

        if is_truthy(condition):
            return self.eval_node(node.consequence, env)
        if node.alternative is not None:
            return self.eval_node(node.alternative, env)
        return NULL

    # === Collections ===

    def eval_expressions(self, expressions, env):
        """Evaluate left to right; returns a list, or the first signal met."""
        result = []
        for expr in expressions:
            evaluated = self.eval_node(expr, env)
            if is_signal(evaluated):
                return evaluated
            result.append(evaluated)
        return result

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if is_signal(elements):
            return elements
        return Array(elements)

    def eval_hash_literal(self, node, env):
        pairs = {}
        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if is_signal(key):
                return key

            if not isinstance(key, Hashable):
                return EvaluationError(f"unusable as hash key: {key.type()}")

            value = self.eval_node(value_node, env)
            if is_signal(value):
                return value

            # later duplicates overwrite earlier entries
            pairs[key.hash_key()] = HashPair(key, value)
        return Hash(pairs)

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_signal(left):
            return left

        index = self.eval_node(node.index, env)
        if is_signal(index):
            return index

        if isinstance(left, Array) and isinstance(index, Integer):
            return self.eval_array_index(left, index)
        if isinstance(left, Hash):
            return self.eval_hash_index(left, index)
        return EvaluationError(f"index operator not supported: {left.type()}")

    def eval_array_index(self, array, index):
        idx = index.value
        if idx < 0 or idx >= len(array.elements):
            return NULL
        return array.elements[idx]

    def eval_hash_index(self, hash_obj, key):
        if not isinstance(key, Hashable):
            return EvaluationError(f"unusable as hash key: {key.type()}")
        value = hash_obj.get(key)
        return NULL if value is None else value
