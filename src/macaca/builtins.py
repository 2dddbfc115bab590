# src/macaca/builtins.py
"""The fixed table of native functions visible to every program.

``BUILTINS`` is a read-only mapping shared by all evaluator sessions.
Each function takes evaluated argument objects and returns an object;
failures come back as ``EvaluationError`` values.
"""
from types import MappingProxyType

from .object import (
    Integer, String, Array, Builtin, EvaluationError, NULL, ARRAY_OBJ,
)


def _wrong_arg_count(got, want):
    return EvaluationError(f"wrong number of arguments. got={got}, want={want}")


def _expect_array(name, arg):
    if arg.type() != ARRAY_OBJ:
        return EvaluationError(f"argument to `{name}` must be ARRAY, got {arg.type()}")
    return None


def _len(*a):
    if len(a) != 1:
        return _wrong_arg_count(len(a), 1)
    arg = a[0]
    if isinstance(arg, String):
        return Integer(len(arg.value))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return EvaluationError(f"argument to `len` not supported, got {arg.type()}")


def _puts(*a):
    for arg in a:
        print(arg.inspect())
    return NULL


def _first(*a):
    if len(a) != 1:
        return _wrong_arg_count(len(a), 1)
    err = _expect_array("first", a[0])
    if err:
        return err
    elements = a[0].elements
    return elements[0] if elements else NULL


def _last(*a):
    if len(a) != 1:
        return _wrong_arg_count(len(a), 1)
    err = _expect_array("last", a[0])
    if err:
        return err
    elements = a[0].elements
    return elements[-1] if elements else NULL


def _rest(*a):
    if len(a) != 1:
        return _wrong_arg_count(len(a), 1)
    err = _expect_array("rest", a[0])
    if err:
        return err
    elements = a[0].elements
    return Array(elements[1:]) if elements else NULL


def _push(*a):
    if len(a) != 2:
        return _wrong_arg_count(len(a), 2)
    err = _expect_array("push", a[0])
    if err:
        return err
    # never mutate the argument
    return Array(a[0].elements + [a[1]])


BUILTINS = MappingProxyType({
    "len": Builtin(_len, "len"),
    "puts": Builtin(_puts, "puts"),
    "first": Builtin(_first, "first"),
    "last": Builtin(_last, "last"),
    "rest": Builtin(_rest, "rest"),
    "push": Builtin(_push, "push"),
})
