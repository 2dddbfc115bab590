# src/macaca/object.py
from typing import NamedTuple

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
STRING_OBJ = "STRING"
NULL_OBJ = "NULL"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"

_INT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63

_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def to_int64(value):
    """Wrap a Python int to the signed 64-bit range (two's complement)."""
    value &= _INT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def fnv1a_64(text):
    h = _FNV_OFFSET_BASIS
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & _INT64_MASK
    return h


class HashKey(NamedTuple):
    type: str
    value: int


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"


class Hashable:
    """Capability for objects usable as hash keys."""

    def hash_key(self):
        raise NotImplementedError("Subclasses must implement this method")


class Integer(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ
    def hash_key(self): return HashKey(INTEGER_OBJ, self.value)


class Boolean(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ
    def hash_key(self): return HashKey(BOOLEAN_OBJ, 1 if self.value else 0)


class Null(Object):
    def inspect(self): return "null"
    def type(self): return NULL_OBJ


class String(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def hash_key(self): return HashKey(STRING_OBJ, fnv1a_64(self.value))
    def __str__(self): return self.value


class Array(Object):
    def __init__(self, elements): self.elements = elements
    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"
    def type(self): return ARRAY_OBJ


class HashPair(NamedTuple):
    key: Object
    value: Object


class Hash(Object):
    def __init__(self, pairs=None):
        self.pairs = pairs if pairs is not None else {}  # HashKey -> HashPair

    def type(self): return HASH_OBJ

    def get(self, key):
        pair = self.pairs.get(key.hash_key())
        return pair.value if pair is not None else None

    def inspect(self):
        pairs = [f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()]
        return "{" + ", ".join(pairs) + "}"


class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ


class EvaluationError(Object):
    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ
    def __str__(self): return self.message


class Function(Object):
    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = parameters, body, env
    def inspect(self):
        params = ", ".join([p.value for p in self.parameters])
        return f"fn({params}) {self.body}"
    def type(self): return FUNCTION_OBJ


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # Stores the native Python function
        self.name = name

    def inspect(self):
        return f"builtin function: {self.name}"

    def type(self):
        return BUILTIN_OBJ


# Canonical shared instances
NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean_object(value):
    return TRUE if value else FALSE
