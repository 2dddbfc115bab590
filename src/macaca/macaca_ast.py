# src/macaca/macaca_ast.py
"""Syntax tree for Macaca programs.

``str(node)`` gives the canonical source reconstruction of a node: fully
parenthesized expressions that re-parse to an equivalent tree.
``repr(node)`` gives a short debugging form.
"""


def _join_statements(statements):
    parts = []
    for i, stmt in enumerate(statements):
        text = str(stmt)
        if isinstance(stmt, ExpressionStatement) and i + 1 < len(statements):
            text += ";"
        parts.append(text)
    return " ".join(parts)


# Base classes
class Node:
    token = None

    def token_literal(self):
        return self.token.literal if self.token is not None else ""

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__repr__()


class Statement(Node): pass
class Expression(Node): pass


class Program(Node):
    def __init__(self, statements=None):
        self.statements = statements if statements is not None else []

    def token_literal(self):
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __repr__(self):
        return f"Program(statements={len(self.statements)})"

    def __str__(self):
        return _join_statements(self.statements)


# Statement Nodes
class LetStatement(Statement):
    def __init__(self, token, name, value):
        self.token = token
        self.name = name
        self.value = value

    def __repr__(self):
        return f"LetStatement(name={self.name!r}, value={self.value!r})"

    def __str__(self):
        return f"let {self.name} = {self.value};"


class ReturnStatement(Statement):
    def __init__(self, token, return_value):
        self.token = token
        self.return_value = return_value

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value!r})"

    def __str__(self):
        return f"return {self.return_value};"


class ExpressionStatement(Statement):
    def __init__(self, token, expression):
        self.token = token
        self.expression = expression

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression!r})"

    def __str__(self):
        return str(self.expression) if self.expression is not None else ""


class BlockStatement(Statement):
    def __init__(self, token, statements=None):
        self.token = token
        self.statements = statements if statements is not None else []

    def __repr__(self):
        return f"BlockStatement(statements={len(self.statements)})"

    def __str__(self):
        if not self.statements:
            return "{ }"
        return "{ " + _join_statements(self.statements) + " }"


# Expression Nodes
class Identifier(Expression):
    def __init__(self, token, value):
        self.token = token
        self.value = value

    def __repr__(self):
        return f"Identifier({self.value})"

    def __str__(self):
        return self.value


class IntegerLiteral(Expression):
    def __init__(self, token, value):
        self.token = token
        self.value = value

    def __repr__(self):
        return f"IntegerLiteral({self.value})"

    def __str__(self):
        return str(self.value)


class Boolean(Expression):
    def __init__(self, token, value):
        self.token = token
        self.value = value

    def __repr__(self):
        return f"Boolean({self.value})"

    def __str__(self):
        return "true" if self.value else "false"


class StringLiteral(Expression):
    def __init__(self, token, value):
        self.token = token
        self.value = value

    def __repr__(self):
        return f"StringLiteral({self.value!r})"

    def __str__(self):
        return f'"{self.value}"'


class ArrayLiteral(Expression):
    def __init__(self, token, elements):
        self.token = token
        self.elements = elements

    def __repr__(self):
        return f"ArrayLiteral(elements={len(self.elements)})"

    def __str__(self):
        return "[" + ", ".join(str(el) for el in self.elements) + "]"


class HashLiteral(Expression):
    """Hash literal. ``pairs`` is a list of (key, value) expression tuples
    kept in source order."""

    def __init__(self, token, pairs):
        self.token = token
        self.pairs = pairs

    def __repr__(self):
        return f"HashLiteral(pairs={len(self.pairs)})"

    def __str__(self):
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.pairs) + "}"


class PrefixExpression(Expression):
    def __init__(self, token, operator, right):
        self.token = token
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"PrefixExpression(operator={self.operator}, right={self.right!r})"

    def __str__(self):
        return f"({self.operator}{self.right})"


class InfixExpression(Expression):
    def __init__(self, token, left, operator, right):
        self.token = token
        self.left = left
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"InfixExpression(left={self.left!r}, operator={self.operator}, right={self.right!r})"

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"


class IfExpression(Expression):
    def __init__(self, token, condition, consequence, alternative=None):
        self.token = token
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def __repr__(self):
        return f"IfExpression(condition={self.condition!r}, has_alternative={self.alternative is not None})"

    def __str__(self):
        text = f"if ({self.condition}) {self.consequence}"
        if self.alternative is not None:
            text += f" else {self.alternative}"
        return text


class FunctionLiteral(Expression):
    def __init__(self, token, parameters, body):
        self.token = token
        self.parameters = parameters
        self.body = body

    def __repr__(self):
        return f"FunctionLiteral(parameters={[p.value for p in self.parameters]})"

    def __str__(self):
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {self.body}"


class CallExpression(Expression):
    def __init__(self, token, function, arguments):
        self.token = token
        self.function = function
        self.arguments = arguments

    def __repr__(self):
        return f"CallExpression(function={self.function!r}, arguments={len(self.arguments)})"

    def __str__(self):
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


class IndexExpression(Expression):
    def __init__(self, token, left, index):
        self.token = token
        self.left = left
        self.index = index

    def __repr__(self):
        return f"IndexExpression(left={self.left!r}, index={self.index!r})"

    def __str__(self):
        return f"({self.left}[{self.index}])"
