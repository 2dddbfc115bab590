# src/macaca/macaca_token.py

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
ASTERISK = "*"
SLASH = "/"
LT = "<"
GT = ">"
EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
COLON = ":"
SEMICOLON = ";"
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

# Single-character tokens that never need lookahead
SINGLE_CHAR_TOKENS = {
    "+": PLUS,
    "-": MINUS,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    ",": COMMA,
    ":": COLON,
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
    "[": LBRACKET,
    "]": RBRACKET,
}


def lookup_ident(ident):
    return KEYWORDS.get(ident, IDENT)


class Token:
    def __init__(self, type, literal, line=0, column=0):
        self.type = type
        self.literal = literal
        self.line = line
        self.column = column

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.literal == other.literal

    def __hash__(self):
        return hash((self.type, self.literal))

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r}, line={self.line}, column={self.column})"
