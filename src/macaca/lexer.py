# src/macaca/lexer.py
import logging

from .macaca_token import *

logger = logging.getLogger("macaca.lexer")

TAB_WIDTH = 4

_LINE_BREAKS = ("\n", "\r")


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        # line/column describe self.ch
        self.line = 1
        self.column = 0
        self.read_char()

    def __iter__(self):
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def read_char(self):
        prev = self.ch
        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        if prev == "\n" or (prev == "\r" and self.ch != "\n"):
            self.line += 1
            self.column = 1
        elif prev == "\t":
            self.column += TAB_WIDTH
        else:
            self.column += 1

        self.position = self.read_position
        if self.read_position <= len(self.input):
            self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        line, column = self.line, self.column

        if self.ch == "":
            return Token(EOF, "", line, column)

        if self.ch == "=":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(EQ, "==", line, column)
            else:
                tok = Token(ASSIGN, self.ch, line, column)
        elif self.ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(NOT_EQ, "!=", line, column)
            else:
                tok = Token(BANG, self.ch, line, column)
        elif self.ch == '"':
            literal, terminated = self.read_string()
            if not terminated:
                logger.debug("Unterminated string at %s:%d:%d", self.filename, line, column)
                return Token(ILLEGAL, '"' + literal, line, column)
            tok = Token(STRING, literal, line, column)
        elif self.ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            literal = self.read_number()
            return Token(INT, literal, line, column)
        else:
            logger.debug("Illegal character %r at %s:%d:%d", self.ch, self.filename, line, column)
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def read_string(self):
        """Read up to the closing quote on the current line.

        Returns ``(content, terminated)``. The cursor is left on the closing
        quote when terminated, otherwise on the line break or end of input.
        """
        start_position = self.position + 1
        while True:
            self.read_char()
            if self.ch == '"':
                return self.input[start_position:self.position], True
            if self.ch == "" or self.ch in _LINE_BREAKS:
                return self.input[start_position:self.position], False

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def is_letter(self, char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    def is_digit(self, char):
        return "0" <= char <= "9"

    def skip_whitespace(self):
        while self.ch in (" ", "\t", "\n", "\r"):
            self.read_char()
