## src/macaca/parser/parser.py
import logging

from ..macaca_token import *
from ..lexer import Lexer
from ..macaca_ast import *
from ..error_reporter import ParseError

logger = logging.getLogger("macaca.parser")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Precedence constants
LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL, INDEX = 1, 2, 3, 4, 5, 6, 7, 8

precedences = {
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, ASTERISK: PRODUCT,
    LPAREN: CALL,
    LBRACKET: INDEX,
}

_CLOSERS = (RPAREN, RBRACE, RBRACKET)


class Parser:
    """Pratt parser turning a token stream into a ``Program``.

    Malformed statements are left out of the program; a ``ParseError`` for
    each problem is collected in ``errors``.
    """

    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            INT: self.parse_integer_literal,
            STRING: self.parse_string_literal,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
            TRUE: self.parse_boolean,
            FALSE: self.parse_boolean,
            LPAREN: self.parse_grouped_expression,
            IF: self.parse_if_expression,
            FUNCTION: self.parse_function_literal,
            LBRACKET: self.parse_array_literal,
            LBRACE: self.parse_hash_literal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_infix_expression,
            MINUS: self.parse_infix_expression,
            SLASH: self.parse_infix_expression,
            ASTERISK: self.parse_infix_expression,
            EQ: self.parse_infix_expression,
            NOT_EQ: self.parse_infix_expression,
            LT: self.parse_infix_expression,
            GT: self.parse_infix_expression,
            LPAREN: self.parse_call_expression,
            LBRACKET: self.parse_index_expression,
        }
        self.next_token()
        self.next_token()

    # ---- token cursor --------------------------------------------------------

    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t):
        if self.peek_token_is(t):
            self.next_token()
            return True
        self.peek_error(t)
        return False

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)

    # ---- diagnostics ---------------------------------------------------------

    def _error(self, message, token, expected=None, found=None, suggestion=None):
        error = ParseError(
            message,
            expected=expected,
            found=found,
            line=token.line,
            column=token.column,
            filename=getattr(self.lexer, "filename", "<stdin>"),
            suggestion=suggestion,
        )
        logger.debug("parse error: %s", error)
        self.errors.append(error)

    def peek_error(self, t):
        found = self.peek_token.type
        suggestion = None
        if t in _CLOSERS:
            suggestion = f"add the missing '{t}'"
        self._error(
            f"expected next token to be {t}, got {found} instead",
            self.peek_token, expected=t, found=found, suggestion=suggestion,
        )

    def no_prefix_parse_fn_error(self, t):
        self._error(
            f"no prefix parse function for {t} found",
            self.cur_token, expected="expression", found=t,
        )

    # ---- statements ----------------------------------------------------------

    def parse_program(self):
        program = Program()
        while not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        logger.debug("parsed %d statements, %d errors", len(program.statements), len(self.errors))
        return program

    def parse_statement(self):
        if self.cur_token_is(LET):
            return self.parse_let_statement()
        if self.cur_token_is(RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self):
        token = self.cur_token

        if not self.expect_peek(IDENT):
            return None
        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return LetStatement(token, name, value)

    def parse_return_statement(self):
        token = self.cur_token
        self.next_token()

        return_value = self.parse_expression(LOWEST)
        if return_value is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return ReturnStatement(token, return_value)

    def parse_expression_statement(self):
        token = self.cur_token
        expression = self.parse_expression(LOWEST)
        if expression is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return ExpressionStatement(token, expression)

    def parse_block_statement(self):
        block = BlockStatement(self.cur_token)
        self.next_token()

        while not self.cur_token_is(RBRACE) and not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            self.next_token()

        if not self.cur_token_is(RBRACE):
            self._error(
                f"expected next token to be {RBRACE}, got {self.cur_token.type} instead",
                self.cur_token, expected=RBRACE, found=self.cur_token.type,
                suggestion=f"add the missing '{RBRACE}'",
            )
            return None
        return block

    # ---- expressions ---------------------------------------------------------

    def parse_expression(self, precedence):
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None

        left_exp = prefix()

        while (left_exp is not None
               and not self.peek_token_is(SEMICOLON)
               and precedence < self.peek_precedence()):
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp
            self.next_token()
            left_exp = infix(left_exp)

        return left_exp

    def parse_identifier(self):
        return Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self):
        token = self.cur_token
        try:
            value = int(token.literal)
        except ValueError:
            value = None
        if value is None or not INT64_MIN <= value <= INT64_MAX:
            self._error(f"could not parse {token.literal} as integer", token, expected=INT, found=token.literal)
            return None
        return IntegerLiteral(token, value)

    def parse_string_literal(self):
        return StringLiteral(self.cur_token, self.cur_token.literal)

    def parse_boolean(self):
        return Boolean(self.cur_token, self.cur_token_is(TRUE))

    def parse_prefix_expression(self):
        token = self.cur_token
        self.next_token()
        right = self.parse_expression(PREFIX)
        if right is None:
            return None
        return PrefixExpression(token, token.literal, right)

    def parse_infix_expression(self, left):
        token = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(token, left, token.literal, right)

    def parse_grouped_expression(self):
        self.next_token()
        exp = self.parse_expression(LOWEST)
        if exp is None or not self.expect_peek(RPAREN):
            return None
        return exp

    def parse_if_expression(self):
        token = self.cur_token

        if not self.expect_peek(LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(LOWEST)
        if condition is None or not self.expect_peek(RPAREN):
            return None

        if not self.expect_peek(LBRACE):
            return None
        consequence = self.parse_block_statement()
        if consequence is None:
            return None

        alternative = None
        if self.peek_token_is(ELSE):
            self.next_token()
            if not self.expect_peek(LBRACE):
                return None
            alternative = self.parse_block_statement()
            if alternative is None:
                return None

        return IfExpression(token, condition, consequence, alternative)

    def parse_function_literal(self):
        token = self.cur_token

        if not self.expect_peek(LPAREN):
            return None
        parameters = self.parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(LBRACE):
            return None
        body = self.parse_block_statement()
        if body is None:
            return None

        return FunctionLiteral(token, parameters, body)

    def parse_function_parameters(self):
        identifiers = []

        if self.peek_token_is(RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(IDENT):
            return None
        identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        while self.peek_token_is(COMMA):
            self.next_token()
            if not self.expect_peek(IDENT):
                return None
            identifiers.append(Identifier(self.cur_token, self.cur_token.literal))

        if not self.expect_peek(RPAREN):
            return None
        return identifiers

    def parse_call_expression(self, function):
        token = self.cur_token
        arguments = self.parse_expression_list(RPAREN)
        if arguments is None:
            return None
        return CallExpression(token, function, arguments)

    def parse_expression_list(self, end):
        items = []

        if self.peek_token_is(end):
            self.next_token()
            return items

        self.next_token()
        item = self.parse_expression(LOWEST)
        if item is None:
            return None
        items.append(item)

        while self.peek_token_is(COMMA):
            self.next_token()
            self.next_token()
            item = self.parse_expression(LOWEST)
            if item is None:
                return None
            items.append(item)

        if not self.expect_peek(end):
            return None
        return items

    def parse_array_literal(self):
        token = self.cur_token
        elements = self.parse_expression_list(RBRACKET)
        if elements is None:
            return None
        return ArrayLiteral(token, elements)

    def parse_index_expression(self, left):
        token = self.cur_token
        self.next_token()
        index = self.parse_expression(LOWEST)
        if index is None or not self.expect_peek(RBRACKET):
            return None
        return IndexExpression(token, left, index)

    def parse_hash_literal(self):
        token = self.cur_token
        pairs = []

        while not self.peek_token_is(RBRACE):
            self.next_token()
            key = self.parse_expression(LOWEST)
            if key is None or not self.expect_peek(COLON):
                return None

            self.next_token()
            value = self.parse_expression(LOWEST)
            if value is None:
                return None
            pairs.append((key, value))

            if not self.peek_token_is(RBRACE) and not self.expect_peek(COMMA):
                return None

        if not self.expect_peek(RBRACE):
            return None
        return HashLiteral(token, pairs)


def parse_source(source, filename="<stdin>"):
    """Parse ``source`` and return ``(program, errors)``."""
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    return program, parser.errors
