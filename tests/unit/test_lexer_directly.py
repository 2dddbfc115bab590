"""Lexer tests: token categories, literals, positions and EOF behaviour."""

import pytest

from macaca.lexer import Lexer
from macaca.macaca_token import *


def _pairs(source):
	return [(tok.type, tok.literal) for tok in Lexer(source)]


def test_full_token_stream():
	source = '''let five = 5;
let ten = 10;
let add = fn(x, y) {
  x + y;
};
let result = add(five, ten);
!-/*5;
5 < 10 > 5;

if (5 < 10) {
	return true;
} else {
	return false;
}

10 == 10;
10 != 9;
"foobar"
"foo bar"
[1, 2];
{"foo": "bar"}
'''
	expected = [
		(LET, "let"), (IDENT, "five"), (ASSIGN, "="), (INT, "5"), (SEMICOLON, ";"),
		(LET, "let"), (IDENT, "ten"), (ASSIGN, "="), (INT, "10"), (SEMICOLON, ";"),
		(LET, "let"), (IDENT, "add"), (ASSIGN, "="), (FUNCTION, "fn"), (LPAREN, "("),
		(IDENT, "x"), (COMMA, ","), (IDENT, "y"), (RPAREN, ")"), (LBRACE, "{"),
		(IDENT, "x"), (PLUS, "+"), (IDENT, "y"), (SEMICOLON, ";"),
		(RBRACE, "}"), (SEMICOLON, ";"),
		(LET, "let"), (IDENT, "result"), (ASSIGN, "="), (IDENT, "add"), (LPAREN, "("),
		(IDENT, "five"), (COMMA, ","), (IDENT, "ten"), (RPAREN, ")"), (SEMICOLON, ";"),
		(BANG, "!"), (MINUS, "-"), (SLASH, "/"), (ASTERISK, "*"), (INT, "5"), (SEMICOLON, ";"),
		(INT, "5"), (LT, "<"), (INT, "10"), (GT, ">"), (INT, "5"), (SEMICOLON, ";"),
		(IF, "if"), (LPAREN, "("), (INT, "5"), (LT, "<"), (INT, "10"), (RPAREN, ")"), (LBRACE, "{"),
		(RETURN, "return"), (TRUE, "true"), (SEMICOLON, ";"),
		(RBRACE, "}"), (ELSE, "else"), (LBRACE, "{"),
		(RETURN, "return"), (FALSE, "false"), (SEMICOLON, ";"),
		(RBRACE, "}"),
		(INT, "10"), (EQ, "=="), (INT, "10"), (SEMICOLON, ";"),
		(INT, "10"), (NOT_EQ, "!="), (INT, "9"), (SEMICOLON, ";"),
		(STRING, "foobar"),
		(STRING, "foo bar"),
		(LBRACKET, "["), (INT, "1"), (COMMA, ","), (INT, "2"), (RBRACKET, "]"), (SEMICOLON, ";"),
		(LBRACE, "{"), (STRING, "foo"), (COLON, ":"), (STRING, "bar"), (RBRACE, "}"),
		(EOF, ""),
	]
	assert _pairs(source) == expected


@pytest.mark.parametrize("word, token_type", [
	("fn", FUNCTION),
	("let", LET),
	("true", TRUE),
	("false", FALSE),
	("if", IF),
	("else", ELSE),
	("return", RETURN),
	("lets", IDENT),
	("Fn", IDENT),
	("_private", IDENT),
])
def test_keywords_match_exactly(word, token_type):
	tok = Lexer(word).next_token()
	assert tok.type == token_type
	assert tok.literal == word


def test_identifiers_stop_at_digits():
	assert _pairs("x1") == [(IDENT, "x"), (INT, "1"), (EOF, "")]


def test_integer_literal_kept_verbatim():
	assert _pairs("007 99999999999999999999") == [
		(INT, "007"), (INT, "99999999999999999999"), (EOF, ""),
	]


def test_illegal_characters():
	assert _pairs("@ #") == [(ILLEGAL, "@"), (ILLEGAL, "#"), (EOF, "")]


def test_string_has_no_escape_processing():
	assert _pairs(r'"a\nb"') == [(STRING, r"a\nb"), (EOF, "")]


def test_empty_string():
	assert _pairs('""') == [(STRING, ""), (EOF, "")]


def test_unterminated_string_stops_at_line_end():
	assert _pairs('"abc\n5') == [(ILLEGAL, '"abc'), (INT, "5"), (EOF, "")]


def test_unterminated_string_at_end_of_input():
	assert _pairs('let s = "abc') == [
		(LET, "let"), (IDENT, "s"), (ASSIGN, "="), (ILLEGAL, '"abc'), (EOF, ""),
	]


def test_eof_is_idempotent():
	lexer = Lexer("x")
	assert lexer.next_token().type == IDENT
	for _ in range(5):
		tok = lexer.next_token()
		assert tok.type == EOF
		assert tok.literal == ""


def test_empty_and_blank_input():
	assert _pairs("") == [(EOF, "")]
	assert _pairs("  \n\t\r\n  ") == [(EOF, "")]


def test_line_and_column_tracking():
	tokens = list(Lexer("let five = 5;\n  five"))
	assert [(t.line, t.column) for t in tokens[:5]] == [(1, 1), (1, 5), (1, 10), (1, 12), (1, 13)]
	assert (tokens[5].line, tokens[5].column) == (2, 3)


def test_tab_advances_column_by_tab_width():
	tok = Lexer("\tx").next_token()
	assert tok.column == 5


def test_crlf_line_endings():
	tokens = list(Lexer("a\r\nb\rc"))
	assert [(t.literal, t.line) for t in tokens[:3]] == [("a", 1), ("b", 2), ("c", 3)]


def test_token_equality_ignores_position():
	assert Token(IDENT, "x", 1, 1) == Token(IDENT, "x", 4, 9)
	assert Token(IDENT, "x") != Token(STRING, "x")
