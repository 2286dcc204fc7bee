"""Tests for character classification, tokens and RPN text helpers."""

import pytest

from core import (
    Associativity, InvalidCharacterError, MalformedNumberError, OPERATOR_DEFINITIONS,
    RPNValidator, SymbolType, Token, classify, format_rpn, parse_rpn
)


# --- Classification ---

@pytest.mark.parametrize("ch", list("0123456789"))
def test_digits_are_values(ch):
    assert classify(ch) == SymbolType.VALUE


@pytest.mark.parametrize("ch", list("+-*/%^"))
def test_operator_symbols(ch):
    assert classify(ch) == SymbolType.OPERATOR


@pytest.mark.parametrize("ch,expected", [
    ("(", SymbolType.OPEN),
    (")", SymbolType.CLOSE),
    (".", SymbolType.PERIOD),
    (" ", SymbolType.BLANK),
    ("\t", SymbolType.BLANK),
    ("\n", SymbolType.BLANK),
])
def test_structural_symbols(ch, expected):
    assert classify(ch) == expected


@pytest.mark.parametrize("ch", ["x", "e", ",", "=", "\r", "٣"])
def test_unknown_character_rejected(ch):
    with pytest.raises(InvalidCharacterError) as exc_info:
        classify(ch, 7)
    assert exc_info.value.char == ch
    assert exc_info.value.position == 7


# --- Operator table ---

def test_precedence_table():
    assert OPERATOR_DEFINITIONS['^'].precedence == 1
    assert OPERATOR_DEFINITIONS['*'].precedence == 2
    assert OPERATOR_DEFINITIONS['/'].precedence == 2
    assert OPERATOR_DEFINITIONS['%'].precedence == 2
    assert OPERATOR_DEFINITIONS['+'].precedence == 3
    assert OPERATOR_DEFINITIONS['-'].precedence == 3


def test_only_power_is_right_associative():
    right = [s for s, spec in OPERATOR_DEFINITIONS.items()
             if spec.associativity == Associativity.RIGHT]
    assert right == ['^']


# --- Token ---

def test_number_token_resolves_lazily_from_span():
    source = "12 + 3.5"
    token = Token(SymbolType.VALUE, source, 5, 8)
    assert token.text == "3.5"
    assert token.value == 3.5


def test_operator_token_has_no_value():
    token = Token(SymbolType.OPERATOR, "1+2", 1)
    assert token.symbol == "+"
    assert token.spec.name == "add"
    with pytest.raises(TypeError):
        token.value


def test_tokens_compare_by_type_and_text():
    assert Token(SymbolType.VALUE, "7 7", 0) == Token(SymbolType.VALUE, "7 7", 2)
    assert Token(SymbolType.VALUE, "7+", 0) != Token(SymbolType.OPERATOR, "7+", 1)


# --- RPN text ---

def test_format_rpn():
    tokens = parse_rpn("3 4 2 * +")
    assert format_rpn(tokens) == "3 4 2 * +"


def test_parse_rpn_handles_extra_whitespace():
    tokens = parse_rpn("  1.5\t2 \n ^ ")
    assert [t.type for t in tokens] == [SymbolType.VALUE, SymbolType.VALUE, SymbolType.OPERATOR]
    assert tokens[0].value == 1.5
    assert tokens[2].symbol == "^"


def test_parse_rpn_rejects_parentheses():
    with pytest.raises(InvalidCharacterError):
        parse_rpn("( 1 2 + )")


def test_parse_rpn_rejects_glued_operator():
    with pytest.raises(InvalidCharacterError):
        parse_rpn("1 +2")


def test_parse_rpn_rejects_two_decimal_points():
    with pytest.raises(MalformedNumberError):
        parse_rpn("1.2.3 4 +")


def test_parse_rpn_rejects_lone_period():
    with pytest.raises(MalformedNumberError):
        parse_rpn(". 1 +")


# --- RPNValidator ---

@pytest.mark.parametrize("rpn,size", [
    ("1", 1),
    ("1 2 +", 1),
    ("1 2", 2),
    ("1 2 3 * +", 1),
    ("", 0),
    ("+", -1),
    ("1 +", -1),
])
def test_calculate_stack_size(rpn, size):
    assert RPNValidator.calculate_stack_size(parse_rpn(rpn)) == size


def test_is_complete():
    assert RPNValidator.is_complete(parse_rpn("2 3 ^"))
    assert not RPNValidator.is_complete(parse_rpn("2 3"))
    assert not RPNValidator.is_complete(parse_rpn("2 ^"))
