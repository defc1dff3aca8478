"""
Tests for the Lexer

Checks:
1. Number accumulation and malformed numbers
2. Operator recognition and consecutive operators
3. Negation rewriting into (0-...) groups
"""

import pytest

from src.calculator.lexer import Lexer
from src.calculator.registry import SymbolRegistry
from src.core.domain import (
    ADDITION,
    DIVISION,
    EXPONENT,
    MODULUS,
    MULTIPLICATION,
    SUBTRACTION,
    Operator,
    Token,
)
from src.core.errors import (
    ConsecutiveOperatorsError,
    MalformedNumberError,
    OperandRequiredError,
    UnrecognizedSymbolError,
)

N = Token.number
L = Token.left_bracket()
R = Token.right_bracket()
PLUS = Token.of(ADDITION)
MINUS = Token.of(SUBTRACTION)
TIMES = Token.of(MULTIPLICATION)
OVER = Token.of(DIVISION)
POW = Token.of(EXPONENT)
MOD = Token.of(MODULUS)

# Binds looser than addition: 5#1 == 501
HASH = Operator(symbol="#", precedence=5, operation=lambda a, b: a * 100 + b)


@pytest.fixture
def lexer() -> Lexer:
    return Lexer(SymbolRegistry.create())


@pytest.fixture
def modulus_lexer() -> Lexer:
    return Lexer(SymbolRegistry.create(operators=[MODULUS]))


def _text(tokens: list[Token]) -> str:
    return "".join(str(token) for token in tokens)


# =============================================================================
# NUMBERS
# =============================================================================


class TestNumbers:
    """Tests for number tokens"""

    def test_parses_equation(self, lexer: Lexer) -> None:
        tokens = lexer.tokenize("5.14*(3.7+2^2)/(5-3)")

        assert tokens == [
            N("5.14"), TIMES, L, N("3.7"), PLUS, N("2"), POW, N("2"), R,
            OVER, L, N("5"), PLUS, L, N("0"), MINUS, N("3"), R, R,
        ]

    def test_leading_decimal_point_gets_zero(self, lexer: Lexer) -> None:
        tokens = lexer.tokenize(".305+.307*.302")

        assert tokens == [N("0.305"), PLUS, N("0.307"), TIMES, N("0.302")]

    def test_multi_digit_numbers(self, lexer: Lexer) -> None:
        assert lexer.tokenize("1234") == [N("1234")]

    def test_two_decimal_points(self, lexer: Lexer) -> None:
        with pytest.raises(MalformedNumberError, match="more than one decimal point"):
            lexer.tokenize("3.157.92+36.4*3")

    def test_decimal_point_before_operator(self, lexer: Lexer) -> None:
        with pytest.raises(MalformedNumberError, match="digits must trail"):
            lexer.tokenize("126.*14+3")

    def test_trailing_decimal_point(self, lexer: Lexer) -> None:
        with pytest.raises(MalformedNumberError):
            lexer.tokenize("2+13.")


# =============================================================================
# OPERATORS
# =============================================================================


class TestOperators:
    """Tests for operator tokens"""

    def test_unrecognized_symbol(self, lexer: Lexer) -> None:
        with pytest.raises(UnrecognizedSymbolError, match="&"):
            lexer.tokenize("3&5.2")

    def test_consecutive_operators(self, lexer: Lexer) -> None:
        with pytest.raises(ConsecutiveOperatorsError):
            lexer.tokenize("157+*3.2/6")
        with pytest.raises(ConsecutiveOperatorsError):
            lexer.tokenize("134/+8")

    def test_single_operator(self, lexer: Lexer) -> None:
        with pytest.raises(OperandRequiredError):
            lexer.tokenize("*")
        with pytest.raises(OperandRequiredError):
            lexer.tokenize("-")

    def test_custom_operator(self, modulus_lexer: Lexer) -> None:
        assert modulus_lexer.tokenize("24%2") == [N("24"), MOD, N("2")]

    def test_empty_expression(self, lexer: Lexer) -> None:
        assert lexer.tokenize("") == []


# =============================================================================
# NEGATION
# =============================================================================


class TestNegation:
    """Tests for the (0-...) rewriting of '-'"""

    def test_subtraction(self, lexer: Lexer) -> None:
        assert lexer.tokenize("8-4") == [N("8"), PLUS, L, N("0"), MINUS, N("4"), R]

    def test_explicit_negation_lexes_the_same(self, lexer: Lexer) -> None:
        assert lexer.tokenize("8-4") == lexer.tokenize("8+(0-4)")

    def test_subtraction_of_bracket(self, lexer: Lexer) -> None:
        tokens = lexer.tokenize("2-(17-5)")

        assert tokens == [
            N("2"), PLUS, L, N("0"), MINUS,
            L, N("17"), PLUS, L, N("0"), MINUS, N("5"), R, R,
            R,
        ]

    def test_negative_divisor(self, lexer: Lexer) -> None:
        assert lexer.tokenize("12/-3") == [N("12"), OVER, L, N("0"), MINUS, N("3"), R]

    def test_nested_negations(self, lexer: Lexer) -> None:
        tokens = lexer.tokenize("-6*(-3-5)")

        assert tokens == [
            L, N("0"), MINUS, N("6"), R,
            TIMES,
            L, L, N("0"), MINUS, N("3"), PLUS, L, N("0"), MINUS, N("5"), R, R, R,
        ]

    def test_negation_spans_exponent(self, lexer: Lexer) -> None:
        """-2^2 is -(2^2)"""
        assert _text(lexer.tokenize("-2^2")) == "(0-2^2)"
        assert _text(lexer.tokenize("10-2^2")) == "10+(0-2^2)"

    def test_negation_closed_before_multiplication(self, lexer: Lexer) -> None:
        assert _text(lexer.tokenize("2*-3-5")) == "2*(0-3)+(0-5)"

    def test_negative_exponent(self, lexer: Lexer) -> None:
        assert _text(lexer.tokenize("2^-2")) == "2^(0-2)"

    def test_lexing_is_stable(self, lexer: Lexer) -> None:
        """Lexing the text of lexed tokens gives the same tokens"""
        for expression in ("8-4", "2-(17-5)", "12/-3", "-6*(-3-5)", "1-2-3"):
            tokens = lexer.tokenize(expression)
            assert lexer.tokenize(_text(tokens)) == tokens

    def test_subtraction_spans_multiplicative_operators(self, modulus_lexer: Lexer) -> None:
        """10-7%3 is 10-(7%3)"""
        assert modulus_lexer.tokenize("10-7%3") == [
            N("10"), PLUS, L, N("0"), MINUS, N("7"), MOD, N("3"), R,
        ]
        assert _text(modulus_lexer.tokenize("8-5*3")) == "8+(0-5*3)"

    def test_negation_closed_before_modulus(self, modulus_lexer: Lexer) -> None:
        """-7%3 is (-7)%3"""
        assert modulus_lexer.tokenize("-7%3") == [L, N("0"), MINUS, N("7"), R, MOD, N("3")]

    def test_leading_zero_subtraction_untouched(self, modulus_lexer: Lexer) -> None:
        assert modulus_lexer.tokenize("0-7%3") == [N("0"), MINUS, N("7"), MOD, N("3")]

    def test_groups_closed_before_looser_operator(self) -> None:
        lexer = Lexer(SymbolRegistry.create(operators=[HASH]))

        assert _text(lexer.tokenize("5-3-4#1")) == "5+(0-3+(0-4))#1"
        assert _text(lexer.tokenize("-3#1")) == "(0-3)#1"
        assert _text(lexer.tokenize("1#2-3")) == "1#2+(0-3)"

    def test_sum_group_keeps_additions(self, lexer: Lexer) -> None:
        assert _text(lexer.tokenize("-1-2+3")) == "(0-1+(0-2)+3)"
