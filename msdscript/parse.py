"""Recursive-descent parser for MSDscript source text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from msdscript.errors import MSDScriptError
from msdscript.expr import (
    AddExpr,
    BoolExpr,
    CallExpr,
    EqualExpr,
    Expr,
    FunExpr,
    IfExpr,
    LetExpr,
    MultExpr,
    NumExpr,
    VarExpr,
)

_WHITESPACE = " \t\n\v\f\r"
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _is_space(c: str) -> bool:
    return c != "" and c in _WHITESPACE


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_name_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_"


@dataclass
class Scanner:
    """A cursor over source text; an empty string marks the end of input."""

    text: str
    pos: int = 0

    def peek(self) -> str:
        """Return the next character without consuming it."""
        return self.text[self.pos : self.pos + 1]

    def get(self) -> str:
        """Consume and return the next character."""
        c = self.peek()
        if c:
            self.pos += 1
        return c

    def consume(self, expect: str) -> None:
        """Consume the next character, which must be ``expect``."""
        if self.get() != expect:
            raise MSDScriptError("consume mismatch")

    def skip_whitespace(self) -> None:
        """Consume any whitespace at the cursor."""
        while _is_space(self.peek()):
            self.pos += 1

    def _take_while(self, pred: Callable[[str], bool]) -> str:
        start = self.pos
        while pred(self.peek()):
            self.pos += 1
        return self.text[start : self.pos]


def parse_str(text: str) -> Expr:
    """Parse an expression from ``text``; trailing input is ignored."""
    return parse_expr(Scanner(text))


def parse_expr(scanner: Scanner) -> Expr:
    expr = parse_comparison(scanner)
    scanner.skip_whitespace()
    return expr


def parse_comparison(scanner: Scanner) -> Expr:
    expr = parse_addend(scanner)
    scanner.skip_whitespace()
    if scanner.peek() == "=":
        scanner.consume("=")
        if scanner.get() != "=":
            raise MSDScriptError("Expected ==")
        return EqualExpr(expr, parse_comparison(scanner))
    return expr


def parse_addend(scanner: Scanner) -> Expr:
    expr = parse_multend(scanner)
    scanner.skip_whitespace()
    while scanner.peek() == "+":
        scanner.consume("+")
        expr = AddExpr(expr, parse_multend(scanner))
        scanner.skip_whitespace()
    return expr


def parse_multend(scanner: Scanner) -> Expr:
    expr = parse_multicand(scanner)
    scanner.skip_whitespace()
    while scanner.peek() == "*":
        scanner.consume("*")
        expr = MultExpr(expr, parse_multicand(scanner))
        scanner.skip_whitespace()
    return expr


def parse_multicand(scanner: Scanner) -> Expr:
    scanner.skip_whitespace()
    c = scanner.peek()
    if c == "(":
        scanner.consume("(")
        expr = parse_expr(scanner)
        scanner.skip_whitespace()
        scanner.consume(")")
    elif _is_digit(c) or c == "-":
        expr = parse_num(scanner)
    elif _is_alpha(c):
        expr = parse_var(scanner)
    elif c == "_":
        expr = parse_keyword(scanner)
    else:
        raise MSDScriptError("invalid input")

    while True:
        scanner.skip_whitespace()
        if scanner.peek() != "(":
            return expr
        scanner.consume("(")
        arg = NumExpr(0) if scanner.peek() == ")" else parse_expr(scanner)
        scanner.consume(")")
        expr = CallExpr(expr, arg)


def parse_num(scanner: Scanner) -> Expr:
    scanner.skip_whitespace()
    sign = ""
    if scanner.peek() == "-":
        sign = scanner.get()
    digits = scanner._take_while(_is_digit)
    if not digits:
        raise MSDScriptError("invalid number format")
    value = int(sign + digits)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise MSDScriptError("number out of range")
    return NumExpr(value)


def parse_var(scanner: Scanner) -> Expr:
    scanner.skip_whitespace()
    if not _is_alpha(scanner.peek()):
        raise MSDScriptError("Invalid variable name")
    return VarExpr(scanner._take_while(_is_name_char))


def parse_keyword(scanner: Scanner) -> Expr:
    scanner.consume("_")
    keyword = scanner._take_while(_is_alpha)
    if keyword == "true":
        return BoolExpr(True)
    if keyword == "false":
        return BoolExpr(False)
    if keyword == "let":
        return parse_let(scanner)
    if keyword == "if":
        return parse_if(scanner)
    if keyword == "fun":
        return parse_fun(scanner)
    raise MSDScriptError(f"Unknown keyword: _{keyword}")


def _expect_keyword(scanner: Scanner, keyword: str, message: str) -> None:
    scanner.skip_whitespace()
    scanner.consume("_")
    if scanner._take_while(_is_alpha) != keyword:
        raise MSDScriptError(message)


def parse_let(scanner: Scanner) -> Expr:
    scanner.skip_whitespace()
    var = scanner._take_while(_is_name_char)
    scanner.skip_whitespace()
    scanner.consume("=")
    rhs = parse_expr(scanner)
    _expect_keyword(scanner, "in", "Expected _in")
    body = parse_expr(scanner)
    return LetExpr(var, rhs, body)


def parse_if(scanner: Scanner) -> Expr:
    condition = parse_expr(scanner)
    _expect_keyword(scanner, "then", "expected _then")
    then_branch = parse_expr(scanner)
    _expect_keyword(scanner, "else", "expected _else")
    else_branch = parse_expr(scanner)
    return IfExpr(condition, then_branch, else_branch)


def parse_fun(scanner: Scanner) -> Expr:
    scanner.skip_whitespace()
    if scanner.peek() != "(":
        raise MSDScriptError("Expected '(' after _fun")
    scanner.consume("(")
    scanner.skip_whitespace()
    var = scanner._take_while(_is_name_char)
    scanner.skip_whitespace()
    if scanner.peek() != ")":
        raise MSDScriptError("Expected ')' after parameter")
    scanner.consume(")")
    body = parse_expr(scanner)
    return FunExpr(var, body)