"""Abstract syntax tree of MSDscript expressions."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from msdscript.env import Env
from msdscript.errors import MSDScriptError
from msdscript.values import BoolVal, FunVal, NumVal, Val


class Precedence(IntEnum):
    """Binding strength of the surrounding context when pretty printing."""

    NONE = 0
    EQ = 1
    ADD = 2
    MULT = 3


class Expr(ABC):
    """An MSDscript expression."""

    @abstractmethod
    def equals(self, other: Expr) -> bool:
        """Return whether ``other`` is structurally the same expression."""

    @abstractmethod
    def interp(self, env: Env) -> Val:
        """Evaluate the expression in ``env``."""

    @abstractmethod
    def print_exp(self, out: TextIO) -> None:
        """Write the fully parenthesised form to ``out``."""

    @abstractmethod
    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        """Write the indented, minimally parenthesised form to ``out``.

        ``line_start`` is the stream position that indentation is measured from.
        """

    def is_simple(self) -> bool:
        return False

    def to_string(self) -> str:
        out = io.StringIO()
        self.print_exp(out)
        return out.getvalue()

    def to_pretty_string(self) -> str:
        out = io.StringIO()
        self.pretty_print(out, Precedence.NONE, out.tell())
        return out.getvalue()

    def __str__(self) -> str:
        return self.to_string()


def _open(out: TextIO, needs_paren: bool) -> None:
    if needs_paren:
        out.write("(")


def _close(out: TextIO, needs_paren: bool) -> None:
    if needs_paren:
        out.write(")")


@dataclass(frozen=True, eq=False)
class NumExpr(Expr):
    val: int

    def equals(self, other: Expr) -> bool:
        return isinstance(other, NumExpr) and self.val == other.val

    def interp(self, env: Env) -> Val:
        return NumVal(self.val)

    def print_exp(self, out: TextIO) -> None:
        out.write(str(self.val))

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        out.write(str(self.val))

    def is_simple(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class AddExpr(Expr):
    lhs: Expr
    rhs: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, AddExpr)
            and self.lhs.equals(other.lhs)
            and self.rhs.equals(other.rhs)
        )

    def interp(self, env: Env) -> Val:
        return self.lhs.interp(env).add_to(self.rhs.interp(env))

    def print_exp(self, out: TextIO) -> None:
        out.write(f"({self.lhs.to_string()}+{self.rhs.to_string()})")

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        needs_paren = prec >= Precedence.ADD
        _open(out, needs_paren)
        self.lhs.pretty_print(out, Precedence.ADD, line_start)
        out.write(" + ")
        self.rhs.pretty_print(out, Precedence.NONE, line_start)
        _close(out, needs_paren)

    def is_simple(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class MultExpr(Expr):
    lhs: Expr
    rhs: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, MultExpr)
            and self.lhs.equals(other.lhs)
            and self.rhs.equals(other.rhs)
        )

    def interp(self, env: Env) -> Val:
        return self.lhs.interp(env).mult_with(self.rhs.interp(env))

    def print_exp(self, out: TextIO) -> None:
        out.write(f"({self.lhs.to_string()}*{self.rhs.to_string()})")

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        needs_paren = prec >= Precedence.MULT
        _open(out, needs_paren)
        self.lhs.pretty_print(out, Precedence.MULT, line_start)
        out.write(" * ")
        self.rhs.pretty_print(out, Precedence.MULT, line_start)
        _close(out, needs_paren)

    def is_simple(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class VarExpr(Expr):
    name: str

    def equals(self, other: Expr) -> bool:
        return isinstance(other, VarExpr) and self.name == other.name

    def interp(self, env: Env) -> Val:
        return env.lookup(self.name)

    def print_exp(self, out: TextIO) -> None:
        out.write(self.name)

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        out.write(self.name)


@dataclass(frozen=True, eq=False)
class LetExpr(Expr):
    var: str
    rhs: Expr
    body: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, LetExpr)
            and self.var == other.var
            and self.rhs.equals(other.rhs)
            and self.body.equals(other.body)
        )

    def interp(self, env: Env) -> Val:
        rhs_val = self.rhs.interp(env)
        return self.body.interp(env.extend(self.var, rhs_val))

    def print_exp(self, out: TextIO) -> None:
        out.write(
            f"(_let {self.var}={self.rhs.to_string()} _in {self.body.to_string()})"
        )

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        needs_paren = prec != Precedence.NONE
        _open(out, needs_paren)
        let_start = out.tell()
        out.write(f"_let {self.var} = ")
        self.rhs.pretty_print(out, Precedence.NONE, line_start)
        out.write("\n")
        out.write(" " * (let_start - line_start) + "_in ")
        self.body.pretty_print(out, Precedence.NONE, out.tell())
        _close(out, needs_paren)


@dataclass(frozen=True, eq=False)
class BoolExpr(Expr):
    val: bool

    def equals(self, other: Expr) -> bool:
        return isinstance(other, BoolExpr) and self.val == other.val

    def interp(self, env: Env) -> Val:
        return BoolVal(self.val)

    def print_exp(self, out: TextIO) -> None:
        out.write("_true" if self.val else "_false")

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        out.write("_true" if self.val else "_false")


@dataclass(frozen=True, eq=False)
class EqualExpr(Expr):
    lhs: Expr
    rhs: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, EqualExpr)
            and self.lhs.equals(other.lhs)
            and self.rhs.equals(other.rhs)
        )

    def interp(self, env: Env) -> Val:
        return BoolVal(self.lhs.interp(env).equals(self.rhs.interp(env)))

    def print_exp(self, out: TextIO) -> None:
        out.write(f"({self.lhs.to_string()}=={self.rhs.to_string()})")

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        needs_paren = prec > Precedence.NONE
        _open(out, needs_paren)
        self.lhs.pretty_print(out, Precedence.ADD, line_start)
        out.write(" == ")
        self.rhs.pretty_print(out, Precedence.ADD, line_start)
        _close(out, needs_paren)


@dataclass(frozen=True, eq=False)
class IfExpr(Expr):
    condition: Expr
    then_branch: Expr
    else_branch: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, IfExpr)
            and self.condition.equals(other.condition)
            and self.then_branch.equals(other.then_branch)
            and self.else_branch.equals(other.else_branch)
        )

    def interp(self, env: Env) -> Val:
        cond = self.condition.interp(env)
        if not isinstance(cond, BoolVal):
            raise MSDScriptError("Condition must be boolean")
        branch = self.then_branch if cond.val else self.else_branch
        return branch.interp(env)

    def print_exp(self, out: TextIO) -> None:
        out.write(
            f"(_if {self.condition.to_string()}"
            f" _then {self.then_branch.to_string()}"
            f" _else {self.else_branch.to_string()})"
        )

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        needs_paren = prec != Precedence.NONE
        _open(out, needs_paren)
        if_start = out.tell()
        out.write("_if ")
        self.condition.pretty_print(out, Precedence.NONE, line_start)
        out.write("\n")
        indent = if_start - line_start + 2
        branch_start = if_start + indent
        pad = " " * indent
        out.write(pad + "_then ")
        self.then_branch.pretty_print(out, Precedence.NONE, branch_start)
        out.write("\n" + pad + "_else ")
        self.else_branch.pretty_print(out, Precedence.NONE, branch_start)
        _close(out, needs_paren)


@dataclass(frozen=True, eq=False)
class FunExpr(Expr):
    var: str
    body: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, FunExpr)
            and self.var == other.var
            and self.body.equals(other.body)
        )

    def interp(self, env: Env) -> Val:
        return FunVal(self.var, self.body, env)

    def print_exp(self, out: TextIO) -> None:
        out.write(f"(_fun ({self.var}) {self.body.to_string()})")

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        needs_paren = prec != Precedence.NONE
        _open(out, needs_paren)
        out.write(f"_fun ({self.var})")
        if self.body.is_simple():
            out.write(" ")
            self.body.pretty_print(out, Precedence.NONE, line_start)
        else:
            out.write("\n  ")
            self.body.pretty_print(out, Precedence.NONE, out.tell())
        _close(out, needs_paren)


@dataclass(frozen=True, eq=False)
class CallExpr(Expr):
    func: Expr
    arg: Expr

    def equals(self, other: Expr) -> bool:
        return (
            isinstance(other, CallExpr)
            and self.func.equals(other.func)
            and self.arg.equals(other.arg)
        )

    def interp(self, env: Env) -> Val:
        fun = self.func.interp(env)
        if not isinstance(fun, FunVal):
            raise MSDScriptError("Cannot call non-function value")
        return fun.call(self.arg.interp(env))

    def print_exp(self, out: TextIO) -> None:
        out.write(f"{self.func.to_string()}({self.arg.to_string()})")

    def pretty_print(self, out: TextIO, prec: Precedence, line_start: int) -> None:
        self.func.pretty_print(out, Precedence.NONE, line_start)
        out.write("(")
        self.arg.pretty_print(out, Precedence.NONE, line_start)
        out.write(")")

    def is_simple(self) -> bool:
        return True