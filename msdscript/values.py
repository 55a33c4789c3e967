"""Runtime values produced by the interpreter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from msdscript.env import Env
from msdscript.errors import MSDScriptError

if TYPE_CHECKING:
    from msdscript.expr import Expr

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


class Val(ABC):
    """A value that an expression evaluates to."""

    _truth_error: ClassVar[str] = "test of boolean"

    @abstractmethod
    def add_to(self, other: Val) -> Val:
        """Return the sum of this value and ``other``."""

    @abstractmethod
    def mult_with(self, other: Val) -> Val:
        """Return the product of this value and ``other``."""

    @abstractmethod
    def equals(self, other: Val) -> bool:
        """Return whether ``other`` is the same value."""

    @abstractmethod
    def to_expr(self) -> Expr:
        """Return an expression that evaluates to this value."""

    @abstractmethod
    def to_string(self) -> str:
        """Return the printed form of this value."""

    def is_true(self) -> bool:
        """Test this value for truth; rejected with the value kind's own message."""
        message = type(self)._truth_error
        raise MSDScriptError(message)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, eq=False)
class NumVal(Val):
    """A 64-bit signed integer."""

    _truth_error: ClassVar[str] = "test of non-boolean"

    val: int

    def add_to(self, other: Val) -> Val:
        if not isinstance(other, NumVal):
            raise MSDScriptError("Add of non-number")
        total = self.val + other.val
        if not INT64_MIN <= total <= INT64_MAX:
            raise MSDScriptError("Addition overflow")
        return NumVal(total)

    def mult_with(self, other: Val) -> Val:
        if not isinstance(other, NumVal):
            raise MSDScriptError("Multiplication of non-number")
        product = self.val * other.val
        if not INT64_MIN <= product <= INT64_MAX:
            raise MSDScriptError("Multiplication overflow")
        return NumVal(product)

    def equals(self, other: Val) -> bool:
        return isinstance(other, NumVal) and self.val == other.val

    def to_expr(self) -> Expr:
        from msdscript.expr import NumExpr

        return NumExpr(self.val)

    def to_string(self) -> str:
        return str(self.val)

    def is_true(self) -> bool:
        """Numbers cannot be tested for truth."""
        return super().is_true()


@dataclass(frozen=True, eq=False)
class BoolVal(Val):
    """A boolean."""

    _truth_error: ClassVar[str] = "Testing of a non-boolean"

    val: bool

    def add_to(self, other: Val) -> Val:
        raise MSDScriptError("Addition of boolean")

    def mult_with(self, other: Val) -> Val:
        raise MSDScriptError("Multiplication of boolean")

    def equals(self, other: Val) -> bool:
        return isinstance(other, BoolVal) and self.val == other.val

    def to_expr(self) -> Expr:
        from msdscript.expr import BoolExpr

        return BoolExpr(self.val)

    def to_string(self) -> str:
        return "_true" if self.val else "_false"

    def is_true(self) -> bool:
        """Truth tests are rejected for booleans as well."""
        return super().is_true()


@dataclass(frozen=True, eq=False)
class FunVal(Val):
    """A one-argument closure."""

    var: str
    body: Expr
    env: Env

    def add_to(self, other: Val) -> Val:
        raise MSDScriptError("Cannot add functions")

    def mult_with(self, other: Val) -> Val:
        raise MSDScriptError("Cannot multiply functions")

    def equals(self, other: Val) -> bool:
        return (
            isinstance(other, FunVal)
            and self.var == other.var
            and self.body.equals(other.body)
            and self.env is other.env
        )

    def to_expr(self) -> Expr:
        from msdscript.expr import FunExpr

        return FunExpr(self.var, self.body)

    def to_string(self) -> str:
        return "[function]"

    def call(self, arg: Val) -> Val:
        """Apply the closure to ``arg``."""
        return self.body.interp(self.env.extend(self.var, arg))