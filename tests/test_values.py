import pytest

from msdscript.env import empty_env
from msdscript.errors import MSDScriptError
from msdscript.expr import AddExpr, BoolExpr, FunExpr, NumExpr, VarExpr
from msdscript.values import BoolVal, FunVal, NumVal

MAX = 2**63 - 1
MIN = -(2**63)


def identity():
    return FunVal("x", VarExpr("x"), empty_env())


def test_add_zero_is_identity():
    assert NumVal(5).add_to(NumVal(0)).equals(NumVal(5))


@pytest.mark.parametrize("a,b", [(3, 4), (-7, 2), (MAX, MIN), (0, -9)])
def test_add_is_commutative(a, b):
    assert NumVal(a).add_to(NumVal(b)).equals(NumVal(b).add_to(NumVal(a)))


def test_add_at_boundary_is_allowed():
    assert NumVal(MAX - 1).add_to(NumVal(1)).val == MAX
    assert NumVal(MIN + 1).add_to(NumVal(-1)).val == MIN


@pytest.mark.parametrize("a,b", [(MAX, 1), (MIN, -1), (1, MAX), (-1, MIN)])
def test_add_overflow(a, b):
    with pytest.raises(MSDScriptError, match="Addition overflow"):
        NumVal(a).add_to(NumVal(b))


def test_mult_by_zero():
    assert NumVal(MAX).mult_with(NumVal(0)).equals(NumVal(0))
    assert NumVal(0).mult_with(NumVal(MIN)).equals(NumVal(0))


def test_mult_by_one_is_identity():
    assert NumVal(MIN).mult_with(NumVal(1)).val == MIN
    assert NumVal(1).mult_with(NumVal(MAX)).val == MAX


@pytest.mark.parametrize("a,b", [(MAX, 2), (MIN, -1), (-1, MIN), (2, MIN), (MIN, 2)])
def test_mult_overflow(a, b):
    with pytest.raises(MSDScriptError, match="Multiplication overflow"):
        NumVal(a).mult_with(NumVal(b))


def test_mult_is_commutative():
    assert NumVal(-6).mult_with(NumVal(7)).equals(NumVal(7).mult_with(NumVal(-6)))


def test_num_add_non_number():
    with pytest.raises(MSDScriptError, match="Add of non-number"):
        NumVal(1).add_to(BoolVal(True))


def test_num_mult_non_number():
    with pytest.raises(MSDScriptError, match="Multiplication of non-number"):
        NumVal(1).mult_with(identity())


def test_bool_arithmetic_errors():
    with pytest.raises(MSDScriptError, match="Addition of boolean"):
        BoolVal(True).add_to(NumVal(1))
    with pytest.raises(MSDScriptError, match="Multiplication of boolean"):
        BoolVal(False).mult_with(NumVal(1))


def test_fun_arithmetic_errors():
    with pytest.raises(MSDScriptError, match="Cannot add functions"):
        identity().add_to(NumVal(1))
    with pytest.raises(MSDScriptError, match="Cannot multiply functions"):
        identity().mult_with(NumVal(1))


def test_to_string():
    assert NumVal(42).to_string() == "42"
    assert BoolVal(True).to_string() == "_true"
    assert BoolVal(False).to_string() == "_false"
    assert identity().to_string() == "[function]"


def test_equals_across_types():
    assert not NumVal(1).equals(BoolVal(True))
    assert not BoolVal(True).equals(NumVal(1))
    assert not BoolVal(True).equals(BoolVal(False))
    assert BoolVal(False).equals(BoolVal(False))


def test_is_true_errors():
    with pytest.raises(MSDScriptError, match="test of non-boolean"):
        NumVal(1).is_true()
    with pytest.raises(MSDScriptError, match="Testing of a non-boolean"):
        BoolVal(True).is_true()
    with pytest.raises(MSDScriptError, match="test of boolean"):
        identity().is_true()


def test_to_expr_round_trip():
    assert NumVal(7).to_expr().equals(NumExpr(7))
    assert BoolVal(True).to_expr().equals(BoolExpr(True))
    assert identity().to_expr().equals(FunExpr("x", VarExpr("x")))


def test_to_expr_interp_round_trip():
    for value in (NumVal(-3), BoolVal(False)):
        assert value.to_expr().interp(empty_env()).equals(value)


def test_fun_call_identity_returns_argument():
    arg = NumVal(3)
    assert identity().call(arg) is arg


def test_fun_call_uses_closure_env():
    captured = NumVal(10)
    env = empty_env().extend("y", captured)
    fun = FunVal("x", AddExpr(VarExpr("x"), VarExpr("y")), env)
    assert fun.call(NumVal(0)).equals(captured)


def test_fun_equals_requires_same_env():
    env = empty_env()
    a = FunVal("x", VarExpr("x"), env)
    b = FunVal("x", VarExpr("x"), env)
    c = FunVal("x", VarExpr("x"), env.extend("z", NumVal(1)))
    assert a.equals(b)
    assert not a.equals(c)
    assert not a.equals(FunVal("y", VarExpr("x"), env))