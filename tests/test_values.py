import pytest

from pholi.values import PrimType, Value, preceq

FF = Value(PrimType.TRUTHVAL, 0)
TT = Value(PrimType.TRUTHVAL, 1)
EE = Value(PrimType.TRUTHVAL, 2)


def test_truth_value_names():
    assert [str(FF), str(TT), str(EE)] == ["ff", "tt", "ee"]
    assert str(Value(PrimType.TRUTHVAL, 9)) == "???"


def test_object_names():
    assert str(Value(PrimType.OBJ, 3)) == "obj3"


def test_equality():
    assert Value(PrimType.OBJ, 1) == Value(PrimType.OBJ, 1)
    assert Value(PrimType.OBJ, 1) != Value(PrimType.TRUTHVAL, 1)


@pytest.mark.parametrize("v", [FF, TT, EE])
def test_error_is_below_everything(v):
    assert preceq(EE, v)


def test_defined_values_only_below_themselves():
    assert preceq(FF, FF)
    assert preceq(TT, TT)
    assert not preceq(FF, TT)
    assert not preceq(TT, EE)


def test_objects_always_preceq():
    assert preceq(Value(PrimType.OBJ, 0), Value(PrimType.OBJ, 1))