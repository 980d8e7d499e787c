"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details
"""

import pytest

import zkalgebra
from zkalgebra.fields.field import PrimeField


def test_errors():
    for err in (
        zkalgebra.DecodeError,
        zkalgebra.NotInvertibleError,
        zkalgebra.NoSquareRootError,
        zkalgebra.InfinityError,
        zkalgebra.FieldMismatchError,
        zkalgebra.CurveMismatchError,
    ):
        assert issubclass(err, zkalgebra.AlgebraError)

    # Division by zero can be caught the usual way.
    assert issubclass(zkalgebra.NotInvertibleError, ZeroDivisionError)
    with pytest.raises(ZeroDivisionError):
        PrimeField(7)(3) / 0


def test_checkSameField():
    f1 = PrimeField(101, name="f1")
    f2 = PrimeField(101, name="f2")
    zkalgebra.checkSameField(f1(1), f1(2))
    with pytest.raises(zkalgebra.FieldMismatchError, match="f1 and f2"):
        zkalgebra.checkSameField(f1(1), f2(1))
