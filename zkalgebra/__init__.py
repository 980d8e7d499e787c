"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details
"""


class AlgebraError(Exception):
    pass


class DecodeError(AlgebraError):
    """
    Bytes could not be decoded into a field element or curve point. Raised for
    bad lengths, unknown tags, integers outside of [0, p) and points that are
    not on the curve.
    """


class NotInvertibleError(AlgebraError, ZeroDivisionError):
    """
    Inversion, or division, by the zero element.
    """


class NoSquareRootError(AlgebraError):
    """
    The element is a quadratic non-residue.
    """


class InfinityError(AlgebraError):
    """
    The point at infinity was used where a finite point is required, e.g. when
    asking for its affine coordinates.
    """


class FieldMismatchError(AlgebraError):
    """
    Elements from two different field descriptors were combined.
    """


class CurveMismatchError(AlgebraError):
    """
    Points from two different curve descriptors were combined.
    """


def checkSameField(a, b):
    """
    Check that two elements belong to the same field descriptor.

    Args:
        a (FieldVal or ExtFieldVal): the first element.
        b (FieldVal or ExtFieldVal): the second element.

    Raises:
        FieldMismatchError if the descriptors differ.
    """
    if a.field is not b.field:
        raise FieldMismatchError(
            f"cannot combine elements of {a.field.name} and {b.field.name}"
        )
