"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

The Curve descriptor binds the parameters of a short Weierstrass curve
y^2 = x^3 + a*x + b to a field, and knows how to build, validate, encode and
decode its points.
"""

import threading

from zkalgebra import AlgebraError, DecodeError, FieldMismatchError
from zkalgebra.fields.field import FieldVal
from zkalgebra.util import helpers

from .point import (
    AFFINE,
    JACOBIAN,
    POINT_CLASSES,
    PUBKEY_IDENTITY,
    PUBKEY_UNCOMPRESSED,
    AffinePoint,
)


log = helpers.getLogger("CURVE")


class Curve:
    """
    Curve describes one group. Points remember the descriptor they were
    built with, and points of different descriptors can't be combined.

    Attributes:
        name (str): a display name, e.g. "bls12_381.g2".
        field: the PrimeField or ExtensionField of the coordinates.
        a, b: the curve coefficients as field elements.
        aIsZero (bool): whether the a = 0 doubling specializations apply.
        N (int): the order of the prime order subgroup.
        H (int): the cofactor.
        scalarField (PrimeField): optional. The field of integers mod N.
        coords (str): the coordinate system used by generator, identity and
            decodePoint.
    """

    def __init__(
        self,
        name,
        field,
        a,
        b,
        generator,
        order,
        cofactor=1,
        coords=JACOBIAN,
        scalarField=None,
    ):
        if coords not in POINT_CLASSES:
            raise AlgebraError(f"unknown coordinate system {coords!r}")
        self.name = name
        self.field = field
        self.a = field.coerce(a)
        self.b = field.coerce(b)
        self.aIsZero = self.a.isZero()
        self.N = order
        self.H = cofactor
        self.scalarField = scalarField
        self.coords = coords
        self.pointLen = 1 + 2 * field.byteLen
        self.root = self
        self._siblings = {coords: self}
        self._lock = threading.Lock()

        gx, gy = generator
        self.G = AffinePoint(self, gx, gy)
        if not self.G.isOnCurve():
            raise AlgebraError(f"{name}: generator is not on the curve")
        log.debug(f"initialized curve {name} over {field.name}")

    def __repr__(self):
        return f"Curve({self.name}, {self.coords})"

    def withCoordinates(self, coords):
        """
        withCoordinates returns a descriptor of the same group whose default
        coordinate system is coords. Points of the sibling descriptors can be
        combined with each other.

        Args:
            coords (str): "affine", "jacobian" or "projective".

        Returns:
            Curve: the sibling descriptor.
        """
        if coords not in POINT_CLASSES:
            raise AlgebraError(f"unknown coordinate system {coords!r}")
        root = self.root
        with root._lock:
            sib = root._siblings.get(coords)
            if sib is None:
                sib = object.__new__(Curve)
                sib.__dict__.update(root.__dict__)
                sib.coords = coords
                root._siblings[coords] = sib
        return sib

    def isOnCurve(self, x, y):
        """
        isOnCurve returns whether the affine point (x, y) satisfies
        y^2 = x^3 + a*x + b.
        """
        x = self.field.coerce(x)
        y = self.field.coerce(y)
        rhs = x.square().mul(x).add(self.b)
        if not self.aIsZero:
            rhs = rhs.add(self.a.mul(x))
        return y.square() == rhs

    def identity(self, coords=None):
        """
        The point at infinity, in the canonical form of the coordinate system.
        """
        coords = coords if coords else self.coords
        if coords == AFFINE:
            return AffinePoint(self, None, None, infinity=True)
        field = self.field
        return POINT_CLASSES[coords](self, field.zero(), field.one(), field.zero())

    def generator(self, coords=None):
        coords = coords if coords else self.coords
        return self.G.toCoordinates(coords)

    def point(self, x, y, coords=None):
        """
        point builds a point from affine coordinates.

        Args:
            x, y (int or field element): the coordinates.
            coords (str): optional. Defaults to the descriptor's system.

        Raises:
            AlgebraError if the point is not on the curve.
        """
        pt = AffinePoint(self, x, y)
        if not pt.isOnCurve():
            raise AlgebraError(f"point is not on {self.name}")
        return pt.toCoordinates(coords if coords else self.coords)

    def scalar(self, k):
        """
        scalar converts a scalar to an integer. FieldVal scalars must belong to
        the scalar field when one is set.
        """
        if isinstance(k, FieldVal):
            if self.scalarField is not None and k.field is not self.scalarField:
                raise FieldMismatchError(
                    f"scalar from {k.field.name} used with {self.name}"
                )
            return k.n
        if isinstance(k, int):
            return k
        raise AlgebraError(f"unsupported scalar type {type(k).__name__}")

    def decodePoint(self, b):
        """
        decodePoint parses a point encoded by CurvePoint.bytes:

          identity:     <0x00><zero bytes>
          uncompressed: <format byte = 0x04><X coordinate><Y coordinate>

        Each coordinate has the fixed width of the field. The compressed and
        hybrid formats are not supported.

        Args:
            b (bytes-like): the encoded point.

        Returns:
            CurvePoint: the point in the descriptor's coordinate system.

        Raises:
            DecodeError on a bad length or format byte, a coordinate that is
            not less than the modulus, or a point that is not on the curve.
        """
        if len(b) == 0:
            raise DecodeError("empty point encoding")
        if len(b) != self.pointLen:
            raise DecodeError(f"invalid point length {len(b)}, expected {self.pointLen}")
        fmt = b[0]
        if fmt == PUBKEY_IDENTITY:
            if any(b[1:]):
                raise DecodeError("non-zero padding in the identity encoding")
            return self.identity()
        if fmt != PUBKEY_UNCOMPRESSED:
            raise DecodeError(f"invalid magic in point: {fmt:#04x}")
        cLen = self.field.byteLen
        x = self.field.fromBytes(b[1 : 1 + cLen])
        y = self.field.fromBytes(b[1 + cLen :])
        if not self.isOnCurve(x, y):
            raise DecodeError(f"point isn't on the {self.name} curve")
        return AffinePoint(self, x, y).toCoordinates(self.coords)
