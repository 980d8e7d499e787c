"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Group law for short Weierstrass curves y^2 = x^3 + a*x + b over any field
built with zkalgebra.fields, in three coordinate systems.

  AffinePoint      (x, y), with a dedicated flag for the point at infinity.
  JacobianPoint    (X, Y, Z) where x = X/Z^2 and y = Y/Z^3.
  ProjectivePoint  (X, Y, Z) where x = X/Z and y = Y/Z.

The point at infinity of the Jacobian and projective systems is any point
with Z = 0. The canonical representative is (0, 1, 0). Points are immutable
and every group operation returns a new point.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [EFD]: Explicit-Formulas Database
    http://hyperelliptic.org/EFD/g1p/auto-shortw.html
"""

from zkalgebra import AlgebraError, CurveMismatchError, InfinityError
from zkalgebra import config
from zkalgebra.fields.field import FieldVal, batchInverse


AFFINE = "affine"
JACOBIAN = "jacobian"
PROJECTIVE = "projective"

PUBKEY_IDENTITY = 0x00  # 0x00 + zero padding
PUBKEY_UNCOMPRESSED = 0x04  # 0x04 x coord + y coord


def naf(k):
    """
    naf returns the Non-Adjacent Form (NAF) of k as a list of digits in
    {-1, 0, 1}, least significant first. NAF is convenient in that on
    average, only 1/3rd of its values are non-zero. This is algorithm 3.30
    from [GECC].

    The expansion may need one more digit than the binary representation of
    k, because consecutive 1s are replaced using the identity
    2^n + 2^(n-1) + ... + 2^(n-k) = 2^(n+1) - 2^(n-k).
    """
    return wnaf(k, 2)


def wnaf(k, w):
    """
    wnaf returns the width-w NAF of k, least significant digit first. Every
    non-zero digit is odd with absolute value less than 2^(w-1), and of any w
    consecutive digits at most one is non-zero. This is algorithm 3.35 from
    [GECC]. Negative k gives the negated digits of -k.

    Args:
        k (int): the scalar.
        w (int): the window width, at least 2.

    Returns:
        list(int): the digits.
    """
    if w < 2:
        raise AlgebraError(f"wNAF window must be at least 2, got {w}")
    if k < 0:
        return [-d for d in wnaf(-k, w)]
    mod = 1 << w
    half = 1 << (w - 1)
    digits = []
    while k > 0:
        if k & 1:
            d = k & (mod - 1)
            if d >= half:
                d -= mod
            k -= d
        else:
            d = 0
        digits.append(d)
        k >>= 1
    return digits


def normalizeNonZeros(points):
    """
    Normalize a list of Jacobian or projective points to Z = 1 with a single
    shared field inversion. Points at infinity are replaced by the canonical
    (0, 1, 0) and don't take part in the inversion.

    Args:
        points (list): the points. Not modified.

    Returns:
        list: the normalized points, in the same order.
    """
    idxs = [i for i, pt in enumerate(points) if not pt.isZero()]
    zInvs = batchInverse([points[i].Z for i in idxs])
    out = [pt if pt.isZero() else None for pt in points]
    for i, zInv in zip(idxs, zInvs):
        out[i] = points[i]._scaled(zInv)
    return [pt.normalize() if pt.isZero() else pt for pt in out]


class CurvePoint:
    """
    CurvePoint is the interface shared by the three coordinate systems. The
    scalar multiplication, encoding and operator plumbing live here. The
    coordinate specific formulas live in the subclasses.
    """

    coords = None
    __slots__ = ()

    def _check(self, q):
        if not isinstance(q, CurvePoint):
            raise AlgebraError(f"expected a curve point, got {type(q).__name__}")
        if q.curve.root is not self.curve.root:
            raise CurveMismatchError(
                f"cannot combine points of {self.curve.name} and {q.curve.name}"
            )

    def identity(self):
        return self.curve.identity(self.coords)

    def toCoordinates(self, coords):
        """
        toCoordinates converts the point to another coordinate system. Only
        conversion to affine coordinates needs a field inversion.

        Args:
            coords (str): "affine", "jacobian" or "projective".
        """
        if coords == self.coords:
            return self
        if coords == AFFINE:
            if self.isZero():
                return self.curve.identity(AFFINE)
            return self.toAffine()
        if coords not in POINT_CLASSES:
            raise AlgebraError(f"unknown coordinate system {coords!r}")
        return self._convert(coords)

    def sub(self, q):
        return self.add(q.negate())

    def mul(self, k):
        """
        mul returns k*P using a left-to-right wNAF ladder. The window width
        comes from the configuration. The odd multiples P, 3P, ... are
        normalized with one shared inversion so the main loop uses mixed
        additions.

        k is used exactly as given. It is not reduced modulo the group order,
        so the result is correct for points outside of the prime order
        subgroup. A negative k multiplies -P.

        Args:
            k (int or FieldVal): the scalar.

        Returns:
            CurvePoint: k*P in the coordinates of P.
        """
        k = self.curve.scalar(k)
        if k == 0 or self.isZero():
            return self.identity()
        if self.coords == AFFINE:
            # Every affine addition costs an inversion. Work in Jacobian
            # coordinates and convert once at the end.
            return self._convert(JACOBIAN).mul(k).toCoordinates(AFFINE)
        p = self
        if k < 0:
            k = -k
            p = p.negate()
        if k == 1:
            return p
        w = config.get().wnafWindow
        digits = wnaf(k, w)
        table = self._oddMultiples(p, w)
        negTable = [t.negate() for t in table]
        q = self.identity()
        for d in reversed(digits):
            q = q.double()
            if d > 0:
                q = q.add(table[d >> 1])
            elif d < 0:
                q = q.add(negTable[(-d) >> 1])
        return q

    @staticmethod
    def _oddMultiples(p, w):
        # [P, 3P, 5P, ..., (2^(w-1) - 1)P]
        n = 1 << (w - 2)
        table = [p]
        if n > 1:
            p2 = p.double()
            for _ in range(n - 1):
                table.append(table[-1].add(p2))
        return normalizeNonZeros(table)

    def isInSubgroup(self):
        """
        Whether the point is in the prime order subgroup, i.e. order*P = O.
        """
        return self.mul(self.curve.N).isZero()

    def clearCofactor(self):
        """
        Multiply by the cofactor, mapping any curve point into the prime order
        subgroup.
        """
        if self.curve.H == 1:
            return self
        return self.mul(self.curve.H)

    def bytes(self):
        """
        bytes encodes the point as 0x04 || x || y with fixed width
        coordinates, or as 0x00 followed by zero bytes for the point at
        infinity.
        """
        if self.isZero():
            return bytes(self.curve.pointLen)
        a = self.toAffine()
        return bytes([PUBKEY_UNCOMPRESSED]) + a.x.bytes() + a.y.bytes()

    def __add__(self, q):
        if not isinstance(q, CurvePoint):
            return NotImplemented
        return self.add(q)

    def __sub__(self, q):
        if not isinstance(q, CurvePoint):
            return NotImplemented
        return self.sub(q)

    def __neg__(self):
        return self.negate()

    def __mul__(self, k):
        if not isinstance(k, (int, FieldVal)):
            return NotImplemented
        return self.mul(k)

    __rmul__ = __mul__

    def __eq__(self, q):
        if not isinstance(q, CurvePoint):
            return NotImplemented
        self._check(q)
        if type(q) is type(self):
            return self.equals(q)
        if self.coords == AFFINE:
            return q.equals(self.toCoordinates(q.coords))
        return self.equals(q.toCoordinates(self.coords))

    def __ne__(self, q):
        eq = self.__eq__(q)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        if self.isZero():
            return hash((self.curve.name, None))
        a = self.toAffine()
        return hash((self.curve.name, a.x, a.y))


class AffinePoint(CurvePoint):
    """
    AffinePoint is a point (x, y) on the curve, or the point at infinity when
    the infinity flag is set. The coordinates of the point at infinity are
    (0, 1).
    """

    coords = AFFINE
    __slots__ = ("curve", "x", "y", "infinity")

    def __init__(self, curve, x, y, infinity=False):
        self.curve = curve
        if infinity:
            self.x = curve.field.zero()
            self.y = curve.field.one()
        else:
            self.x = curve.field.coerce(x)
            self.y = curve.field.coerce(y)
        self.infinity = infinity

    def __repr__(self):
        if self.infinity:
            return f"AffinePoint({self.curve.name}, infinity)"
        return f"AffinePoint({self.curve.name}, {self.x!r}, {self.y!r})"

    def isZero(self):
        return self.infinity

    def isOnCurve(self):
        """
        isOnCurve returns whether y^2 = x^3 + a*x + b. The point at infinity is
        on every curve.
        """
        if self.infinity:
            return True
        return self.curve.isOnCurve(self.x, self.y)

    def add(self, q):
        """
        add returns the sum of the two points using the chord rule. A
        non-affine q is added with q's mixed addition.
        """
        self._check(q)
        if not isinstance(q, AffinePoint):
            return q.mixedAdd(self)
        if self.infinity:
            return q
        if q.infinity:
            return self
        if self.x == q.x:
            if self.y == q.y:
                return self.double()
            # x1 == x2 and y1 == -y2, so the sum is the point at infinity.
            return self.identity()
        lam = q.y.sub(self.y).mul(q.x.sub(self.x).inverse())
        x3 = lam.square().sub(self.x).sub(q.x)
        y3 = lam.mul(self.x.sub(x3)).sub(self.y)
        return AffinePoint(self.curve, x3, y3)

    mixedAdd = add

    def double(self):
        """
        double returns 2*P using the tangent rule.
        """
        if self.infinity or self.y.isZero():
            return self.identity()
        xx = self.x.square()
        num = xx.add(xx).add(xx)
        if not self.curve.aIsZero:
            num = num.add(self.curve.a)
        lam = num.mul(self.y.add(self.y).inverse())
        x3 = lam.square().sub(self.x).sub(self.x)
        y3 = lam.mul(self.x.sub(x3)).sub(self.y)
        return AffinePoint(self.curve, x3, y3)

    def negate(self):
        if self.infinity:
            return self
        return AffinePoint(self.curve, self.x, self.y.negate())

    def equals(self, q):
        if self.infinity or q.infinity:
            return self.infinity and q.infinity
        return self.x == q.x and self.y == q.y

    def toAffine(self):
        """
        Raises:
            InfinityError for the point at infinity.
        """
        if self.infinity:
            raise InfinityError("the point at infinity has no affine coordinates")
        return self

    def normalize(self):
        return self

    def isNormalized(self):
        return True

    def _convert(self, coords):
        cls = POINT_CLASSES[coords]
        field = self.curve.field
        if self.infinity:
            return cls(self.curve, field.zero(), field.one(), field.zero())
        return cls(self.curve, self.x, self.y, field.one())


class _ProjectiveBase(CurvePoint):
    """
    Shared plumbing of the two systems with a Z coordinate.
    """

    __slots__ = ("curve", "X", "Y", "Z")

    def __init__(self, curve, X, Y, Z):
        self.curve = curve
        field = curve.field
        self.X = field.coerce(X)
        self.Y = field.coerce(Y)
        self.Z = field.coerce(Z)

    def __repr__(self):
        return f"{type(self).__name__}({self.curve.name}, {self.X!r}, {self.Y!r}, {self.Z!r})"

    def _new(self, X, Y, Z):
        p = object.__new__(type(self))
        p.curve = self.curve
        p.X = X
        p.Y = Y
        p.Z = Z
        return p

    def _infinity(self):
        field = self.curve.field
        return self._new(field.zero(), field.one(), field.zero())

    def isZero(self):
        return self.Z.isZero()

    def negate(self):
        return self._new(self.X, self.Y.negate(), self.Z)

    def normalize(self):
        """
        normalize returns the same point with Z = 1, or the canonical (0, 1, 0)
        for the point at infinity. Costs one field inversion unless the point
        is already normalized.
        """
        if self.isZero():
            if self.X.isZero() and self.Y.isOne():
                return self
            return self._infinity()
        if self.Z.isOne():
            return self
        return self._scaled(self.Z.inverse())

    def isNormalized(self):
        if self.isZero():
            return self.X.isZero() and self.Y.isOne()
        return self.Z.isOne()

    def toAffine(self):
        """
        toAffine converts the point to affine coordinates with one field
        inversion.

        Raises:
            InfinityError for the point at infinity.
        """
        if self.isZero():
            raise InfinityError("the point at infinity has no affine coordinates")
        return self._affineScaled(self.Z.inverse())

    def mixedAdd(self, q):
        """
        mixedAdd adds an affine point. The affine point is treated as having
        Z = 1, which saves several multiplications over a full addition.
        """
        self._check(q)
        if not isinstance(q, AffinePoint):
            raise AlgebraError(f"mixedAdd needs an affine point, got {type(q).__name__}")
        if q.infinity:
            return self
        if self.isZero():
            return self._new(q.x, q.y, self.curve.field.one())
        return self._addZ2EqualsOne(q.x, q.y)

    def add(self, q):
        self._check(q)
        if isinstance(q, AffinePoint):
            return self.mixedAdd(q)
        if type(q) is not type(self):
            raise AlgebraError(
                f"cannot add {type(q).__name__} to {type(self).__name__}, convert with toCoordinates"
            )
        # A point at infinity is the identity according to the group law for
        # elliptic curve cryptography. Thus, O + P = P and P + O = P.
        if self.isZero():
            return q
        if q.isZero():
            return self
        return self._add(q)


class JacobianPoint(_ProjectiveBase):
    """
    JacobianPoint is a curve point in Jacobian coordinates. For a given (x, y)
    position on the curve, the Jacobian coordinates are (X, Y, Z) where
    x = X/Z^2 and y = Y/Z^3.
    """

    coords = JACOBIAN
    __slots__ = ()

    def _scaled(self, zInv):
        zInv2 = zInv.square()
        one = self.curve.field.one()
        return self._new(self.X.mul(zInv2), self.Y.mul(zInv2).mul(zInv), one)

    def _affineScaled(self, zInv):
        zInv2 = zInv.square()
        return AffinePoint(self.curve, self.X.mul(zInv2), self.Y.mul(zInv2).mul(zInv))

    def _convert(self, coords):
        # x = X/Z^2 = (X*Z)/Z^3 and y = Y/Z^3.
        if self.isZero():
            return self.curve.identity(coords)
        return ProjectivePoint(self.curve, self.X.mul(self.Z), self.Y, self.Z.square().mul(self.Z))

    def isOnCurve(self):
        """
        isOnCurve checks Y^2 = X^3 + a*X*Z^4 + b*Z^6 without an inversion.
        """
        if self.isZero():
            return True
        curve = self.curve
        zz = self.Z.square()
        z4 = zz.square()
        rhs = self.X.square().mul(self.X).add(curve.b.mul(z4.mul(zz)))
        if not curve.aIsZero:
            rhs = rhs.add(curve.a.mul(self.X).mul(z4))
        return self.Y.square() == rhs

    def equals(self, q):
        """
        Two Jacobian points are equal when X1*Z2^2 = X2*Z1^2 and
        Y1*Z2^3 = Y2*Z1^3.
        """
        if self.isZero() or q.isZero():
            return self.isZero() and q.isZero()
        z1z1 = self.Z.square()
        z2z2 = q.Z.square()
        if self.X.mul(z2z2) != q.X.mul(z1z1):
            return False
        return self.Y.mul(z2z2).mul(q.Z) == q.Y.mul(z1z1).mul(self.Z)

    def _add(self, q):
        # Faster point addition can be achieved when certain assumptions are
        # met. For example, when both points have the same z value, arithmetic
        # on the z values can be avoided. This section thus checks for these
        # conditions and calls an appropriate add function which is accelerated
        # by using those assumptions.
        isZ1One = self.Z.isOne()
        isZ2One = q.Z.isOne()
        if isZ1One and isZ2One:
            return self._addZ1AndZ2EqualsOne(q)
        if self.Z == q.Z:
            return self._addZ1EqualsZ2(q)
        if isZ2One:
            return self._addZ2EqualsOne(q.X, q.Y)
        if isZ1One:
            return q._addZ2EqualsOne(self.X, self.Y)
        return self._addGeneric(q)

    def _addZ1AndZ2EqualsOne(self, q):
        # This implementation splits the equation into intermediate elements
        # which are used to minimize the number of field multiplications using
        # the method shown at [EFD] addition-mmadd-2007-bl:
        #
        # H = X2-X1, HH = H^2, I = 4*HH, J = H*I, r = 2*(Y2-Y1), V = X1*I
        # X3 = r^2-J-2*V, Y3 = r*(V-X3)-2*Y1*J, Z3 = 2*H
        x1, y1, x2, y2 = self.X, self.Y, q.X, q.Y
        # When the x coordinates are the same for two points on the curve, the
        # y coordinates either must be the same, in which case it is point
        # doubling, or they are opposite and the result is the point at
        # infinity per the group law.
        if x1 == x2:
            if y1 == y2:
                return self.double()
            return self._infinity()
        # fmt: off
        h = x2.sub(x1)                          # H = X2-X1
        i = h.square().mulInt(4)                # I = 4*H^2
        j = h.mul(i)                            # J = H*I
        r = y2.sub(y1).mulInt(2)                # r = 2*(Y2-Y1)
        v = x1.mul(i)                           # V = X1*I
        x3 = r.square().sub(j).sub(v.add(v))    # X3 = r^2-J-2*V
        y3 = r.mul(v.sub(x3)).sub(y1.mul(j).mulInt(2))  # Y3 = r*(V-X3)-2*Y1*J
        z3 = h.add(h)                           # Z3 = 2*H
        # fmt: on
        return self._new(x3, y3, z3)

    def _addZ1EqualsZ2(self, q):
        # A slightly modified version of [EFD] addition-mmadd-2007-bl for two
        # points sharing a z value:
        #
        # A = X2-X1, B = A^2, C = Y2-Y1, D = C^2, E = X1*B, F = X2*B
        # X3 = D-E-F, Y3 = C*(E-X3)-Y1*(F-E), Z3 = Z1*A
        x1, y1, z1, x2, y2 = self.X, self.Y, self.Z, q.X, q.Y
        if x1 == x2:
            if y1 == y2:
                return self.double()
            return self._infinity()
        # fmt: off
        a = x2.sub(x1)                           # A = X2-X1
        b = a.square()                           # B = A^2
        c = y2.sub(y1)                           # C = Y2-Y1
        d = c.square()                           # D = C^2
        e = x1.mul(b)                            # E = X1*B
        f = x2.mul(b)                            # F = X2*B
        x3 = d.sub(e).sub(f)                     # X3 = D-E-F
        y3 = c.mul(e.sub(x3)).sub(y1.mul(f.sub(e)))  # Y3 = C*(E-X3)-Y1*(F-E)
        z3 = z1.mul(a)                           # Z3 = Z1*A
        # fmt: on
        return self._new(x3, y3, z3)

    def _addZ2EqualsOne(self, x2, y2):
        # [EFD] addition-madd-2007-bl:
        #
        # Z1Z1 = Z1^2, U2 = X2*Z1Z1, S2 = Y2*Z1*Z1Z1, H = U2-X1, HH = H^2,
        # I = 4*HH, J = H*I, r = 2*(S2-Y1), V = X1*I
        # X3 = r^2-J-2*V, Y3 = r*(V-X3)-2*Y1*J, Z3 = (Z1+H)^2-Z1Z1-HH
        x1, y1, z1 = self.X, self.Y, self.Z
        # fmt: off
        z1z1 = z1.square()                      # Z1Z1 = Z1^2
        u2 = x2.mul(z1z1)                       # U2 = X2*Z1Z1
        s2 = y2.mul(z1z1).mul(z1)               # S2 = Y2*Z1*Z1Z1
        # fmt: on
        # Since any number of Jacobian coordinates can represent the same
        # affine point, the x and y values need to be converted to like terms
        # before comparing.
        if x1 == u2:
            if y1 == s2:
                return self.double()
            return self._infinity()
        # fmt: off
        h = u2.sub(x1)                          # H = U2-X1
        hh = h.square()                         # HH = H^2
        i = hh.mulInt(4)                        # I = 4*HH
        j = h.mul(i)                            # J = H*I
        r = s2.sub(y1).mulInt(2)                # r = 2*(S2-Y1)
        v = x1.mul(i)                           # V = X1*I
        x3 = r.square().sub(j).sub(v.add(v))    # X3 = r^2-J-2*V
        y3 = r.mul(v.sub(x3)).sub(y1.mul(j).mulInt(2))  # Y3 = r*(V-X3)-2*Y1*J
        z3 = z1.add(h).square().sub(z1z1).sub(hh)       # Z3 = (Z1+H)^2-Z1Z1-HH
        # fmt: on
        return self._new(x3, y3, z3)

    def _addGeneric(self, q):
        # [EFD] addition-add-2007-bl:
        #
        # Z1Z1 = Z1^2, Z2Z2 = Z2^2, U1 = X1*Z2Z2, U2 = X2*Z1Z1, S1 = Y1*Z2*Z2Z2
        # S2 = Y2*Z1*Z1Z1, H = U2-U1, I = (2*H)^2, J = H*I, r = 2*(S2-S1)
        # V = U1*I
        # X3 = r^2-J-2*V, Y3 = r*(V-X3)-2*S1*J, Z3 = ((Z1+Z2)^2-Z1Z1-Z2Z2)*H
        x1, y1, z1, x2, y2, z2 = self.X, self.Y, self.Z, q.X, q.Y, q.Z
        # fmt: off
        z1z1 = z1.square()                      # Z1Z1 = Z1^2
        z2z2 = z2.square()                      # Z2Z2 = Z2^2
        u1 = x1.mul(z2z2)                       # U1 = X1*Z2Z2
        u2 = x2.mul(z1z1)                       # U2 = X2*Z1Z1
        s1 = y1.mul(z2z2).mul(z2)               # S1 = Y1*Z2*Z2Z2
        s2 = y2.mul(z1z1).mul(z1)               # S2 = Y2*Z1*Z1Z1
        # fmt: on
        if u1 == u2:
            if s1 == s2:
                return self.double()
            return self._infinity()
        # fmt: off
        h = u2.sub(u1)                          # H = U2-U1
        h2 = h.add(h)
        i = h2.square()                         # I = (2*H)^2
        j = h.mul(i)                            # J = H*I
        r = s2.sub(s1).mulInt(2)                # r = 2*(S2-S1)
        v = u1.mul(i)                           # V = U1*I
        x3 = r.square().sub(j).sub(v.add(v))    # X3 = r^2-J-2*V
        y3 = r.mul(v.sub(x3)).sub(s1.mul(j).mulInt(2))            # Y3 = r*(V-X3)-2*S1*J
        z3 = z1.add(z2).square().sub(z1z1).sub(z2z2).mul(h)       # Z3 = ((Z1+Z2)^2-Z1Z1-Z2Z2)*H
        # fmt: on
        return self._new(x3, y3, z3)

    def double(self):
        """
        double returns 2*P. Curves with a = 0 use [EFD] dbl-2009-l, others use
        dbl-2007-bl. A point with Z = 1 uses mdbl-2007-bl.
        """
        # Doubling a point at infinity is still infinity, and so is doubling a
        # point of order 2.
        if self.Y.isZero() or self.Z.isZero():
            return self._infinity()
        if self.Z.isOne():
            return self._doubleZ1EqualsOne()
        if self.curve.aIsZero:
            return self._doubleA0()
        return self._doubleGeneric()

    def _doubleZ1EqualsOne(self):
        # With Z1 = 1 the doubling formulas of [EFD] mdbl-2007-bl reduce to:
        #
        # A = X1^2, B = Y1^2, C = B^2, D = 2*((X1+B)^2-A-C)
        # E = 3*A+a, F = E^2, X3 = F-2*D, Y3 = E*(D-X3)-8*C
        # Z3 = 2*Y1
        x1, y1 = self.X, self.Y
        # fmt: off
        a = x1.square()                         # A = X1^2
        b = y1.square()                         # B = Y1^2
        c = b.square()                          # C = B^2
        d = x1.add(b).square().sub(a).sub(c)
        d = d.add(d)                            # D = 2*((X1+B)^2-A-C)
        e = a.mulInt(3)                         # E = 3*A
        if not self.curve.aIsZero:
            e = e.add(self.curve.a)             # E = 3*A+a
        f = e.square()                          # F = E^2
        x3 = f.sub(d.add(d))                    # X3 = F-2*D
        y3 = e.mul(d.sub(x3)).sub(c.mulInt(8))  # Y3 = E*(D-X3)-8*C
        z3 = y1.add(y1)                         # Z3 = 2*Y1
        # fmt: on
        return self._new(x3, y3, z3)

    def _doubleA0(self):
        # [EFD] dbl-2009-l, for a = 0:
        #
        # A = X1^2, B = Y1^2, C = B^2, D = 2*((X1+B)^2-A-C)
        # E = 3*A, F = E^2, X3 = F-2*D, Y3 = E*(D-X3)-8*C
        # Z3 = 2*Y1*Z1
        x1, y1, z1 = self.X, self.Y, self.Z
        # fmt: off
        a = x1.square()                         # A = X1^2
        b = y1.square()                         # B = Y1^2
        c = b.square()                          # C = B^2
        d = x1.add(b).square().sub(a).sub(c)
        d = d.add(d)                            # D = 2*((X1+B)^2-A-C)
        e = a.mulInt(3)                         # E = 3*A
        f = e.square()                          # F = E^2
        x3 = f.sub(d.add(d))                    # X3 = F-2*D
        y3 = e.mul(d.sub(x3)).sub(c.mulInt(8))  # Y3 = E*(D-X3)-8*C
        z3 = y1.mul(z1).mulInt(2)               # Z3 = 2*Y1*Z1
        # fmt: on
        return self._new(x3, y3, z3)

    def _doubleGeneric(self):
        # [EFD] dbl-2007-bl, for any a:
        #
        # XX = X1^2, YY = Y1^2, YYYY = YY^2, ZZ = Z1^2
        # S = 2*((X1+YY)^2-XX-YYYY), M = 3*XX+a*ZZ^2, T = M^2-2*S
        # X3 = T, Y3 = M*(S-T)-8*YYYY, Z3 = (Y1+Z1)^2-YY-ZZ
        x1, y1, z1 = self.X, self.Y, self.Z
        # fmt: off
        xx = x1.square()                        # XX = X1^2
        yy = y1.square()                        # YY = Y1^2
        yyyy = yy.square()                      # YYYY = YY^2
        zz = z1.square()                        # ZZ = Z1^2
        s = x1.add(yy).square().sub(xx).sub(yyyy)
        s = s.add(s)                            # S = 2*((X1+YY)^2-XX-YYYY)
        m = xx.mulInt(3).add(self.curve.a.mul(zz.square()))  # M = 3*XX+a*ZZ^2
        t = m.square().sub(s.add(s))            # T = M^2-2*S
        y3 = m.mul(s.sub(t)).sub(yyyy.mulInt(8))  # Y3 = M*(S-T)-8*YYYY
        z3 = y1.add(z1).square().sub(yy).sub(zz)  # Z3 = (Y1+Z1)^2-YY-ZZ
        # fmt: on
        return self._new(t, y3, z3)


class ProjectivePoint(_ProjectiveBase):
    """
    ProjectivePoint is a curve point in homogeneous projective coordinates
    (X, Y, Z) where x = X/Z and y = Y/Z.
    """

    coords = PROJECTIVE
    __slots__ = ()

    def _scaled(self, zInv):
        return self._new(self.X.mul(zInv), self.Y.mul(zInv), self.curve.field.one())

    def _affineScaled(self, zInv):
        return AffinePoint(self.curve, self.X.mul(zInv), self.Y.mul(zInv))

    def _convert(self, coords):
        # x = X/Z = (X*Z)/Z^2 and y = Y/Z = (Y*Z^2)/Z^3.
        if self.isZero():
            return self.curve.identity(coords)
        return JacobianPoint(self.curve, self.X.mul(self.Z), self.Y.mul(self.Z.square()), self.Z)

    def isOnCurve(self):
        """
        isOnCurve checks Y^2*Z = X^3 + a*X*Z^2 + b*Z^3 without an inversion.
        """
        if self.isZero():
            return True
        curve = self.curve
        zz = self.Z.square()
        rhs = self.X.square().mul(self.X).add(curve.b.mul(zz.mul(self.Z)))
        if not curve.aIsZero:
            rhs = rhs.add(curve.a.mul(self.X).mul(zz))
        return self.Y.square().mul(self.Z) == rhs

    def equals(self, q):
        """
        Two projective points are equal when X1*Z2 = X2*Z1 and Y1*Z2 = Y2*Z1.
        """
        if self.isZero() or q.isZero():
            return self.isZero() and q.isZero()
        return self.X.mul(q.Z) == q.X.mul(self.Z) and self.Y.mul(q.Z) == q.Y.mul(self.Z)

    def _add(self, q):
        # [EFD] addition-add-1998-cmo-2:
        #
        # Y1Z2 = Y1*Z2, X1Z2 = X1*Z2, Z1Z2 = Z1*Z2, u = Y2*Z1-Y1Z2, uu = u^2
        # v = X2*Z1-X1Z2, vv = v^2, vvv = v*vv, R = vv*X1Z2
        # A = uu*Z1Z2-vvv-2*R, X3 = v*A, Y3 = u*(R-A)-vvv*Y1Z2, Z3 = vvv*Z1Z2
        x1, y1, z1, x2, y2, z2 = self.X, self.Y, self.Z, q.X, q.Y, q.Z
        # fmt: off
        y1z2 = y1.mul(z2)                       # Y1Z2 = Y1*Z2
        x1z2 = x1.mul(z2)                       # X1Z2 = X1*Z2
        u = y2.mul(z1).sub(y1z2)                # u = Y2*Z1-Y1Z2
        v = x2.mul(z1).sub(x1z2)                # v = X2*Z1-X1Z2
        # fmt: on
        if v.isZero():
            if u.isZero():
                return self.double()
            return self._infinity()
        z1z2 = z1.mul(z2)
        return self._addFinish(u, v, x1z2, y1z2, z1z2)

    def _addZ2EqualsOne(self, x2, y2):
        # [EFD] addition-madd-1998-cmo, the add-1998-cmo-2 formulas with Z2 = 1.
        x1, y1, z1 = self.X, self.Y, self.Z
        u = y2.mul(z1).sub(y1)                  # u = Y2*Z1-Y1
        v = x2.mul(z1).sub(x1)                  # v = X2*Z1-X1
        if v.isZero():
            if u.isZero():
                return self.double()
            return self._infinity()
        return self._addFinish(u, v, x1, y1, z1)

    def _addFinish(self, u, v, x1z2, y1z2, z1z2):
        # fmt: off
        uu = u.square()                         # uu = u^2
        vv = v.square()                         # vv = v^2
        vvv = v.mul(vv)                         # vvv = v*vv
        r = vv.mul(x1z2)                        # R = vv*X1Z2
        a = uu.mul(z1z2).sub(vvv).sub(r.add(r))  # A = uu*Z1Z2-vvv-2*R
        x3 = v.mul(a)                           # X3 = v*A
        y3 = u.mul(r.sub(a)).sub(vvv.mul(y1z2))  # Y3 = u*(R-A)-vvv*Y1Z2
        z3 = vvv.mul(z1z2)                      # Z3 = vvv*Z1Z2
        # fmt: on
        return self._new(x3, y3, z3)

    def double(self):
        """
        double returns 2*P using [EFD] dbl-2007-bl for projective coordinates.
        The a*Z1^2 term is skipped when a = 0.
        """
        if self.Y.isZero() or self.Z.isZero():
            return self._infinity()
        # XX = X1^2, w = a*Z1^2+3*XX, s = 2*Y1*Z1, ss = s^2, sss = s*ss
        # R = Y1*s, RR = R^2, B = (X1+R)^2-XX-RR, h = w^2-2*B
        # X3 = h*s, Y3 = w*(B-h)-2*RR, Z3 = sss
        x1, y1, z1 = self.X, self.Y, self.Z
        # fmt: off
        xx = x1.square()                        # XX = X1^2
        w = xx.mulInt(3)                        # w = 3*XX
        if not self.curve.aIsZero:
            w = w.add(self.curve.a.mul(z1.square()))  # w = a*Z1^2+3*XX
        s = y1.mul(z1).mulInt(2)                # s = 2*Y1*Z1
        ss = s.square()                         # ss = s^2
        sss = s.mul(ss)                         # sss = s*ss
        r = y1.mul(s)                           # R = Y1*s
        rr = r.square()                         # RR = R^2
        b = x1.add(r).square().sub(xx).sub(rr)  # B = (X1+R)^2-XX-RR
        h = w.square().sub(b.add(b))            # h = w^2-2*B
        x3 = h.mul(s)                           # X3 = h*s
        y3 = w.mul(b.sub(h)).sub(rr.add(rr))    # Y3 = w*(B-h)-2*RR
        # fmt: on
        return self._new(x3, y3, sss)


POINT_CLASSES = {
    AFFINE: AffinePoint,
    JACOBIAN: JacobianPoint,
    PROJECTIVE: ProjectivePoint,
}
