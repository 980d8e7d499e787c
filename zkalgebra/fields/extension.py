"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Extension field towers. An ExtensionField is the quotient ring
base[x] / (x^k - beta) for an irreducible binomial, where the base is a
PrimeField or another ExtensionField. Towers like the Fp2 -> Fp6 -> Fp12 of
pairing friendly curves are built by nesting descriptors.

ExtFieldVal elements hold a tuple of k base elements, the coefficients of
1, x, ..., x^(k-1). Like FieldVal, they are immutable.

References:
  [BGM]: Beuchat et al., "High-Speed Software Implementation of the Optimal
    Ate Pairing over Barreto-Naehrig Curves", 2010. Karatsuba multiplication
    and complex squaring for degree 2.

  [CH]: Chung & Hasan, "Asymmetric Squaring Formulae", 2007. SQR2 for
    degree 3.

  [SCOTT]: Scott, "Implementing cryptographic pairings", 2007. Inversion
    formulas for cubic extensions.
"""

import threading

from zkalgebra import (
    AlgebraError,
    FieldMismatchError,
    NoSquareRootError,
    NotInvertibleError,
)
from zkalgebra.fields.field import FieldVal, PrimeField, tonelliShanks
from zkalgebra.util import encode, helpers


log = helpers.getLogger("EXTENSION")


class ExtensionField:
    """
    ExtensionField describes base[x] / (x^degree - nonResidue).

    The caller is responsible for choosing a nonResidue that makes the binomial
    irreducible. Descriptors compare by identity.
    """

    def __init__(self, base, degree, nonResidue, name=None):
        """
        Args:
            base (PrimeField or ExtensionField): the field the coefficients
                live in.
            degree (int): the degree of the extension over base, at least 2.
            nonResidue (int or base element): the beta in x^degree = beta.
            name (str): optional. A display name.
        """
        if not isinstance(base, (PrimeField, ExtensionField)):
            raise AlgebraError(f"unsupported base field {base!r}")
        if degree < 2:
            raise AlgebraError(f"extension degree must be at least 2, got {degree}")
        self.base = base
        self.degree = degree
        self.nonResidue = base.coerce(nonResidue)
        if self.nonResidue.isZero():
            raise AlgebraError("the non-residue of an extension cannot be zero")
        self.P = base.P
        self.absDegree = degree * base.absDegree
        self.order = base.order ** degree
        self.byteLen = degree * base.byteLen
        self.name = name if name else f"{base.name}^{degree}"

        baseZero = base.zero()
        self._zero = ExtFieldVal(self, (baseZero,) * degree)
        self._one = ExtFieldVal(self, (base.one(),) + (baseZero,) * (degree - 1))
        self._inv2 = base.coerce(2).inverse()

        self._frobCoeffs = {}
        self._sqrtParams = None
        self._lock = threading.RLock()

    def __repr__(self):
        return f"ExtensionField({self.name})"

    def __call__(self, coeffs):
        """
        Build an element from its coefficients, lowest degree first. Missing
        high coefficients are zero. Each coefficient is coerced into the base,
        so nested tuples and plain ints work:

            fq6(((1, 2), (3, 4), 0))

        A single int or subfield element is embedded as a constant.
        """
        if not isinstance(coeffs, (list, tuple)):
            return self.coerce(coeffs)
        if len(coeffs) > self.degree:
            raise AlgebraError(
                f"{self.name}: expected at most {self.degree} coefficients, got {len(coeffs)}"
            )
        base = self.base
        cs = [base.coerce(c) for c in coeffs]
        cs.extend(base.zero() for _ in range(self.degree - len(cs)))
        return ExtFieldVal(self, tuple(cs))

    def zero(self):
        return self._zero

    def one(self):
        return self._one

    def fromBase(self, b):
        """
        Embed an element of the base field as a constant.
        """
        b = self.base.coerce(b)
        return ExtFieldVal(self, (b,) + self._zero.coeffs[1:])

    def contains(self, x):
        """
        Whether x is an element of this field or of a field below it in the
        tower.
        """
        f = self
        while f is not None:
            if x.field is f:
                return True
            f = f.base
        return False

    def coerce(self, x):
        """
        Lift x into this field. ints and elements of any field lower in the
        tower are embedded as constants.

        Raises:
            FieldMismatchError if x belongs to an unrelated field.
        """
        if isinstance(x, ExtFieldVal) and x.field is self:
            return x
        if isinstance(x, (list, tuple)):
            return self(x)
        if isinstance(x, int) or (isinstance(x, (FieldVal, ExtFieldVal)) and self.contains(x)):
            return self.fromBase(self.base.coerce(x))
        what = x.field.name if isinstance(x, (FieldVal, ExtFieldVal)) else type(x).__name__
        raise FieldMismatchError(f"cannot convert {what} to {self.name}")

    def fromBytes(self, b):
        """
        Decode the concatenated coefficient encodings, c0 first.

        Raises:
            DecodeError on a bad length or an out of range coefficient.
        """
        encode.checkLength(b, self.byteLen, self.name)
        bl = self.base.byteLen
        return ExtFieldVal(
            self,
            tuple(self.base.fromBytes(b[i * bl : (i + 1) * bl]) for i in range(self.degree)),
        )

    def random(self, rng):
        return ExtFieldVal(self, tuple(self.base.random(rng) for _ in range(self.degree)))

    def frobeniusCoefficients(self, q, power):
        """
        The table of constants beta^(j * (q^power - 1) / k) for j in [0, k).
        With q = p these are the constants of the absolute Frobenius map. With
        q equal to the order of the base field they are the constants of the
        base-relative conjugation. Tables are built on first use and cached
        for the life of the descriptor.

        Args:
            q (int): the characteristic or the order of the base field.
            power (int): the power of q.

        Returns:
            tuple: degree base field elements.

        Raises:
            AlgebraError if the degree does not divide q^power - 1.
        """
        key = (q, power)
        coeffs = self._frobCoeffs.get(key)
        if coeffs is not None:
            return coeffs
        with self._lock:
            coeffs = self._frobCoeffs.get(key)
            if coeffs is not None:
                return coeffs
            e, rem = divmod(q ** power - 1, self.degree)
            if rem != 0:
                raise AlgebraError(
                    f"{self.name}: degree {self.degree} does not divide q^{power} - 1"
                )
            gamma = self.nonResidue.pow(e)
            cs = [self.base.one()]
            for _ in range(1, self.degree):
                cs.append(cs[-1].mul(gamma))
            coeffs = tuple(cs)
            self._frobCoeffs[key] = coeffs
            log.debug(f"built Frobenius table for {self.name}, power {power}")
        return coeffs

    def sqrtParams(self):
        """
        The Tonelli-Shanks parameters of the multiplicative group: the odd
        part, the 2-adicity and a fixed non-square. The non-square is the first
        of x, x + 1, x + 2, ... that is not a square, so the choice is
        reproducible.
        """
        if self._sqrtParams is not None:
            return self._sqrtParams
        with self._lock:
            if self._sqrtParams is None:
                oddPart, twoAdicity = self.order - 1, 0
                while oddPart % 2 == 0:
                    oddPart //= 2
                    twoAdicity += 1
                k = 0
                while True:
                    z = self((k, 1))
                    if z.legendre() == -1:
                        break
                    k += 1
                self._sqrtParams = (oddPart, twoAdicity, z)
                log.debug(f"{self.name}: sqrt non-residue found at x + {k}")
        return self._sqrtParams


class ExtFieldVal:
    """
    ExtFieldVal is an element of an ExtensionField. Arithmetic accepts other
    elements of the same field, elements of fields lower in the tower, and
    plain ints.
    """

    __slots__ = ("field", "coeffs")

    def __init__(self, field, coeffs):
        self.field = field
        self.coeffs = coeffs

    @staticmethod
    def fromBytes(field, b):
        return field.fromBytes(b)

    def _other(self, f):
        if isinstance(f, ExtFieldVal) and f.field is self.field:
            return f.coeffs
        return self.field.coerce(f).coeffs

    def add(self, f):
        return ExtFieldVal(self.field, tuple(a.add(b) for a, b in zip(self.coeffs, self._other(f))))

    def sub(self, f):
        return ExtFieldVal(self.field, tuple(a.sub(b) for a, b in zip(self.coeffs, self._other(f))))

    def negate(self):
        return ExtFieldVal(self.field, tuple(a.negate() for a in self.coeffs))

    def mulInt(self, i):
        return ExtFieldVal(self.field, tuple(a.mulInt(i) for a in self.coeffs))

    def mulBase(self, b):
        """
        mulBase scales every coefficient by an element of a field lower in the
        tower.
        """
        return ExtFieldVal(self.field, tuple(a.mul(b) for a in self.coeffs))

    def mulByNonResidue(self, b):
        """
        Multiply an element b of the base field by the non-residue of this
        field.
        """
        return b.mul(self.field.nonResidue)

    def mul(self, f):
        """
        mul multiplies two elements. Degree 2 and 3 use Karatsuba style
        formulas [BGM], other degrees use schoolbook multiplication followed
        by the reduction x^k = beta.
        """
        if isinstance(f, int):
            return self.mulInt(f)
        if not (isinstance(f, ExtFieldVal) and f.field is self.field):
            if isinstance(f, (FieldVal, ExtFieldVal)) and self.field.contains(f):
                return self.mulBase(f)
            f = self.field.coerce(f)
        a, b = self.coeffs, f.coeffs
        degree = self.field.degree
        if degree == 2:
            a0, a1 = a
            b0, b1 = b
            v0 = a0.mul(b0)
            v1 = a1.mul(b1)
            c0 = v0.add(self.mulByNonResidue(v1))
            c1 = a0.add(a1).mul(b0.add(b1)).sub(v0).sub(v1)
            return ExtFieldVal(self.field, (c0, c1))
        if degree == 3:
            a0, a1, a2 = a
            b0, b1, b2 = b
            v0 = a0.mul(b0)
            v1 = a1.mul(b1)
            v2 = a2.mul(b2)
            c0 = self.mulByNonResidue(a1.add(a2).mul(b1.add(b2)).sub(v1).sub(v2)).add(v0)
            c1 = a0.add(a1).mul(b0.add(b1)).sub(v0).sub(v1).add(self.mulByNonResidue(v2))
            c2 = a0.add(a2).mul(b0.add(b2)).sub(v0).add(v1).sub(v2)
            return ExtFieldVal(self.field, (c0, c1, c2))
        zero = self.field.base.zero()
        t = [zero] * (2 * degree - 1)
        for i, ai in enumerate(a):
            if ai.isZero():
                continue
            for j, bj in enumerate(b):
                t[i + j] = t[i + j].add(ai.mul(bj))
        for k in range(2 * degree - 2, degree - 1, -1):
            t[k - degree] = t[k - degree].add(self.mulByNonResidue(t[k]))
        return ExtFieldVal(self.field, tuple(t[:degree]))

    def square(self):
        """
        square uses complex squaring for degree 2 and the SQR2 formulas of
        [CH] for degree 3.
        """
        degree = self.field.degree
        if degree == 2:
            a0, a1 = self.coeffs
            v0 = a0.mul(a1)
            c0 = a0.add(a1).mul(a0.add(self.mulByNonResidue(a1))).sub(v0).sub(self.mulByNonResidue(v0))
            c1 = v0.add(v0)
            return ExtFieldVal(self.field, (c0, c1))
        if degree == 3:
            a0, a1, a2 = self.coeffs
            s0 = a0.square()
            ab = a0.mul(a1)
            s1 = ab.add(ab)
            s2 = a0.sub(a1).add(a2).square()
            bc = a1.mul(a2)
            s3 = bc.add(bc)
            s4 = a2.square()
            c0 = s0.add(self.mulByNonResidue(s3))
            c1 = s1.add(self.mulByNonResidue(s4))
            c2 = s1.add(s2).add(s3).sub(s0).sub(s4)
            return ExtFieldVal(self.field, (c0, c1, c2))
        return self.mul(self)

    def conjugate(self, i=1):
        """
        conjugate applies the i-th power of the base-relative Frobenius map
        x -> x^q, where q is the order of the base field. For a quadratic
        extension this is c0 - c1*x.
        """
        field = self.field
        if field.degree == 2 and i % 2 == 1:
            c0, c1 = self.coeffs
            return ExtFieldVal(field, (c0, c1.negate()))
        i %= field.degree
        if i == 0:
            return self
        gammas = field.frobeniusCoefficients(field.base.order, i)
        return ExtFieldVal(field, tuple(c.mul(g) for c, g in zip(self.coeffs, gammas)))

    def frobenius(self, power=1):
        """
        frobenius computes self^(p^power) with the cached coefficient tables,
        applying the map to each coefficient before scaling by the table.

        Raises:
            AlgebraError if the degree does not divide p^power - 1.
        """
        field = self.field
        power %= field.absDegree
        if power == 0:
            return self
        gammas = field.frobeniusCoefficients(field.P, power)
        return ExtFieldVal(
            field, tuple(c.frobenius(power).mul(g) for c, g in zip(self.coeffs, gammas))
        )

    def _adjugate(self):
        # The product of the non-trivial base-relative conjugates, so that
        # self * adjugate is the norm.
        field = self.field
        if (field.base.order - 1) % field.degree != 0:
            return None
        adj = self.conjugate(1)
        for i in range(2, field.degree):
            adj = adj.mul(self.conjugate(i))
        return adj

    def norm(self):
        """
        norm is the product of the base-relative conjugates of the element, an
        element of the base field.
        """
        field = self.field
        degree = field.degree
        if degree == 2:
            a0, a1 = self.coeffs
            return a0.square().sub(self.mulByNonResidue(a1.square()))
        if degree == 3:
            return self._cubicAdjugate()[1]
        adj = self._adjugate()
        if adj is None:
            q = field.base.order
            return self.pow((field.order - 1) // (q - 1)).coeffs[0]
        return self.mul(adj).coeffs[0]

    def _cubicAdjugate(self):
        a0, a1, a2 = self.coeffs
        c0 = a0.square().sub(self.mulByNonResidue(a1.mul(a2)))
        c1 = self.mulByNonResidue(a2.square()).sub(a0.mul(a1))
        c2 = a1.square().sub(a0.mul(a2))
        t = a0.mul(c0).add(self.mulByNonResidue(a2.mul(c1).add(a1.mul(c2))))
        return (c0, c1, c2), t

    def inverse(self):
        """
        inverse finds the multiplicative inverse with a single base field
        inversion.

        Raises:
            NotInvertibleError if the element is zero.
        """
        if self.isZero():
            raise NotInvertibleError(f"zero has no inverse in {self.field.name}")
        field = self.field
        degree = field.degree
        if degree == 2:
            a0, a1 = self.coeffs
            tInv = a0.square().sub(self.mulByNonResidue(a1.square())).inverse()
            return ExtFieldVal(field, (a0.mul(tInv), a1.mul(tInv).negate()))
        if degree == 3:
            (c0, c1, c2), t = self._cubicAdjugate()
            tInv = t.inverse()
            return ExtFieldVal(field, (c0.mul(tInv), c1.mul(tInv), c2.mul(tInv)))
        adj = self._adjugate()
        if adj is None:
            return self.pow(field.order - 2)
        return adj.mulBase(self.mul(adj).coeffs[0].inverse())

    def div(self, f):
        if isinstance(f, ExtFieldVal) and f.field is self.field:
            return self.mul(f.inverse())
        if isinstance(f, int):
            f = self.field.base.coerce(f)
        if isinstance(f, (FieldVal, ExtFieldVal)) and self.field.contains(f):
            return self.mulBase(f.inverse())
        return self.mul(self.field.coerce(f).inverse())

    def pow(self, e):
        """
        pow raises the element to a public exponent, square-and-multiply from
        the most significant bit. Negative exponents invert first.
        """
        if e < 0:
            return self.inverse().pow(-e)
        if e == 0:
            return self.field.one()
        r = self
        for bit in bin(e)[3:]:
            r = r.square()
            if bit == "1":
                r = r.mul(self)
        return r

    def legendre(self):
        """
        legendre is the quadratic character: 0, 1 or -1. An element is a
        square exactly when its norm down to the prime field is.
        """
        if self.isZero():
            return 0
        return self.norm().legendre()

    def isSquare(self):
        return self.legendre() >= 0

    def sqrt(self):
        """
        sqrt returns the square root with sgn0 = 0. Quadratic extensions use
        the norm method, which needs one square root of the norm and one of
        (c0 +/- sqrt(norm)) / 2 in the base field. Other degrees use
        Tonelli-Shanks over the multiplicative group of the extension.

        Raises:
            NoSquareRootError if the element is not a square.
        """
        if self.isZero():
            return self
        field = self.field
        if self.legendre() != 1:
            raise NoSquareRootError(f"element is not a square in {field.name}")
        if field.degree == 2:
            a0, a1 = self.coeffs
            if a1.isZero():
                if a0.isSquare():
                    r = ExtFieldVal(field, (a0.sqrt(), a1))
                else:
                    # (c*x)^2 = c^2 * beta
                    c = a0.mul(field.nonResidue.inverse()).sqrt()
                    r = ExtFieldVal(field, (a1, c))
            else:
                s = self.norm().sqrt()
                d = a0.add(s).mul(field._inv2)
                if not d.isSquare():
                    d = a0.sub(s).mul(field._inv2)
                x0 = d.sqrt()
                x1 = a1.mul(x0.add(x0).inverse())
                r = ExtFieldVal(field, (x0, x1))
        else:
            oddPart, twoAdicity, z = field.sqrtParams()
            r = tonelliShanks(self, oddPart, twoAdicity, z)
        if r.square() != self:
            raise NoSquareRootError(f"element is not a square in {field.name}")
        if r.sgn0():
            r = r.negate()
        return r

    def isZero(self):
        return all(c.isZero() for c in self.coeffs)

    def isOne(self):
        return self.coeffs[0].isOne() and all(c.isZero() for c in self.coeffs[1:])

    def sgn0(self):
        """
        sgn0 is the sign of the first non-zero coefficient, lowest degree
        first.
        """
        for c in self.coeffs:
            if not c.isZero():
                return c.sgn0()
        return 0

    def equals(self, f):
        return self.coeffs == self._other(f)

    def bytes(self):
        return b"".join(c.bytes() for c in self.coeffs)

    def hex(self):
        return self.bytes().hex()

    __add__ = add
    __radd__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __neg__ = negate
    __pow__ = pow

    def __rsub__(self, f):
        return self.field.coerce(f).sub(self)

    def __rtruediv__(self, f):
        return self.field.coerce(f).mul(self.inverse())

    def __eq__(self, f):
        if not isinstance(f, (FieldVal, ExtFieldVal, int, tuple, list)):
            return NotImplemented
        return self.equals(f)

    def __ne__(self, f):
        eq = self.__eq__(f)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        # Constants hash like the base element, and so like the int.
        if all(c.isZero() for c in self.coeffs[1:]):
            return hash(self.coeffs[0])
        return hash(self.coeffs)

    def __repr__(self):
        return f"ExtFieldVal({list(self.coeffs)}, {self.field.name})"
