"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Prime field arithmetic. A PrimeField describes the modulus and the byte
encoding of a field family, and FieldVal is an element of that field.

FieldVal values are immutable. Every arithmetic method returns a new value,
so field elements can be shared freely between points, tables and threads.
The canonical integer representative in [0, p) is always held, which makes
equality, hashing and encoding trivial.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

  [ATKIN]: Atkin, "Probabilistic primality testing", 1992. Square roots for
    p = 5 mod 8.

  [RFC9380]: Hashing to Elliptic Curves, section 4.1 for the sgn0 convention.
"""

from itertools import count

from zkalgebra import (
    AlgebraError,
    DecodeError,
    FieldMismatchError,
    NoSquareRootError,
    NotInvertibleError,
    checkSameField,
)
from zkalgebra.util import encode


class PrimeField:
    """
    PrimeField is the descriptor of the field of integers modulo an odd prime
    p. The primality of p is assumed, not checked.

    Descriptors are compared by identity. Two descriptors built from the same
    modulus are different field families and their elements cannot be mixed.
    """

    # A prime field is the bottom of every tower.
    base = None
    degree = 1
    absDegree = 1

    def __init__(self, modulus, name=None, byteOrder=encode.BIG):
        if modulus < 3 or modulus % 2 == 0:
            raise AlgebraError(f"modulus must be an odd prime, got {modulus}")
        if byteOrder not in encode.BYTE_ORDERS:
            raise AlgebraError(f"unknown byte order {byteOrder!r}")
        self.P = modulus
        self.order = modulus
        self.name = name if name else f"F_{modulus:#x}"
        self.byteOrder = byteOrder
        self.bits = modulus.bit_length()
        self.byteLen = encode.byteLength(self.bits)

        # p - 1 = oddPart * 2^twoAdicity.
        oddPart, twoAdicity = modulus - 1, 0
        while oddPart % 2 == 0:
            oddPart //= 2
            twoAdicity += 1
        self.oddPart = oddPart
        self.twoAdicity = twoAdicity

        self._zero = FieldVal(self, 0)
        self._one = FieldVal(self, 1)

        # The fixed non-square used by Tonelli-Shanks. The first non-residue
        # counting up from 2 is used so the choice is reproducible.
        self.nonSquare = None
        if modulus % 8 == 1:
            self.nonSquare = next(
                FieldVal(self, z) for z in count(2) if pow(z, (modulus - 1) // 2, modulus) == modulus - 1
            )

    def __repr__(self):
        return f"PrimeField({self.name})"

    def __call__(self, n):
        """
        The element n mod p. n can be any integer, including negative ones.
        """
        return FieldVal(self, n)

    def zero(self):
        return self._zero

    def one(self):
        return self._one

    def fromHex(self, hx):
        """
        fromHex parses a big-endian hex literal of any width and reduces it
        modulo p.

        Args:
            hx (str): the hex string, optionally prefixed with 0x.

        Returns:
            FieldVal: the element.
        """
        return FieldVal(self, encode.hexToInt(hx))

    def fromBytes(self, b):
        """
        fromBytes decodes the fixed width encoding produced by FieldVal.bytes.

        Args:
            b (bytes-like): exactly byteLen bytes in the field byte order.

        Returns:
            FieldVal: the element.

        Raises:
            DecodeError if the length is wrong or the integer is >= p.
        """
        encode.checkLength(b, self.byteLen, self.name)
        n = encode.intFromBytes(b, self.byteOrder)
        if n >= self.P:
            raise DecodeError(f"{self.name}: encoded integer is not less than the modulus")
        return _fv(self, n)

    def coerce(self, x):
        """
        Lift x into this field.

        Args:
            x (int or FieldVal): the value.

        Returns:
            FieldVal: an element of this field.

        Raises:
            FieldMismatchError if x is an element of another field.
        """
        if isinstance(x, FieldVal):
            if x.field is not self:
                raise FieldMismatchError(f"{x.field.name} element is not in {self.name}")
            return x
        if isinstance(x, int):
            return FieldVal(self, x)
        raise FieldMismatchError(f"cannot convert {type(x).__name__} to {self.name}")

    def random(self, rng):
        """
        A uniformly random element drawn from the caller's random source. The
        field never seeds randomness on its own.

        Args:
            rng (random.Random-like): anything with a randrange method.
        """
        return _fv(self, rng.randrange(self.P))


def _fv(field, n):
    """
    Build a FieldVal from an integer that is already reduced.
    """
    f = object.__new__(FieldVal)
    f.field = field
    f.n = n
    return f


def tonelliShanks(a, oddPart, twoAdicity, nonSquare):
    """
    Tonelli-Shanks square root. This is algorithm 3.34 from [GECC] written
    against the element interface, so it works for prime fields and for
    extension fields alike.

    Args:
        a: a non-zero element.
        oddPart (int): the odd part of the order of the multiplicative group.
        twoAdicity (int): the exponent of 2 in that order.
        nonSquare: a quadratic non-residue of the same field.

    Returns:
        A square root of a.

    Raises:
        NoSquareRootError if a is not a square.
    """
    m = twoAdicity
    c = nonSquare.pow(oddPart)
    t = a.pow(oddPart)
    r = a.pow((oddPart + 1) // 2)
    while not t.isOne():
        # Find the least i such that t^(2^i) = 1.
        i, t2 = 0, t
        while not t2.isOne():
            t2 = t2.square()
            i += 1
            if i == m:
                raise NoSquareRootError("element is not a quadratic residue")
        b = c
        for _ in range(m - i - 1):
            b = b.square()
        m = i
        c = b.square()
        t = t.mul(c)
        r = r.mul(b)
    return r


def batchInverse(elements):
    """
    batchInverse inverts every element of the list with a single field
    inversion using Montgomery's trick. It works with elements of any field.

        prefix[i] = a[0] * ... * a[i]
        inv = prefix[n-1]^-1
        a[i]^-1 = inv * prefix[i-1], then inv = inv * a[i]

    Args:
        elements (list): field elements of one field.

    Returns:
        list: the inverses, in the same order.

    Raises:
        NotInvertibleError if any element is zero. The message names the index.
    """
    if not elements:
        return []
    prefix = []
    acc = None
    for i, a in enumerate(elements):
        if a.isZero():
            raise NotInvertibleError(f"batch inversion: element {i} is zero")
        acc = a if acc is None else acc.mul(a)
        prefix.append(acc)
    inv = acc.inverse()
    out = [None] * len(elements)
    for i in range(len(elements) - 1, 0, -1):
        out[i] = inv.mul(prefix[i - 1])
        inv = inv.mul(elements[i])
    out[0] = inv
    return out


def _operator(method):
    def op(self, f):
        if not isinstance(f, (FieldVal, int)):
            return NotImplemented
        return method(self, f)

    op.__name__ = method.__name__
    return op


class FieldVal:
    """
    FieldVal is an element of a PrimeField. Arithmetic is available both as
    methods and as the usual operators. Plain ints are accepted wherever
    another element is and are reduced into the field first.

        F = PrimeField(101)
        x = F(5).mul(F(30)).add(1)   # 5 * 30 + 1 = 50 (mod 101)
        y = F(5) * 30 + 1            # the same
    """

    __slots__ = ("field", "n")

    def __init__(self, field, n=0):
        self.field = field
        self.n = n % field.P

    @staticmethod
    def fromInt(field, i):
        """
        fromInt reduces the integer into the field. Always succeeds.

        Args:
            field (PrimeField): the field.
            i (int): the integer, may be negative or wider than the modulus.

        Returns:
            FieldVal: the element.
        """
        return FieldVal(field, i)

    @staticmethod
    def fromHex(field, hexString):
        return field.fromHex(hexString)

    @staticmethod
    def fromBytes(field, b):
        return field.fromBytes(b)

    def _other(self, f):
        if isinstance(f, FieldVal):
            checkSameField(self, f)
            return f.n
        if isinstance(f, int):
            return f % self.field.P
        raise FieldMismatchError(
            f"cannot combine {self.field.name} element with {type(f).__name__}"
        )

    def add(self, f):
        n = self.n + self._other(f)
        P = self.field.P
        return _fv(self.field, n - P if n >= P else n)

    def sub(self, f):
        n = self.n - self._other(f)
        return _fv(self.field, n + self.field.P if n < 0 else n)

    def negate(self):
        return _fv(self.field, (self.field.P - self.n) if self.n else 0)

    def mul(self, f):
        return _fv(self.field, self.n * self._other(f) % self.field.P)

    def mulInt(self, i):
        """
        mulInt multiplies by a small integer. The integer doesn't need to be
        reduced.
        """
        return _fv(self.field, self.n * i % self.field.P)

    def square(self):
        return _fv(self.field, self.n * self.n % self.field.P)

    def inverse(self):
        """
        inverse finds the modular multiplicative inverse of the field value.

        Returns:
            FieldVal: the inverse.

        Raises:
            NotInvertibleError if the value is zero.
        """
        if self.n == 0:
            raise NotInvertibleError(f"zero has no inverse in {self.field.name}")
        # The extended Euclidean algorithm in pow is considerably faster than
        # Fermat's a^(p-2) for a single inversion.
        return _fv(self.field, pow(self.n, -1, self.field.P))

    def div(self, f):
        if not isinstance(f, FieldVal):
            f = _fv(self.field, self._other(f))
        checkSameField(self, f)
        return self.mul(f.inverse())

    def pow(self, e):
        """
        pow raises the value to a public integer exponent with left-to-right
        square-and-multiply. Negative exponents invert first.

        Raises:
            NotInvertibleError for a negative exponent and a zero value.
        """
        if e < 0:
            return self.inverse().pow(-e)
        return _fv(self.field, pow(self.n, e, self.field.P))

    def legendre(self):
        """
        legendre computes the Legendre symbol with Euler's criterion.

        Returns:
            int: 0 for zero, 1 for a non-zero square, -1 otherwise.
        """
        if self.n == 0:
            return 0
        P = self.field.P
        return 1 if pow(self.n, (P - 1) // 2, P) == 1 else -1

    def isSquare(self):
        return self.legendre() >= 0

    def sqrt(self):
        """
        sqrt returns a square root of the value. The strategy is picked from
        the shape of the modulus:

          p = 3 mod 4: a^((p+1)/4)
          p = 5 mod 8: Atkin's method [ATKIN]
          p = 1 mod 8: Tonelli-Shanks

        Of the two roots, the one with an even canonical integer (sgn0 = 0) is
        returned, so the result is stable across calls and implementations.

        Returns:
            FieldVal: the even square root.

        Raises:
            NoSquareRootError if the value is a quadratic non-residue.
        """
        if self.n == 0:
            return self
        field = self.field
        P = field.P
        if pow(self.n, (P - 1) // 2, P) != 1:
            raise NoSquareRootError(f"element is not a square in {field.name}")
        if P % 4 == 3:
            r = pow(self.n, (P + 1) // 4, P)
        elif P % 8 == 5:
            # t = (2a)^((p-5)/8), i = 2a*t^2, r = a*t*(i-1)
            a2 = 2 * self.n % P
            t = pow(a2, (P - 5) // 8, P)
            i = a2 * t * t % P
            r = self.n * t * (i - 1) % P
        else:
            r = tonelliShanks(self, field.oddPart, field.twoAdicity, field.nonSquare).n
        if r * r % P != self.n:
            raise NoSquareRootError(f"element is not a square in {field.name}")
        if r & 1:
            r = P - r
        return _fv(field, r)

    def frobenius(self, power=1):
        """
        The Frobenius map is the identity on the prime field.
        """
        return self

    def isZero(self):
        return self.n == 0

    def isOne(self):
        return self.n == 1

    def isOdd(self):
        return self.n & 1 == 1

    def sgn0(self):
        """
        sgn0 is the parity of the canonical representative [RFC9380].
        """
        return self.n & 1

    def equals(self, f):
        """
        equals returns whether or not the two field values are the same.

        Raises:
            FieldMismatchError if f belongs to a different field.
        """
        return self.n == self._other(f)

    def int(self):
        """The canonical integer in [0, p)."""
        return self.n

    def bytes(self):
        """
        bytes encodes the value with the fixed width and byte order of the
        field.

        Returns:
            bytes: byteLen bytes.
        """
        return encode.intToBytes(self.n, self.field.byteLen, self.field.byteOrder)

    def hex(self):
        return self.bytes().hex()

    # Operators defer to the other operand when it isn't a prime field value,
    # so that an extension element on the right can embed this one.
    __add__ = __radd__ = _operator(add)
    __sub__ = _operator(sub)
    __mul__ = __rmul__ = _operator(mul)
    __truediv__ = _operator(div)
    __neg__ = negate
    __pow__ = pow

    @_operator
    def __rsub__(self, f):
        return _fv(self.field, self._other(f)).sub(self)

    @_operator
    def __rtruediv__(self, f):
        return _fv(self.field, self._other(f)).mul(self.inverse())

    def __eq__(self, f):
        if not isinstance(f, (FieldVal, int)):
            return NotImplemented
        return self.equals(f)

    def __ne__(self, f):
        eq = self.__eq__(f)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        # Same as the canonical int, which compares equal.
        return hash(self.n)

    def __int__(self):
        return self.n

    def __repr__(self):
        return f"FieldVal({self.n:#x}, {self.field.name})"
