"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details
"""

import random

import pytest

from zkalgebra import (
    AlgebraError,
    DecodeError,
    FieldMismatchError,
    NoSquareRootError,
    NotInvertibleError,
)
from zkalgebra.curves.params import bls12_381, pallas, secp256k1
from zkalgebra.fields import params
from zkalgebra.fields.field import FieldVal, PrimeField, batchInverse
from zkalgebra.util.encode import LITTLE


FIELDS = [
    params.M31,
    params.Goldilocks,
    secp256k1.Fq,
    bls12_381.Fq,
    pallas.Fp,
]


def test_descriptor():
    F = PrimeField(17, name="f17")
    assert F.byteLen == 1
    assert F.bits == 5
    assert F.oddPart == 1
    assert F.twoAdicity == 4
    assert F.nonSquare == 3
    assert repr(F) == "PrimeField(f17)"

    assert params.Goldilocks.twoAdicity == 32
    assert pallas.Fp.twoAdicity == 32
    assert secp256k1.Fq.byteLen == 32
    assert bls12_381.Fq.byteLen == 48
    # No Tonelli-Shanks non-square is needed unless p = 1 mod 8.
    assert params.M31.nonSquare is None

    for modulus in (2, 1, 15 * 2):
        with pytest.raises(AlgebraError):
            PrimeField(modulus)
    with pytest.raises(AlgebraError):
        PrimeField(101, byteOrder="middle")


def test_fromInt():
    F = secp256k1.Fq
    P = F.P
    tests = [
        (0, 0),
        (1, 1),
        (-1, P - 1),
        (P, 0),
        (P + 5, 5),
        (-P - 5, P - 5),
        (2 ** 300, pow(2, 300, P)),
    ]
    for i, (n, want) in enumerate(tests):
        assert FieldVal.fromInt(F, n).int() == want, f"test {i}"
        assert F(n) == want, f"test {i}"

    assert FieldVal.fromHex(F, "0x10") == 16
    assert F.fromHex("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC30").isOne()
    assert repr(F(255)) == "FieldVal(0xff, secp256k1.fq)"


def test_axioms():
    rng = random.Random(0)
    for F in FIELDS:
        zero, one = F.zero(), F.one()
        for _ in range(20):
            a, b, c = F.random(rng), F.random(rng), F.random(rng)
            assert a.add(b) == b.add(a)
            assert a.mul(b) == b.mul(a)
            assert a.add(b).add(c) == a.add(b.add(c))
            assert a.mul(b).mul(c) == a.mul(b.mul(c))
            assert a.mul(b.add(c)) == a.mul(b).add(a.mul(c))
            assert a.add(a.negate()) == zero
            assert a.sub(b) == a.add(b.negate())
            assert a.add(zero) == a
            assert a.mul(one) == a
            assert a.square() == a.mul(a)
            assert a.mulInt(3) == a.add(a).add(a)
            if not a.isZero():
                assert a.mul(a.inverse()) == one
                assert a.inverse().inverse() == a
            if not b.isZero():
                assert a.div(b).mul(b) == a

        with pytest.raises(NotInvertibleError):
            zero.inverse()
        with pytest.raises(ZeroDivisionError):
            one.div(zero)
        assert zero.negate() == zero


def test_operators():
    F = params.M31
    a = F(5)
    assert a + 3 == 8
    assert 3 + a == 8
    assert a - 7 == F.P - 2
    assert 3 - a == F(-2)
    assert a * 2 == 10
    assert 2 * a == 10
    assert -a == F.P - 5
    assert (1 / F(2)) * 2 == 1
    assert a / a == 1
    assert a ** 3 == 125
    assert a ** -1 == a.inverse()
    assert a != 6
    assert a == F(5 + F.P)
    assert int(a) == 5
    assert len({F(1), F(1 + F.P), F(2)}) == 2
    assert a.__eq__("5") is NotImplemented


def test_hash():
    for F in FIELDS:
        tests = [0, 1, 5, F.P - 1]
        for i, n in enumerate(tests):
            a = F(n)
            assert a == n, f"{F.name} test {i}"
            assert hash(a) == hash(n), f"{F.name} test {i}"
            assert n in {a}, f"{F.name} test {i}"
            assert a in {n}, f"{F.name} test {i}"
            assert {a: "x"}[n] == "x", f"{F.name} test {i}"
        assert len({F(3), 3, F(3 + F.P)}) == 1, F.name


def test_pow():
    F = PrimeField(101)
    assert F(2).pow(10) == 1024 % 101
    assert F(2).pow(0).isOne()
    assert F(0).pow(0).isOne()
    assert F(0).pow(5).isZero()
    # Fermat's little theorem.
    assert F(37).pow(100).isOne()
    assert F(3).pow(-2).mul(9).isOne()
    with pytest.raises(NotInvertibleError):
        F(0).pow(-1)


def test_mismatch():
    F1 = PrimeField(101, name="a")
    F2 = PrimeField(101, name="b")
    with pytest.raises(FieldMismatchError):
        F1(1).add(F2(1))
    with pytest.raises(FieldMismatchError):
        F1(1) * F2(1)
    with pytest.raises(FieldMismatchError):
        F1(1).equals(F2(1))
    with pytest.raises(FieldMismatchError):
        F1.coerce(F2(3))
    with pytest.raises(FieldMismatchError):
        F1.coerce("3")
    with pytest.raises(FieldMismatchError):
        secp256k1.Fq(1).add(secp256k1.Fr(1))
    assert F1.coerce(F1(3)) == 3
    assert F1.coerce(104) == 3


def test_legendre():
    F = PrimeField(13)
    tests = [
        (0, 0),
        (1, 1),
        (4, 1),
        (3, 1),
        (10, 1),
        (2, -1),
        (5, -1),
    ]
    for i, (n, want) in enumerate(tests):
        assert F(n).legendre() == want, f"test {i}"
        assert F(n).isSquare() == (want >= 0), f"test {i}"


def test_sqrt_small():
    """
    Square roots in each of the three branches, checked by hand. The even
    root is always returned.
    """
    tests = [
        # p = 3 mod 4
        (11, 5, 4),
        (11, 3, 6),
        # p = 5 mod 8, Atkin
        (13, 4, 2),
        (13, 3, 4),
        (13, 10, 6),
        # p = 1 mod 8, Tonelli-Shanks
        (17, 2, 6),
        (17, 8, 12),
        (17, 16, 4),
    ]
    for i, (p, a, want) in enumerate(tests):
        F = PrimeField(p)
        assert F(a).sqrt() == want, f"test {i}"

    for p in (11, 13, 17):
        F = PrimeField(p)
        assert F(0).sqrt().isZero()
        for n in range(1, p):
            x = F(n)
            if x.isSquare():
                r = x.sqrt()
                assert r.square() == x
                assert not r.isOdd()
            else:
                with pytest.raises(NoSquareRootError):
                    x.sqrt()


def test_sqrt():
    rng = random.Random(0)
    nonSquares = [
        (params.M31, params.M31(-1)),
        (params.Curve25519, params.Curve25519(2)),
        (params.Goldilocks, params.Goldilocks(7)),
        (pallas.Fp, pallas.Fp.nonSquare),
        (bls12_381.Fq, bls12_381.Fq(-1)),
        (secp256k1.Fq, secp256k1.Fq(-1)),
    ]
    for F, nonSquare in nonSquares:
        for _ in range(10):
            a = F.random(rng)
            s = a.square()
            r = s.sqrt()
            assert r.square() == s
            assert r.sgn0() == 0
            assert r == a or r == a.negate()
            # Deterministic.
            assert s.sqrt() == r

        assert nonSquare.legendre() == -1
        with pytest.raises(NoSquareRootError):
            nonSquare.sqrt()
        with pytest.raises(NoSquareRootError):
            nonSquare.mul(F(4)).sqrt()


def test_bytes():
    F = secp256k1.Fq
    b = F(1).bytes()
    assert len(b) == 32
    assert b == bytes(31) + b"\x01"
    assert F(0x0102).hex() == "00" * 30 + "0102"

    M = params.M31
    assert M.byteOrder == LITTLE
    assert M(1).bytes() == b"\x01\x00\x00\x00"
    assert M.fromBytes(b"\x02\x01\x00\x00") == 0x0102
    assert pallas.Fp(1).bytes() == b"\x01" + bytes(31)

    rng = random.Random(0)
    for Fld in FIELDS:
        a = Fld.random(rng)
        enc = a.bytes()
        assert len(enc) == Fld.byteLen
        assert FieldVal.fromBytes(Fld, enc) == a

    tests = [
        (M, b"\xff\xff\xff\x7f"),  # p itself
        (M, b"\xff\xff\xff\xff"),
        (M, b"\x01\x00\x00"),
        (M, b""),
        (F, F.P.to_bytes(32, "big")),
        (F, bytes(33)),
    ]
    for i, (Fld, b) in enumerate(tests):
        with pytest.raises(DecodeError):
            Fld.fromBytes(b)


def test_batchInverse():
    rng = random.Random(0)
    F = bls12_381.Fq
    elements = [F.random(rng) for _ in range(17)]
    invs = batchInverse(elements)
    assert len(invs) == len(elements)
    for a, aInv in zip(elements, invs):
        assert aInv == a.inverse()

    assert batchInverse([]) == []
    assert batchInverse([F(2)]) == [F(2).inverse()]

    with pytest.raises(NotInvertibleError, match="element 2"):
        batchInverse([F(1), F(2), F(0), F(3)])


def test_random():
    F = params.Goldilocks
    a = [F.random(random.Random(0)) for _ in range(2)]
    assert a[0] == a[1]
    assert 0 <= a[0].int() < F.P
