"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details
"""

from zkalgebra.curves.params import bls12_381, secp256k1
from zkalgebra.fields import params
from zkalgebra.fields.field import batchInverse


H1 = "b3d9aac9c5e43910b4385b53c7e78c21d4cd5f8e683c633aed04c233efc2e120"
H2 = "b0ba920360ea8436a216128047aab9766d8faf468895eb5090fc8241ec758896"
C12 = (((1, 2), (3, 4), (5, 6)), ((7, 8), (9, 10), (11, 12)))

Fq = secp256k1.Fq


class Test_FieldVal:
    def test_negate(self, benchmark):
        f = Fq.fromHex(H1)
        benchmark(f.negate)

    def test_add(self, benchmark):
        f1 = Fq.fromHex(H1)
        f2 = Fq.fromHex(H2)
        benchmark(f1.add, f2)

    def test_square(self, benchmark):
        f = Fq.fromHex(H1)
        benchmark(f.square)

    def test_mul(self, benchmark):
        f = Fq.fromHex(H1)
        f2 = Fq.fromHex(H2)
        benchmark(f.mul, f2)

    def test_inverse(self, benchmark):
        f = Fq.fromHex(H1)
        benchmark(f.inverse)

    def test_sqrt(self, benchmark):
        f = params.Goldilocks.fromHex(H1[:15])
        benchmark(f.square().sqrt)

    def test_batchInverse(self, benchmark):
        f = Fq.fromHex(H1)
        elements = [f.mulInt(i) for i in range(1, 65)]
        benchmark(batchInverse, elements)


class Test_ExtFieldVal:
    def test_mul_fq2(self, benchmark):
        f = bls12_381.Fq2((Fq.fromHex(H1).int(), Fq.fromHex(H2).int()))
        benchmark(f.mul, f)

    def test_mul_fq12(self, benchmark):
        f = bls12_381.Fq12(C12)
        benchmark(f.mul, f)

    def test_square_fq12(self, benchmark):
        f = bls12_381.Fq12(C12)
        benchmark(f.square)

    def test_inverse_fq12(self, benchmark):
        f = bls12_381.Fq12(C12)
        benchmark(f.inverse)

    def test_frobenius_fq12(self, benchmark):
        f = bls12_381.Fq12(C12)
        benchmark(f.frobenius, 1)
