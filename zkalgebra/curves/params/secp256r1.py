"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

secp256r1 (NIST P-256) parameters from [SEC2] section 2.4.2. The a = -3
coefficient exercises the general doubling formulas.

  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import JACOBIAN
from zkalgebra.fields.field import PrimeField
from zkalgebra.util.encode import hexToInt


Name = "secp256r1"

P = hexToInt("FFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF")
N = hexToInt("FFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551")
A = P - 3
B = hexToInt("5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B")
Gx = hexToInt("6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296")
Gy = hexToInt("4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5")

Fq = PrimeField(P, name="secp256r1.fq")
Fr = PrimeField(N, name="secp256r1.fr")

G1 = Curve(Name, Fq, A, B, (Gx, Gy), N, 1, coords=JACOBIAN, scalarField=Fr)

Groups = {"g1": G1}
