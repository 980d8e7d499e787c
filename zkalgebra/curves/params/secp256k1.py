"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

secp256k1 parameters. Any values should mirror exactly [SEC2] section 2.4.1.

  [SEC2] Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import JACOBIAN
from zkalgebra.fields.field import PrimeField
from zkalgebra.util.encode import hexToInt


Name = "secp256k1"

P = hexToInt("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F")
N = hexToInt("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141")
B = 7
Gx = hexToInt("79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798")
Gy = hexToInt("483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8")

Fq = PrimeField(P, name="secp256k1.fq")
Fr = PrimeField(N, name="secp256k1.fr")

G1 = Curve(Name, Fq, 0, B, (Gx, Gy), N, 1, coords=JACOBIAN, scalarField=Fr)

Groups = {"g1": G1}
