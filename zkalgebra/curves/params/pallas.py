"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Pallas parameters. Pallas and Vesta form a cycle: the base field of each is
the scalar field of the other. Field elements are encoded little-endian.

Pallas is y^2 = x^3 + 5 over Fp with order q.
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import JACOBIAN
from zkalgebra.fields.field import PrimeField
from zkalgebra.util.encode import LITTLE, hexToInt


Name = "pallas"

P = hexToInt("40000000000000000000000000000000224698fc094cf91b992d30ed00000001")
Q = hexToInt("40000000000000000000000000000000224698fc0994a8dd8c46eb2100000001")
B = 5

Fp = PrimeField(P, name="pallas.fp", byteOrder=LITTLE)
Fq = PrimeField(Q, name="pallas.fq", byteOrder=LITTLE)

# (-1, 2) is on the curve since -1 + 5 = 4.
G1 = Curve(Name, Fp, 0, B, (P - 1, 2), Q, 1, coords=JACOBIAN, scalarField=Fq)

Groups = {"g1": G1}
