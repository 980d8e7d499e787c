"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Vesta parameters, the other half of the Pallas/Vesta cycle. Vesta is
y^2 = x^3 + 5 over Fq with order p. The fields are shared with pallas.
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import JACOBIAN

from . import pallas


Name = "vesta"

P = pallas.Q
Q = pallas.P
B = 5

Fp = pallas.Fq
Fq = pallas.Fp

G1 = Curve(Name, Fp, 0, B, (P - 1, 2), Q, 1, coords=JACOBIAN, scalarField=Fq)

Groups = {"g1": G1}
