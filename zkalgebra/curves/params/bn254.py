"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

BN254 (alt_bn128) parameters, as used by the Ethereum precompiles of
EIP-196 and EIP-197.

  Fq2  = Fq[u] / (u^2 + 1)
  Fq6  = Fq2[v] / (v^3 - (9 + u))
  Fq12 = Fq6[w] / (w^2 - v)

G1 is y^2 = x^3 + 3 over Fq. G2 is the sextic twist y^2 = x^3 + 3/(9 + u)
over Fq2.
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import JACOBIAN
from zkalgebra.fields.extension import ExtensionField
from zkalgebra.fields.field import PrimeField


Name = "bn254"

P = 21888242871839275222246405745257275088696311157297823662689037894645226208583
R = 21888242871839275222246405745257275088548364400416034343698204186575808495617

Fq = PrimeField(P, name="bn254.fq")
Fr = PrimeField(R, name="bn254.fr")
Fq2 = ExtensionField(Fq, 2, -1, name="bn254.fq2")
Fq6 = ExtensionField(Fq2, 3, (9, 1), name="bn254.fq6")
Fq12 = ExtensionField(Fq6, 2, (0, 1), name="bn254.fq12")

B = 3
B2 = Fq2(B).div(Fq2((9, 1)))

G1Gen = (1, 2)
G2Gen = (
    (
        10857046999023057135944570762232829481370756359578518086990519993285655852781,
        11559732032986387107991004021392285783925812861821192530917403151452391805634,
    ),
    (
        8495653923123431417604973247489272438418190587263600148770280649306958101930,
        4082367875863433681332203403145435568316851327593401208105741076214120093531,
    ),
)

# The G2 cofactor is 2p - r.
H2 = 21888242871839275222246405745257275088844257914179612981679871602714643921549

G1 = Curve("bn254.g1", Fq, 0, B, G1Gen, R, 1, coords=JACOBIAN, scalarField=Fr)
G2 = Curve("bn254.g2", Fq2, 0, B2, G2Gen, R, H2, coords=JACOBIAN, scalarField=Fr)

Groups = {"g1": G1, "g2": G2}
