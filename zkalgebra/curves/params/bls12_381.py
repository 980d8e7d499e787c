"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

BLS12-381 parameters.

  Fq2  = Fq[u] / (u^2 + 1)
  Fq6  = Fq2[v] / (v^3 - (1 + u))
  Fq12 = Fq6[w] / (w^2 - v)

G1 is y^2 = x^3 + 4 over Fq. G2 is the M-twist y^2 = x^3 + 4(1 + u) over
Fq2. Both groups use projective coordinates.
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import PROJECTIVE
from zkalgebra.fields.extension import ExtensionField
from zkalgebra.fields.field import PrimeField
from zkalgebra.util.encode import hexToInt


Name = "bls12_381"

P = hexToInt(
    "1a0111ea397fe69a4b1ba7b6434bacd764774b84f38512bf6730d2a0f6b0f624"
    "1eabfffeb153ffffb9feffffffffaaab"
)
R = hexToInt("73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001")

Fq = PrimeField(P, name="bls12_381.fq")
Fr = PrimeField(R, name="bls12_381.fr")
Fq2 = ExtensionField(Fq, 2, -1, name="bls12_381.fq2")
Fq6 = ExtensionField(Fq2, 3, (1, 1), name="bls12_381.fq6")
Fq12 = ExtensionField(Fq6, 2, (0, 1), name="bls12_381.fq12")

B = 4
Twist = Fq2((1, 1))
B2 = Twist.mulInt(B)

G1Gen = (
    hexToInt(
        "17f1d3a73197d7942695638c4fa9ac0fc3688c4f9774b905a14e3a3f171bac58"
        "6c55e83ff97a1aeffb3af00adb22c6bb"
    ),
    hexToInt(
        "08b3f481e3aaa0f1a09e30ed741d8ae4fcf5e095d5d00af600db18cb2c04b3ed"
        "d03cc744a2888ae40caa232946c5e7e1"
    ),
)
G2Gen = (
    (
        hexToInt(
            "024aa2b2f08f0a91260805272dc51051c6e47ad4fa403b02b4510b647ae3d177"
            "0bac0326a805bbefd48056c8c121bdb8"
        ),
        hexToInt(
            "13e02b6052719f607dacd3a088274f65596bd0d09920b61ab5da61bbdc7f5049"
            "334cf11213945d57e5ac7d055d042b7e"
        ),
    ),
    (
        hexToInt(
            "0ce5d527727d6e118cc9cdc6da2e351aadfd9baa8cbdd3a76d429a695160d12c"
            "923ac9cc3baca289e193548608b82801"
        ),
        hexToInt(
            "0606c4a02ea734cc32acd2b02bc28b99cb3e287e85a763af267492ab572e99ab"
            "3f370d275cec1da1aaa9075ff05f79be"
        ),
    ),
)

H1 = hexToInt("396c8c005555e1568c00aaab0000aaab")
H2 = hexToInt(
    "5d543a95414e7f1091d50792876a202cd91de4547085abaa68a205b2e5a7ddfa"
    "628f1cb4d9e82ef21537e293a6691ae1616ec6e786f0c70cf1c38e31c7238e5"
)

G1 = Curve("bls12_381.g1", Fq, 0, B, G1Gen, R, H1, coords=PROJECTIVE, scalarField=Fr)
G2 = Curve("bls12_381.g2", Fq2, 0, B2, G2Gen, R, H2, coords=PROJECTIVE, scalarField=Fr)

Groups = {"g1": G1, "g2": G2}
