"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Named prime fields that are not the base field of a supported curve, plus
the small extensions used with them by STARK provers.

  m31         2^31 - 1, the Mersenne prime. p = 3 mod 4.
  goldilocks  2^64 - 2^32 + 1. p = 1 mod 8, 2-adicity 32.
  curve25519  2^255 - 19, the base field of curve25519. p = 5 mod 8.

Together they exercise every square root strategy of PrimeField.
"""

from zkalgebra import AlgebraError
from zkalgebra.util.encode import LITTLE

from .extension import ExtensionField
from .field import PrimeField


M31 = PrimeField(2 ** 31 - 1, name="m31", byteOrder=LITTLE)
# The complex extension of m31, u^2 = -1.
CM31 = ExtensionField(M31, 2, -1, name="cm31")

Goldilocks = PrimeField(2 ** 64 - 2 ** 32 + 1, name="goldilocks", byteOrder=LITTLE)
# 7 generates the multiplicative group of goldilocks, so it is not a square
# and x^2 - 7 and x^4 - 7 are both irreducible.
GoldilocksQuadratic = ExtensionField(Goldilocks, 2, 7, name="goldilocks2")
GoldilocksQuartic = ExtensionField(Goldilocks, 4, 7, name="goldilocks4")

Curve25519 = PrimeField(2 ** 255 - 19, name="curve25519", byteOrder=LITTLE)


the_fields = {
    f.name: f
    for f in (M31, CM31, Goldilocks, GoldilocksQuadratic, GoldilocksQuartic, Curve25519)
}


def parse(name):
    """
    Get a named field.

    Args:
        name (str): the field name, e.g. "goldilocks".

    Returns:
        PrimeField or ExtensionField: the field descriptor.
    """
    try:
        return the_fields[name.lower()]
    except KeyError:
        raise AlgebraError(f"unrecognized field {name}")
