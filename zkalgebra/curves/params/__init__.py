"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Parameters of the supported curve families. Each family module binds its
base field, scalar field, extension tower and groups as module level
constants.
"""

from zkalgebra import AlgebraError

from . import bls12_381, bn254, mnt4, pallas, secp256k1, secp256r1, vesta


the_families = {
    f.Name: f for f in (secp256k1, secp256r1, bn254, bls12_381, mnt4, pallas, vesta)
}
the_families["p256"] = secp256r1
the_families["alt_bn128"] = bn254


def parse(name):
    """
    Get the parameters of a curve family based on its name.

    Args:
        name (str): the family name, e.g. "bls12_381".

    Returns:
        module: the family module.
    """
    try:
        return the_families[name.lower()]
    except KeyError:
        raise AlgebraError(f"unrecognized curve family {name}")


def curve(name):
    """
    Get a group descriptor by name. The name is the family, optionally
    followed by the group, e.g. "secp256k1" or "bls12_381.g2". Without a group
    the family's G1 is returned.

    Args:
        name (str): the group name.

    Returns:
        Curve: the group descriptor.
    """
    familyName, _, groupName = name.partition(".")
    family = parse(familyName)
    try:
        return family.Groups[groupName.lower() if groupName else "g1"]
    except KeyError:
        raise AlgebraError(f"curve family {family.Name} has no group {groupName}")
