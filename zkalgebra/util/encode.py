"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Integer <-> bytes helpers used by the field and point codecs.
"""

from zkalgebra import DecodeError


BIG = "big"
LITTLE = "little"
BYTE_ORDERS = (BIG, LITTLE)


def byteLength(bits):
    """
    The number of bytes needed to hold an integer of the given bit length.

    Args:
        bits (int): The bit length.

    Returns:
        int: ceil(bits / 8).
    """
    return (bits + 7) // 8


def intToBytes(i, length, byteorder=BIG):
    """
    Encodes a non-negative integer to a fixed-width byte string.

    Args:
        i (int): The integer.
        length (int): The width of the encoding in bytes.
        byteorder (str): "big" or "little".

    Returns:
        bytes: The encoded integer.
    """
    return i.to_bytes(length, byteorder=byteorder)


def intFromBytes(b, byteorder=BIG):
    """
    Decodes an unsigned integer from bytes.

    Args:
        b (bytes-like): The encoded integer.
        byteorder (str): "big" or "little".

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, byteorder)


def hexToInt(hx):
    """
    Parse a hexadecimal literal of any width. An optional 0x prefix and
    embedded underscores or whitespace are accepted, so that long constants
    can be wrapped across lines.

    Args:
        hx (str): The hex string.

    Returns:
        int: The parsed integer.

    Raises:
        DecodeError if the string is not hexadecimal.
    """
    s = "".join(hx.split()).replace("_", "")
    neg = s.startswith("-")
    if neg:
        s = s[1:]
    if s[:2].lower() == "0x":
        s = s[2:]
    if not s:
        raise DecodeError(f"empty hex literal {hx!r}")
    try:
        v = int(s, 16)
    except ValueError:
        raise DecodeError(f"invalid hex literal {hx!r}")
    return -v if neg else v


def checkLength(b, length, what):
    """
    Check that the byte string has exactly the expected length.

    Args:
        b (bytes-like): The bytes.
        length (int): The expected length.
        what (str): Description of the decoded value for error messages.

    Raises:
        DecodeError if the length is wrong.
    """
    if len(b) != length:
        raise DecodeError(f"{what}: expected {length} bytes, got {len(b)}")
