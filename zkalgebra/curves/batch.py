"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

Amortized operations over many points. Field inversions are the expensive
part of leaving Jacobian or projective coordinates, and Montgomery's trick
lets a whole batch share a single one.
"""

from zkalgebra import AlgebraError, InfinityError
from zkalgebra import config
from zkalgebra.fields.field import batchInverse
from zkalgebra.util import helpers

from .point import AFFINE, JACOBIAN, AffinePoint, CurvePoint, normalizeNonZeros


log = helpers.getLogger("BATCH")


__all__ = [
    "batchInverse",
    "batchNormalizeAllNonZeros",
    "batchToAffine",
    "KnowledgeCommitment",
    "multiScalarMul",
    "FixedBaseTable",
]


def batchNormalizeAllNonZeros(points):
    """
    batchNormalizeAllNonZeros replaces every Jacobian or projective point in
    the list with its Z = 1 form, using one shared field inversion. Affine
    points are left as they are. The result is the same as calling normalize
    on each point.

    Args:
        points (list): the points, none of which may be the point at infinity.
            The list is updated in place.

    Returns:
        list: the same list.

    Raises:
        InfinityError if any point is the point at infinity. The list is not
            modified in that case.
    """
    idxs = []
    for i, pt in enumerate(points):
        if pt.isZero():
            raise InfinityError(f"batch normalization: point {i} is the point at infinity")
        if not isinstance(pt, AffinePoint):
            idxs.append(i)
    zInvs = batchInverse([points[i].Z for i in idxs])
    for i, zInv in zip(idxs, zInvs):
        points[i] = points[i]._scaled(zInv)
    log.debug(f"normalized {len(idxs)} points with one inversion")
    return points


def batchToAffine(points):
    """
    batchToAffine converts every point to affine coordinates with one shared
    field inversion. Points at infinity become the affine point at infinity.

    Args:
        points (list): the points. Not modified.

    Returns:
        list(AffinePoint): the converted points, in the same order.
    """
    out = [None] * len(points)
    idxs = []
    for i, pt in enumerate(points):
        if pt.isZero():
            out[i] = pt.curve.identity(AFFINE)
        elif isinstance(pt, AffinePoint):
            out[i] = pt
        else:
            idxs.append(i)
    zInvs = batchInverse([points[i].Z for i in idxs])
    for i, zInv in zip(idxs, zInvs):
        out[i] = points[i]._affineScaled(zInv)
    return out


class KnowledgeCommitment:
    """
    KnowledgeCommitment is a pair of points (g, h), usually on two different
    curves, that are operated on together. It is the group element of
    knowledge-of-exponent commitments.
    """

    __slots__ = ("g", "h")

    def __init__(self, g, h):
        self.g = g
        self.h = h

    def __repr__(self):
        return f"KnowledgeCommitment({self.g!r}, {self.h!r})"

    def add(self, other):
        return KnowledgeCommitment(self.g.add(other.g), self.h.add(other.h))

    def sub(self, other):
        return KnowledgeCommitment(self.g.sub(other.g), self.h.sub(other.h))

    def negate(self):
        return KnowledgeCommitment(self.g.negate(), self.h.negate())

    def double(self):
        return KnowledgeCommitment(self.g.double(), self.h.double())

    def mul(self, k):
        return KnowledgeCommitment(self.g.mul(k), self.h.mul(k))

    def isZero(self):
        return self.g.isZero() and self.h.isZero()

    def normalize(self):
        return KnowledgeCommitment(self.g.normalize(), self.h.normalize())

    def isNormalized(self):
        return self.g.isNormalized() and self.h.isNormalized()

    def __add__(self, other):
        if not isinstance(other, KnowledgeCommitment):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, KnowledgeCommitment):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, k):
        if isinstance(k, (KnowledgeCommitment, CurvePoint)):
            return NotImplemented
        return self.mul(k)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, KnowledgeCommitment):
            return NotImplemented
        return self.g == other.g and self.h == other.h

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash((self.g, self.h))

    @staticmethod
    def batchNormalizeAllNonZeros(vec):
        """
        Normalize a list of commitments. Either half of a commitment may be the
        point at infinity. The non-zero g halves are normalized together with
        one inversion, zero g halves are replaced by the canonical normalized
        identity, and then the same is done for the h halves.

        Args:
            vec (list(KnowledgeCommitment)): updated in place.

        Returns:
            list: the same list.
        """
        gs = _normalizeHalves([kc.g for kc in vec])
        hs = _normalizeHalves([kc.h for kc in vec])
        for i, (g, h) in enumerate(zip(gs, hs)):
            vec[i] = KnowledgeCommitment(g, h)
        return vec


def _normalizeHalves(points):
    nonZero = [pt for pt in points if not pt.isZero()]
    batchNormalizeAllNonZeros(nonZero)
    it = iter(nonZero)
    return [pt.normalize() if pt.isZero() else next(it) for pt in points]


def _pippengerWindow(n):
    if n < 4:
        return 2
    return min(16, max(2, n.bit_length() - 1))


def multiScalarMul(points, scalars, window=None):
    """
    multiScalarMul computes sum(k_i * P_i) with Pippenger's bucket method.
    Each window of c scalar bits puts every point in the bucket of its digit,
    and the weighted bucket sum is formed with two running sums, so a window
    costs about n + 2^(c+1) additions.

    Scalars are used as given, without reduction modulo the group order.

    Args:
        points (list(CurvePoint)): points of one curve.
        scalars (list(int or FieldVal)): the scalars.
        window (int): optional. The bucket window width c.

    Returns:
        CurvePoint: the sum, in the coordinate system of the first point.
    """
    if len(points) != len(scalars):
        raise AlgebraError(f"{len(points)} points but {len(scalars)} scalars")
    if not points:
        raise AlgebraError("multi-scalar multiplication of an empty list")
    first = points[0]
    curve = first.curve
    ks = []
    pts = []
    for pt, k in zip(points, scalars):
        first._check(pt)
        k = curve.scalar(k)
        if k == 0 or pt.isZero():
            continue
        if k < 0:
            k, pt = -k, pt.negate()
        ks.append(k)
        pts.append(pt)

    # Buckets accumulate in the first coordinate system with a Z coordinate,
    # Jacobian if every input is affine. Affine inputs stay affine for mixed
    # additions and the other inputs are converted.
    coords = next((pt.coords for pt in pts if pt.coords != AFFINE), JACOBIAN)
    pts = [
        pt if pt.coords in (AFFINE, coords) else pt.toCoordinates(coords) for pt in pts
    ]
    identity = curve.identity(coords)
    if not ks:
        return identity.toCoordinates(first.coords)

    c = window if window else _pippengerWindow(len(ks))
    mask = (1 << c) - 1
    bits = max(k.bit_length() for k in ks)
    res = identity
    for start in reversed(range(0, bits, c)):
        for _ in range(c):
            res = res.double()
        buckets = [identity] * mask
        for pt, k in zip(pts, ks):
            d = (k >> start) & mask
            if d:
                buckets[d - 1] = buckets[d - 1].add(pt)
        running = identity
        acc = identity
        for b in reversed(buckets):
            running = running.add(b)
            acc = acc.add(running)
        res = res.add(acc)
    return res.toCoordinates(first.coords)


class FixedBaseTable:
    """
    FixedBaseTable precomputes the multiples d * 2^(w*i) * P of a fixed point
    P for every w-bit window i and digit d, all normalized to Z = 1 with a
    single inversion. A scalar multiplication is then one mixed addition per
    window and no doublings, which pays off when the same base point is
    multiplied many times.

    The base point must be in the prime order subgroup, because scalars are
    reduced modulo the group order.
    """

    def __init__(self, point, window=None):
        """
        Args:
            point (CurvePoint): the base point.
            window (int): optional. The window width in bits. Defaults to the
                configured fixedbasewindow.
        """
        if point.isZero():
            raise InfinityError("cannot build a fixed-base table for the point at infinity")
        curve = point.curve
        if not point.isInSubgroup():
            raise AlgebraError(f"base point is not in the prime order subgroup of {curve.name}")
        w = window if window else config.get().fixedBaseWindow
        if w < 1:
            raise AlgebraError(f"fixed-base window must be positive, got {w}")
        self.curve = curve
        self.coords = point.coords
        self.window = w
        self.numWindows = -(-curve.N.bit_length() // w)
        rowLen = (1 << w) - 1

        base = point.toCoordinates(JACOBIAN if point.coords == AFFINE else point.coords)
        self._identity = base.identity()
        flat = []
        for _ in range(self.numWindows):
            row = [base]
            for _ in range(rowLen - 1):
                row.append(row[-1].add(base))
            flat.extend(row)
            # 2^w * base
            base = row[-1].add(base)
        flat = normalizeNonZeros(flat)
        self.table = [flat[i * rowLen : (i + 1) * rowLen] for i in range(self.numWindows)]
        log.debug(
            f"built {curve.name} fixed-base table: {self.numWindows} windows of {rowLen} points"
        )

    def mul(self, k):
        """
        mul returns k * P, where k is reduced modulo the group order.

        Args:
            k (int or FieldVal): the scalar.

        Returns:
            CurvePoint: the product, in the coordinate system of P.
        """
        return self._mul(k).toCoordinates(self.coords)

    def _mul(self, k):
        k = self.curve.scalar(k) % self.curve.N
        mask = (1 << self.window) - 1
        q = self._identity
        for row in self.table:
            if k == 0:
                break
            d = k & mask
            if d:
                q = q.add(row[d - 1])
            k >>= self.window
        return q

    def batchMul(self, scalars):
        """
        batchMul multiplies the base point by every scalar. The results are
        normalized together with one shared inversion.

        Args:
            scalars (list(int or FieldVal)): the scalars.

        Returns:
            list(CurvePoint): the products, in the coordinate system of P.
        """
        res = [self._mul(k) for k in scalars]
        if self.coords == AFFINE:
            return batchToAffine(res)
        return normalizeNonZeros(res)
