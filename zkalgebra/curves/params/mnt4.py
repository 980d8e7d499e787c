"""
Copyright (c) 2026, the zkalgebra developers
See LICENSE for details

MNT4-298 parameters, the embedding degree 4 cycle partner of MNT6-298.

  Fq2 = Fq[u] / (u^2 - 17)

G1 is y^2 = x^3 + 2x + b over Fq. G2 is the quadratic twist
y^2 = x^3 + 2*17 x + 17*b*u over Fq2, with twist u.
"""

from zkalgebra.curves.curve import Curve
from zkalgebra.curves.point import PROJECTIVE
from zkalgebra.fields.extension import ExtensionField
from zkalgebra.fields.field import PrimeField


Name = "mnt4"

P = 475922286169261325753349249653048451545124879242694725395555128576210262817955800483758081
R = 475922286169261325753349249653048451545124878552823515553267735739164647307408490559963137

Fq = PrimeField(P, name="mnt4.fq")
Fr = PrimeField(R, name="mnt4.fr")
NonResidue = 17
Fq2 = ExtensionField(Fq, 2, NonResidue, name="mnt4.fq2")

A = 2
B = 423894536526684178289416011533888240029318103673896002803341544124054745019340795360841685

Twist = Fq2((0, 1))
A2 = Fq2((A * NonResidue, 0))
B2 = Fq2((0, B * NonResidue))

G1Gen = (
    60760244141852568949126569781626075788424196370144486719385562369396875346601926534016838,
    363732850702582978263902770815145784459747722357071843971107674179038674942891694705904306,
)
G2Gen = (
    (
        438374926219350099854919100077809681842783509163790991847867546339851681564223481322252708,
        37620953615500480110935514360923278605464476459712393277679280819942849043649216370485641,
    ),
    (
        37437409008528968268352521034936931842973546441370663118543015118291998305624025037512482,
        424621479598893882672393190337420680597584695892317197646113820787463109735345923009077489,
    ),
)

# #E(Fq) = r. The twist has order (q + 1 - t)(q + 1 + t), so the G2
# cofactor is q + 1 + t = 2q + 2 - r.
H2 = 2 * P + 2 - R

G1 = Curve("mnt4.g1", Fq, A, B, G1Gen, R, 1, coords=PROJECTIVE, scalarField=Fr)
G2 = Curve("mnt4.g2", Fq2, A2, B2, G2Gen, R, H2, coords=PROJECTIVE, scalarField=Fr)

Groups = {"g1": G1, "g2": G2}
