"""
1980 IAU Theory of Nutation (Seidelmann 1982), 106 terms.

Each row is ((i1, i2, i3, i4, i5) multipliers, (period [days], A, B, C, D)) and
contributes
    Δψ += (A + B T) sin φ,   Δε += (C + D T) cos φ,
    φ = i1 l + i2 l' + i3 F + i4 D + i5 Ω,
with A..D in units of 0.0001".
"""

NUTATION_TERMS = (
    ((0, 0, 0, 0, 1), (-6798.4, -171996.0, -174.2, 92025.0, 8.9)),
    ((0, 0, 2, -2, 2), (182.6, -13187.0, -1.6, 5736.0, -3.1)),
    ((0, 0, 2, 0, 2), (13.7, -2274.0, -0.2, 977.0, -0.5)),
    ((0, 0, 0, 0, 2), (-3399.2, 2062.0, 0.2, -895.0, 0.5)),
    ((0, -1, 0, 0, 0), (-365.3, -1426.0, 3.4, 54.0, -0.1)),
    ((1, 0, 0, 0, 0), (27.6, 712.0, 0.1, -7.0, 0.0)),
    ((0, 1, 2, -2, 2), (121.7, -517.0, 1.2, 224.0, -0.6)),
    ((0, 0, 2, 0, 1), (13.6, -386.0, -0.4, 200.0, 0.0)),
    ((1, 0, 2, 0, 2), (9.1, -301.0, 0.0, 129.0, -0.1)),
    ((0, -1, 2, -2, 2), (365.2, 217.0, -0.5, -95.0, 0.3)),
    ((-1, 0, 0, 2, 0), (31.8, 158.0, 0.0, -1.0, 0.0)),
    ((0, 0, 2, -2, 1), (177.8, 129.0, 0.1, -70.0, 0.0)),
    ((-1, 0, 2, 0, 2), (27.1, 123.0, 0.0, -53.0, 0.0)),
    ((1, 0, 0, 0, 1), (27.7, 63.0, 0.1, -33.0, 0.0)),
    ((0, 0, 0, 2, 0), (14.8, 63.0, 0.0, -2.0, 0.0)),
    ((-1, 0, 2, 2, 2), (9.6, -59.0, 0.0, 26.0, 0.0)),
    ((-1, 0, 0, 0, 1), (-27.4, -58.0, -0.1, 32.0, 0.0)),
    ((1, 0, 2, 0, 1), (9.1, -51.0, 0.0, 27.0, 0.0)),
    ((-2, 0, 0, 2, 0), (-205.9, -48.0, 0.0, 1.0, 0.0)),
    ((-2, 0, 2, 0, 1), (1305.5, 46.0, 0.0, -24.0, 0.0)),
    ((0, 0, 2, 2, 2), (7.1, -38.0, 0.0, 16.0, 0.0)),
    ((2, 0, 2, 0, 2), (6.9, -31.0, 0.0, 13.0, 0.0)),
    ((2, 0, 0, 0, 0), (13.8, 29.0, 0.0, -1.0, 0.0)),
    ((1, 0, 2, -2, 2), (23.9, 29.0, 0.0, -12.0, 0.0)),
    ((0, 0, 2, 0, 0), (13.6, 26.0, 0.0, -1.0, 0.0)),
    ((0, 0, 2, -2, 0), (173.3, -22.0, 0.0, 0.0, 0.0)),
    ((-1, 0, 2, 0, 1), (27.0, 21.0, 0.0, -10.0, 0.0)),
    ((0, 2, 0, 0, 0), (182.6, 17.0, -0.1, 0.0, 0.0)),
    ((0, 2, 2, -2, 2), (91.3, -16.0, 0.1, 7.0, 0.0)),
    ((-1, 0, 0, 2, 1), (32.0, 16.0, 0.0, -8.0, 0.0)),
    ((0, 1, 0, 0, 1), (386.0, -15.0, 0.0, 9.0, 0.0)),
    ((1, 0, 0, -2, 1), (-31.7, -13.0, 0.0, 7.0, 0.0)),
    ((0, -1, 0, 0, 1), (-346.6, -12.0, 0.0, 6.0, 0.0)),
    ((2, 0, -2, 0, 0), (-1095.2, 11.0, 0.0, 0.0, 0.0)),
    ((-1, 0, 2, 2, 1), (9.5, -10.0, 0.0, 5.0, 0.0)),
    ((1, 0, 2, 2, 2), (5.6, -8.0, 0.0, 3.0, 0.0)),
    ((0, -1, 2, 0, 2), (14.2, -7.0, 0.0, 3.0, 0.0)),
    ((0, 0, 2, 2, 1), (7.1, -7.0, 0.0, 3.0, 0.0)),
    ((1, 1, 0, -2, 0), (-34.8, -7.0, 0.0, 0.0, 0.0)),
    ((0, 1, 2, 0, 2), (13.2, 7.0, 0.0, -3.0, 0.0)),
    ((-2, 0, 0, 2, 1), (-199.8, -6.0, 0.0, 3.0, 0.0)),
    ((0, 0, 0, 2, 1), (14.8, -6.0, 0.0, 3.0, 0.0)),
    ((2, 0, 2, -2, 2), (12.8, 6.0, 0.0, -3.0, 0.0)),
    ((1, 0, 0, 2, 0), (9.6, 6.0, 0.0, 0.0, 0.0)),
    ((1, 0, 2, -2, 1), (23.9, 6.0, 0.0, -3.0, 0.0)),
    ((0, 0, 0, -2, 1), (-14.7, -5.0, 0.0, 3.0, 0.0)),
    ((0, -1, 2, -2, 1), (346.6, -5.0, 0.0, 3.0, 0.0)),
    ((2, 0, 2, 0, 1), (6.9, -5.0, 0.0, 3.0, 0.0)),
    ((1, -1, 0, 0, 0), (29.8, 5.0, 0.0, 0.0, 0.0)),
    ((1, 0, 0, -1, 0), (411.8, -4.0, 0.0, 0.0, 0.0)),
    ((0, 0, 0, 1, 0), (29.5, -4.0, 0.0, 0.0, 0.0)),
    ((0, 1, 0, -2, 0), (-15.4, -4.0, 0.0, 0.0, 0.0)),
    ((1, 0, -2, 0, 0), (-26.9, 4.0, 0.0, 0.0, 0.0)),
    ((2, 0, 0, -2, 1), (212.3, 4.0, 0.0, -2.0, 0.0)),
    ((0, 1, 2, -2, 1), (119.6, 4.0, 0.0, -2.0, 0.0)),
    ((1, 1, 0, 0, 0), (25.6, -3.0, 0.0, 0.0, 0.0)),
    ((1, -1, 0, -1, 0), (-3232.9, -3.0, 0.0, 0.0, 0.0)),
    ((-1, -1, 2, 2, 2), (9.8, -3.0, 0.0, 1.0, 0.0)),
    ((0, -1, 2, 2, 2), (7.2, -3.0, 0.0, 1.0, 0.0)),
    ((1, -1, 2, 0, 2), (9.4, -3.0, 0.0, 1.0, 0.0)),
    ((3, 0, 2, 0, 2), (5.5, -3.0, 0.0, 1.0, 0.0)),
    ((-2, 0, 2, 0, 2), (1615.7, -3.0, 0.0, 1.0, 0.0)),
    ((1, 0, 2, 0, 0), (9.1, 3.0, 0.0, 0.0, 0.0)),
    ((-1, 0, 2, 4, 2), (5.8, -2.0, 0.0, 1.0, 0.0)),
    ((1, 0, 0, 0, 2), (27.8, -2.0, 0.0, 1.0, 0.0)),
    ((-1, 0, 2, -2, 1), (-32.6, -2.0, 0.0, 1.0, 0.0)),
    ((0, -2, 2, -2, 1), (6786.3, -2.0, 0.0, 1.0, 0.0)),
    ((-2, 0, 0, 0, 1), (-13.7, -2.0, 0.0, 1.0, 0.0)),
    ((2, 0, 0, 0, 1), (13.8, 2.0, 0.0, -1.0, 0.0)),
    ((3, 0, 0, 0, 0), (9.2, 2.0, 0.0, 0.0, 0.0)),
    ((1, 1, 2, 0, 2), (8.9, 2.0, 0.0, -1.0, 0.0)),
    ((0, 0, 2, 1, 2), (9.3, 2.0, 0.0, -1.0, 0.0)),
    ((1, 0, 0, 2, 1), (9.6, -1.0, 0.0, 0.0, 0.0)),
    ((1, 0, 2, 2, 1), (5.6, -1.0, 0.0, 1.0, 0.0)),
    ((1, 1, 0, -2, 1), (-34.7, -1.0, 0.0, 0.0, 0.0)),
    ((0, 1, 0, 2, 0), (14.2, -1.0, 0.0, 0.0, 0.0)),
    ((0, 1, 2, -2, 0), (117.5, -1.0, 0.0, 0.0, 0.0)),
    ((0, 1, -2, 2, 0), (-329.8, -1.0, 0.0, 0.0, 0.0)),
    ((1, 0, -2, 2, 0), (23.8, -1.0, 0.0, 0.0, 0.0)),
    ((1, 0, -2, -2, 0), (-9.5, -1.0, 0.0, 0.0, 0.0)),
    ((1, 0, 2, -2, 0), (32.8, -1.0, 0.0, 0.0, 0.0)),
    ((1, 0, 0, -4, 0), (-10.1, -1.0, 0.0, 0.0, 0.0)),
    ((2, 0, 0, -4, 0), (-15.9, -1.0, 0.0, 0.0, 0.0)),
    ((0, 0, 2, 4, 2), (4.8, -1.0, 0.0, 0.0, 0.0)),
    ((0, 0, 2, -1, 2), (25.4, -1.0, 0.0, 0.0, 0.0)),
    ((-2, 0, 2, 4, 2), (7.3, -1.0, 0.0, 1.0, 0.0)),
    ((2, 0, 2, 2, 2), (4.7, -1.0, 0.0, 0.0, 0.0)),
    ((0, -1, 2, 0, 1), (14.2, -1.0, 0.0, 0.0, 0.0)),
    ((0, 0, -2, 0, 1), (-13.6, -1.0, 0.0, 0.0, 0.0)),
    ((0, 0, 4, -2, 2), (12.7, 1.0, 0.0, 0.0, 0.0)),
    ((0, 1, 0, 0, 2), (409.2, 1.0, 0.0, 0.0, 0.0)),
    ((1, 1, 2, -2, 2), (22.5, 1.0, 0.0, -1.0, 0.0)),
    ((3, 0, 2, -2, 2), (8.7, 1.0, 0.0, 0.0, 0.0)),
    ((-2, 0, 2, 2, 2), (14.6, 1.0, 0.0, -1.0, 0.0)),
    ((-1, 0, 0, 0, 2), (-27.3, 1.0, 0.0, -1.0, 0.0)),
    ((0, 0, -2, 2, 1), (-169.0, 1.0, 0.0, 0.0, 0.0)),
    ((0, 1, 2, 0, 1), (13.1, 1.0, 0.0, 0.0, 0.0)),
    ((-1, 0, 4, 0, 2), (9.1, 1.0, 0.0, 0.0, 0.0)),
    ((2, 1, 0, -2, 0), (131.7, 1.0, 0.0, 0.0, 0.0)),
    ((2, 0, 0, 2, 0), (7.1, 1.0, 0.0, 0.0, 0.0)),
    ((2, 0, 2, -2, 1), (12.8, 1.0, 0.0, -1.0, 0.0)),
    ((2, 0, -2, 0, 1), (-943.2, 1.0, 0.0, 0.0, 0.0)),
    ((1, -1, 0, -2, 0), (-29.3, 1.0, 0.0, 0.0, 0.0)),
    ((-1, 0, 0, 1, 1), (-388.3, 1.0, 0.0, 0.0, 0.0)),
    ((-1, -1, 0, 2, 1), (35.0, 1.0, 0.0, 0.0, 0.0)),
    ((0, 1, 0, 1, 0), (27.3, 1.0, 0.0, 0.0, 0.0)),
)
