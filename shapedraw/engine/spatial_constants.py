"""Shared geometric constants for the shape path engine.

Ellipses are carried as regular polygons so that vertex editing and
classification work on the same representation as every other shape.
"""

import math

# Sides of the ellipse approximation. Must stay divisible by 8 so the
# 45-degree and cardinal samples land exactly on vertices.
CIRCLE_SIDES = 32

I000 = 0
I045 = CIRCLE_SIDES // 8
I090 = CIRCLE_SIDES // 4
I180 = CIRCLE_SIDES // 2
I270 = CIRCLE_SIDES // 4 * 3

COS45 = math.cos(math.pi / 4)
SIN45 = math.sin(math.pi / 4)
SQRT2 = math.sqrt(2)

# Smallest drag (px) recognised as a selection; handle sizes derive from it.
MINSELECT = 12
