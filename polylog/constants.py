"""
Mathematical constants shared by the evaluators.
"""

import math

PI = math.pi
PI2 = PI * PI
ZETA2 = PI2 / 6.0  # Li2(1)
ZETA3 = 1.2020569031595942853997  # Li3(1), Apéry's constant
