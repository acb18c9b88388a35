"""
Numerical constants for gear phase calculations.

This module centralizes all numerical constants used by the core angle
functions, the validation layer and the output formatters.

MODIFICATION GUIDELINES:
- Changing the tie epsilon or default tolerance changes meshing results
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_RAD, _DEG)

Constants are grouped by category:
- Angles: full and half turn in radians
- Meshing: thresholds used to judge tooth/gap proximity
- Tooth counts: argument limits
- Display: formatting of reports
"""

from math import pi

# =============================================================================
# Angles
# =============================================================================

FULL_TURN_RAD: float = 2 * pi
HALF_TURN_RAD: float = pi

# =============================================================================
# Meshing Thresholds
# =============================================================================

# Default "near" threshold for is_near_tooth / is_near_gap.
# Only applied when the caller omits the tolerance; an explicit 0.0 is kept.
DEFAULT_NEAR_TOLERANCE_RAD: float = 0.01

# Tooth and gap distances closer than this are treated as a tie (neutral side)
# when judging whether two gears interleave at the contact line.
MESH_TIE_EPSILON_RAD: float = 0.001

# =============================================================================
# Tooth Counts
# =============================================================================

MIN_TEETH: int = 1

# =============================================================================
# Display
# =============================================================================

DISPLAY_PRECISION_DIGITS: int = 4
