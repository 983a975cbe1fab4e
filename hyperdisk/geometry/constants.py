# geometry/constants.py
"""Constants for geometric calculations."""

# Default tolerance for floating-point comparisons
EPSILON = 1e-9
