"""
Core calendar arithmetic, value types and invariants.

This package contains the building blocks that are independent of the wall
clock and of any formatting concerns.
"""
