"""Diagnostics package.

Optional tools (need `astrochron[diagnostics]` and, for the JPL comparison,
`astrochron[ephemeris]` plus a kernel).
"""

__all__ = ["validate_theory"]
