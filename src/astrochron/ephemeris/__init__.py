"""Ephemeris backends (optional).

JPL development ephemerides read through jplephem, with the kernel fetched
by skyfield's loader when it is not on disk yet. Install with:
  pip install "astrochron[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "astrochron[ephemeris]"') from e
