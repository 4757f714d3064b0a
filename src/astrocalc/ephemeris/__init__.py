"""Ephemeris adapters (optional).

Thin wrappers around JPL development ephemerides, used to check the
analytic theories. Install with:
  pip install "astrocalc[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import de422  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "astrocalc[ephemeris]"') from e
