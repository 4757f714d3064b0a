"""Diagnostics package.

- nutation_plot, kepler_convergence, round_trip: no ephemeris needed
- validate_reference: optional (requires ephemeris extras + DE file)
"""

__all__ = ["nutation_plot", "kepler_convergence", "round_trip", "validate_reference"]
