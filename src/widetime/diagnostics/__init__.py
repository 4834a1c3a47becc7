"""Diagnostics package.

- round_trip, safe_years: always available, stdlib only
- cross_check, safe_year_plot: need the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "safe_years", "cross_check", "safe_year_plot"]
