"""Diagnostics package.

- new_years_table: always available, plain-text table
- nowruz_scatter: optional plot (requires the diagnostics extra)
"""

__all__ = ["new_years_table", "nowruz_scatter"]
