"""Diagnostics package.

- new_years_table, pretty_month: plain text, always available
- year_lengths: plots, needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "year_lengths"]
