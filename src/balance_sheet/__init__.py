"""balance_sheet package.

Contains modules for reading dated expense and revenue entries, folding each
series onto a 12-month grid, merging the two grids into a signed monthly
balance, and writing the result back out as JSON.

Architecture:
- Input JSON → validated entries → per-series month grid → merged balance sheet
- Pandas is used for per-slot summation
- Pydantic models validate input and shape the output
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
