"""Writers for the rendered balance sheet."""
