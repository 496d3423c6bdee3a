"""Input readers for the balance sheet pipeline."""
