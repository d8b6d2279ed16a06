"""Command-line interface for topicsummary."""
