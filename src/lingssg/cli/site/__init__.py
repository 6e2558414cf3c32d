"""Site commands."""
