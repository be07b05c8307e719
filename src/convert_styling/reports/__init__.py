"""Report rendering for migration results."""
