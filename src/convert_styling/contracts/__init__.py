"""JSON Schema contracts for run output."""
