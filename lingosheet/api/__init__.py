"""HTTP surface for the checklist engine."""
