"""Per-user task tracking: owner-scoped task queries over a pluggable store."""
