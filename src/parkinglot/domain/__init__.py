"""Immutable lot state, pure transitions and read-only queries."""
