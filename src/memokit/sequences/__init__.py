"""Sequences built on the memoizing cache."""
