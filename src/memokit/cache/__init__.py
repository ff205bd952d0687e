"""Memoization cache and key derivation."""
