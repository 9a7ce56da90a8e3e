"""Immutable mapping tables and font registry."""
