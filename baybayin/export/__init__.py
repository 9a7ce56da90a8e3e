"""Batch export of converted text."""
