"""Streamed translation service client."""
