"""Shared models, issues, and process helpers."""
