"""Shared validation helpers."""
