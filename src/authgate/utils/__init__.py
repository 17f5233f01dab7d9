"""Utility helpers for authgate."""
