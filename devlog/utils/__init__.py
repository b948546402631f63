"""Utility helpers shared across devlog."""
