"""Utility helpers for SavGolKit."""
