"""Shared helpers for catalog-sync tests."""
