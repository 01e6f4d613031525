"""Shared utilities for catalog-sync."""
