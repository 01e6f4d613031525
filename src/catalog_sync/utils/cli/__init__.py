"""Command-line helpers for catalog-sync."""
