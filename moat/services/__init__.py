"""Data sources behind the mock registry endpoints."""
