"""Bundled example resume data."""
