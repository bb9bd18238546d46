"""Shared helpers used across harbor-analyst packages."""
