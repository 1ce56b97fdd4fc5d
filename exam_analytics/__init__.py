"""Occupational exam absence analytics service."""
