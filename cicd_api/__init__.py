"""Minimal JSON API used to demonstrate a CI/CD pipeline."""

__version__ = "1.0.0"
