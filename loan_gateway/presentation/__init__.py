"""Presentation layer - HTTP adapter."""
