"""Exporters that turn graph values into text."""
