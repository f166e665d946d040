"""Test fixtures and helpers."""
