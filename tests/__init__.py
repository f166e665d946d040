"""Test suite for rocketchat."""
