"""Concrete implementations of the Core interfaces."""
