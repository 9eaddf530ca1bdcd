"""Presentation layer: HTTP-shaped controllers over the Core interfaces."""
