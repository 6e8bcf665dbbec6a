"""Renderers for history and committed files."""
