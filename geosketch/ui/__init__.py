"""Toolbar widgets drawn around the canvas."""
