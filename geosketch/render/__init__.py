"""Pygame rendering: the canvas painter and the window it is presented in."""
