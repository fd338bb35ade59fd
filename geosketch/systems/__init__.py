"""Editing systems: coordinate mapping, labels, hit testing, gestures, selection."""
