"""Interactive point/line diagram editor for geometry exercises."""

__version__ = "0.1.0"
