"""Plank layout and cutting plans for rectilinear floors."""

__version__ = "0.1.0"
