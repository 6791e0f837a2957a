"""A terminal typing tutor for learning keyboard layouts: courses, a checked typing field, menus and the full-screen app."""

__version__ = "0.1.0"