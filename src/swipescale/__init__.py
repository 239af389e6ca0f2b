"""Visualise mouse DPI × sensitivity as on-screen swipe distance."""

__version__ = "0.1.0"
