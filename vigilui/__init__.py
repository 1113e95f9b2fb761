"""Headless UI state components and utilities for a 2D action role-playing game."""

__version__ = "0.1.0"