"""Use-case layer for the project type dialog.

Each module coordinates domain objects and ports without performing UI work
directly, preserving MVVM + Hexagonal boundaries.
"""
