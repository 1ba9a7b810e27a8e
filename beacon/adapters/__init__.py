"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (local project
    storage, directory-watch registration, crash reporting) used by use
    cases.

Dependencies:
    Individual submodules depend on filesystem APIs, the standard logging
    module, and domain protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
