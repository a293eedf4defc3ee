"""
Top-level package for the user management screen.

This file makes ``user_manager`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``user_manager.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
