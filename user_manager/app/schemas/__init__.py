"""
Pydantic schema definitions for the screen.

Remote user records are not validated; only locally owned state (the
new-user draft, the display rows and the view state) has a schema.
"""
