"""
Version 1 of the screen's JSON API.
"""
