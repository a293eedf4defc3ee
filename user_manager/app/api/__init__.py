"""
API package containing versioned routes.

Version subpackages expose a top-level ``router``.  The HTML page router
(``v1/endpoints/page.py``) is not versioned: ``main`` mounts it at the
site root.
"""
