"""
Application package initializer.

The screen is organised the same way as a small API service: ``core``
holds configuration, logging and dependencies, ``schemas`` the pydantic
models, ``services`` the screen controller and page renderer, and
``api`` the routers.  The FastAPI application itself is built by
``main.create_app``.
"""
