"""
Service layer.

``user_table_service`` owns the screen state and talks to the remote
users API; ``page_renderer`` turns that state into HTML.
"""
