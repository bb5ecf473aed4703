"""
HTTP layer.

``deps`` holds the dependencies that hand services to the endpoints;
versioned routers live under ``v1``.
"""
