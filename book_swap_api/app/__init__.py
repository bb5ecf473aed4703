"""
Application package initializer.

The API is organised in layers: ``schemas`` define payloads and stored
entities, ``core`` holds configuration, logging, validation and
storage, ``services`` hold the per-entity logic and ``api`` exposes it
over HTTP.  Routers are grouped under ``api/<version>/``.
"""

from .main import app  # noqa: F401
