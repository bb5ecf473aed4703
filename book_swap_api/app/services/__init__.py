"""
Service layer abstraction.

Each service encapsulates the logic for one entity type and works
against a table handed to it at construction, so the same service runs
on the SQLite store in production and the in-memory store in tests.
"""
