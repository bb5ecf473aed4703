"""
Pydantic schema definitions for API payloads and stored entities.

Each entity (users, books, swap requests, feedback) defines its create
payload, its stored record and its response envelopes in its own
module.  Stored records use snake_case attributes and serialise with
camelCase JSON keys.
"""
