"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every route family uses
(DB pool, error classification, logging). Keep resource-specific SQL and
response shaping in the corresponding package (e.g. `articles/`).
"""
