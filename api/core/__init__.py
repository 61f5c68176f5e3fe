"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(batch loading, the in-memory store, settings, logging, errors). Keep
feature-specific rules in the corresponding feature package (e.g. `articles/`).
"""
