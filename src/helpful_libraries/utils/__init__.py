"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise be rewritten in every feature package.

Scope:
- Small, stateless helpers over in-memory collections (``collections.py``)
  and sequential awaiting of per-item coroutines (``async_iteration.py``).
- No business rules, no orchestration, no I/O.
- Input collections are never mutated.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
