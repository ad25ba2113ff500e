"""Acceptable success codes per kind of resource operation.

A 2xx answer outside the declared set is still a success; the client only
logs a warning so that upstream inconsistencies (200 vs 201 on creation)
never turn into hard failures.
"""

READ: frozenset[int] = frozenset({200})
CREATED: frozenset[int] = frozenset({200, 201})
WRITE: frozenset[int] = frozenset({200})
DELETE: frozenset[int] = frozenset({200, 204})


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300
