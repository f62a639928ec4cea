"""Shared utilities — typing helpers and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

from typing import NoReturn


def assert_never(value: NoReturn) -> NoReturn:
    """Mark a branch that exhaustive ``match`` statements must never reach.

    Type checkers flag any call site where *value* could still be a
    live variant, so adding a variant to a closed union surfaces every
    handler that forgot about it.
    """
    raise AssertionError(f"Unhandled variant: {value!r}")


__all__: list[str] = ["assert_never"]
