"""Ausencia como error específico para lookups de un único registro."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from robolt.core.errors import HttpError, NotFoundError


@contextmanager
def not_found_on_404() -> Iterator[None]:
    """Re-raise a 404 `HttpError` as `NotFoundError`; anything else passes through."""

    try:
        yield
    except HttpError as exc:
        if exc.status == 404 and not isinstance(exc, NotFoundError):
            raise NotFoundError(exc.status, exc.body, url=exc.url) from exc
        raise
