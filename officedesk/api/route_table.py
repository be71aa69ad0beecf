"""Startup checks over the registered route table."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Any

from fastapi import FastAPI
from fastapi.routing import APIRoute

logger = logging.getLogger(__name__)


def iter_api_routes(routes: Iterable[Any]) -> Iterator[Any]:
    """Yield every API route with its full path, descending into included routers.

    Older FastAPI releases copy an included router's routes into the parent
    with the prefix applied. Newer ones keep the router as one entry that
    expands, through ``effective_route_contexts()``, into per-route contexts
    exposing the same ``path``, ``methods`` and ``dependant`` as an APIRoute.
    """
    for route in routes:
        expand = getattr(route, "effective_route_contexts", None)
        if callable(expand):
            for context in expand():
                if isinstance(getattr(context, "original_route", None), APIRoute):
                    yield context
        elif isinstance(route, APIRoute):
            yield route


def route_keys(app: FastAPI) -> list[tuple[str, str]]:
    """Return every (method, path) pair served by the app's API routes."""
    keys: list[tuple[str, str]] = []
    for route in iter_api_routes(app.router.routes):
        for method in sorted(route.methods):
            keys.append((method, route.path))
    return keys


def ensure_unique_routes(app: FastAPI) -> None:
    """Fail startup if two handlers claim the same method and path.

    Starlette dispatches to the first match only, so a second registration
    would never run.
    """
    keys = route_keys(app)
    duplicates = sorted(key for key, count in Counter(keys).items() if count > 1)
    if duplicates:
        formatted = ", ".join(f"{method} {path}" for method, path in duplicates)
        raise RuntimeError(f"Duplicate route registrations: {formatted}")
    logger.debug("Route table verified: %d routes", len(keys))
