"""Endpoint extraction, ordering, selection and search."""

import logging
from collections.abc import Iterable
from functools import lru_cache

from pyuca import Collator

from .base import Endpoint
from .spec import SpecDocument

logger = logging.getLogger(__name__)

METHOD_ORDER = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Built once per process.
    return Collator()


def endpoint_key(method: str, path: str) -> str:
    return f"{method.upper()}:{path}"


def _method_rank(method: str) -> int:
    # Unlisted methods rank -1 and therefore sort before GET.
    return METHOD_ORDER.index(method) if method in METHOD_ORDER else -1


def path_sort_key(path: str) -> tuple:
    """Unicode collation key: punctuation before letters, lower case before upper case."""
    return (_collator().sort_key(path), path)


def _sort_key(endpoint: Endpoint) -> tuple:
    return (_method_rank(endpoint.method), path_sort_key(endpoint.path))


def extract_endpoints(doc: dict | SpecDocument) -> list[Endpoint]:
    """Extract documentable endpoints, ordered by method rank then path.

    An operation is included when it has an ``operationId``, or,
    independently, a ``summary``.
    """
    spec = doc if isinstance(doc, SpecDocument) else SpecDocument.from_raw(doc)

    endpoints: list[Endpoint] = []
    for path, methods in spec.paths.items():
        if not isinstance(methods, dict):
            continue
        for method, operation in methods.items():
            if not isinstance(operation, dict):
                continue
            if "operationId" in operation or "summary" in operation:
                endpoints.append(
                    Endpoint(path=str(path), method=str(method).upper(), operation=operation)
                )

    logger.info("Extracted %d endpoints", len(endpoints))
    return sorted(endpoints, key=_sort_key)


def select_endpoints(endpoints: list[Endpoint], keys: Iterable[str]) -> list[Endpoint]:
    """Keep endpoints whose ``METHOD:path`` key was selected, in endpoint order."""
    wanted = set()
    for key in keys:
        method, _, path = key.partition(":")
        wanted.add(endpoint_key(method, path))
    return [ep for ep in endpoints if ep.key in wanted]


def search_endpoints(endpoints: list[Endpoint], query: str | None) -> list[Endpoint]:
    """Case-insensitive match over path, method, summary and operationId."""
    if not query:
        return list(endpoints)
    query = query.lower()
    return [
        ep for ep in endpoints
        if query in ep.path.lower()
        or query in ep.method.lower()
        or query in str(ep.summary).lower()
        or query in str(ep.operation_id).lower()
    ]
