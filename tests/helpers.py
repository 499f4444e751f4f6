"""
Test utilities and helpers for oapiviews tests.

This module provides factory functions for building canonical documents
and small assertion helpers.
"""

from __future__ import annotations

import copy
from typing import Any


def make_operation(
    tags: list[str] | None = None,
    security: list[dict[str, list[str]]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build an operation object."""
    operation: dict[str, Any] = dict(extra)
    if tags is not None:
        operation["tags"] = list(tags)
    if security is not None:
        operation["security"] = copy.deepcopy(security)
    operation.setdefault("responses", {"200": {"description": "OK"}})
    return operation


def make_document(
    paths: dict[str, Any],
    tags: list[dict[str, Any]] | None = None,
    **sections: Any,
) -> dict[str, Any]:
    """
    Build a canonical document around a ``paths`` mapping.

    Extra keyword arguments are added as top-level sections.
    """
    document: dict[str, Any] = {
        "openapi": "3.0.3",
        "info": {"title": "notifications-backend API", "version": "1.0"},
        "servers": [{"url": "http://localhost:8085"}],
    }
    if tags is not None:
        document["tags"] = tags
    document["paths"] = paths
    document["components"] = {
        "securitySchemes": {
            "SecurityScheme": {"type": "http", "scheme": "basic"},
        },
    }
    document.update(sections)
    return document


def canonical_document() -> dict[str, Any]:
    """
    Build a canonical document covering every audience.

    Layout:
        - notifications: root path, a secured path, a mixed public/private path
        - integrations: a mixed path and a private-only path
        - internal: a public and a private-only path
        - the canonical document endpoints themselves
    """
    return make_document(
        tags=[
            {"name": "notifications", "description": "Notifications"},
            {"name": "integrations", "description": "Integrations"},
            {"name": "private", "description": "Hidden operations"},
        ],
        paths={
            "/openapi.json": {"get": make_operation(tags=["openapi"])},
            "/api/notifications/v1.0/openapi.json": {
                "get": make_operation(tags=["notifications"]),
            },
            "/api/notifications/v1.0": {
                "get": make_operation(tags=["notifications"], operationId="root"),
            },
            "/api/notifications/v1.0/events": {
                "get": make_operation(
                    tags=["notifications"],
                    security=[{"SecurityScheme": ["admin"]}],
                    operationId="getEvents",
                ),
            },
            "/api/notifications/v1.0/notifications/eventTypes/{eventTypeId}/behaviorGroups": {
                "parameters": [{"name": "eventTypeId", "in": "path", "required": True}],
                "get": make_operation(tags=["notifications"], operationId="getBehaviorGroups"),
                "put": make_operation(
                    tags=["notifications", "private"],
                    security=[{"SecurityScheme": ["write"]}],
                    operationId="updateBehaviorGroups",
                ),
            },
            "/api/integrations/v1.0/endpoints": {
                "get": make_operation(
                    tags=["integrations"],
                    security=[{"SecurityScheme": ["read"]}, {"Other": ["x"]}],
                    operationId="getEndpoints",
                ),
                "post": make_operation(
                    tags=["integrations", "private"],
                    security=[{"SecurityScheme": ["write"]}],
                    operationId="createEndpoint",
                ),
            },
            "/api/integrations/v1.0/endpoints/{id}/test": {
                "post": make_operation(tags=["integrations", "private"], operationId="testEndpoint"),
            },
            "/internal/status": {
                "get": make_operation(tags=["internal"], operationId="getStatus"),
            },
            "/internal/admin": {
                "put": make_operation(tags=["private"], operationId="adminUpdate"),
            },
        },
    )


def operation_ids(view: dict[str, Any]) -> set[str]:
    """Collect the operationIds present in a view."""
    return {
        operation["operationId"]
        for path_item in view["paths"].values()
        for operation in path_item.values()
        if isinstance(operation, dict) and "operationId" in operation
    }
