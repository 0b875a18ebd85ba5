"""Pagination descriptors attached to every ``list_*`` response."""

from __future__ import annotations

from models.base import AssistantModel


class Pagination(AssistantModel):
    """Paging information for workspace-content collections."""

    refresh_url: str | None = None
    next_url: str | None = None
    total: int | None = None
    matched: int | None = None
    refresh_cursor: str | None = None
    next_cursor: str | None = None


class LogPagination(AssistantModel):
    """Paging information for log listings (cursor based, no totals)."""

    next_url: str | None = None
    matched: int | None = None
    next_cursor: str | None = None
