"""Conversation log models returned by ``list_logs`` / ``list_all_logs``."""

from __future__ import annotations

from models.base import AssistantModel
from models.message import MessageRequest, MessageResponse
from models.pagination import LogPagination


class Log(AssistantModel):
    """One logged message exchange."""

    request: MessageRequest | None = None
    response: MessageResponse | None = None
    log_id: str | None = None
    request_timestamp: str | None = None
    response_timestamp: str | None = None
    workspace_id: str | None = None
    language: str | None = None


class LogCollection(AssistantModel):
    logs: list[Log] | None = None
    pagination: LogPagination | None = None
