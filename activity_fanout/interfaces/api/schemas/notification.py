"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    """Representation of a consolidated notification held for a user."""

    id: int
    user_id: int
    target_model: str
    target_id: int
    action: str
    status: str
    activity_ids: list[int] = Field(default_factory=list)
    created_at: datetime


__all__ = ["NotificationRead"]
