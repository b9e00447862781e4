"""Pydantic schemas for watch/ignore subscriptions."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class WatcherUpdate(BaseModel):
    status: Literal["WATCH", "IGNORE"] = Field(..., description="Watch or ignore the page")


class WatcherRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    target_id: int
    status: str
    created_at: datetime | None = None


__all__ = ["WatcherRead", "WatcherUpdate"]
