"""Pydantic schemas for activity endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ActivityCreate(BaseModel):
    """Payload recording a user action against a target."""

    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(..., description="Identifier of the acting user")
    target_model: str = Field(..., description="Registered kind of the target, e.g. Page")
    target_id: int = Field(..., description="Identifier of the target entity")
    action: str = Field(..., description="Registered action, e.g. COMMENT or LIKE")
    event_id: int | None = Field(default=None, description="Sub-entity that triggered the activity")
    event_model: str | None = Field(default=None, description="Registered kind of the event")
    created_at: datetime | None = Field(default=None, description="Defaults to the current time")


class ActivityRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    target_model: str
    target_id: int
    action: str
    event_id: int | None = None
    event_model: str | None = None
    created_at: datetime


class ActivityRemovalResult(BaseModel):
    removed: int = Field(..., ge=0, description="Number of activities removed")


__all__ = ["ActivityCreate", "ActivityRead", "ActivityRemovalResult"]
