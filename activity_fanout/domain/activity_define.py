"""Registered target kinds, event kinds and actions for activity records.

These values are persisted verbatim in the ``activity`` table, so existing
names must never change.
"""

from __future__ import annotations

MODEL_PAGE = "Page"
MODEL_COMMENT = "Comment"

ACTION_COMMENT = "COMMENT"
ACTION_LIKE = "LIKE"
ACTION_UPDATE = "UPDATE"

SUPPORTED_TARGET_MODELS: tuple[str, ...] = (MODEL_PAGE,)
SUPPORTED_EVENT_MODELS: tuple[str, ...] = (MODEL_COMMENT,)
SUPPORTED_ACTIONS: tuple[str, ...] = (ACTION_COMMENT, ACTION_LIKE, ACTION_UPDATE)


def is_supported_target_model(name: object) -> bool:
    return name in SUPPORTED_TARGET_MODELS


def is_supported_event_model(name: object) -> bool:
    return name in SUPPORTED_EVENT_MODELS


def is_supported_action(name: object) -> bool:
    return name in SUPPORTED_ACTIONS


__all__ = [
    "ACTION_COMMENT",
    "ACTION_LIKE",
    "ACTION_UPDATE",
    "MODEL_COMMENT",
    "MODEL_PAGE",
    "SUPPORTED_ACTIONS",
    "SUPPORTED_EVENT_MODELS",
    "SUPPORTED_TARGET_MODELS",
    "is_supported_action",
    "is_supported_event_model",
    "is_supported_target_model",
]
