"""Registry resolving an activity's ``target_model`` tag into a loader."""

from __future__ import annotations

import logging

from activity_fanout.domain.activity_define import is_supported_target_model
from activity_fanout.domain.errors import NotFoundError, TargetNotFoundError, ValidationError
from activity_fanout.domain.ports import TargetEntity, TargetLoader

logger = logging.getLogger(__name__)


class TargetRegistry:
    """Map registered target kinds to the callables that load them."""

    def __init__(self) -> None:
        self._loaders: dict[str, TargetLoader] = {}

    def register(self, target_model: str, loader: TargetLoader) -> None:
        if not is_supported_target_model(target_model):
            msg = f"Unsupported target model {target_model!r}"
            raise ValidationError(msg)
        self._loaders[target_model] = loader

    def load(self, target_model: str, target_id: int) -> TargetEntity:
        """Return the entity behind ``target_id`` or raise :class:`TargetNotFoundError`."""

        loader = self._loaders.get(target_model)
        if loader is None:
            logger.warning("No loader registered for target model %s", target_model)
            raise TargetNotFoundError(target_model, target_id)

        try:
            entity = loader(target_id)
        except TargetNotFoundError:
            raise
        except NotFoundError as exc:
            raise TargetNotFoundError(target_model, target_id) from exc
        if entity is None:
            raise TargetNotFoundError(target_model, target_id)
        return entity


__all__ = ["TargetRegistry"]
