"""Build containers with defaults taken from :class:`ContainersConfig`."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from seqcontainers.config.models import ContainersConfig
from seqcontainers.containers import DynArray, FixedArray, LinkedList
from seqcontainers.core.result import Result


class ContainerFactory:
    """Single place where configured defaults meet container constructors.

    Explicit arguments always win over config; ``None`` means "use the
    configured default".
    """

    def __init__(self, config: ContainersConfig | None = None) -> None:
        self.config = config or ContainersConfig()
        self.logger = logging.getLogger("seqcontainers.factory")

    def dynarray(self, capacity: Optional[int] = None) -> Result[Optional[DynArray[Any]]]:
        settings = self.config.dynarray
        if capacity is None:
            capacity = settings.default_capacity
        self.logger.debug("Creating DynArray", extra={"capacity": capacity})
        return DynArray.create(capacity, growth_factor=settings.growth_factor)

    def dynarray_from(self, payloads: Sequence[Any]) -> Result[Optional[DynArray[Any]]]:
        return DynArray.from_sequence(payloads, growth_factor=self.config.dynarray.growth_factor)

    def fixed_array(self, size: Optional[int] = None) -> Result[Optional[FixedArray[Any]]]:
        if size is None:
            size = self.config.fixed_array.default_size
        self.logger.debug("Creating FixedArray", extra={"size": size})
        return FixedArray.create(size)

    def linked_list(self) -> Result[LinkedList[Any]]:
        return LinkedList.create(seek_from_nearest_end=self.config.linked_list.seek_from_nearest_end)

    def linked_list_from(self, payloads: Sequence[Any]) -> Result[Optional[LinkedList[Any]]]:
        return LinkedList.from_sequence(
            payloads,
            seek_from_nearest_end=self.config.linked_list.seek_from_nearest_end,
        )


__all__ = ["ContainerFactory"]
