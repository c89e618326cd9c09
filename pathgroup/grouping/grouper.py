"""Partitioning of operations into resource groups.

This module provides the Grouper class that assigns each operation to exactly
one group, keyed either by its declared tag or by the first segment of its
path. Groups keep operations in the order they were encountered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pathgroup.config import GroupingConfig, GroupingMode
from pathgroup.exceptions import ConfigurationError
from pathgroup.grouping.operation import Operation, validate_operation
from pathgroup.grouping.paths import (
    DEFAULT_GROUP,
    split_segments,
    strip_group_segment,
)

logger = logging.getLogger(__name__)


def coerce_mode(mode: GroupingMode | str) -> GroupingMode:
    """Return ``mode`` as a GroupingMode.

    Raises:
        ConfigurationError: If ``mode`` is not one of the recognised modes.
    """
    if isinstance(mode, GroupingMode):
        return mode
    try:
        return GroupingMode(mode)
    except ValueError as e:
        allowed = ', '.join(m.value for m in GroupingMode)
        raise ConfigurationError(
            f"Unknown grouping mode '{mode}', expected one of: {allowed}",
            field='mode',
        ) from e


class Grouper:
    """Assigns operations to groups according to a GroupingConfig.

    In tag mode the group key is the operation's tag and paths are left
    alone. In path mode the key is the first path segment (``"default"`` for
    root paths); the segment is stripped from the path, ``base_name`` is set
    to the key and ``subresource_operation`` records whether anything is left.

    Input operations are never modified; the returned groups hold copies.

    Example:
        >>> grouper = Grouper(GroupingConfig(mode=GroupingMode.PATH))
        >>> groups = grouper.group([Operation(path='/pets/{id}')])
        >>> groups['pets'][0].path
        '/{id}'
    """

    def __init__(self, config: GroupingConfig):
        self.config = config
        self.mode = coerce_mode(config.mode)

    def group(self, operations: Iterable[Operation]) -> dict[str, list[Operation]]:
        """Partition operations into an insertion-ordered mapping of groups.

        Args:
            operations: Operations in declaration order.

        Returns:
            Mapping from group key to the operations assigned to it.

        Raises:
            InvalidOperationError: If an operation has no path.
        """
        groups: dict[str, list[Operation]] = {}

        for operation in operations:
            validate_operation(operation)
            if self.mode is GroupingMode.TAG:
                key, assigned = self._assign_by_tag(operation)
            else:
                key, assigned = self._assign_by_path(operation)
            groups.setdefault(key, []).append(assigned)

        logger.debug(
            f'Grouped operations by {self.mode.value} into {len(groups)} group(s): '
            f'{", ".join(groups)}'
        )
        return groups

    def _assign_by_tag(self, operation: Operation) -> tuple[str, Operation]:
        key = operation.tag
        if not key:
            logger.debug(
                f'{operation.http_method} {operation.path} has no tag, '
                f'using {DEFAULT_GROUP!r}'
            )
            key = DEFAULT_GROUP
        return key, operation.copy()

    def _assign_by_path(self, operation: Operation) -> tuple[str, Operation]:
        key = split_segments(operation.path)[0]
        if not key:
            return DEFAULT_GROUP, operation.copy(base_name=DEFAULT_GROUP)

        path = strip_group_segment(operation.path, key)
        return key, operation.copy(
            path=path,
            base_name=key,
            subresource_operation=bool(path),
        )


def group_operations(
    operations: Iterable[Operation],
    mode: GroupingMode | str,
) -> dict[str, list[Operation]]:
    """Convenience function to group operations with a given mode."""
    return Grouper(GroupingConfig(mode=coerce_mode(mode))).group(operations)
