"""Base path resolution and the grouping entry point.

Grouping by tag says nothing about path hierarchy, so after tag grouping a
second pass resolves one base path shared by the whole operation set, strips
it from every path and records it for the rendering stage. Grouping by path
segment already rewrites paths per group and needs no second pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pathgroup.config import GroupingConfig, GroupingMode
from pathgroup.grouping.grouper import Grouper
from pathgroup.grouping.operation import Operation
from pathgroup.grouping.paths import resolve_common_prefix, strip_base_path

logger = logging.getLogger(__name__)

API_BASE_PATH_KEY = 'apiBasePath'
BASE_NAME_KEY = 'baseName'


@dataclass
class GroupingResult:
    """Grouped operations plus the base path resolved for them.

    Attributes:
        groups: Group key to operations, in first-seen order.
        api_base_path: The shared base path, ``''`` when resolution found
            none, or None when no resolution was run (path-segment mode).
        base_name: The top-level base name, ``''`` when resolution found no
            base path and None otherwise; a non-empty base path is recorded
            on each operation instead.
    """

    groups: dict[str, list[Operation]] = field(default_factory=dict)
    api_base_path: str | None = None
    base_name: str | None = None

    @property
    def operations(self) -> list[Operation]:
        """All operations, group by group, in order."""
        return [operation for ops in self.groups.values() for operation in ops]

    def __iter__(self) -> Iterator[tuple[str, list[Operation]]]:
        return iter(self.groups.items())

    def count_operations(self) -> int:
        return sum(len(ops) for ops in self.groups.values())

    def to_template_context(self) -> dict[str, Any]:
        """Build the mapping handed to the rendering stage.

        ``apiBasePath`` and ``baseName`` are only present when a base path
        was resolved, so an empty base path stays distinguishable from one
        that was never computed.
        """
        context: dict[str, Any] = {
            'operations': {
                key: [operation.to_dict() for operation in ops]
                for key, ops in self.groups.items()
            }
        }
        if self.api_base_path is not None:
            context[API_BASE_PATH_KEY] = self.api_base_path
        if self.base_name is not None:
            context[BASE_NAME_KEY] = self.base_name
        return context


def apply_common_base_path(groups: dict[str, list[Operation]]) -> GroupingResult:
    """Resolve and strip the base path shared by every operation in ``groups``.

    The prefix is resolved over the whole operation set, not per group. When
    it is non-empty it is stripped from each path and becomes every
    operation's ``base_name``; when it is empty paths and names are kept.
    Either way ``subresource_operation`` is set from the remaining path.

    Args:
        groups: Tag groups as produced by the Grouper.

    Returns:
        A GroupingResult holding rewritten copies and the resolved base path.
    """
    paths = [operation.path for ops in groups.values() for operation in ops]
    if not paths:
        return GroupingResult(groups={})

    base_path = resolve_common_prefix(paths)
    logger.debug(f'Resolved base path {base_path!r} across {len(paths)} operation(s)')

    rewritten: dict[str, list[Operation]] = {}
    for key, ops in groups.items():
        rewritten[key] = []
        for operation in ops:
            if base_path:
                path = strip_base_path(operation.path, base_path)
                updated = operation.copy(
                    path=path,
                    base_name=base_path,
                    subresource_operation=bool(path),
                )
            else:
                updated = operation.copy(subresource_operation=bool(operation.path))
            rewritten[key].append(updated)

    return GroupingResult(
        groups=rewritten,
        api_base_path=base_path,
        base_name=None if base_path else '',
    )


def partition_operations(
    operations: Iterable[Operation],
    config: GroupingConfig,
) -> GroupingResult:
    """Group operations and rewrite their paths relative to their base path.

    Args:
        operations: Operations in declaration order. They are not modified.
        config: Grouping configuration selecting tag or path-segment mode.

    Returns:
        The grouped, rewritten operations. In tag mode the result also
        carries the base path shared by all operations.

    Raises:
        InvalidOperationError: If an operation has no path.
        ConfigurationError: If the grouping mode is not recognised.
    """
    grouper = Grouper(config)
    groups = grouper.group(operations)

    if grouper.mode is GroupingMode.TAG:
        return apply_common_base_path(groups)
    return GroupingResult(groups=groups)
