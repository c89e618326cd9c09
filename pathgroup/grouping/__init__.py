"""Operation grouping and base path resolution.

This package partitions API operations into resource groups and rewrites
each operation's path relative to its group's base path.

Classes:
    Grouper: Assigns operations to tag or path-segment groups.
    GroupingResult: Grouped operations plus the resolved base path.
    Operation: One HTTP operation record.
"""

from pathgroup.grouping.grouper import Grouper, group_operations
from pathgroup.grouping.operation import Operation, validate_operation
from pathgroup.grouping.paths import (
    DEFAULT_GROUP,
    resolve_common_prefix,
    strip_base_path,
    strip_group_segment,
)
from pathgroup.grouping.processor import (
    API_BASE_PATH_KEY,
    GroupingResult,
    apply_common_base_path,
    partition_operations,
)

__all__ = [
    'API_BASE_PATH_KEY',
    'DEFAULT_GROUP',
    'Grouper',
    'GroupingResult',
    'Operation',
    'apply_common_base_path',
    'group_operations',
    'partition_operations',
    'resolve_common_prefix',
    'strip_base_path',
    'strip_group_segment',
    'validate_operation',
]
