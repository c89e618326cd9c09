"""pathgroup - Group API operations into resources for server code generation.

pathgroup takes the operations of a parsed API description and partitions
them into resource groups, either by declared tag or by first path segment,
rewriting each operation's path relative to its group's base path. The
result is handed to a template stage that emits one resource class per group.

Quick Start:
    >>> from pathgroup import GroupingConfig, GroupingMode, Operation
    >>> from pathgroup import partition_operations
    >>>
    >>> result = partition_operations(
    ...     [Operation(path='/pets/{id}'), Operation(path='/owners')],
    ...     GroupingConfig(mode=GroupingMode.PATH),
    ... )
    >>> list(result.groups)
    ['pets', 'owners']

CLI Usage:
    $ pathgroup group operations.yaml
    $ pathgroup group operations.yaml --use-tags --json
"""

from importlib.metadata import PackageNotFoundError, version

from pathgroup.config import (
    GeneratorOptions,
    GroupingConfig,
    GroupingMode,
    get_config,
)
from pathgroup.exceptions import (
    ConfigurationError,
    InvalidOperationError,
    OperationLoadError,
    PathGroupError,
)
from pathgroup.grouping import (
    Grouper,
    GroupingResult,
    Operation,
    partition_operations,
    resolve_common_prefix,
)
from pathgroup.loader import load_operations

__all__ = [
    # Grouping
    'Grouper',
    'GroupingResult',
    'Operation',
    'partition_operations',
    'resolve_common_prefix',
    'load_operations',
    # Configuration
    'GeneratorOptions',
    'GroupingConfig',
    'GroupingMode',
    'get_config',
    # Exceptions
    'PathGroupError',
    'ConfigurationError',
    'InvalidOperationError',
    'OperationLoadError',
]

try:
    __version__ = version('pathgroup')
except PackageNotFoundError:
    __version__ = 'unknown'
