"""Loading operation records from YAML or JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from pathgroup.exceptions import OperationLoadError
from pathgroup.grouping.operation import Operation

logger = logging.getLogger(__name__)


def _read(path: Path) -> Any:
    text = path.read_text()
    if path.suffix == '.json':
        return json.loads(text)
    return yaml.safe_load(text)


def load_operations(source: str | Path) -> list[Operation]:
    """Load operation records from a YAML or JSON file.

    The file holds either a list of operation mappings or a mapping with an
    ``operations`` list. Each mapping needs at least a ``path``; ``method``,
    ``tag`` and ``operationId`` are optional and anything else is kept as
    metadata.

    Args:
        source: Path to the file.

    Returns:
        The operations in file order.

    Raises:
        OperationLoadError: If the file cannot be read or has the wrong shape.
    """
    path = Path(source)
    try:
        data = _read(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise OperationLoadError(str(source), cause=e) from e

    if isinstance(data, dict):
        if 'operations' not in data:
            raise OperationLoadError(str(source), cause="missing 'operations' list")
        data = data['operations']

    if data is None:
        logger.warning(f'{source} contains no operations')
        return []

    if not isinstance(data, list):
        raise OperationLoadError(
            str(source), cause=f'expected a list of operations, got {type(data).__name__}'
        )

    operations = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise OperationLoadError(
                str(source), cause=f'operation #{index} is not a mapping'
            )
        if not isinstance(item.get('path'), str):
            raise OperationLoadError(
                str(source), cause=f'operation #{index} has no string path'
            )
        if item.get('tag') is not None and not isinstance(item['tag'], str):
            raise OperationLoadError(
                str(source), cause=f'operation #{index} has a non-string tag'
            )
        operations.append(Operation.from_dict(item))

    logger.debug(f'Loaded {len(operations)} operation(s) from {source}')
    return operations
