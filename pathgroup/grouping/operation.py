"""Operation records consumed and produced by the grouping core."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from pathgroup.exceptions import InvalidOperationError

_METHOD_KEYS = ('httpMethod', 'http_method', 'method')
_OPERATION_ID_KEYS = ('operationId', 'operation_id')
_KNOWN_KEYS = {
    'path',
    'tag',
    'baseName',
    'base_name',
    'subresourceOperation',
    'subresource_operation',
    *_METHOD_KEYS,
    *_OPERATION_ID_KEYS,
}


@dataclass
class Operation:
    """One HTTP operation from an API description.

    Attributes:
        path: URL template, e.g. "/pets/{id}". Rewritten by grouping.
        http_method: The HTTP verb. Passed through untouched.
        tag: Grouping tag, used when grouping by tag.
        operation_id: The operationId, if the description declares one.
        base_name: The resolved group name, set by grouping.
        subresource_operation: True when the rewritten path is non-empty.
        metadata: Opaque generation metadata, passed through untouched.
    """

    path: str
    http_method: str = 'GET'
    tag: str | None = None
    operation_id: str | None = None
    base_name: str | None = None
    subresource_operation: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def copy(self, **changes: Any) -> Operation:
        """Return a copy with ``changes`` applied; metadata is copied shallowly."""
        changes.setdefault('metadata', dict(self.metadata))
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Template-facing mapping with camelCase keys and metadata merged in."""
        return {
            **self.metadata,
            'path': self.path,
            'httpMethod': self.http_method,
            'tag': self.tag,
            'operationId': self.operation_id,
            'baseName': self.base_name,
            'subresourceOperation': self.subresource_operation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Operation:
        method = next((data[k] for k in _METHOD_KEYS if k in data), 'GET')
        operation_id = next((data[k] for k in _OPERATION_ID_KEYS if k in data), None)
        return cls(
            path=data.get('path'),
            http_method=str(method).upper(),
            tag=data.get('tag'),
            operation_id=operation_id,
            base_name=data.get('baseName', data.get('base_name')),
            subresource_operation=bool(
                data.get('subresourceOperation', data.get('subresource_operation', False))
            ),
            metadata={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )


def validate_operation(operation: Operation) -> None:
    """Fail fast on a record the grouping core cannot classify.

    Raises:
        InvalidOperationError: If the operation has no string path or a
            non-string tag.
    """
    if not isinstance(operation, Operation):
        raise InvalidOperationError(
            f'Expected an Operation, got {type(operation).__name__}'
        )
    if operation.path is None:
        raise InvalidOperationError(
            'Operation path must not be None',
            operation_id=operation.operation_id,
            method=operation.http_method,
        )
    if not isinstance(operation.path, str):
        raise InvalidOperationError(
            f'Operation path must be a string, got {type(operation.path).__name__}',
            operation_id=operation.operation_id,
            method=operation.http_method,
        )
    if operation.tag is not None and not isinstance(operation.tag, str):
        raise InvalidOperationError(
            f'Operation tag must be a string, got {type(operation.tag).__name__}',
            operation_id=operation.operation_id,
            method=operation.http_method,
        )
