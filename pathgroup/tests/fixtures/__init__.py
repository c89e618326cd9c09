"""Test fixtures for pathgroup tests.

This module provides sample operation records for exercising grouping.
"""

# Petstore-style operations, grouped naturally by first path segment
PETSTORE_OPERATIONS = [
    {'path': '/pets/{id}', 'method': 'get', 'tag': 'pets', 'operationId': 'getPet'},
    {'path': '/pets', 'method': 'post', 'tag': 'pets', 'operationId': 'addPet'},
    {'path': '/owners', 'method': 'get', 'tag': 'owners', 'operationId': 'listOwners'},
]

# Operations sharing a versioned prefix, grouped by tag
VERSIONED_OPERATIONS = [
    {'path': '/api/v1/pets', 'method': 'get', 'tag': 'pets', 'operationId': 'listPets'},
    {
        'path': '/api/v1/owners',
        'method': 'get',
        'tag': 'owners',
        'operationId': 'listOwners',
    },
    {
        'path': '/api/v1/pets/{id}',
        'method': 'delete',
        'tag': 'pets',
        'operationId': 'deletePet',
        'summary': 'Delete a pet',
    },
]

OPERATIONS_YAML = """\
operations:
  - path: /pets/{id}
    method: get
    tag: pets
    operationId: getPet
  - path: /pets
    method: post
    tag: pets
    operationId: addPet
  - path: /owners
    method: get
    tag: owners
    operationId: listOwners
"""

VERSIONED_OPERATIONS_YAML = """\
- path: /api/v1/pets
  method: get
  tag: pets
- path: /api/v1/owners
  method: get
  tag: owners
"""
