"""DevOps API client library.

This package provides a typed, testable interface to the DevOps API, which
manages engineers, developer teams, operations teams and DevOps teams.

Architecture:
- client.py: HTTP transport with a bounded timeout and status classification
- models.py: Immutable entity dataclasses (Engineer, Developer, Operations, DevOps)
- codec.py: JSON body <-> entity conversion
- base.py: Shared CRUD surface for one collection
- engineers.py / developers.py / operations.py / devops.py: Per-kind services
- exceptions.py: Typed exceptions for error handling

Usage:
    from app.core.devops import DevOpsClient, EngineerService, Engineer

    client = DevOpsClient("http://localhost:8080")
    engineers = EngineerService(client)
    alice = engineers.create(Engineer(name="Alice", email="alice@example.com"))
    alice = engineers.get(alice.id)

Limitations:
- Team membership is changed by reading the team, recomputing its engineers
  and updating the whole team; there is no add/remove member call.
- Calls block for up to the client timeout and cannot be cancelled from here.
"""
from .client import (
    DevOpsClient,
    new_client,
    REQUEST_TIMEOUT,
    ENDPOINT_ENV_VAR,
)
from .exceptions import (
    DevOpsError,
    ConfigurationError,
    TransportError,
    RemoteError,
    NotFoundError,
    DecodeError,
    EncodeError,
    InvalidRequestError,
)
from .models import (
    Engineer,
    Developer,
    Operations,
    DevOps,
)
from .codec import decode, decode_list, encode
from .base import ResourceService
from .engineers import (
    EngineerService,
    list_engineers,
    get_engineer,
    create_engineer,
    update_engineer,
    delete_engineer,
)
from .developers import (
    DeveloperService,
    list_developers,
    get_developer,
    create_developer,
    update_developer,
    delete_developer,
)
from .operations import (
    OperationsService,
    list_operations,
    get_operation,
    create_operation,
    update_operation,
    delete_operation,
)
from .devops import (
    DevOpsService,
    list_devops,
    get_devops,
    create_devops,
    update_devops,
    delete_devops,
)

__all__ = [
    # Client
    "DevOpsClient",
    "new_client",
    "REQUEST_TIMEOUT",
    "ENDPOINT_ENV_VAR",

    # Exceptions
    "DevOpsError",
    "ConfigurationError",
    "TransportError",
    "RemoteError",
    "NotFoundError",
    "DecodeError",
    "EncodeError",
    "InvalidRequestError",

    # Entities and codec
    "Engineer",
    "Developer",
    "Operations",
    "DevOps",
    "decode",
    "decode_list",
    "encode",

    # Services
    "ResourceService",
    "EngineerService",
    "DeveloperService",
    "OperationsService",
    "DevOpsService",

    # Engineer functions
    "list_engineers",
    "get_engineer",
    "create_engineer",
    "update_engineer",
    "delete_engineer",

    # Developer functions
    "list_developers",
    "get_developer",
    "create_developer",
    "update_developer",
    "delete_developer",

    # Operations functions
    "list_operations",
    "get_operation",
    "create_operation",
    "update_operation",
    "delete_operation",

    # DevOps functions
    "list_devops",
    "get_devops",
    "create_devops",
    "update_devops",
    "delete_devops",
]
