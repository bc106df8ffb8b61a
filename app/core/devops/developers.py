"""Developer team management operations."""
from __future__ import annotations
from typing import List

from .base import ResourceService
from .client import DevOpsClient
from .models import Developer


class DeveloperService(ResourceService[Developer]):
    """Service for managing developer teams.

    Membership is not edited in place: read the team, compute the new
    engineers list, then update the whole team, e.g.::

        team = service.get(team_id)
        service.update(team_id, team.with_engineers([*team.engineers, newcomer]))
    """

    collection = "developers"
    shape = Developer


def list_developers(client: DevOpsClient) -> List[Developer]:
    """Retrieve all developer teams."""
    return DeveloperService(client).list()


def get_developer(client: DevOpsClient, developer_id: str) -> Developer:
    """Retrieve a specific developer team by ID."""
    return DeveloperService(client).get(developer_id)


def create_developer(client: DevOpsClient, developer: Developer) -> Developer:
    """Create a new developer team."""
    return DeveloperService(client).create(developer)


def update_developer(client: DevOpsClient, developer_id: str, developer: Developer) -> Developer:
    """Replace an existing developer team."""
    return DeveloperService(client).update(developer_id, developer)


def delete_developer(client: DevOpsClient, developer_id: str) -> None:
    """Delete a developer team."""
    DeveloperService(client).delete(developer_id)
