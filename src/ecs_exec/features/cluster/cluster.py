"""Cluster-wide task listing for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import TaskListing
from ...core.utils import extract_name_from_arn
from ..task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

SERVICE_GROUP_PREFIX = "service:"


class ClusterService(BaseAWSService):
    """Service for ECS cluster operations."""

    def __init__(self, ecs_client: ECSClient, task_service: TaskService | None = None) -> None:
        super().__init__(ecs_client)
        self.task_service = task_service or TaskService(ecs_client)

    def get_all_tasks(self, cluster_name: str) -> list[TaskTypeDef]:
        """Describe every task in the cluster, ordered by service group then task ARN."""
        task_arns = self.task_service.get_task_arns(cluster_name)
        if not task_arns:
            return []

        tasks = self.task_service.describe_tasks(cluster_name, task_arns)
        return sorted(tasks, key=lambda task: (task.get("group", "").lower(), task["taskArn"]))

    def get_task_listing(self, cluster_name: str) -> list[TaskListing]:
        return [_create_task_listing(task) for task in self.get_all_tasks(cluster_name)]


def service_name_from_group(group: str) -> str:
    """Strip the ``service:`` prefix ECS puts on tasks started by a service."""
    if group.startswith(SERVICE_GROUP_PREFIX):
        return group[len(SERVICE_GROUP_PREFIX) :]
    return group


def _create_task_listing(task: TaskTypeDef) -> TaskListing:
    return {
        "service_name": service_name_from_group(task.get("group", "")),
        "task_id": extract_name_from_arn(task["taskArn"]),
        "container_names": sorted(container["name"] for container in task.get("containers", [])),
    }
