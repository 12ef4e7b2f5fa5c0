"""Task operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from ...core.base import BaseAWSService
from ...core.errors import InvalidInputError, NotFoundError, ResolutionFailure
from ...core.utils import batch_items, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

DESCRIBE_TASKS_BATCH_SIZE = 100


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_task_arns(self, cluster_name: str, service_name: str | None = None) -> list[str]:
        """List every task ARN in the cluster, optionally limited to one service."""
        kwargs = {"cluster": cluster_name}
        if service_name:
            kwargs["serviceName"] = service_name
        try:
            return paginate_aws_list(self.ecs_client, "list_tasks", "taskArns", **kwargs)
        except (BotoCoreError, ClientError) as e:
            raise ResolutionFailure("list_tasks", e) from e

    def describe_tasks(self, cluster_name: str, task_arns: list[str]) -> list[TaskTypeDef]:
        """Describe tasks in batches the API accepts, preserving order."""
        tasks: list[TaskTypeDef] = []
        for batch in batch_items(task_arns, DESCRIBE_TASKS_BATCH_SIZE):
            try:
                response = self.ecs_client.describe_tasks(cluster=cluster_name, tasks=batch)
            except (BotoCoreError, ClientError) as e:
                raise ResolutionFailure("describe_tasks", e) from e
            tasks.extend(response.get("tasks", []))
        return tasks

    def resolve_task(self, cluster_name: str, service_name: str | None, task_id: str | None) -> TaskTypeDef:
        """Pick exactly one task.

        With a service, the lexicographically smallest task ARN of that service
        wins; the choice is reproducible, not a health or age ranking. Otherwise
        the given task id is used as is.
        """
        if service_name:
            task_arns = self.get_task_arns(cluster_name, service_name)
            if not task_arns:
                raise NotFoundError("Task for service", f"{service_name} in cluster {cluster_name}")
            task_ref = min(task_arns)
        elif task_id:
            task_ref = task_id
        else:
            raise InvalidInputError("Must provide at least one of ECS service or task id")

        tasks = self.describe_tasks(cluster_name, [task_ref])
        if not tasks:
            raise NotFoundError("Task", f"{task_ref} in cluster {cluster_name}")
        return tasks[0]
