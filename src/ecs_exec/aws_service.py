"""AWS ECS service layer - chains task, host, and command resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import HostInfo, TaskListing
from .features.cluster.cluster import ClusterService
from .features.container.container import build_docker_exec_command
from .features.host.host import HostService
from .features.pipe.pipe import build_pipe_params, expand_pipe_command
from .features.task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ec2.client import EC2Client
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

    from .core.config import ExecConfig


class ECSExecService:
    """Service for resolving ECS tasks down to a runnable remote command."""

    def __init__(self, ecs_client: ECSClient, ec2_client: EC2Client | None = None) -> None:
        self.ecs_client = ecs_client
        self.ec2_client = ec2_client
        # Initialize feature services
        self._task = TaskService(ecs_client)
        self._cluster = ClusterService(ecs_client, self._task)
        self._host = HostService(ecs_client, ec2_client) if ec2_client is not None else None

    def resolve_task(self, config: ExecConfig, service_name: str | None, task_id: str | None) -> TaskTypeDef:
        return self._task.resolve_task(config.cluster, service_name, task_id)

    def resolve_host(self, config: ExecConfig, task: TaskTypeDef) -> HostInfo:
        if self._host is None:
            raise RuntimeError("Host resolution needs an EC2 client")
        return self._host.resolve_host(config.cluster, task)

    def build_exec_command(
        self,
        config: ExecConfig,
        command: str,
        service_name: str | None = None,
        task_id: str | None = None,
        container_name: str | None = None,
    ) -> str:
        """Resolve task and host, then render the full command line through the configured pipe."""
        task = self.resolve_task(config, service_name, task_id)
        host = self.resolve_host(config, task)
        docker_exec = build_docker_exec_command(task["taskArn"], container_name, command)
        return expand_pipe_command(config.pipe, build_pipe_params(host, docker_exec))

    def get_task_listing(self, config: ExecConfig) -> list[TaskListing]:
        """List every task of the cluster with its service and container names."""
        return self._cluster.get_task_listing(config.cluster)
