"""Type definitions for ecs-exec."""

from __future__ import annotations

from typing import TypedDict


class HostInfo(TypedDict):
    instance_id: str
    instance_arn: str
    private_ip_address: str
    public_ip_address: str | None


class PipeParams(TypedDict):
    # Keys double as the placeholder names accepted in pipe templates.
    InstanceArn: str
    InstanceId: str
    PrivateIpAddress: str
    PublicIpAddress: str
    Command: str


class TaskListing(TypedDict):
    service_name: str
    task_id: str
    container_names: list[str]
