"""Host resolution: from a task to the EC2 instance running it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from ...core.base import BaseAWSService
from ...core.errors import NotFoundError, ResolutionFailure
from ...core.types import HostInfo

if TYPE_CHECKING:
    from mypy_boto3_ec2.client import EC2Client
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef


def derive_instance_arn(container_instance_arn: str, instance_id: str) -> str:
    """Build the EC2 instance ARN from the region and account of a container instance ARN."""
    parts = container_instance_arn.split(":")
    if len(parts) < 6:
        raise NotFoundError("Region and account in container instance ARN", container_instance_arn)
    region, account_id = parts[3], parts[4]
    return f"arn:aws:ec2:{region}:{account_id}:instance/{instance_id}"


class HostService(BaseAWSService):
    """Service for looking up the physical host of an ECS task."""

    def __init__(self, ecs_client: ECSClient, ec2_client: EC2Client) -> None:
        super().__init__(ecs_client)
        self.ec2_client = ec2_client

    def get_instance_id(self, cluster_name: str, container_instance_arn: str) -> str:
        try:
            response = self.ecs_client.describe_container_instances(
                cluster=cluster_name, containerInstances=[container_instance_arn]
            )
        except (BotoCoreError, ClientError) as e:
            raise ResolutionFailure("describe_container_instances", e) from e

        container_instances = response.get("containerInstances", [])
        if not container_instances or not container_instances[0].get("ec2InstanceId"):
            raise NotFoundError("Container instance", container_instance_arn)
        return container_instances[0]["ec2InstanceId"]

    def get_instance_addresses(self, instance_id: str) -> tuple[str, str | None]:
        """Return the private and, if allocated, public IP address of an instance."""
        try:
            response = self.ec2_client.describe_instances(InstanceIds=[instance_id])
        except (BotoCoreError, ClientError) as e:
            raise ResolutionFailure("describe_instances", e) from e

        for reservation in response.get("Reservations", []):
            for instance in reservation.get("Instances", []):
                return instance.get("PrivateIpAddress", ""), instance.get("PublicIpAddress")
        raise NotFoundError("EC2 instance", instance_id)

    def resolve_host(self, cluster_name: str, task: TaskTypeDef) -> HostInfo:
        container_instance_arn = task.get("containerInstanceArn")
        if not container_instance_arn:
            raise NotFoundError("Container instance for task", task["taskArn"])

        instance_id = self.get_instance_id(cluster_name, container_instance_arn)
        private_ip, public_ip = self.get_instance_addresses(instance_id)

        return {
            "instance_id": instance_id,
            "instance_arn": derive_instance_arn(container_instance_arn, instance_id),
            "private_ip_address": private_ip,
            "public_ip_address": public_ip,
        }
