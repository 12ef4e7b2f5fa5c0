"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

CONTAINER_INSTANCE_ARN = "arn:aws:ecs:ap-southeast-2:123456789012:container-instance/default/5f3c2b1a"
TASK_ARN_A = "arn:aws:ecs:ap-southeast-2:123456789012:task/default/a"
TASK_ARN_B = "arn:aws:ecs:ap-southeast-2:123456789012:task/default/b"


@pytest.fixture
def container_instance_arn():
    return CONTAINER_INSTANCE_ARN


@pytest.fixture
def task_arn_a():
    return TASK_ARN_A


@pytest.fixture
def task_arn_b():
    return TASK_ARN_B


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_ecs_client():
    return Mock()


@pytest.fixture
def make_task():
    def _make_task(task_arn: str, group: str = "service:web", containers: list[str] | None = None) -> dict:
        return {
            "taskArn": task_arn,
            "group": group,
            "containerInstanceArn": CONTAINER_INSTANCE_ARN,
            "containers": [{"name": name, "taskArn": task_arn} for name in (containers or ["app"])],
        }

    return _make_task


@pytest.fixture
def pipeline_clients(mock_paginated_client, make_task):
    """ECS and EC2 clients answering every call of a service-based exec."""
    ecs_client = mock_paginated_client([{"taskArns": [TASK_ARN_B, TASK_ARN_A]}])
    ecs_client.describe_tasks.return_value = {"tasks": [make_task(TASK_ARN_A)]}
    ecs_client.describe_container_instances.return_value = {
        "containerInstances": [{"containerInstanceArn": CONTAINER_INSTANCE_ARN, "ec2InstanceId": "i-0abc1234"}]
    }

    ec2_client = Mock()
    ec2_client.describe_instances.return_value = {
        "Reservations": [{"Instances": [{"InstanceId": "i-0abc1234", "PrivateIpAddress": "10.0.0.5"}]}]
    }
    return ecs_client, ec2_client
