"""Tests for cluster listing output."""

from unittest.mock import Mock, call

import pytest

from ecs_exec.core.config import ExecConfig
from ecs_exec.features.cluster.ui import ClusterUI

LISTING = [
    {"service_name": "api", "task_id": "1111", "container_names": ["app", "envoy"]},
    {"service_name": "api", "task_id": "2222", "container_names": ["app", "envoy"]},
    {"service_name": "worker", "task_id": "3333", "container_names": ["worker"]},
]


@pytest.fixture
def cluster_ui():
    ecs_service = Mock()
    ecs_service.get_task_listing.return_value = LISTING
    return ClusterUI(ecs_service, Mock())


def _printed(cluster_ui):
    return cluster_ui.console.print.call_args_list


def test_services_only(cluster_ui):
    cluster_ui.show_listing(ExecConfig(cluster="prod"), show_services=True, show_tasks=False)

    assert _printed(cluster_ui) == [
        call("api", style=None, highlight=False),
        call("worker", style=None, highlight=False),
    ]


def test_services_and_tasks(cluster_ui):
    cluster_ui.show_listing(ExecConfig(cluster="prod"), show_services=True, show_tasks=True)

    assert _printed(cluster_ui) == [
        call("api", style="bold", highlight=False),
        call("\t1111", highlight=False),
        call("\t2222", highlight=False),
        call("worker", style="bold", highlight=False),
        call("\t3333", highlight=False),
    ]


def test_tasks_with_containers(cluster_ui):
    cluster_ui.show_listing(ExecConfig(cluster="prod"), show_services=False, show_tasks=True, show_containers=True)

    assert _printed(cluster_ui) == [
        call("1111 (app, envoy)", highlight=False),
        call("2222 (app, envoy)", highlight=False),
        call("3333 (worker)", highlight=False),
    ]
    cluster_ui.ecs_service.get_task_listing.assert_called_once_with(ExecConfig(cluster="prod"))


def test_nothing_selected_prints_nothing(cluster_ui):
    cluster_ui.show_listing(ExecConfig(cluster="prod"), show_services=False, show_tasks=False)

    cluster_ui.console.print.assert_not_called()
