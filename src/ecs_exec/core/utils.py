"""Utility functions for ecs-exec."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Literal, TypeVar

from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)


def extract_name_from_arn(arn: str) -> str:
    """Extract resource name from AWS ARN."""
    return arn.split("/")[-1]


def print_error(message: str) -> None:
    err_console.print(f"❌ {message}", style="red")


def print_info(message: str) -> None:
    err_console.print(message, style="blue")


def batch_items(items: Sequence[T], batch_size: int) -> Iterator[list[T]]:
    """Yield consecutive slices of at most batch_size items."""
    for offset in range(0, len(items), batch_size):
        yield list(items[offset : offset + batch_size])


def paginate_aws_list(
    client: ECSClient,
    operation_name: Literal[
        "list_clusters",
        "list_container_instances",
        "list_services",
        "list_tasks",
    ],
    result_key: str,
    **kwargs: str,
) -> list[str]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[str] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results
