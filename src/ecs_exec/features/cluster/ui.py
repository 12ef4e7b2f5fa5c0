"""UI components for cluster listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from ...core.base import BaseUIComponent
from ...core.types import TaskListing

if TYPE_CHECKING:
    from ...aws_service import ECSExecService
    from ...core.config import ExecConfig


class ClusterUI(BaseUIComponent):
    """Prints services and tasks of a cluster."""

    def __init__(self, ecs_service: ECSExecService, console: Console | None = None) -> None:
        super().__init__(console)
        self.ecs_service = ecs_service

    def show_listing(
        self, config: ExecConfig, show_services: bool, show_tasks: bool, show_containers: bool = False
    ) -> None:
        listing = self.ecs_service.get_task_listing(config)
        self.render_listing(listing, show_services, show_tasks, show_containers)

    def render_listing(
        self, listing: list[TaskListing], show_services: bool, show_tasks: bool, show_containers: bool = False
    ) -> None:
        previous_service = None
        for entry in listing:
            service_name = entry["service_name"]

            if show_services and service_name != previous_service:
                # Plain output when only services are listed, so it can be piped.
                style = "bold" if show_tasks else None
                self.console.print(escape(service_name), style=style, highlight=False)
                previous_service = service_name

            if not show_tasks:
                continue

            indentation = "\t" if show_services else ""
            suffix = f" ({', '.join(entry['container_names'])})" if show_containers else ""
            self.console.print(f"{indentation}{escape(entry['task_id'])}{escape(suffix)}", highlight=False)
