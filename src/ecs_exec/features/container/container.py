"""Assembly of the remote ``docker exec`` invocation."""

from __future__ import annotations

TASK_ARN_LABEL = "com.amazonaws.ecs.task-arn"
CONTAINER_NAME_LABEL = "com.amazonaws.ecs.container-name"


def container_id_command(task_arn: str, container_name: str | None = None) -> str:
    """Build the ``docker ps`` lookup that prints the target container id on the host.

    The lookup runs on the instance, so shell metacharacters meant for the remote
    shell are backslash-escaped to survive the local ``sh -c``. Without a container
    name, containers of the task are sorted by name and the first one is taken.
    """
    if container_name:
        parts = [
            "docker",
            "ps",
            f"--filter label={TASK_ARN_LABEL}={task_arn}",
            f"--filter label={CONTAINER_NAME_LABEL}={container_name}",
            "--format '{{.ID}}'",
        ]
    else:
        parts = [
            "docker",
            "ps",
            f"--filter label={TASK_ARN_LABEL}={task_arn}",
            "--format \\'{{.Label \\\"" + CONTAINER_NAME_LABEL + "\\\"}} {{.ID}}\\'",
            "\\| sort \\| awk \\'{print \\$2}\\' \\| head -n1",
        ]
    return " ".join(parts)


def build_docker_exec_command(task_arn: str, container_name: str | None, command: str) -> str:
    """Return ``docker exec -i $(<lookup>) <command>`` for the container of a task.

    ``command`` must be non-empty; callers are responsible for that.
    """
    lookup = container_id_command(task_arn, container_name)
    return " ".join(["docker", "exec", "-i", f"$\\({lookup}\\)", command])
