"""Pipe templates: the transport that connects stdin/stdout to the remote docker exec."""

from __future__ import annotations

import re

from ...core.errors import TemplateError
from ...core.types import HostInfo, PipeParams

WELL_KNOWN_PIPES: dict[str, str] = {
    "@SSH": "ssh ec2-user@{PrivateIpAddress} {Command}",
    "@LKP": "ssh ec2-user@{InstanceArn} {Command}",
    # gossm runs through SSM RunCommand and cannot attach interactively.
    "@GOSSM": "gossm -q -i {InstanceId} -- {Command}",
}

PLACEHOLDERS = frozenset(PipeParams.__annotations__)

# Placeholders are capitalised names in single braces, e.g. {InstanceId}, or the
# older {{.InstanceId}} form. Shell braces such as ${VAR}, awk '{print $2}' or a
# lone } are left alone.
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*\.(?P<dotted>\w+)\s*\}\}|(?<!\$)\{(?P<name>[A-Z]\w*)\}")


def build_pipe_params(host: HostInfo, docker_exec_command: str) -> PipeParams:
    return {
        "InstanceArn": host["instance_arn"],
        "InstanceId": host["instance_id"],
        "PrivateIpAddress": host["private_ip_address"],
        "PublicIpAddress": host["public_ip_address"] or "",
        "Command": docker_exec_command,
    }


def resolve_template(template: str) -> str:
    """Swap a well-known alias for its template text; anything else is used verbatim."""
    return WELL_KNOWN_PIPES.get(template, template)


def expand_pipe_command(template: str, params: PipeParams) -> str:
    """Render a pipe template (or well-known alias) with the host and command values.

    Substituted values are never scanned again, so braces inside the command survive.
    """
    text = resolve_template(template)

    def _substitute(match: re.Match[str]) -> str:
        field_name = match.group("dotted") or match.group("name")
        if field_name not in PLACEHOLDERS:
            allowed = ", ".join("{" + name + "}" for name in sorted(PLACEHOLDERS))
            raise TemplateError(
                f"Unknown placeholder {match.group(0)} in pipe template {text!r} (allowed: {allowed})",
                details={"placeholder": field_name},
            )
        return params[field_name]  # type: ignore[literal-required]

    return PLACEHOLDER_PATTERN.sub(_substitute, text)
