import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TYPE_CHECKING

import boto3
import botocore.session
from botocore.config import Config
from botocore.exceptions import BotoCoreError
from botocore.utils import JSONFileCache
from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_ec2.client import EC2Client
    from mypy_boto3_ecs import ECSClient

from .aws_service import ECSExecService
from .core.config import ExecConfig, load_config
from .core.errors import EcsExecError
from .core.shell import run_shell_command
from .core.utils import print_error, print_info
from .features.cluster.ui import ClusterUI

try:
    __version__ = version("ecs-exec")
except PackageNotFoundError:
    __version__ = "dev"

console = Console()

CREDENTIAL_CACHE_DIR = Path.home() / ".aws" / "cli" / "cache"

EXEC_DESCRIPTION = """\
Specify a cluster (-c) and one of ECS service name (-s) or ECS task ID (-t). If
a task ID is not provided, the first task (alphabetically by ARN) is selected.
Likewise, if a container name (--container) is not provided, the first one is
selected.

The pipe command (--pipe) hooks up stdin/stdout to 'docker exec' on the instance.
Well-known pipes:

  @SSH   - the default: 'ssh ec2-user@{PrivateIpAddress} {Command}'
  @LKP   - LastKeypair-negotiated SSH: 'ssh ec2-user@{InstanceArn} {Command}'
  @GOSSM - SSM RunCommand via gossm, not interactive: 'gossm -q -i {InstanceId} -- {Command}'

Custom pipes may use {InstanceArn}, {InstanceId}, {PrivateIpAddress},
{PublicIpAddress} (empty if not allocated) and {Command}.
"""


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--cluster", help="Name of ECS cluster (default: default)", default=None)
    common.add_argument("-p", "--profile", help="Profile name in ~/.aws/config to use", default=None)
    common.add_argument("-r", "--region", help="AWS region of cluster", default=None)
    common.add_argument("--config", help="Config file (default: ~/.ecs-exec.yaml)", default=None)
    common.add_argument("--verbose", action="store_true", help="Log AWS API requests and responses")

    parser = argparse.ArgumentParser(
        prog="ecs-exec",
        description="Run commands in containers on AWS ECS with stdin/stdout connected to your terminal",
    )
    parser.add_argument("--version", action="version", version=f"ecs-exec {__version__}")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    exec_parser = subparsers.add_parser(
        "exec",
        parents=[common],
        help="Execute a command in a container running on ECS",
        description=EXEC_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    exec_parser.add_argument("-s", "--service", help="ECS service - optional if task ID provided")
    exec_parser.add_argument("-t", "--task", help="Task ID - defaults to first task of the service")
    exec_parser.add_argument("--container", help="Container name, defaults to first alphabetical")
    exec_parser.add_argument("--dry-run", action="store_true", help="Just print the command that would be run")
    exec_parser.add_argument("--pipe", default=None, help="Transport command connecting stdin/stdout (default: @SSH)")
    exec_parser.add_argument("remote_command", nargs=argparse.REMAINDER, help="Command to run in the container")

    ls_parser = subparsers.add_parser(
        "ls",
        parents=[common],
        help="List ECS services and/or tasks running on a cluster",
    )
    ls_parser.add_argument("-s", "--services", action="store_true", help="Show services")
    ls_parser.add_argument("-t", "--tasks", action="store_true", help="Show tasks")
    ls_parser.add_argument("--containers", action="store_true", help="Show container names")

    return parser


def main() -> None:
    """Run commands in ECS containers through a pluggable transport."""
    parser = _build_parser()
    args = parser.parse_args()

    remote_command: list[str] = []
    if args.command_name == "exec":
        remote_command = args.remote_command
        if remote_command and remote_command[0] == "--":
            remote_command = remote_command[1:]
        if not remote_command:
            parser.error("exec needs a command to run in the container, e.g. 'bash'")

    try:
        config = load_config(
            args.config,
            {
                "cluster": args.cluster,
                "profile": args.profile,
                "region": args.region,
                "pipe": getattr(args, "pipe", None),
                "verbose": True if args.verbose else None,
            },
        )
        if config.verbose:
            boto3.set_stream_logger("botocore", logging.DEBUG)

        ecs_client = _create_ecs_client(config)
        if args.command_name == "ls":
            ClusterUI(ECSExecService(ecs_client), console).show_listing(
                config, args.services, args.tasks, args.containers
            )
            return

        ecs_service = ECSExecService(ecs_client, _create_ec2_client(config))
        full_command = ecs_service.build_exec_command(
            config,
            " ".join(remote_command),
            service_name=args.service,
            task_id=args.task,
            container_name=args.container,
        )
    except EcsExecError as e:
        print_error(e.message)
        sys.exit(1)
    except BotoCoreError as e:
        print_error(str(e))
        print_info("Make sure your AWS credentials are configured.")
        sys.exit(1)

    if args.dry_run:
        console.out(full_command, highlight=False)
        return

    sys.exit(run_shell_command(full_command))


def _create_session(config: ExecConfig) -> boto3.Session:
    """Create a session whose assumed-role credentials are cached on disk between runs.

    The cache directory is shared with the AWS CLI, so an MFA code entered for either
    tool is reused until the role credentials expire.
    """
    botocore_session = botocore.session.Session(profile=config.profile)
    assume_role_provider = botocore_session.get_component("credential_provider").get_provider("assume-role")
    assume_role_provider.cache = JSONFileCache(str(CREDENTIAL_CACHE_DIR))
    return boto3.Session(botocore_session=botocore_session, region_name=config.region)


def _client_config() -> Config:
    return Config(
        max_pool_connections=5,
        retries={"max_attempts": 2, "mode": "adaptive"},
        user_agent_extra=f"ecs-exec/{__version__}",
    )


def _create_ecs_client(config: ExecConfig) -> "ECSClient":
    """Create ECS client for the configured profile and region."""
    return _create_session(config).client("ecs", config=_client_config())


def _create_ec2_client(config: ExecConfig) -> "EC2Client":
    """Create EC2 client for the configured profile and region."""
    return _create_session(config).client("ec2", config=_client_config())


if __name__ == "__main__":
    main()
