"""
CLI Commands.

Organized by Mender service area.
"""

from mender_cli.cli.commands.artifacts import count_artifacts
from mender_cli.cli.commands.auth import login
from mender_cli.cli.commands.deployments import deploy
from mender_cli.cli.commands.devices import getid, getinfo
from mender_cli.cli.commands.system import env

__all__ = [
    "count_artifacts",
    "deploy",
    "env",
    "getid",
    "getinfo",
    "login",
]
