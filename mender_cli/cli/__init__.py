"""
CLI Module.

Command-line front-end built with Typer and Rich.

Architecture:
- CLI is a thin presentation layer
- Fleet logic lives in mender_cli.api
- Settings come from MENDER_* environment variables

Usage:
    mender-cli --help
    mender-cli login admin@example.com
    mender-cli deploy release-2 --group production
"""
