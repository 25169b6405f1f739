"""
Mender Fleet CLI.

- api/: Mender management API operations (pagination, identity, inventory, deployments)
- cli/: Command implementations (Typer + Rich)
- core/: Configuration, logging, exceptions
- settings/: Bundled YAML settings
"""
