"""
Mender management API endpoint paths.

These paths and their query parameter names are the server's wire contract.
"""

LOGIN = "/api/management/v1/useradm/auth/login"

INVENTORY_DEVICES = "/api/management/v1/inventory/devices"
INVENTORY_DEVICE = "/api/management/v1/inventory/devices/{id}"
INVENTORY_GROUP_DEVICES = "/api/management/v1/inventory/groups/{name}/devices"

DEVAUTH_DEVICES = "/api/management/v2/devauth/devices"

DEPLOYMENTS = "/api/management/v1/deployments/deployments"
