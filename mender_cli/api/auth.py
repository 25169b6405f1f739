"""Login against the user administration service."""

from mender_cli.api import paths
from mender_cli.api.client import MenderClient
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


async def login(client: MenderClient, email: str, password: str) -> str:
    """
    Request an auth token from the Mender server.

    The token is returned as the raw response body. It is never stored by
    this client; callers export it as MENDER_TOKEN.

    Raises:
        FetchError: If the server rejects the credentials.
    """
    response = await client.post_checked(paths.LOGIN, auth=(email, password))
    log_with_source(logger, "api", "info", "Logged in", email=email)
    return response.text.strip()
