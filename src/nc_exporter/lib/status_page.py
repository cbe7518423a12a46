"""
status_page.py
- HTTP client for the Nextcloud serverinfo status page.
- Returns the raw response bytes; parsing happens in status_tree.py.
"""

import requests
from loguru import logger

from nc_exporter.core.config import DEFAULT_FETCH_TIMEOUT
from nc_exporter.core.errors import FetchError


def load_status_page(url, user, password, timeout=DEFAULT_FETCH_TIMEOUT):
    """
    Load the Nextcloud status page using admin user credentials.

    Args:
        url (str): Full status page URL (…/ocs/v2.php/apps/serverinfo/api/v1/info).
        user (str): Nextcloud user name.
        password (str): Password or app password, sent as HTTP Basic auth.
        timeout (float): Seconds to wait for the response.

    Returns:
        bytes: The raw XML body.

    Raises:
        FetchError: on connection errors, timeouts and non-2xx responses.
    """
    try:
        response = requests.get(url, auth=(user, password), timeout=timeout)
    except requests.RequestException as e:
        logger.error(f'[status_page] Request of Nextcloud status failed (url="{url}"): {e}')
        raise FetchError(f"Request of Nextcloud status failed: {e}") from e

    logger.debug(f"[status_page] Response {response.status_code} from {url}")
    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        logger.warning(f"[status_page] Status code is not 2xx: {response.status_code}")
        raise FetchError(f"Nextcloud status page returned {response.status_code}") from e

    return response.content
