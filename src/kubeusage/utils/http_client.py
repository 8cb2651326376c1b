import logging

import httpx

from ..core.config import config

logger = logging.getLogger(__name__)


def get_async_http_client(
    connect_timeout: float = None,
    read_timeout: float = None,
    verify: bool = True,
    auth=None,
    headers: dict = None,
) -> httpx.AsyncClient:
    """
    Returns a configured httpx.AsyncClient with:
    - Default timeouts (connect and read).
    - Standard User-Agent header, merged with any extra headers.
    """
    c_timeout = connect_timeout if connect_timeout is not None else config.DEFAULT_TIMEOUT_CONNECT
    r_timeout = read_timeout if read_timeout is not None else config.DEFAULT_TIMEOUT_READ

    timeout = httpx.Timeout(r_timeout, connect=c_timeout)

    merged_headers = {"User-Agent": config.USER_AGENT}
    if headers:
        merged_headers.update(headers)

    # No retries here: a failed request surfaces to the caller as-is.
    return httpx.AsyncClient(
        timeout=timeout,
        headers=merged_headers,
        verify=verify,
        auth=auth,
        follow_redirects=True,
    )
