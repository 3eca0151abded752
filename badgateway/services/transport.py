"""
Transport adapter for executing requests.

Sends a RequestSpec with httpx and captures the full response. Every
HTTP status is a response here; only failures to obtain one become a
TransportError.
"""

import time

import httpx

from ..config import get_settings
from ..logging_config import get_logger
from ..schemas.execute import ExecuteResponse, TransportError
from ..schemas.request import RequestSpec
from .request_builder import assemble_url, build_body, build_headers


logger = get_logger(__name__)


async def send(
    spec: RequestSpec,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = None,
) -> ExecuteResponse | TransportError:
    """
    Execute a request and read its whole body.

    Args:
        spec: The request to send
        transport: Optional httpx transport, e.g. a MockTransport in tests
        timeout: Transport timeout in seconds, defaults to the configured
            value; None disables timeouts

    Returns:
        ExecuteResponse for any received status, TransportError otherwise
    """
    if timeout is None:
        timeout = get_settings().request_timeout

    url = assemble_url(spec.url, spec.query_params)

    try:
        start_time = time.perf_counter()

        headers = build_headers(spec)
        content = build_body(spec)

        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.request(
                method=spec.method,
                url=url,
                headers=headers,
                content=content,
            )

        end_time = time.perf_counter()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("request_failed", method=spec.method, url=url, error=str(e))
        return TransportError(error=str(e) or type(e).__name__)
    except UnicodeEncodeError as e:
        logger.warning("request_failed", method=spec.method, url=url, error=str(e))
        return TransportError(error=f"Header contains characters that cannot be sent: {e}")

    if not 100 <= response.status_code <= 599:
        logger.warning("request_failed", method=spec.method, url=url, status=response.status_code)
        return TransportError(error=f"Malformed response: status code {response.status_code}")

    duration_ms = int((end_time - start_time) * 1000)
    body_bytes = response.content

    logger.info(
        "request_completed",
        method=spec.method,
        url=url,
        status=response.status_code,
        duration_ms=duration_ms,
        size=len(body_bytes),
    )

    return ExecuteResponse(
        status=response.status_code,
        status_text=response.reason_phrase or "",
        headers=response.headers.multi_items(),
        body=response.text,
        duration_ms=duration_ms,
        size=len(body_bytes),
    )
