"""Common HTTP utilities for calling model backends."""

import asyncio
import re
from typing import Dict, Any

import aiohttp

from trackademic.errors import UpstreamError
from trackademic.logging import get_logger

logger = get_logger(__name__)

CODE_FENCE_OPEN = re.compile(r'^```[a-zA-Z0-9_-]*\n?')
CODE_FENCE_CLOSE = re.compile(r'\n?```$')


async def post_request(
    url: str,
    headers: Dict[str, str],
    data: Dict[str, Any],
    timeout: int = 30
) -> Dict[str, Any]:
    """
    Make an async POST request and return JSON response.

    Args:
        url: The URL to make the request to
        headers: Request headers
        data: Request data to send as JSON
        timeout: Request timeout in seconds

    Returns:
        Response JSON data

    Raises:
        UpstreamError: on connection failures, timeouts, non-200 statuses
            and bodies that are not JSON.
    """
    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                url,
                headers=headers,
                json=data,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                if response.status != 200:
                    body = await response.text()
                    logger.error(f"HTTP request failed with status {response.status}")
                    raise UpstreamError(
                        f"Backend returned status {response.status}: {body[:200]}",
                        status=response.status,
                    )
                return await response.json(content_type=None)
    except asyncio.TimeoutError as e:
        logger.error(f"HTTP request timed out after {timeout} seconds")
        raise UpstreamError(f"Request timed out after {timeout} seconds") from e
    except aiohttp.ClientError as e:
        logger.error(f"HTTP request failed: {str(e)}")
        raise UpstreamError(f"Could not reach backend: {e}") from e
    except ValueError as e:
        logger.error(f"HTTP response was not JSON: {str(e)}")
        raise UpstreamError(f"Backend response was not JSON: {e}") from e


def strip_code_fences(content: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```) if present."""
    content = content.strip()
    content = CODE_FENCE_OPEN.sub('', content)
    content = CODE_FENCE_CLOSE.sub('', content)
    return content.strip()
