"""
Diffy Service - Publish raw diffs to the diffy.org paste service
"""

from __future__ import annotations

import asyncio
import json
import webbrowser
from typing import Any

import aiohttp
import pyperclip

from models.config import DiffyType
from models.diffy import DiffyCreated, DiffyError, decode_diffy_response
from services.errors import RemoteError

DIFFY_API_URL = "https://diffy.org/api/diff/"
DIFFY_VIEW_URL = "https://diffy.org/diff/"


class DiffyClient:
    """Thin HTTP client for the diffy.org API"""

    def __init__(self, api_url: str = DIFFY_API_URL, timeout_seconds: int = 60):
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds

    async def put(self, payload: dict[str, Any]) -> Any:
        """PUT a JSON payload and return the decoded body, or its raw text if it is not JSON"""
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.put(self.api_url, json=payload) as response:
                    body = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RemoteError(f"Could not reach {self.api_url}: {e}") from e

        try:
            return json.loads(body)
        except json.JSONDecodeError:
            print(f"[Diffy] Non-JSON response (HTTP {response.status})")
            return body


def diff_url(diff_id: str) -> str:
    return f"{DIFFY_VIEW_URL}{diff_id}"


async def post_to_diffy(diff: str, diffy_output: DiffyType, client: DiffyClient | None = None) -> str:
    """Upload a diff and return the link to it"""
    client = client or DiffyClient()
    result = decode_diffy_response(await client.put({"diff": diff}))

    if isinstance(result, DiffyError):
        raise RemoteError(result.error)
    if not isinstance(result, DiffyCreated):
        raise RemoteError(
            f"Could not find 'id' of created diff in the response json.\nBody:\n\n{result.describe()}"
        )

    url = diff_url(result.id)

    print("Link powered by https://diffy.org")
    print(url)

    if diffy_output == DiffyType.BROWSER:
        webbrowser.open(url)
    elif diffy_output == DiffyType.PBCOPY:
        pyperclip.copy(url)

    return url
