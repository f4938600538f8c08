"""
KyuuBot - Web Search Service
============================

Thin aiohttp clients for the YouTube Data API v3 and the Wolfram|Alpha
v2 query API, plus the helpers that turn their responses into replies.

DESIGN:
    One persistent ClientSession is shared by both clients and closed
    on shutdown. Every transport problem, non-200 status or missing key
    is raised as WebSearchError so commands have one thing to catch.

Author: Kyuu
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import aiohttp
import discord

from kyuubot.core.config import EmbedColors
from kyuubot.core.constants import API_TIMEOUT, EMBED_FIELD_MAX, EMBED_PREFIX
from kyuubot.core.logger import logger


YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
WOLFRAM_QUERY_URL = "https://api.wolframalpha.com/v2/query"
NO_RESULTS = "No results for that search."
EMBED_FIELDS_MAX = 25


class WebSearchError(Exception):
    """Raised when a web search cannot be completed."""
    pass


@dataclass
class WolframPod:
    """One result pod: its title and the first subpod's text and image."""

    title: str
    text: Optional[str] = None
    image: Optional[str] = None


# =============================================================================
# Response Helpers
# =============================================================================

def get_result_url(result: Dict[str, Any]) -> Optional[str]:
    """
    Build the public URL for a YouTube search result.

    Returns:
        Playlist, video or channel URL, or None for unknown kinds.
    """
    result_id = result.get("id", {})
    kind = result_id.get("kind")

    if kind == "youtube#playlist":
        return f"http://www.youtube.com/playlist?list={result_id['playlistId']}"
    if kind == "youtube#video":
        return f"http://www.youtube.com/watch?v={result_id['videoId']}"
    if kind == "youtube#channel":
        return f"http://www.youtube.com/channel/{result_id['channelId']}"
    return None


def parse_wolfram_pods(payload: Dict[str, Any]) -> List[WolframPod]:
    """Extract pods from a Wolfram|Alpha JSON response."""
    result = payload.get("queryresult", {})
    if result.get("error"):
        error = result["error"]
        message = error.get("msg", "unknown error") if isinstance(error, dict) else "unknown error"
        raise WebSearchError(f"Wolfram|Alpha error: {message}")

    pods = []
    for pod in result.get("pods", []):
        subpods = pod.get("subpods") or [{}]
        first = subpods[0]
        pods.append(WolframPod(
            title=pod.get("title", ""),
            text=first.get("plaintext") or None,
            image=(first.get("img") or {}).get("src"),
        ))
    return pods


def build_wolfram_embed(pods: List[WolframPod]) -> discord.Embed:
    """
    Lay out Wolfram|Alpha pods in an embed.

    Text that fits an embed field is shown as text; otherwise the pod's
    image URL is used, and the first such image becomes the embed image.
    """
    embed = discord.Embed(color=EmbedColors.INFO)

    for pod in pods[:EMBED_FIELDS_MAX]:
        title = f"{EMBED_PREFIX} {pod.title}"
        if pod.text and len(pod.text) < EMBED_FIELD_MAX:
            embed.add_field(name=title, value=pod.text, inline=False)
        elif pod.image:
            embed.add_field(name=title, value=pod.image, inline=False)
            if embed.image.url is None:
                embed.set_image(url=pod.image)

    return embed


# =============================================================================
# Web Search Client
# =============================================================================

class WebSearchClient:
    """
    HTTP client for the search commands.

    Attributes:
        youtube_api_key: Google API key, or None when disabled.
        wolfram_app_id: Wolfram|Alpha app id, or None when disabled.
    """

    def __init__(self, youtube_api_key: Optional[str] = None, wolfram_app_id: Optional[str] = None) -> None:
        self.youtube_api_key = youtube_api_key
        self.wolfram_app_id = wolfram_app_id
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the persistent HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=API_TIMEOUT),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session on shutdown."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _get_json(self, service: str, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        session = await self._get_session()
        try:
            async with session.get(url, params=params) as resp:
                if resp.status != 200:
                    raise WebSearchError(f"{service} returned HTTP {resp.status}")
                return await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning("Web Search Request Failed", [
                ("Service", service),
                ("Error Type", type(e).__name__),
                ("Error", str(e)[:100]),
            ])
            raise WebSearchError(f"{service} request failed") from e

    # =========================================================================
    # YouTube
    # =========================================================================

    async def search_youtube(self, query: str) -> Optional[str]:
        """
        Search YouTube and return the URL of the top result.

        Returns:
            Result URL, or None if nothing was found.

        Raises:
            WebSearchError: If the key is missing or the request fails.
        """
        if not self.youtube_api_key:
            raise WebSearchError("YouTube search is not configured")

        payload = await self._get_json("YouTube", YOUTUBE_SEARCH_URL, {
            "part": "snippet",
            "maxResults": 1,
            "q": query,
            "key": self.youtube_api_key,
        })
        items = payload.get("items") or []
        if not items:
            return None
        return get_result_url(items[0])

    # =========================================================================
    # Wolfram|Alpha
    # =========================================================================

    async def query_wolfram(self, query: str) -> List[WolframPod]:
        """
        Ask Wolfram|Alpha and return the result pods.

        Raises:
            WebSearchError: If the app id is missing or the request fails.
        """
        if not self.wolfram_app_id:
            raise WebSearchError("Wolfram|Alpha is not configured")

        payload = await self._get_json("Wolfram|Alpha", WOLFRAM_QUERY_URL, {
            "input": query,
            "appid": self.wolfram_app_id,
            "output": "json",
            "format": "plaintext,image",
        })
        return parse_wolfram_pods(payload)


__all__ = [
    "WebSearchClient",
    "WebSearchError",
    "WolframPod",
    "NO_RESULTS",
    "get_result_url",
    "parse_wolfram_pods",
    "build_wolfram_embed",
]
