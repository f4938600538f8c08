"""
KyuuBot - Web Command Cog
=========================

``youtube`` and ``wolfram``: proxy a query to a web API and post the result.

Author: Kyuu
"""

from typing import TYPE_CHECKING

from discord.ext import commands

from kyuubot.core.config import get_config
from kyuubot.core.logger import logger
from kyuubot.services.web_search import (
    NO_RESULTS,
    WebSearchClient,
    WebSearchError,
    build_wolfram_embed,
)
from kyuubot.utils.replies import clean_reply, send_error

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


SEARCH_FAILED = "Something went wrong when searching."


class WebCog(commands.Cog):
    """
    Web search commands.

    Attributes:
        bot: Reference to the main bot instance.
        client: Shared HTTP client for the search APIs.
    """

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot
        config = get_config()
        self.client = WebSearchClient(config.youtube_api_key, config.wolfram_app_id)

    async def cog_unload(self) -> None:
        await self.client.close()

    async def _fail(self, ctx: commands.Context, command: str, query: str, error: WebSearchError) -> None:
        logger.warning("Web Search Failed", [
            ("Command", command),
            ("Query", query[:50]),
            ("Error", str(error)),
        ])
        await send_error(ctx, SEARCH_FAILED)

    # =========================================================================
    # YouTube
    # =========================================================================

    @commands.command(
        name="youtube",
        aliases=["yt"],
        help="Search for videos on Youtube.",
        usage="<query>",
        extras={"group": "web", "examples": ["youtube never gonna give you up"]},
    )
    @commands.cooldown(1, 3, commands.BucketType.user)
    async def youtube(self, ctx: commands.Context, *, query: str) -> None:
        try:
            async with ctx.typing():
                url = await self.client.search_youtube(query)
        except WebSearchError as e:
            await self._fail(ctx, "youtube", query, e)
            return

        await clean_reply(ctx, url or NO_RESULTS)

    # =========================================================================
    # Wolfram|Alpha
    # =========================================================================

    @commands.command(
        name="wolfram",
        aliases=["wolfram-alpha", "wa", "math"],
        help="Search Wolfram|Alpha or solve problems.",
        usage="<query>",
        extras={"group": "web", "examples": ["wolfram integrate x^2", "wa population of tokyo"]},
    )
    @commands.cooldown(1, 3, commands.BucketType.user)
    async def wolfram(self, ctx: commands.Context, *, query: str) -> None:
        try:
            async with ctx.typing():
                pods = await self.client.query_wolfram(query)
        except WebSearchError as e:
            await self._fail(ctx, "wolfram", query, e)
            return

        if not pods:
            await clean_reply(ctx, "There were no results.")
            return

        await clean_reply(ctx, "Results:", embed=build_wolfram_embed(pods))


async def setup(bot: "KyuuBot") -> None:
    """Add the web cog to the bot."""
    await bot.add_cog(WebCog(bot))


__all__ = ["WebCog", "setup"]
