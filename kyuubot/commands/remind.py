"""
KyuuBot - Remind Command Cog
============================

Prefix commands for scheduling reminders.

DESIGN:
    Reminders are stored in the database and delivered by the
    ReminderScheduler, so they survive restarts. The time may be a
    duration ("2h30m", "in 10 minutes") or an absolute date understood
    by dateutil ("4/13/2027 2:23pm", "friday 8pm").

Author: Kyuu
"""

import asyncio
from datetime import datetime
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from kyuubot.core.config import EmbedColors, get_config
from kyuubot.core.constants import EMBED_BULLET, REMINDER_CONTENT_MAX
from kyuubot.core.database import get_db
from kyuubot.core.logger import logger, NY_TZ
from kyuubot.utils.duration import split_reminder
from kyuubot.utils.replies import clean_reply, send_error

if TYPE_CHECKING:
    from kyuubot.bot import KyuuBot


TIME_HELP = (
    "Could not find a time at the start of your reminder. "
    "Try `2h`, `in 10 minutes`, `friday 8pm` or `4/13/2027 2:23pm`."
)


# =============================================================================
# Remindee Converter
# =============================================================================

class RemindeeConverter(commands.Converter):
    """
    Resolve who gets pinged: a member, a role, ``@here`` or ``@everyone``.

    Returns:
        The mention string used when the reminder is delivered.
    """

    async def convert(self, ctx: commands.Context, argument: str) -> str:
        stripped = argument.strip("`")
        if stripped in ("@here", "@everyone"):
            return stripped

        try:
            member = await commands.MemberConverter().convert(ctx, argument)
            return member.mention
        except commands.MemberNotFound:
            pass

        try:
            role = await commands.RoleConverter().convert(ctx, argument)
            return role.mention
        except commands.RoleNotFound:
            pass

        raise commands.BadArgument(f"`{argument}` is not a member, a role, `@here` or `@everyone`.")


# =============================================================================
# Remind Cog
# =============================================================================

class RemindCog(commands.Cog):
    """
    Reminder commands.

    Attributes:
        bot: Reference to the main bot instance.
        config: Bot configuration.
    """

    def __init__(self, bot: "KyuuBot") -> None:
        self.bot = bot
        self.config = get_config()
        self.db = get_db()

    # =========================================================================
    # Shared
    # =========================================================================

    async def _create(self, ctx: commands.Context, remindee: str, text: str) -> None:
        """Parse ``text`` and store the reminder for ``remindee``."""
        parsed = split_reminder(text, datetime.now(NY_TZ))
        if parsed is None:
            await send_error(ctx, TIME_HELP)
            return

        due, content = parsed
        if len(content) > REMINDER_CONTENT_MAX:
            await send_error(ctx, f"Reminders are limited to {REMINDER_CONTENT_MAX} characters.")
            return

        reminder_id = await asyncio.to_thread(
            self.db.add_reminder,
            ctx.channel.id,
            ctx.author.id,
            remindee,
            content,
            due.timestamp(),
            ctx.guild.id if ctx.guild else None,
        )

        timestamp = int(due.timestamp())
        embed = discord.Embed(
            description=f"⏰ I will remind {remindee} <t:{timestamp}:R> (<t:{timestamp}:F>).",
            color=EmbedColors.SUCCESS,
        )
        embed.set_footer(text=f"Reminder #{reminder_id}")
        await clean_reply(ctx, embed=embed)

    # =========================================================================
    # Commands
    # =========================================================================

    @commands.command(
        name="remind",
        aliases=["reminder", "remindme"],
        help="Create a reminder for yourself.",
        usage="<when> <message>",
        extras={
            "group": "util",
            "examples": [
                "remind 2h take out the trash",
                "remind friday 8pm movie night!",
                "remind 4/13/2027 2:23pm Lhu's birthday!",
            ],
        },
    )
    async def remind(self, ctx: commands.Context, *, text: str) -> None:
        await self._create(ctx, ctx.author.mention, text)

    @commands.command(
        name="remind-other",
        aliases=["reminder-other"],
        help="Create a reminder to remind someone else at some time.",
        usage="<member|role|@here|@everyone> <when> <message>",
        extras={
            "group": "util",
            "examples": [
                "remind-other `@everyone` friday movie night!",
                "remind-other @Fizz 4/13/2027 2:23pm Lhu's birthday!",
                "remind-other @moderators 30m party hard",
            ],
        },
    )
    @commands.guild_only()
    async def remind_other(
        self,
        ctx: commands.Context,
        remindee: RemindeeConverter,
        *,
        text: str,
    ) -> None:
        if remindee in ("@here", "@everyone") and not ctx.author.guild_permissions.mention_everyone:
            await send_error(ctx, f"You do not have permission to mention {remindee}.")
            return
        await self._create(ctx, remindee, text)

    @commands.command(
        name="reminders",
        help="List your pending reminders.",
        extras={"group": "util", "examples": ["reminders"]},
    )
    async def reminders(self, ctx: commands.Context) -> None:
        pending = await asyncio.to_thread(self.db.get_pending_reminders, ctx.author.id)
        if not pending:
            await clean_reply(ctx, "You have no pending reminders.")
            return

        lines = [
            f"{EMBED_BULLET} **#{row['id']}** <t:{int(row['due_at'])}:R> {row['remindee']}: "
            f"{row['content'][:80]}"
            for row in pending[:15]
        ]
        embed = discord.Embed(
            title="__Pending Reminders__",
            description="\n".join(lines),
            color=EmbedColors.INFO,
        )
        if len(pending) > 15:
            embed.set_footer(text=f"And {len(pending) - 15} more")
        await clean_reply(ctx, embed=embed)

    @commands.command(
        name="reminder-cancel",
        aliases=["cancel-reminder"],
        help="Cancel one of your pending reminders.",
        usage="<id>",
        extras={"group": "util", "examples": ["reminder-cancel 12"]},
    )
    async def reminder_cancel(self, ctx: commands.Context, reminder_id: int) -> None:
        cancelled = await asyncio.to_thread(self.db.cancel_reminder, reminder_id, ctx.author.id)
        if not cancelled:
            await send_error(ctx, f"You have no pending reminder #{reminder_id}.")
            return

        logger.tree("Reminder Cancelled", [
            ("ID", str(reminder_id)),
            ("Author", f"{ctx.author} ({ctx.author.id})"),
        ], emoji="🗑️")
        await clean_reply(ctx, f"Reminder #{reminder_id} was cancelled.")


# =============================================================================
# Setup
# =============================================================================

async def setup(bot: "KyuuBot") -> None:
    """Add the remind cog to the bot."""
    await bot.add_cog(RemindCog(bot))


__all__ = ["RemindCog", "RemindeeConverter", "setup"]
