"""
KyuuBot - Help Command
======================

Replacement for discord.py's default help command.

DESIGN:
    - ``help``          every command usable here, sent by DM
    - ``help all``      every command, usable or not, sent by DM
    - ``help here``     command names posted in the channel
    - ``help <name>``   one command, or a list of matches to choose from

    Commands are grouped by ``extras["group"]`` (falling back to their
    cog). Embed fields cap at 1024 characters, so a long group spills
    into extra fields whose name is a zero width space.

Author: Kyuu
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import discord
from discord.ext import commands

from kyuubot.core.config import EmbedColors
from kyuubot.core.constants import EMBED_BULLET, EMBED_FIELD_MAX, EMBED_PREFIX, ZERO_WIDTH_SPACE
from kyuubot.utils.replies import clean_reply


GROUP_NAMES: Mapping[str, str] = {
    "tags": "Tags",
    "snippets": "Snippets",
    "pkmn-spec": "Pokémon Speculation",
    "util": "Utility",
    "web": "Web",
    "mod": "Moderation",
}


# =============================================================================
# Field Layout
# =============================================================================

def chunk_field_values(entries: Sequence[str], delimiter: str, max_len: int = EMBED_FIELD_MAX) -> List[str]:
    """
    Join entries with ``delimiter`` into values no longer than ``max_len``.

    An entry is never split across two values; one that is too long on
    its own is truncated.
    """
    values = [""]
    for i, entry in enumerate(entries):
        piece = entry if i == len(entries) - 1 else entry + delimiter
        if len(piece) > max_len:
            piece = piece[:max_len - 1] + "…"
        if values[-1] and len(values[-1]) + len(piece) > max_len:
            values.append("")
        values[-1] += piece
    return values


def build_group_fields(
    groups: Sequence[Tuple[str, Sequence[str]]],
    delimiter: str,
) -> List[Tuple[str, str]]:
    """
    Turn (group name, entries) pairs into embed (name, value) fields.

    The first field of a group carries its name; continuation fields are
    named with a zero width space.
    """
    fields = []
    for name, entries in groups:
        if not entries:
            continue
        for i, value in enumerate(chunk_field_values(entries, delimiter)):
            fields.append((f"{EMBED_PREFIX} {name}" if i == 0 else ZERO_WIDTH_SPACE, value))
    return fields


def command_group(command: commands.Command) -> str:
    """Return the help group key of a command."""
    group = command.root_parent.extras.get("group") if command.root_parent else command.extras.get("group")
    if group:
        return group
    if command.cog is not None:
        return command.cog.qualified_name.lower()
    return "misc"


def disambiguation(items: Sequence[commands.Command], label: str) -> str:
    names = ",   ".join(f'"{item.qualified_name.replace(" ", chr(0xA0))}"' for item in items)
    return f"Multiple {label} found, please be more specific: {names}"


def find_commands(bot: commands.Bot, search: str) -> List[commands.Command]:
    """
    Find commands by whole or partial name.

    An exact name or alias wins outright; otherwise every visible command
    whose name or alias contains the search text is returned.
    """
    exact = bot.get_command(search)
    if exact is not None:
        return [exact]

    matches: Dict[str, commands.Command] = {}
    for command in bot.walk_commands():
        if command.hidden:
            continue
        if search in command.qualified_name or any(search in alias for alias in command.aliases):
            matches[command.qualified_name] = command
    return [matches[name] for name in sorted(matches)]


# =============================================================================
# Help Command
# =============================================================================

class KyuuHelpCommand(commands.HelpCommand):
    """Help command with DM, channel and per-command views."""

    def __init__(self, **options) -> None:
        options.setdefault("command_attrs", {
            "name": "help",
            "aliases": ["commands"],
            "help": "Displays a list of available commands, or detailed information for a specified command.",
            "usage": "[command|here|all]",
            "extras": {"group": "util", "examples": ["help", "help here", "help tag"]},
        })
        super().__init__(**options)

    async def command_callback(self, ctx: commands.Context, /, *, command: Optional[str] = None) -> None:
        search = (command or "").strip().lower()

        if not search or search == "all":
            await self.send_commands_in_dm(show_all=search == "all")
            return
        if search == "here":
            await self.send_commands_in_channel()
            return

        matches = find_commands(ctx.bot, search)
        if len(matches) == 1:
            await self.send_command_help(matches[0])
        elif matches:
            await clean_reply(ctx, disambiguation(matches, "commands"))
        else:
            await clean_reply(
                ctx,
                f"Unable to identify command. Use `{ctx.clean_prefix}help` to view the list of all commands.",
            )

    # =========================================================================
    # Listing
    # =========================================================================

    async def _grouped_commands(self, show_all: bool) -> List[Tuple[str, List[commands.Command]]]:
        all_commands = [c for c in self.context.bot.commands if not c.hidden]
        if not show_all:
            all_commands = await self.filter_commands(all_commands, sort=True)
        else:
            all_commands = sorted(all_commands, key=lambda c: c.name)

        groups: Dict[str, List[commands.Command]] = {}
        for command in all_commands:
            groups.setdefault(command_group(command), []).append(command)

        return [(GROUP_NAMES.get(key, key.title()), groups[key]) for key in sorted(groups)]

    def _build_listing(
        self,
        groups: List[Tuple[str, List[commands.Command]]],
        title: str,
        description: str,
        delimiter: str,
        detailed: bool,
    ) -> discord.Embed:
        embed = discord.Embed(title=f"__{title}__", description=description, color=EmbedColors.HELP)

        def entry(command: commands.Command) -> str:
            if detailed:
                return f"{EMBED_BULLET} **{command.name}**: {command.short_doc or 'No description.'}"
            return command.name

        fields = build_group_fields(
            [(name, [entry(c) for c in group]) for name, group in groups],
            delimiter,
        )
        for name, value in fields[:25]:
            embed.add_field(name=name, value=value, inline=False)
        return embed

    async def send_commands_in_dm(self, show_all: bool) -> None:
        ctx = self.context
        prefix = ctx.clean_prefix
        title = "All Commands" if show_all else f"Available Commands In {ctx.guild or 'This DM'}"
        description = (
            f"To run a command in {ctx.guild or 'any server'}, use `{prefix}command`. "
            f"For example, `{prefix}help here`.\n"
            f"Use `{prefix}help all` to view a list of *all* commands, not just available ones.\n"
            f"Use `{prefix}help <command>` to view detailed information about a specific command."
        )
        embed = self._build_listing(await self._grouped_commands(show_all), title, description, "\n", True)

        try:
            await ctx.author.send(embed=embed)
        except discord.Forbidden:
            await clean_reply(ctx, "Unable to send you the help DM. You probably have DMs disabled.")
            return

        if ctx.guild is not None:
            await clean_reply(ctx, "Sent you a DM with information.")

    async def send_commands_in_channel(self) -> None:
        ctx = self.context
        prefix = ctx.clean_prefix
        description = (
            f"To run a command in {ctx.guild or 'any server'}, use `{prefix}command`.\n"
            f"Use `{prefix}help` to view a list of commands with their descriptions."
        )
        embed = self._build_listing(
            await self._grouped_commands(False),
            f"Available Commands In {ctx.guild or 'This DM'}",
            description,
            ", ",
            False,
        )
        await ctx.send(embed=embed)

    # =========================================================================
    # Single Command
    # =========================================================================

    def build_command_embed(self, command: commands.Command) -> discord.Embed:
        prefix = self.context.clean_prefix
        group_key = command_group(command)
        embed = discord.Embed(
            title=f"__{command.qualified_name}__",
            description=command.help or command.short_doc or "No description.",
            color=EmbedColors.HELP,
        )
        embed.add_field(
            name=f"{EMBED_PREFIX} Group",
            value=f"{GROUP_NAMES.get(group_key, group_key.title())} (`{group_key}:{command.name}`)",
            inline=True,
        )
        if command.aliases:
            embed.add_field(
                name=f"{EMBED_PREFIX} Aliases",
                value=", ".join(f"`{alias}`" for alias in command.aliases),
                inline=True,
            )

        signature = command.usage or command.signature
        embed.add_field(
            name=f"{EMBED_PREFIX} Format",
            value=f"`{prefix}{command.qualified_name}{' ' + signature if signature else ''}`",
            inline=False,
        )

        if isinstance(command, commands.Group) and command.commands:
            embed.add_field(
                name=f"{EMBED_PREFIX} Subcommands",
                value="\n".join(
                    f"{EMBED_BULLET} **{sub.name}**: {sub.short_doc}" for sub in command.commands
                )[:EMBED_FIELD_MAX],
                inline=False,
            )

        examples = command.extras.get("examples") or []
        if examples:
            value = f"{EMBED_BULLET} " + f"\n{EMBED_BULLET} ".join(examples)
            embed.add_field(name=f"{EMBED_PREFIX} Examples", value=value[:EMBED_FIELD_MAX], inline=False)

        return embed

    async def send_command_help(self, command: commands.Command) -> None:
        await clean_reply(self.context, embed=self.build_command_embed(command))

    async def send_group_help(self, group: commands.Group) -> None:
        await self.send_command_help(group)


__all__ = [
    "KyuuHelpCommand",
    "build_group_fields",
    "chunk_field_values",
    "command_group",
    "disambiguation",
    "find_commands",
]
