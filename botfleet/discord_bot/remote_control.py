"""
Discord commands that remotely control bots.

The cog is a thin layer over :class:`~botfleet.control.remote.RemoteControl`:
it parses chat arguments, enforces who may run what and turns results and
errors into replies.  Commands that name a bot by address, and all screen
commands, are restricted to sudo users; role-resolved ``click`` and
``setStick`` are open to members holding a remote-control role.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from discord.ext import commands

from ..control.actions import DEFAULT_STICK_DELAY_MS, MAX_STICK_DELAY_MS, SwitchStick
from ..control.errors import (
    BotFleetError,
    DeviceNotFound,
    EmptyFleet,
    InvalidArgument,
    TransportError,
)
from ..control.sequence import PressState, StepResult

logger = logging.getLogger(__name__)

NOT_PERMITTED = "You are not permitted to use this command."


def is_sudo(ctx: commands.Context) -> bool:
    return ctx.author.id in ctx.bot.settings.sudo_user_ids


def has_role_access(ctx: commands.Context) -> bool:
    if is_sudo(ctx):
        return True
    allowed = set(ctx.bot.settings.remote_control_roles)
    roles = getattr(ctx.author, "roles", ())
    return any(role.name in allowed for role in roles)


def require_sudo():
    """Command check restricting a command to ``SUDO_USER_IDS``."""

    async def predicate(ctx: commands.Context) -> bool:
        return is_sudo(ctx)

    return commands.check(predicate)


def _is_stick(word: str) -> bool:
    return word.upper() in SwitchStick.__members__


def _looks_like_address(word: str) -> bool:
    # dotted IPv4 / hostname, or IPv6
    return "." in word or ":" in word


def parse_stick_args(args: Sequence[str]) -> Tuple[Optional[str], str, int, int, int]:
    """
    Split ``setStick`` arguments into ``(ip, stick, x, y, ms)``.

    Accepts ``<stick> <x> <y> [ms]`` and ``<ip> <stick> <x> <y> [ms]``.  The
    first word is an address when it does not name a stick and either looks
    like one, is followed by a stick name, or five words were given.
    Anything else is reported as an unknown stick.
    """
    args = list(args)
    ip: Optional[str] = None
    if args and not _is_stick(args[0]):
        if not (_looks_like_address(args[0]) or len(args) == 5 or (len(args) > 1 and _is_stick(args[1]))):
            raise commands.BadArgument(f"Unknown stick: {args[0]}")
        ip = args.pop(0)
    if len(args) not in (3, 4):
        raise commands.BadArgument("Usage: setStick [ip] <stick> <x> <y> [ms]")
    stick = args[0]
    try:
        x, y = int(args[1]), int(args[2])
    except ValueError:
        raise commands.BadArgument("Stick coordinates must be integers.") from None
    ms = DEFAULT_STICK_DELAY_MS
    if len(args) == 4:
        try:
            ms = int(args[3])
        except ValueError:
            raise commands.BadArgument("Duration must be an integer number of milliseconds.") from None
        if not 0 <= ms <= MAX_STICK_DELAY_MS:
            raise commands.BadArgument(f"Duration must be within 0..{MAX_STICK_DELAY_MS} ms.")
    return ip, stick, x, y, ms


class RemoteControlCog(commands.Cog, name="Remote Control"):
    """Remotely controls a bot."""

    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot

    @property
    def remote(self):
        return self.bot.remote

    async def _reply_error(self, ctx: commands.Context, error: BotFleetError) -> None:
        if isinstance(error, TransportError):
            logger.error(f"Transport failure: {error}", exc_info=error)
        else:
            logger.info(f"Command {ctx.command} rejected: {error}")
        await ctx.reply(str(error))

    @commands.command(name="click")
    async def click(self, ctx: commands.Context, *args: str) -> None:
        """Clicks the specified button: ``click [ip] <button>``."""
        if len(args) == 1:
            ip, button = None, args[0]
            allowed = has_role_access(ctx)
        elif len(args) == 2:
            ip, button = args
            allowed = is_sudo(ctx)
        else:
            await ctx.reply("Usage: click [ip] <button>")
            return
        if not allowed:
            await ctx.reply(NOT_PERMITTED)
            return
        try:
            ack = await self.remote.click_button(button, target=ip)
        except DeviceNotFound:
            await ctx.reply(f"No bot is available to execute your command: {button}")
            return
        except BotFleetError as e:
            await self._reply_error(ctx, e)
            return
        await ctx.reply(f"{ack.device.name} has performed: {ack.action.button.value}")

    @commands.command(name="setStick")
    async def set_stick(self, ctx: commands.Context, *args: str) -> None:
        """Sets the stick to the specified position: ``setStick [ip] <stick> <x> <y> [ms]``."""
        ip, stick, x, y, ms = parse_stick_args(args)
        allowed = is_sudo(ctx) if ip is not None else has_role_access(ctx)
        if not allowed:
            await ctx.reply(NOT_PERMITTED)
            return

        async def report(state: PressState, step: StepResult) -> None:
            name = step.action.stick.value
            if state is PressState.ARMED:
                if step.ok:
                    await ctx.reply(f"{step.ack.device.name} has performed: {name}")
                else:
                    await ctx.reply(f"Failed to set {name} stick: {step.error}")
            elif step.ok:
                await ctx.reply(f"{step.ack.device.name} has reset the stick position.")
            else:
                await ctx.reply(f"Failed to reset {name} stick: {step.error}")

        try:
            await self.remote.set_stick(stick, x, y, ms, target=ip, report=report)
        except DeviceNotFound:
            if ip is None:
                await ctx.reply(f"No bot is available to execute your command: {stick}")
            else:
                await ctx.reply(f"No bot has that IP address ({ip}).")
        except InvalidArgument as e:
            await self._reply_error(ctx, e)

    async def _set_screen(self, ctx: commands.Context, on: bool) -> None:
        try:
            await self.remote.set_screen(on)
        except BotFleetError as e:
            await self._reply_error(ctx, e)
            return
        await ctx.reply("Screen state set to: " + ("On" if on else "Off"))

    async def _set_screen_for_all(self, ctx: commands.Context, on: bool) -> None:
        try:
            report = await self.remote.set_screen_for_all(on)
        except EmptyFleet as e:
            await ctx.reply(str(e))
            return
        await ctx.reply(
            f"Screen state set to {'On' if on else 'Off'} for "
            f"{report.success_count} out of {report.total} bots."
        )

    @commands.command(name="setScreenOff", aliases=["screenOff", "scrOff"])
    @require_sudo()
    async def set_screen_off(self, ctx: commands.Context) -> None:
        """Turns the screen off"""
        await self._set_screen(ctx, False)

    @commands.command(name="setScreenOn", aliases=["screenOn", "scrOn"])
    @require_sudo()
    async def set_screen_on(self, ctx: commands.Context) -> None:
        """Turns the screen on"""
        await self._set_screen(ctx, True)

    @commands.command(name="screenOnAll", aliases=["setScreenOnAll", "scrOnAll"])
    @require_sudo()
    async def set_screen_on_all(self, ctx: commands.Context) -> None:
        """Turns the screen on for all connected bots"""
        await self._set_screen_for_all(ctx, True)

    @commands.command(name="screenOffAll", aliases=["setScreenOffAll", "scrOffAll"])
    @require_sudo()
    async def set_screen_off_all(self, ctx: commands.Context) -> None:
        """Turns the screen off for all connected bots"""
        await self._set_screen_for_all(ctx, False)

    async def cog_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        if isinstance(error, commands.CheckFailure):
            await ctx.reply(NOT_PERMITTED)
        elif isinstance(error, commands.UserInputError):
            await ctx.reply(str(error))
        else:
            logger.error(f"Command {ctx.command} failed: {error}", exc_info=error)
