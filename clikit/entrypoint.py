"""A small command-line application model with wrapped help output and error handling."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from clikit.errors import (
    ErrorWithExitCode,
    print_error_with_stack_trace,
    recover,
    unwrap,
)
from clikit.helptext import (
    HELP_TEXT_LINE_WIDTH,
    prefixed_first_flag_name,
    wrapped_help_printer,
)

DEFAULT_SUCCESS_EXIT_CODE = 0
DEFAULT_ERROR_EXIT_CODE = 1
DEBUG_ENV_VAR = "GRUNTWORK_DEBUG"

Action = Callable[[dict, list], Any]


@dataclass
class Flag:
    """A command-line option. Its type follows its default: str, int or bool."""

    name: str
    aliases: Sequence[str] = ()
    default: Any = ""
    usage: str = ""

    @property
    def names(self) -> list[str]:
        return [self.name, *self.aliases]

    @property
    def is_bool(self) -> bool:
        return isinstance(self.default, bool)

    def convert(self, raw: str) -> Any:
        if self.is_bool:
            return raw.lower() in ("1", "t", "true")
        if isinstance(self.default, int):
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"invalid value {raw!r} for flag --{self.name}") from None
        return raw

    def __str__(self) -> str:
        placeholder = "" if self.is_bool else " value"
        names = ", ".join(prefixed_first_flag_name(name) + placeholder for name in self.names)
        text = f"{names}\t{self.usage}"
        if not self.is_bool and self.default not in ("", None):
            shown = f'"{self.default}"' if isinstance(self.default, str) else str(self.default)
            text += f" (default: {shown})"
        return text


@dataclass
class Command:
    """A subcommand of an application."""

    name: str
    usage: str = ""
    usage_text: str = ""
    description: str = ""
    aliases: Sequence[str] = ()
    flags: list[Flag] = field(default_factory=list)
    action: Action | None = None
    args_usage: str = ""
    hide_help: bool = False

    @property
    def names(self) -> list[str]:
        return [self.name, *self.aliases]


_HELP_FLAG = Flag("help", aliases=("h",), default=False, usage="show help")
_VERSION_FLAG = Flag("version", aliases=("v",), default=False, usage="print the version")
_HELP_COMMAND = Command(
    "help", aliases=("h",), usage="Shows a list of commands or help for one command"
)


def _parse_flags(flags: Sequence[Flag], args: Sequence[str]) -> tuple[dict, list[str]]:
    """Parse leading options from ``args``; return the option values and the remaining args."""
    lookup = {name: flag for flag in flags for name in flag.names}
    options = {flag.name: flag.default for flag in flags}
    remaining = list(args)
    while remaining:
        arg = remaining[0]
        if arg == "--":
            remaining.pop(0)
            break
        if not arg.startswith("-") or arg == "-":
            break
        remaining.pop(0)
        name, has_value, raw = arg.lstrip("-").partition("=")
        flag = lookup.get(name)
        if flag is None:
            raise ValueError(f"flag provided but not defined: -{name}")
        if has_value:
            options[flag.name] = flag.convert(raw)
        elif flag.is_bool:
            options[flag.name] = True
        elif remaining:
            options[flag.name] = flag.convert(remaining.pop(0))
        else:
            raise ValueError(f"flag needs an argument: -{name}")
    return options, remaining


@dataclass
class App:
    """A command-line application with options, subcommands and help output."""

    name: str
    version: str = ""
    help_name: str = ""
    usage_text: str = ""
    description: str = ""
    args_usage: str = ""
    flags: list[Flag] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    action: Action | None = None
    writer: TextIO | None = None
    help_line_width: int = HELP_TEXT_LINE_WIDTH

    def __post_init__(self) -> None:
        if not self.help_name:
            self.help_name = self.name

    @property
    def _out(self) -> TextIO:
        return self.writer if self.writer is not None else sys.stdout

    def _visible_flags(self) -> list[Flag]:
        flags = [*self.flags, _HELP_FLAG]
        if self.version:
            flags.append(_VERSION_FLAG)
        return flags

    def _find_command(self, name: str) -> Command | None:
        return next((command for command in self.commands if name in command.names), None)

    def run(self, argv: Sequence[str]) -> None:
        """Run the application; ``argv[0]`` is the program name."""
        options, args = _parse_flags(self._visible_flags(), argv[1:])
        if options.get("help"):
            self.print_help()
            return
        if options.get("version"):
            self._out.write(f"{self.name} version {self.version}\n")
            return
        if args and args[0] in _HELP_COMMAND.names:
            if len(args) > 1:
                self.print_command_help(args[1])
            else:
                self.print_help()
            return
        command = self._find_command(args[0]) if args else None
        if command is None:
            if self.action is not None:
                self.action(options, args)
            elif args and self.commands:
                raise ValueError(f"No help topic for '{args[0]}'")
            else:
                self.print_help()
            return
        command_options, command_args = _parse_flags([*command.flags, _HELP_FLAG], args[1:])
        if command_options.pop("help"):
            self.print_command_help(command.name)
            return
        if command.action is not None:
            command.action({**options, **command_options}, command_args)

    def print_help(self, out: TextIO | None = None) -> None:
        """Write the application help text."""
        if self.usage_text:
            usage = self.usage_text
        else:
            flag_names = "".join(
                f"[{prefixed_first_flag_name(flag.name)}] " for flag in self._visible_flags()
            )
            commands = "command [options]" if self.commands else ""
            usage = f"{self.help_name} {flag_names}{commands} {self.args_usage or '[args]'}"
        text = f"Usage: {usage}"
        if self.description:
            text += f"\n\n{self.description}"
        if self.commands:
            text += "\n\nCommands:\n\n"
            for command in [*self.commands, _HELP_COMMAND]:
                if not command.hide_help:
                    text += f"   {', '.join(command.names)}\t{command.usage}\n"
        wrapped_help_printer(out or self._out, text, self.help_line_width)

    def print_command_help(self, command_name: str, out: TextIO | None = None) -> None:
        """Write the help text of the named command."""
        command = self._find_command(command_name)
        if command is None:
            raise ValueError(f"No help topic for '{command_name}'")
        if command.usage_text:
            usage = command.usage_text
        else:
            options = " [options]" if command.flags else ""
            usage = f"{self.help_name} {command.name}{options} {command.args_usage or '[args]'}"
        text = f"Usage: {usage}"
        if command.description:
            text += f"\n\n{command.description}"
        if command.flags:
            text += "\n\nOptions:\n\n   " + "".join(f"{flag}\n   " for flag in command.flags)
        wrapped_help_printer(out or self._out, text, self.help_line_width)


def new_app(name: str, version: str) -> App:
    """Create an application with the given name and version."""
    return App(name=name, version=version)


def get_exit_code(err: BaseException | None) -> int:
    """Return the exit code for ``err``: 0 for none, its own code, or 1."""
    if err is None:
        return DEFAULT_SUCCESS_EXIT_CODE
    inner = unwrap(err)
    if isinstance(inner, ErrorWithExitCode):
        return inner.exit_code
    return DEFAULT_ERROR_EXIT_CODE


def log_error(err: BaseException | None, app: App) -> None:
    """Log ``err``; with the debug environment variable set, include its stack trace."""
    if err is None:
        return
    logger = logging.getLogger(f"{app.name}.{app.version}" if app.version else app.name)
    if os.environ.get(DEBUG_ENV_VAR):
        logger.error(print_error_with_stack_trace(err))
    else:
        logger.error("%s", unwrap(err))


def run_app(app: App, argv: Sequence[str] | None = None) -> None:
    """Run ``app``, log any error and exit with the matching exit code."""
    failures: list[BaseException] = []
    with recover(failures.append):
        app.run(list(sys.argv if argv is None else argv))
    err = failures[0] if failures else None
    log_error(err, app)
    sys.exit(get_exit_code(err))