# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core

COMMAND_ORDER = [
    "record, r",
    "forecast, f",
    "trajectory, tj",
    "week, w",
    "simulate, sim",
    "config, c",
]


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names are comma-separated alias lists"""

    _ALIAS_SEPARATOR = re.compile(r" ?, ?")

    def aliases_of(self, registered_name: str) -> list[str]:
        return self._ALIAS_SEPARATOR.split(registered_name)

    def resolve_alias(self, name: str) -> str:
        """Return the registered name that lists ``name`` as an alias"""
        for registered_name in self.commands:
            if name in self.aliases_of(registered_name):
                return registered_name
        return name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""
        registered_name = self.resolve_alias(name)
        if registered_name in self.commands and registered_name != name:
            return
        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Aliased group listing commands in COMMAND_ORDER, then the rest"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
