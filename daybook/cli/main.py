"""Main CLI entry point for DayBook."""

import importlib
from typing import Optional

import click

from daybook.config import load_config, setup_logging


class LazyGroup(click.Group):
    """Click group that imports a command's module only when it is used."""

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(set(super().list_commands(ctx)) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name not in self.commands and cmd_name in self._lazy_subcommands:
            module_path, attr_name = self._lazy_subcommands[cmd_name].split(":")
            self.add_command(getattr(importlib.import_module(module_path), attr_name), cmd_name)
        return super().get_command(ctx, cmd_name)


# Command name -> "module:attribute"
LAZY_SUBCOMMANDS = {
    "add": "daybook.cli.journal:add",
    "remove": "daybook.cli.journal:remove",
    "history": "daybook.cli.journal:history",
    "export": "daybook.cli.journal:export",
    "dashboard": "daybook.cli.dashboard:dashboard",
    "rules": "daybook.cli.dashboard:rules",
    "size": "daybook.cli.size:size",
    "settings": "daybook.cli.settings:settings",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="daybook")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the journal database.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, db_path: Optional[str], verbose: bool) -> None:
    """DayBook - trading journal and risk dashboard.

    Record daily start/end balances, follow your equity curve and
    daily stop rules, and size leveraged positions from your risk.

    \b
    Quick Start:
      daybook add --start 1000 --end 1050   # Log today
      daybook dashboard                     # Bankroll, month P/L, rules
      daybook size --entry 100 --stop 95    # Position calculator
    """
    ctx.ensure_object(dict)
    config = load_config()
    setup_logging(config, verbose=verbose)
    ctx.obj["config"] = config
    ctx.obj["db_path"] = db_path


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
