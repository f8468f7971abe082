"""CLI entry point for glueform.

Commands are registered through a LazyGroup so ``glueform --help`` does not
pay for importing pydantic and boto3.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from glueform_cli import __version__
from glueform_cli.output import configure_logging, set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that imports a command only when it is looked up.

    Attributes:
        lazy_subcommands: Mapping of command name to ``module.attribute`` path.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_name, attr_name = self.lazy_subcommands[cmd_name].rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "compile": "glueform_cli.commands.compile.compile_cmd",
    "validate": "glueform_cli.commands.validate.validate",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="glueform")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Show upload and build events.",
)
def cli(verbose: bool) -> None:
    """Glueform - Glue jobs, connections and triggers for serverless.yml.

    Reads the `custom.Glue` block of serverless.yml and produces the
    matching CloudFormation resources.

    **Getting Started:**

    - `glueform validate` - Check the Glue configuration
    - `glueform compile` - Upload scripts and write the template
    - `glueform compile --dry-run` - Write the template without uploading
    """
    configure_logging(verbose=verbose)


if __name__ == "__main__":
    cli()
