"""Click group for azsm: usage errors print the error, then the help of the
command they happened in.

An unknown command name gets the closest command names appended to the
error, e.g. ``azsm deploy`` -> "Did you mean: deployment?".
"""

import difflib
from typing import Any

import click


class AzsmGroup(click.Group):
    """Click group with command-name suggestions and help on usage errors."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            matches = difflib.get_close_matches(cmd_name, self.list_commands(ctx), n=3)
            if matches:
                ctx.fail(f"No such command '{cmd_name}'. Did you mean: {', '.join(matches)}?")
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            error_ctx = e.ctx or ctx
            click.echo(f"Error: {e.format_message()}", err=True)
            click.echo("")
            click.echo(error_ctx.get_help())
            error_ctx.exit(e.exit_code)


# subgroups created with @main.group() also use AzsmGroup
AzsmGroup.group_class = AzsmGroup
