import logging
import sys
from typing import Optional

import rich_click as click
from click.core import Context
from rich.logging import RichHandler

from .console import console
from .entries import run_delete, run_get, run_list, run_set


def excepthook(debug: bool, type, value, traceback):
    from rich.console import Console
    from rich.traceback import Traceback

    traceback_console = Console(stderr=True)
    traceback_console.print(
        Traceback.from_exception(
            type,
            value,
            traceback,
            suppress=[click],
            show_locals=debug,
        )
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--base",
    "-b",
    required=True,
    envvar="DOTSTORE_BASE",
    help="Application name. Entries are stored in `.<base>` directories.",
)
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    default=False,
    help="Set logging level to debug and show locals in tracebacks.",
)
@click.option(
    "--silent",
    "-s",
    is_flag=True,
    default=False,
    help="Disable all stdout output.",
)
@click.version_option(message="%(version)s", package_name="dotstore")
@click.pass_context
def main(ctx: Context, base: str, debug: bool, silent: bool) -> None:
    from pydantic import ValidationError

    from dotstore.core.logging import set_debug
    from dotstore.store import DotStore, StoreConfig

    logging.basicConfig(
        format="%(asctime)s %(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, console=console, markup=False)],
        force=True,
    )
    sys.excepthook = lambda type, value, traceback: excepthook(
        debug, type, value, traceback
    )

    set_debug(debug)

    console.quiet = silent

    try:
        config = StoreConfig(base=base)
    except ValidationError as e:
        raise click.BadParameter(
            str(e.errors()[0]["msg"]), ctx=ctx, param_hint="'--base'"
        )

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["store"] = DotStore(config=config)


main.add_command(run_delete)
main.add_command(run_get)
main.add_command(run_list)
main.add_command(run_set)


@main.command(name="path")
@click.option(
    "--local",
    "-l",
    is_flag=True,
    default=False,
    help="Print the directory in the current working directory instead of the home directory.",
)
@click.pass_context
def path(ctx: Context, local: bool) -> None:
    """Print the root directory of a scope."""
    from dotstore.core.enums import Scope
    from dotstore.store import DotStore, HomeResolutionError

    store: DotStore = ctx.obj["store"]
    try:
        root = store.root(Scope.LOCAL if local else Scope.GLOBAL)
    except HomeResolutionError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    console.out(str(root), highlight=False)


if __name__ == "__main__":
    main()
