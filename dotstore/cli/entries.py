from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

import rich_click as click
from click.core import Context
from rich.markup import escape

from .console import console
from .param_types import StoredKey

if TYPE_CHECKING:
    from dotstore.store import DotStore

SCOPE_CHOICES = click.Choice(["auto", "local", "global"], case_sensitive=False)


@contextmanager
def handle_store_errors(subject: str) -> Iterator[None]:
    from dotstore.store import HomeResolutionError

    try:
        yield
    except FileNotFoundError:
        console.print(f"[red]{escape(subject)} not found.[/red]")
        sys.exit(1)
    except (OSError, HomeResolutionError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


@click.command(name="list")
@click.argument("namespace")
@click.option(
    "--values",
    "-v",
    is_flag=True,
    default=False,
    help="Print values next to keys.",
)
@click.pass_context
def run_list(ctx: Context, namespace: str, values: bool) -> None:
    """List keys saved in a namespace of the global scope."""
    store: DotStore = ctx.obj["store"]

    with handle_store_errors(f"Namespace '{namespace}'"):
        keys = store.list_keys(namespace)

    for key in keys:
        if values:
            with handle_store_errors(f"Entry '{namespace}/{key}'"):
                value = store.load_global(namespace, key)
            console.out(f"{key}={value}", highlight=False)
        else:
            console.out(key, highlight=False)


@click.command(name="get")
@click.argument("namespace")
@click.argument("key", type=StoredKey())
@click.option(
    "--scope",
    type=SCOPE_CHOICES,
    default="auto",
    show_default=True,
    help="Scope to load from. `auto` tries the local scope first, then the global one.",
)
@click.option(
    "--show-scope",
    is_flag=True,
    default=False,
    help="Print the scope the value was loaded from.",
)
@click.pass_context
def run_get(
    ctx: Context, namespace: str, key: str, scope: str, show_scope: bool
) -> None:
    """Print the value of an entry."""
    from dotstore.core.enums import Scope

    store: DotStore = ctx.obj["store"]

    with handle_store_errors(f"Entry '{namespace}/{key}'"):
        if scope == "auto":
            result = store.lookup(namespace, key)
            value, loaded_from = result.value, result.scope
        elif scope == "local":
            value, loaded_from = store.load_local(namespace, key), Scope.LOCAL
        else:
            value, loaded_from = store.load_global(namespace, key), Scope.GLOBAL

    if show_scope:
        console.print(f"[bold]{loaded_from}[/bold]")
    console.out(value, highlight=False, end="" if value.endswith("\n") else "\n")


@click.command(name="set")
@click.argument("namespace")
@click.argument("key", type=StoredKey())
@click.argument("value")
@click.option(
    "--local",
    "-l",
    is_flag=True,
    default=False,
    help="Save into the current working directory instead of the home directory.",
)
@click.pass_context
def run_set(ctx: Context, namespace: str, key: str, value: str, local: bool) -> None:
    """
    Save the value of an entry. Use `-` as VALUE to read it from standard input.
    """
    store: DotStore = ctx.obj["store"]

    if value == "-":
        value = click.get_text_stream("stdin").read()

    with handle_store_errors(f"Entry '{namespace}/{key}'"):
        if local:
            store.save_local(namespace, key, value)
        else:
            store.save_global(namespace, key, value)

    console.print(f"[green]Saved '{escape(namespace)}/{escape(key)}'[/green]")


@click.command(name="delete")
@click.argument("namespace")
@click.argument("key", type=StoredKey())
@click.option(
    "--scope",
    type=SCOPE_CHOICES,
    default="global",
    show_default=True,
    help="Scope to delete from. `auto` tries the local scope first, then the global one.",
)
@click.pass_context
def run_delete(ctx: Context, namespace: str, key: str, scope: str) -> None:
    """Delete an entry."""
    store: DotStore = ctx.obj["store"]

    with handle_store_errors(f"Entry '{namespace}/{key}'"):
        if scope == "auto":
            store.delete_local_or_global(namespace, key)
        elif scope == "local":
            store.delete_local(namespace, key)
        else:
            store.delete_global(namespace, key)

    console.print(f"[green]Deleted '{escape(namespace)}/{escape(key)}'[/green]")
