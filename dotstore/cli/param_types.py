from __future__ import annotations

from typing import TYPE_CHECKING, List

from rich_click import Context, Parameter, ParamType

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem


class StoredKey(ParamType):
    """
    Key of an entry. Completes keys already saved in the global scope of the namespace given
    by the `namespace` parameter.
    """

    name = "key"

    def shell_complete(
        self, ctx: Context, param: Parameter, incomplete: str
    ) -> List[CompletionItem]:
        from click.shell_completion import CompletionItem

        from dotstore.store import DotStore

        namespace = ctx.params.get("namespace")
        base = ctx.find_root().params.get("base")
        if not namespace or not base:
            return []

        try:
            keys = DotStore(base).list_keys(namespace)
        except (OSError, ValueError):
            return []

        return [CompletionItem(key) for key in keys if key.startswith(incomplete)]
