from pathlib import Path
from typing import List, Optional

from dotstore.core import get_logger
from dotstore.core.enums import Scope
from dotstore.utils import make_dirs, read_text_file, write_text_file

from .data_model import ScopedValue, StoreConfig
from .home import HomeDirectoryResolver, default_home_resolver

logger = get_logger(__name__)


class DotStore:
    """
    Key/value store keeping every value in its own file `<root>/.<base>/<namespace>/<key>`.
    The root is either the home directory (global scope) or the current working directory (local scope).

    Errors of the underlying file operations are not translated: a missing entry raises `FileNotFoundError`,
    other failures raise `OSError` (or one of its subclasses).
    """

    __config: StoreConfig
    __home_resolver: HomeDirectoryResolver

    def __init__(
        self,
        base: Optional[str] = None,
        *,
        config: Optional[StoreConfig] = None,
        home_resolver: Optional[HomeDirectoryResolver] = None,
    ):
        """
        Initialize the `DotStore` class. Either `base` or `config` must be provided.
        If `home_resolver` is not provided, the resolver for the current platform is used.
        No file system access happens here.
        """
        if config is None:
            if base is None:
                raise ValueError("Either `base` or `config` must be provided.")
            config = StoreConfig(base=base)
        elif base is not None and base != config.base:
            raise ValueError(
                f"Base `{base}` does not match the config base `{config.base}`."
            )

        self.__config = config
        self.__home_resolver = (
            home_resolver if home_resolver is not None else default_home_resolver()
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__config.base!r})"

    @property
    def base(self) -> str:
        """
        Returns:
            Application identifier used to name the `.<base>` directories.
        """
        return self.__config.base

    @property
    def config(self) -> StoreConfig:
        return self.__config

    @property
    def global_root(self) -> Path:
        """
        Returns:
            System path to the `.<base>` directory in the home directory. Resolved on every access.
        """
        return self.__home_resolver.resolve() / self.__config.dirname

    @property
    def local_root(self) -> Path:
        """
        Returns:
            System path to the `.<base>` directory in the current working directory. Resolved on every access.
        """
        return Path.cwd() / self.__config.dirname

    def root(self, scope: Scope) -> Path:
        if scope == Scope.LOCAL:
            return self.local_root
        return self.global_root

    def path(self, scope: Scope, namespace: str, key: str) -> Path:
        """
        Args:
            scope: Scope to resolve the path in.
            namespace: Namespace of the entry.
            key: Key of the entry.

        Returns:
            System path to the file holding the entry.
        """
        return self.root(scope) / namespace / key

    def list_keys(self, namespace: str) -> List[str]:
        """
        List keys of a namespace in the global scope.

        Args:
            namespace: Namespace to list.

        Returns:
            Sorted names of all entries in the namespace directory.

        Raises:
            FileNotFoundError: If the namespace directory does not exist.
        """
        directory = self.root(Scope.GLOBAL) / namespace
        return sorted(p.name for p in directory.iterdir())

    def save(self, namespace: str, key: str, value: str) -> None:
        """
        Same as `save_global`.
        """
        self.save_global(namespace, key, value)

    def save_global(self, namespace: str, key: str, value: str) -> None:
        """
        Save a value into the global scope, overwriting any previous value.
        Missing directories are created.

        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.
            value: New value.
        """
        self.__save(Scope.GLOBAL, namespace, key, value)

    def save_local(self, namespace: str, key: str, value: str) -> None:
        """
        Save a value into the local scope, overwriting any previous value.
        Missing directories are created.

        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.
            value: New value.
        """
        self.__save(Scope.LOCAL, namespace, key, value)

    def load(self, namespace: str, key: str) -> str:
        """
        Same as `load_global`.
        """
        return self.load_global(namespace, key)

    def load_global(self, namespace: str, key: str) -> str:
        """
        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.

        Returns:
            Value stored in the global scope.

        Raises:
            FileNotFoundError: If the entry does not exist.
        """
        return self.__load(Scope.GLOBAL, namespace, key)

    def load_local(self, namespace: str, key: str) -> str:
        """
        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.

        Returns:
            Value stored in the local scope.

        Raises:
            FileNotFoundError: If the entry does not exist.
        """
        return self.__load(Scope.LOCAL, namespace, key)

    def load_local_or_global(self, namespace: str, key: str) -> str:
        """
        Load a value from the local scope. If that fails for any reason, load it from the global scope instead.
        Only errors of the global attempt are raised.

        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.

        Returns:
            Value stored in the local scope if readable, otherwise the value stored in the global scope.
        """
        return self.lookup(namespace, key).value

    def lookup(self, namespace: str, key: str) -> ScopedValue:
        """
        Resolve a value the same way as `load_local_or_global` and report which scope provided it.

        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.

        Returns:
            Loaded value together with the scope it was loaded from.
        """
        try:
            return ScopedValue(
                scope=Scope.LOCAL, value=self.load_local(namespace, key)
            )
        except (OSError, ValueError) as e:
            logger.debug(
                f"Failed to load '{namespace}/{key}' from the local scope, falling back to the global scope: {e}"
            )
        return ScopedValue(scope=Scope.GLOBAL, value=self.load_global(namespace, key))

    def delete(self, namespace: str, key: str) -> None:
        """
        Same as `delete_global`.
        """
        self.delete_global(namespace, key)

    def delete_global(self, namespace: str, key: str) -> None:
        """
        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.

        Raises:
            FileNotFoundError: If the entry does not exist.
        """
        self.__delete(Scope.GLOBAL, namespace, key)

    def delete_local(self, namespace: str, key: str) -> None:
        """
        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.

        Raises:
            FileNotFoundError: If the entry does not exist.
        """
        self.__delete(Scope.LOCAL, namespace, key)

    def delete_local_or_global(self, namespace: str, key: str) -> None:
        """
        Delete an entry from the local scope. If that fails for any reason, delete it from the global scope instead.
        Only errors of the global attempt are raised.

        Args:
            namespace: Namespace of the entry.
            key: Key of the entry.
        """
        try:
            self.delete_local(namespace, key)
            return
        except (OSError, ValueError) as e:
            logger.debug(
                f"Failed to delete '{namespace}/{key}' from the local scope, falling back to the global scope: {e}"
            )
        self.delete_global(namespace, key)

    def __save(self, scope: Scope, namespace: str, key: str, value: str) -> None:
        path = self.path(scope, namespace, key)
        logger.debug(f"Saving '{namespace}/{key}' to {path}")

        make_dirs(path.parent, self.__config.dir_mode)
        write_text_file(
            path,
            value,
            mode=self.__config.file_mode,
            encoding=self.__config.encoding,
            errors=self.__config.encoding_errors,
        )

    def __load(self, scope: Scope, namespace: str, key: str) -> str:
        path = self.path(scope, namespace, key)
        logger.debug(f"Loading '{namespace}/{key}' from {path}")

        return read_text_file(
            path,
            encoding=self.__config.encoding,
            errors=self.__config.encoding_errors,
        )

    def __delete(self, scope: Scope, namespace: str, key: str) -> None:
        path = self.path(scope, namespace, key)
        logger.debug(f"Deleting '{namespace}/{key}' from {path}")

        path.unlink()
