from .data_model import ScopedValue, StoreConfig
from .exceptions import HomeResolutionError
from .home import (
    HomeDirectoryResolver,
    PosixHomeDirectoryResolver,
    WindowsHomeDirectoryResolver,
    default_home_resolver,
)
from .scoped_store import DotStore

__doc__ = """This module implements a directory based key/value store. Every value is kept in its own file:

    <root>/.<base>/<namespace>/<key>

There are two roots:
* the global root is the home directory of the current user (`HOME` on Linux and macOS, `USERPROFILE` on Windows)
* the local root is the current working directory

Both roots are resolved on every call, so changing the working directory or the environment takes effect immediately.
Plain operations work with the global root. `*_local_or_global` operations try the local root first and fall back to the
global one on any failure; only the outcome of the global attempt is reported in that case.

Created directories are accessible by the owner only (`0o700`), created files are readable and writable by the owner
only (`0o600`). There is no locking, concurrent writers race and the last one wins."""
