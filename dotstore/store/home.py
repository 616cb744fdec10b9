import os
import platform
from abc import ABC, abstractmethod
from pathlib import Path

from .exceptions import HomeResolutionError


class HomeDirectoryResolver(ABC):
    """
    ABC for all home directory resolvers.
    """

    @abstractmethod
    def resolve(self) -> Path:
        """
        Return the home directory of the current user.
        :return: system path to the home directory
        """


class PosixHomeDirectoryResolver(HomeDirectoryResolver):
    """
    Reads the `HOME` environment variable. The value is neither validated nor expanded; an unset
    variable yields an empty (relative) path.
    """

    def resolve(self) -> Path:
        return Path(os.environ.get("HOME", ""))


class WindowsHomeDirectoryResolver(HomeDirectoryResolver):
    """
    Prefers `HOME`, then `USERPROFILE`, then `HOMEDRIVE` joined with `HOMEPATH`.
    """

    def resolve(self) -> Path:
        home = os.environ.get("HOME")
        if home:
            return Path(home)

        profile = os.environ.get("USERPROFILE")
        if profile:
            return Path(profile)

        drive = os.environ.get("HOMEDRIVE")
        path = os.environ.get("HOMEPATH")
        if drive and path:
            return Path(drive + path)

        raise HomeResolutionError(
            "HOMEDRIVE, HOMEPATH, and USERPROFILE are blank or not set."
        )


def default_home_resolver() -> HomeDirectoryResolver:
    if platform.system() == "Windows":
        return WindowsHomeDirectoryResolver()
    return PosixHomeDirectoryResolver()
