from pathlib import Path

import pytest

from dotstore.store import (
    HomeResolutionError,
    PosixHomeDirectoryResolver,
    WindowsHomeDirectoryResolver,
    default_home_resolver,
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ["HOME", "USERPROFILE", "HOMEDRIVE", "HOMEPATH"]:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


def test_posix_resolver(clean_env):
    clean_env.setenv("HOME", "/home/user")
    assert PosixHomeDirectoryResolver().resolve() == Path("/home/user")


def test_posix_resolver_does_not_validate(clean_env):
    clean_env.setenv("HOME", "/does/not/exist")
    assert PosixHomeDirectoryResolver().resolve() == Path("/does/not/exist")


def test_posix_resolver_unset(clean_env):
    assert PosixHomeDirectoryResolver().resolve() == Path("")


def test_windows_resolver_order(clean_env):
    clean_env.setenv("HOMEDRIVE", "C:")
    clean_env.setenv("HOMEPATH", "\\Users\\drive")
    assert WindowsHomeDirectoryResolver().resolve() == Path("C:\\Users\\drive")

    clean_env.setenv("USERPROFILE", "C:\\Users\\profile")
    assert WindowsHomeDirectoryResolver().resolve() == Path("C:\\Users\\profile")

    clean_env.setenv("HOME", "C:\\Users\\home")
    assert WindowsHomeDirectoryResolver().resolve() == Path("C:\\Users\\home")


def test_windows_resolver_failure(clean_env):
    with pytest.raises(HomeResolutionError):
        WindowsHomeDirectoryResolver().resolve()

    clean_env.setenv("HOMEDRIVE", "C:")
    with pytest.raises(HomeResolutionError):
        WindowsHomeDirectoryResolver().resolve()


def test_default_resolver(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("platform.system", lambda: "Windows")
    assert isinstance(default_home_resolver(), WindowsHomeDirectoryResolver)

    for system in ["Linux", "Darwin", "FreeBSD"]:
        monkeypatch.setattr("platform.system", lambda: system)
        assert isinstance(default_home_resolver(), PosixHomeDirectoryResolver)


def test_home_resolution_error_propagates(clean_env, work_path: Path):
    from dotstore import DotStore

    store = DotStore("tool", home_resolver=WindowsHomeDirectoryResolver())
    with pytest.raises(HomeResolutionError):
        store.load_global("ns", "key")
    with pytest.raises(HomeResolutionError):
        store.load_local_or_global("ns", "key")
