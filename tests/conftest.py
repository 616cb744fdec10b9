from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "platform_dependent: test relies on POSIX file system semantics"
    )


@pytest.fixture()
def home_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    monkeypatch.setenv("USERPROFILE", str(path))
    return path


@pytest.fixture()
def work_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path
