from pathlib import Path

import pytest
from click.testing import CliRunner

from dotstore import DotStore
from dotstore.cli.__main__ import main


@pytest.fixture()
def cli_runner(home_path: Path, work_path: Path) -> CliRunner:
    return CliRunner()


def test_cli_set_get(cli_runner: CliRunner, home_path: Path):
    result = cli_runner.invoke(
        main, ["--base", "tool", "set", "profiles", "default", "region=us-east-1"]
    )
    assert result.exit_code == 0, result.output
    assert (home_path / ".tool" / "profiles" / "default").read_text() == (
        "region=us-east-1"
    )

    result = cli_runner.invoke(main, ["--base", "tool", "get", "profiles", "default"])
    assert result.exit_code == 0, result.output
    assert result.output == "region=us-east-1\n"


def test_cli_base_from_env(cli_runner: CliRunner, home_path: Path):
    result = cli_runner.invoke(
        main, ["set", "ns", "key", "value"], env={"DOTSTORE_BASE": "envtool"}
    )
    assert result.exit_code == 0, result.output
    assert (home_path / ".envtool" / "ns" / "key").read_text() == "value"


def test_cli_invalid_base(cli_runner: CliRunner):
    result = cli_runner.invoke(main, ["--base", "a/b", "list", "ns"])
    assert result.exit_code == 2


def test_cli_set_local_from_stdin(cli_runner: CliRunner, work_path: Path):
    result = cli_runner.invoke(
        main, ["--base", "tool", "set", "--local", "ns", "key", "-"], input="abc\n"
    )
    assert result.exit_code == 0, result.output
    assert (work_path / ".tool" / "ns" / "key").read_text() == "abc\n"


def test_cli_get_scopes(cli_runner: CliRunner):
    store = DotStore("tool")
    store.save_global("ns", "key", "v2")
    store.save_local("ns", "key", "v1")

    result = cli_runner.invoke(
        main, ["--base", "tool", "get", "--show-scope", "ns", "key"]
    )
    assert result.exit_code == 0, result.output
    assert result.output == "local\nv1\n"

    result = cli_runner.invoke(
        main, ["--base", "tool", "get", "--scope", "global", "ns", "key"]
    )
    assert result.exit_code == 0, result.output
    assert result.output == "v2\n"


def test_cli_get_missing(cli_runner: CliRunner):
    result = cli_runner.invoke(main, ["--base", "tool", "get", "ns", "missing"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_cli_list(cli_runner: CliRunner):
    store = DotStore("tool")
    for key in ["b", "a", "c"]:
        store.save_global("ns", key, key.upper())

    result = cli_runner.invoke(main, ["--base", "tool", "list", "ns"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["a", "b", "c"]

    result = cli_runner.invoke(main, ["--base", "tool", "list", "--values", "ns"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["a=A", "b=B", "c=C"]


def test_cli_list_missing_namespace(cli_runner: CliRunner):
    result = cli_runner.invoke(main, ["--base", "tool", "list", "ns"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_cli_delete(cli_runner: CliRunner):
    store = DotStore("tool")
    store.save_global("ns", "key", "v2")
    store.save_local("ns", "key", "v1")

    result = cli_runner.invoke(
        main, ["--base", "tool", "delete", "--scope", "auto", "ns", "key"]
    )
    assert result.exit_code == 0, result.output
    with pytest.raises(FileNotFoundError):
        store.load_local("ns", "key")
    assert store.load_global("ns", "key") == "v2"

    result = cli_runner.invoke(main, ["--base", "tool", "delete", "ns", "key"])
    assert result.exit_code == 0, result.output
    with pytest.raises(FileNotFoundError):
        store.load_global("ns", "key")

    result = cli_runner.invoke(main, ["--base", "tool", "delete", "ns", "key"])
    assert result.exit_code == 1


def test_cli_path(cli_runner: CliRunner, home_path: Path, work_path: Path):
    result = cli_runner.invoke(main, ["--base", "tool", "path"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(home_path / ".tool")

    result = cli_runner.invoke(main, ["--base", "tool", "path", "--local"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(work_path / ".tool")


def test_cli_silent(cli_runner: CliRunner):
    result = cli_runner.invoke(
        main, ["--base", "tool", "--silent", "set", "ns", "key", "value"]
    )
    assert result.exit_code == 0
    assert result.output == ""
