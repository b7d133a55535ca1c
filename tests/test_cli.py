"""Tests for the click front-end."""

import json

import pytest
from click.testing import CliRunner

from tassist.cli import main
from tassist.config import Config

ADD_AMY = "add n/Amy Bee p/11111111 e/amy@example.com s/A1111111A"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    monkeypatch.setattr("tassist.cli.load_config", lambda: Config())


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "addressbook.json"


def invoke(data_file, *args, input=None):
    return CliRunner().invoke(main, ["--data-file", str(data_file), *args], input=input)


class TestRun:
    def test_add_then_list(self, data_file):
        result = invoke(data_file, "run", *ADD_AMY.split())
        assert result.exit_code == 0
        assert "New person added: Amy Bee" in result.output

        saved = json.loads(data_file.read_text())
        assert saved["persons"][0]["studentId"] == "A1111111A"

        result = invoke(data_file, "list-persons")
        assert result.exit_code == 0
        assert "1. Amy Bee; Phone: 11111111" in result.output

    def test_error_exits_non_zero(self, data_file):
        result = invoke(data_file, "run", "delete", "1")
        assert result.exit_code == 1
        assert "The person index provided is invalid" in result.output

    def test_help_prints_usage(self, data_file):
        result = invoke(data_file, "run", "help")
        assert result.exit_code == 0
        assert "Opened help window." in result.output
        assert "add: Adds a person to the address book." in result.output

    def test_list_persons_empty(self, data_file):
        result = invoke(data_file, "list-persons")
        assert "No persons to show." in result.output


class TestRepl:
    def test_runs_until_exit(self, data_file):
        result = invoke(data_file, input=f"{ADD_AMY}\nfind nobody\nlist\nexit\nlist\n")
        assert result.exit_code == 0
        assert "New person added: Amy Bee" in result.output
        assert "0 persons listed!" in result.output
        assert "1. Amy Bee" in result.output
        assert result.output.count("Listed all persons") == 1
        assert "Exiting Address Book as requested ..." in result.output

    def test_errors_do_not_stop_the_loop(self, data_file):
        result = invoke(data_file, "repl", input="bogus\nadd n/Amy\nexit\n")
        assert result.exit_code == 0
        assert "Unknown command" in result.output
        assert "Invalid command format!" in result.output
        assert "Exiting Address Book" in result.output

    def test_help_prints_every_usage(self, data_file):
        result = invoke(data_file, "repl", input="help\nexit\n")
        assert "Opened help window." in result.output
        assert "github: Sets the Github link" in result.output
