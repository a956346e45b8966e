"""
Tests for the list CLI command.
"""

import argparse
import json

import pytest

from tagfilter.cli.commands.listing import add_list_parser, cmd_list
from tagfilter.core.registry import DEFAULT_CATALOGERS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TAGFILTER_DEFAULT_TAGS", raising=False)
    monkeypatch.delenv("TAGFILTER_REGISTRY", raising=False)


@pytest.fixture
def parser():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers()
    add_list_parser(subparsers)
    return parser


@pytest.fixture
def registry_file(tmp_path):
    path = tmp_path / "catalogers.json"
    path.write_text(json.dumps({"catalogers": [
        {"name": "a", "tags": ["x", "y"], "description": "first"},
        {"name": "b", "tags": ["y", "z"]},
    ]}))
    return path


class TestCmdList:
    """Test running the list command."""

    def test_tags_only(self, parser, registry_file, capsys):
        """Test --tags prints universe tags in first-seen order."""
        args = parser.parse_args(["list", "--registry", str(registry_file), "--tags"])
        assert cmd_list(args) == 0
        assert capsys.readouterr().out.splitlines() == ["a", "x", "y", "b", "z"]

    def test_json(self, parser, registry_file, capsys):
        args = parser.parse_args(["list", "--registry", str(registry_file), "-f", "json"])
        assert cmd_list(args) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["catalogers"][0] == {"name": "a", "tags": ["x", "y"], "description": "first"}
        assert data["tags"] == ["a", "x", "y", "b", "z"]

    def test_table(self, parser, registry_file, capsys):
        args = parser.parse_args(["list", "--registry", str(registry_file)])
        assert cmd_list(args) == 0
        out = capsys.readouterr().out
        assert "first" in out
        assert "2 catalogers, 5 tags" in out

    def test_builtin(self, parser, capsys):
        args = parser.parse_args(["list", "-f", "json"])
        assert cmd_list(args) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["catalogers"]) == len(DEFAULT_CATALOGERS)
