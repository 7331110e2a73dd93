"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from dagger_client import cli
from dagger_client.core.executor import GraphQLExecutor


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("DAGGER_SESSION_PORT", "DAGGER_SESSION_TOKEN", "DAGGER_SESSION_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_engine(engine, monkeypatch):
    """Route the CLI's executor through the fake engine."""
    def executor(url, auth=None, *, timeout=None):
        return GraphQLExecutor(url, auth, timeout=timeout, transport=engine.transport)

    monkeypatch.setattr(cli, "GraphQLExecutor", executor)
    return engine


class TestQueryCommand:
    """Tests for the query command."""

    def test_prints_data(self, fake_engine):
        """Test the response data is printed as JSON."""
        fake_engine.reply({"defaultPlatform": "linux/amd64"})

        result = CliRunner().invoke(cli.main, ["query", "--port", "8080"],
                                    input="{ defaultPlatform }")

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"defaultPlatform": "linux/amd64"}
        assert str(fake_engine.requests[0].url) == "http://127.0.0.1:8080/query"

    def test_reads_file(self, fake_engine, tmp_path):
        """Test reading the document from --file."""
        doc = tmp_path / "q.graphql"
        doc.write_text("{ container { id } }")
        fake_engine.reply({"container": {"id": "ctr-1"}})

        result = CliRunner().invoke(cli.main, ["query", "--file", str(doc), "--url", "http://e/query"])

        assert result.exit_code == 0, result.output
        assert fake_engine.queries == ["{ container { id } }"]

    def test_exec_error(self, fake_engine):
        """Test a failed command prints its stderr and exits 1."""
        fake_engine.reply(None, errors=[{
            "message": "exit code: 1",
            "extensions": {"_type": "EXEC_ERROR", "exitCode": 1, "stderr": "boom"},
        }])

        result = CliRunner().invoke(cli.main, ["query", "--port", "8080"], input="{ a }")

        assert result.exit_code == 1
        assert "Stderr:\nboom" in result.output

    def test_no_session(self, fake_engine):
        """Test a missing session is reported without a request."""
        result = CliRunner().invoke(cli.main, ["query"], input="{ a }")

        assert result.exit_code == 1
        assert "DAGGER_SESSION_PORT" in result.output
        assert fake_engine.requests == []

    def test_empty_document(self, fake_engine):
        result = CliRunner().invoke(cli.main, ["query", "--port", "8080"], input="  \n")
        assert result.exit_code == 1


class TestCheckVersionCommand:
    """Tests for the check-version command."""

    def test_compatible(self, fake_engine, monkeypatch):
        """Test a compatible version exits 0."""
        monkeypatch.setenv("DAGGER_SESSION_PORT", "8080")
        fake_engine.reply({"checkVersionCompatibility": True})

        result = CliRunner().invoke(cli.main, ["check-version", "v0.9.7"])

        assert result.exit_code == 0, result.output
        assert "compatible with v0.9.7" in result.output
        assert 'checkVersionCompatibility(version: "v0.9.7")' in fake_engine.queries[0]

    def test_incompatible(self, fake_engine):
        """Test an incompatible version exits 1."""
        fake_engine.reply({"checkVersionCompatibility": False})

        result = CliRunner().invoke(cli.main, ["check-version", "v0.1.0", "--port", "8080"])

        assert result.exit_code == 1
