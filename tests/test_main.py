"""Tests for main.py - command-line runner."""

import json

import pytest
from click.testing import CliRunner

from conftest import StubRedisService
from main import cli
from plugins.redis import RedisPlugin
from plugins.registry import get_registry


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def registry_with_stub():
    service = StubRedisService()
    get_registry().register_plugin(RedisPlugin(service=service))
    return service


class TestCli:
    """Tests for the cli command."""

    def test_create_from_stdin(self, runner, registry_with_stub, create_item):
        result = runner.invoke(
            cli, ["redis", "create"], input=json.dumps({"inputs": [create_item]})
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout.strip().splitlines()[-1])
        assert payload == {
            "outputs": [{"request_id": "req-1", "guid": "g1", "deal_id": "deal-1"}]
        }

    def test_terminate_from_file(self, runner, registry_with_stub, terminate_item, tmp_path):
        path = tmp_path / "payload.json"
        path.write_text(json.dumps({"inputs": [terminate_item]}))
        result = runner.invoke(cli, ["redis", "terminate", str(path)])
        assert result.exit_code == 0
        assert '"task_id": 1001' in result.stdout

    def test_unknown_action_exits_nonzero(self, runner, registry_with_stub):
        result = runner.invoke(cli, ["redis", "resize"], input="{}")
        assert result.exit_code == 1
        assert "resize" in result.output

    def test_validation_error_exits_nonzero(self, runner, registry_with_stub, create_item):
        bad = dict(create_item, password="")
        result = runner.invoke(cli, ["redis", "create"], input=json.dumps({"inputs": [bad]}))
        assert result.exit_code == 1
        assert "password" in result.output
        assert registry_with_stub.calls == []

    def test_registers_builtin_plugins_when_empty(self, runner):
        result = runner.invoke(cli, ["mysql", "create"], input="{}")
        assert result.exit_code == 1
        assert get_registry().list_plugins() == ["redis"]
