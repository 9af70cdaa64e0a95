import os
import shutil
import tempfile
from unittest import mock

import pytest

from pulsar_agent.engine_api.client import EngineApiClient, EngineApiClientError
from pulsar_agent.engine_api.dto import ConfigKV, ModuleConfigKVs
from pulsar_agent.engine_api.error import BadRequest
from pulsar_agent.engine_api.server import run_api_server


class FakeDaemon:
    def __init__(self):
        self.configs = {
            "file-system-monitor": {"enabled": "true"},
            "logger": {"level": "info", "console": "false"},
        }
        self.calls = []

    def _check(self, name):
        if name not in self.configs:
            raise BadRequest(f"Module not found {name}")

    async def modules(self):
        return [{"name": name} for name in self.configs]

    async def get_configurations(self):
        return {m: dict(c) for m, c in self.configs.items()}

    async def get_configuration(self, name):
        self._check(name)
        return dict(self.configs[name])

    async def start(self, name):
        self._check(name)
        self.calls.append(("start", name))

    async def stop(self, name):
        self._check(name)
        self.calls.append(("stop", name))

    async def restart(self, name):
        self._check(name)
        self.calls.append(("restart", name))

    async def update_configuration(self, name, key, value):
        self._check(name)
        self.configs[name][key] = value


@pytest.fixture
def socket_path():
    directory = tempfile.mkdtemp(prefix="pa")
    yield os.path.join(directory, "api.sock")
    shutil.rmtree(directory, ignore_errors=True)


def test_missing_socket(socket_path):
    with pytest.raises(EngineApiClientError, match="not found"):
        EngineApiClient(socket_path)


def test_regular_file_is_rejected(socket_path):
    with open(socket_path, "w") as fh:
        fh.write("x")
    with pytest.raises(EngineApiClientError, match="is not a unix socket"):
        EngineApiClient(socket_path)


@pytest.mark.asyncio
async def test_default_uses_default_socket(socket_path):
    handle = await run_api_server(FakeDaemon(), socket_path)
    try:
        with mock.patch("pulsar_agent.engine_api.client.DEFAULT_UDS", socket_path):
            client = EngineApiClient.default()
        assert client.socket == socket_path
    finally:
        await handle.stop()


@pytest.mark.asyncio
async def test_list_modules(socket_path):
    daemon = FakeDaemon()
    handle = await run_api_server(daemon, socket_path)
    try:
        client = EngineApiClient(socket_path)
        modules = await client.list_modules()
        assert modules == [{"name": n} for n in daemon.configs]
    finally:
        await handle.stop()


@pytest.mark.asyncio
async def test_get_configs(socket_path):
    daemon = FakeDaemon()
    handle = await run_api_server(daemon, socket_path)
    try:
        client = EngineApiClient(socket_path)
        configs = await client.get_configs()
        expected = [
            ModuleConfigKVs(m, [ConfigKV(k, v) for k, v in c.items()])
            for m, c in daemon.configs.items()
        ]
        assert configs == expected
    finally:
        await handle.stop()


@pytest.mark.asyncio
async def test_set_and_get_module_config(socket_path):
    daemon = FakeDaemon()
    handle = await run_api_server(daemon, socket_path)
    try:
        client = EngineApiClient(socket_path)
        await client.set_module_config("logger", "level", "debug")
        config = await client.get_module_config("logger")
        assert ConfigKV("level", "debug") in config
        assert daemon.configs["logger"]["level"] == "debug"
    finally:
        await handle.stop()


@pytest.mark.asyncio
async def test_start_stop_restart(socket_path):
    daemon = FakeDaemon()
    handle = await run_api_server(daemon, socket_path)
    try:
        client = EngineApiClient(socket_path)
        await client.start("logger")
        await client.stop("logger")
        await client.restart("logger")
        assert daemon.calls == [
            ("start", "logger"),
            ("stop", "logger"),
            ("restart", "logger"),
        ]
    finally:
        await handle.stop()


@pytest.mark.asyncio
async def test_error_body_is_reported(socket_path):
    handle = await run_api_server(FakeDaemon(), socket_path)
    try:
        client = EngineApiClient(socket_path)
        with pytest.raises(EngineApiClientError) as info:
            await client.start("missing")
        assert str(info.value) == "Error during request. Module not found missing"
        with pytest.raises(EngineApiClientError, match="Error during request"):
            await client.set_module_config("missing", "k", "v")
    finally:
        await handle.stop()