"""Client for the engine API served on a unix socket."""

from __future__ import annotations

import json
import os
import stat
from typing import Any
from urllib.parse import quote

import aiohttp

from .dto import DEFAULT_UDS, ConfigKV, ModuleConfigKVs

_BASE_URL = "http://localhost"


class EngineApiClientError(Exception):
    """A request to the engine API failed."""


def _check_socket(socket: str) -> None:
    try:
        info = os.stat(socket)
    except FileNotFoundError:
        raise EngineApiClientError(
            f"'{socket}' not found. Check if the daemon is running"
        ) from None
    except PermissionError:
        raise EngineApiClientError(f"No write permission on '{socket}'") from None
    except ValueError as err:
        raise EngineApiClientError(
            f"Can't convert '{socket}' to a valid string "
        ) from err
    except OSError as err:
        raise EngineApiClientError(f"Failed to get '{socket}' metadata") from err
    if not stat.S_ISSOCK(info.st_mode):
        raise EngineApiClientError(f"'{socket}' is not a unix socket")
    if not os.access(socket, os.W_OK):
        raise EngineApiClientError(f"No write permission on '{socket}'")


def _module_path(module_name: str, action: str) -> str:
    return f"/modules/{quote(module_name, safe='')}/{action}"


class EngineApiClient:
    """Talks to a running daemon through its unix socket."""

    def __init__(self, socket: str) -> None:
        _check_socket(socket)
        self._socket = socket

    @classmethod
    def default(cls) -> EngineApiClient:
        """Client for the daemon's default socket."""
        return cls(DEFAULT_UDS)

    @property
    def socket(self) -> str:
        return self._socket

    def __repr__(self) -> str:
        return f"EngineApiClient(socket={self._socket!r})"

    async def _request(self, method: str, path: str, **kwargs: Any) -> tuple[int, bytes]:
        connector = aiohttp.UnixConnector(path=self._socket)
        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.request(method, _BASE_URL + path, **kwargs) as resp:
                    return resp.status, await resp.read()
        except aiohttp.ClientError as err:
            raise EngineApiClientError(
                f"Error during the http request. Reason: {err}"
            ) from err

    async def _get(self, path: str) -> Any:
        _, body = await self._request("GET", path)
        try:
            return json.loads(body)
        except ValueError as err:
            raise EngineApiClientError(f"Invalid response body: {err}") from err

    @staticmethod
    def _check_ok(status: int, body: bytes) -> None:
        if status == 200:
            return
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as err:
            raise EngineApiClientError(
                f"Cannot parse error str. Reason: {err}"
            ) from err
        raise EngineApiClientError(f"Error during request. {text}")

    async def _empty_post(self, path: str) -> None:
        status, body = await self._request("POST", path)
        self._check_ok(status, body)

    async def list_modules(self) -> list[Any]:
        """Overview of every module known to the daemon."""
        return await self._get("/modules")

    async def get_configs(self) -> list[ModuleConfigKVs]:
        """Configuration of every module."""
        data = await self._get("/configs")
        if not isinstance(data, list):
            raise EngineApiClientError("Invalid response body: expected a list")
        try:
            return [ModuleConfigKVs.from_dict(entry) for entry in data]
        except ValueError as err:
            raise EngineApiClientError(f"Invalid response body: {err}") from err

    async def start(self, module_name: str) -> None:
        await self._empty_post(_module_path(module_name, "start"))

    async def stop(self, module_name: str) -> None:
        await self._empty_post(_module_path(module_name, "stop"))

    async def restart(self, module_name: str) -> None:
        await self._empty_post(_module_path(module_name, "restart"))

    async def get_module_config(self, module_name: str) -> list[ConfigKV]:
        """Configuration of one module."""
        data = await self._get(_module_path(module_name, "config"))
        if not isinstance(data, list):
            raise EngineApiClientError("Invalid response body: expected a list")
        try:
            return [ConfigKV.from_dict(entry) for entry in data]
        except ValueError as err:
            raise EngineApiClientError(f"Invalid response body: {err}") from err

    async def set_module_config(self, module_name: str, key: str, value: str) -> None:
        """Change one configuration value of a module."""
        body = json.dumps(ConfigKV(key=key, value=value).to_dict())
        status, response = await self._request(
            "PATCH",
            _module_path(module_name, "config"),
            data=body,
            headers={"content-type": "application/json"},
        )
        self._check_ok(status, response)