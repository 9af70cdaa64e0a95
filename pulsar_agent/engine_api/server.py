"""HTTP server exposing the daemon's engine API on a unix socket.

The daemon handle passed in must provide the coroutines ``modules()``,
``get_configurations()``, ``get_configuration(name)``, ``start(name)``,
``stop(name)``, ``restart(name)`` and ``update_configuration(name, key, value)``,
and report failures by raising ``EngineApiError``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from collections.abc import Mapping
from typing import Any, Iterable

from aiohttp import web

from .dto import DEFAULT_UDS, ConfigKV, ModuleConfigKVs
from .error import EngineApiError

logger = logging.getLogger(__name__)


def _pairs(items: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(items, Mapping):
        return items.items()
    return items


def _to_json(item: Any) -> Any:
    if hasattr(item, "to_dict"):
        return item.to_dict()
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    return item


def _error_response(err: EngineApiError) -> web.Response:
    return web.Response(status=err.status_code(), text=err.body())


class _Routes:
    def __init__(self, daemon: Any) -> None:
        self._daemon = daemon

    async def _run(self, call) -> web.Response:
        try:
            await call
        except EngineApiError as err:
            return _error_response(err)
        return web.Response()

    async def modules(self, request: web.Request) -> web.Response:
        modules = await self._daemon.modules()
        return web.json_response([_to_json(m) for m in modules])

    async def configs(self, request: web.Request) -> web.Response:
        cfgs = await self._daemon.get_configurations()
        result = [
            ModuleConfigKVs(
                module=module,
                config=[ConfigKV(key=k, value=v) for k, v in _pairs(cfg)],
            ).to_dict()
            for module, cfg in _pairs(cfgs)
        ]
        return web.json_response(result)

    async def module_start(self, request: web.Request) -> web.Response:
        return await self._run(self._daemon.start(request.match_info["module_name"]))

    async def module_restart(self, request: web.Request) -> web.Response:
        return await self._run(self._daemon.restart(request.match_info["module_name"]))

    async def module_stop(self, request: web.Request) -> web.Response:
        return await self._run(self._daemon.stop(request.match_info["module_name"]))

    async def get_module_cfg(self, request: web.Request) -> web.Response:
        try:
            cfg = await self._daemon.get_configuration(request.match_info["module_name"])
        except EngineApiError as err:
            return _error_response(err)
        return web.json_response(
            [ConfigKV(key=k, value=v).to_dict() for k, v in _pairs(cfg)]
        )

    async def update_module_cfg(self, request: web.Request) -> web.Response:
        if request.content_type != "application/json":
            return web.Response(
                status=415,
                text="Expected request with `Content-Type: application/json`",
            )
        try:
            payload = json.loads(await request.text())
        except ValueError as err:
            return web.Response(status=400, text=f"Failed to parse the request body as JSON: {err}")
        try:
            config_kv = ConfigKV.from_dict(payload)
        except ValueError as err:
            return web.Response(status=422, text=f"Failed to deserialize the JSON body: {err}")
        return await self._run(
            self._daemon.update_configuration(
                request.match_info["module_name"], config_kv.key, config_kv.value
            )
        )


def build_app(daemon: Any) -> web.Application:
    """The web application serving the engine API for ``daemon``."""
    routes = _Routes(daemon)
    app = web.Application()
    app.add_routes(
        [
            web.get("/modules", routes.modules),
            web.get("/modules/", routes.modules),
            web.post("/modules/{module_name}/start", routes.module_start),
            web.post("/modules/{module_name}/restart", routes.module_restart),
            web.post("/modules/{module_name}/stop", routes.module_stop),
            web.get("/modules/{module_name}/config", routes.get_module_cfg),
            web.patch("/modules/{module_name}/config", routes.update_module_cfg),
            web.get("/configs", routes.configs),
        ]
    )
    return app


class ServerHandle:
    """A running API server; ``stop`` shuts it down and removes its socket."""

    def __init__(self, runner: web.AppRunner, socket_path: str) -> None:
        self._runner = runner
        self.socket_path = socket_path

    async def stop(self) -> None:
        try:
            await self._runner.cleanup()
        except Exception as err:  # noqa: BLE001
            logger.error("Engine Api server error: %s", err)
        try:
            os.remove(self.socket_path)
        except FileNotFoundError:
            pass
        except OSError as err:
            logger.error("Error removing unix socket: %s", err)

    async def __aenter__(self) -> ServerHandle:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.stop()


async def run_api_server(daemon: Any, socket_path: str = DEFAULT_UDS) -> ServerHandle:
    """Start serving the engine API on ``socket_path``."""
    runner = web.AppRunner(build_app(daemon))
    await runner.setup()
    site = web.UnixSite(runner, socket_path)
    try:
        await site.start()
    except OSError as err:
        await runner.cleanup()
        raise RuntimeError(f"Cannot bind to socket: {err}") from err
    logger.debug("listening on %s", socket_path)
    return ServerHandle(runner, socket_path)