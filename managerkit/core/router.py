# -*- coding: utf-8 -*-
"""
router

FastAPI routing of manager actions to their controllers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Union
from weakref import WeakSet

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from .configuration.conf import ManagerSettings, current_settings
from .controller import ManagerController
from .exceptions import ControllerNotFound, PermissionDenied
from .paths import CORE_NAMESPACE
from .runtime import ManagerRuntime


logger = logging.getLogger(__name__)

RuntimeFactory = Callable[[Request], Union[ManagerRuntime, Awaitable[ManagerRuntime]]]


@dataclass(frozen=True)
class ActionConfig:
    """A manager action and the controller class rendering it."""

    id: str
    controller: type[ManagerController]
    namespace: str = CORE_NAMESPACE
    namespace_path: str | Path | None = None

    def as_config(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "namespace": self.namespace,
            "namespace_path": str(self.namespace_path) if self.namespace_path else None,
        }


class ActionRegistry:
    """Map action identifiers to their configuration."""

    def __init__(self) -> None:
        self._actions: dict[str, ActionConfig] = {}

    def register(
        self,
        action_id: str,
        controller: type[ManagerController],
        *,
        namespace: str = CORE_NAMESPACE,
        namespace_path: str | Path | None = None,
    ) -> ActionConfig:
        """Register ``controller`` for ``action_id``."""
        config = ActionConfig(
            id=action_id,
            controller=controller,
            namespace=namespace,
            namespace_path=namespace_path,
        )
        self._actions[action_id] = config
        return config

    def get(self, action_id: str) -> ActionConfig:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise ControllerNotFound(f"Action '{action_id}' not registered") from exc

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions


class ManagerRouter:
    """Build and mount the router serving manager pages."""

    def __init__(
        self,
        registry: ActionRegistry,
        runtime_factory: RuntimeFactory,
        prefix: str | None = None,
        *,
        settings: ManagerSettings | None = None,
    ) -> None:
        """Store the action registry and the per-request runtime factory."""

        self.registry = registry
        self._runtime_factory = runtime_factory
        self._settings = settings or current_settings()
        self._prefix = (prefix or self._settings.router_prefix).rstrip("/")
        self._router: APIRouter | None = None
        self._mounted_apps: WeakSet[FastAPI] = WeakSet()

    @property
    def prefix(self) -> str:
        return self._prefix

    def get_router(self) -> APIRouter:
        """Return the cached router, creating it when necessary."""

        if self._router is None:
            router = APIRouter()
            router.add_api_route(
                "/{action:path}",
                self.handle,
                methods=["GET"],
                response_class=HTMLResponse,
                name="manager-action",
            )
            self._router = router
        return self._router

    def mount(self, app: FastAPI, prefix: str | None = None) -> None:
        """Include the manager router into ``app`` once."""

        self._prefix = (prefix or self._prefix).rstrip("/")
        if app in self._mounted_apps:
            return
        app.include_router(self.get_router(), prefix=self._prefix)
        self._mounted_apps.add(app)

    async def handle(self, action: str, request: Request) -> HTMLResponse:
        """Render the controller registered for ``action``."""

        params = dict(request.query_params)
        try:
            action_config = self.registry.get(action)
            runtime = self._runtime_factory(request)
            if inspect.isawaitable(runtime):
                runtime = await runtime
            controller_cls = action_config.controller
            controller = controller_cls.get_instance(
                runtime, controller_cls, action_config.as_config(), params
            )
        except ControllerNotFound as exc:
            logger.debug("No controller for action %s: %s", action, exc)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        controller.set_properties(params)
        controller.initialize()
        try:
            output = await controller.render()
        except PermissionDenied as exc:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
        return HTMLResponse(output)


__all__ = ["ActionConfig", "ActionRegistry", "ManagerRouter", "RuntimeFactory"]


# The End
