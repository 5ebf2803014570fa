# -*- coding: utf-8 -*-
"""
loader

Load controller modules from files found on the controller search paths.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import hashlib
from importlib import util
from pathlib import Path
from types import ModuleType

from .exceptions import ControllerNotFound


class ControllerModuleLoader:
    """Import controller files by path and cache the loaded modules."""

    def __init__(self) -> None:
        self._modules: dict[str, ModuleType] = {}

    def load(self, file_path: str | Path) -> ModuleType:
        """Return the module defined in ``file_path``, importing it once."""
        path = Path(file_path).resolve()
        key = str(path)
        module = self._modules.get(key)
        if module is not None:
            return module
        if not path.is_file():
            raise ControllerNotFound(f"Controller file '{path}' does not exist")
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()[:12]
        spec = util.spec_from_file_location(f"managerkit_controllers.{path.stem}_{digest}", path)
        if spec is None or spec.loader is None:
            raise ControllerNotFound(f"Unable to load controller module from '{path}'")
        module = util.module_from_spec(spec)
        spec.loader.exec_module(module)
        self._modules[key] = module
        return module

    def clear(self) -> None:
        self._modules.clear()


controller_loader = ControllerModuleLoader()

__all__ = ["ControllerModuleLoader", "controller_loader"]


# The End
