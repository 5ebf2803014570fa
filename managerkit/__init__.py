"""
__init__

ManagerKit entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .core.configuration.conf import ManagerSettings, configure, current_settings
from .core.controller import ManagerController
from .core.extra import ExtraManagerController
from .core.formcustomization import FormCustomizationResolver, FormTarget, ShapeId
from .core.router import ActionRegistry, ManagerRouter
from .core.runtime import ManagerRuntime, ManagerUser
from .meta import __version__

# The End
