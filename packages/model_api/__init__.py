"""
model_api - object composition helpers

Run-once initialization groups and extensions that graft forwarding
methods onto a host Model.
"""

__version__ = "0.1.0"

from .config import Settings, settings
from .discovery import discover_extensions
from .exceptions import (
    InvalidParentError,
    MethodConflictError,
    MissingMethodError,
    ModelAPIError,
)
from .extension import Extension
from .handled_methods import (
    DestName,
    Forwarder,
    HandledMethodOptions,
    ModelIsThis,
    Receiver,
    parse_method_spec,
)
from .init_group import InitEntry, InitGroup
from .model import Model
from .result import InitResult

__all__ = [
    # Core
    "Model",
    "Extension",
    "InitGroup",
    "InitEntry",
    "InitResult",
    # Forwarding
    "Forwarder",
    "Receiver",
    "DestName",
    "ModelIsThis",
    "HandledMethodOptions",
    "parse_method_spec",
    # Discovery / config
    "discover_extensions",
    "Settings",
    "settings",
    # Errors
    "ModelAPIError",
    "InvalidParentError",
    "MissingMethodError",
    "MethodConflictError",
]
