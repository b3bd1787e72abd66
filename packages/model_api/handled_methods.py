"""
Forwarding records and bulk registration specs for Extension methods.

A Forwarder is installed on a Model in place of a closure. It records
which extension method to call and which object acts as the receiver;
dispatch() is the single code path shared by every forwarder.

Bulk specs passed to Extension.add_handled_methods() are normalized into
one of three variants:

    DestName("alias")               -> install under another name
    ModelIsThis(True)               -> call with the Model as receiver
    HandledMethodOptions(...)       -> any combination of the options
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .extension import Extension


class Receiver(Enum):
    """Which object the forwarded method runs against"""
    EXTENSION = "extension"
    PARENT = "parent"


@dataclass(frozen=True)
class Forwarder:
    """
    Callable installed on a Model that delegates to an Extension method.

    The source method is looked up on every call, so later changes to the
    extension's attribute are picked up.
    """

    extension: "Extension"
    src_name: str
    receiver: Receiver = Receiver.EXTENSION

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return dispatch(self, args, kwargs)


def dispatch(forwarder: Forwarder, args: tuple, kwargs: dict) -> Any:
    """
    Call the forwarder's source method with the chosen receiver.

    With Receiver.PARENT the underlying function of a bound method is
    called with the Model as first argument. Callables without a bound
    receiver (staticmethods, plain attributes) and classmethods, which
    are bound to a class, are called as-is.
    """
    method = getattr(forwarder.extension, forwarder.src_name)

    if forwarder.receiver is Receiver.PARENT:
        func = getattr(method, "__func__", None)
        if func is not None and not isinstance(method.__self__, type):
            return func(forwarder.extension.parent, *args, **kwargs)

    return method(*args, **kwargs)


@dataclass(frozen=True)
class DestName:
    """Install the forwarder under a different name"""
    name: str


@dataclass(frozen=True)
class ModelIsThis:
    """Choose the Model (True) or the extension (False) as receiver"""
    flag: bool


class HandledMethodOptions(BaseModel):
    """
    Full option set for one forwarder.

    Accepts both snake_case and the camelCase keys used by older configs.

    Example:
        >>> HandledMethodOptions.model_validate({"destName": "y", "modelIsThis": True})
        HandledMethodOptions(dest_name='y', model_is_this=True, can_replace=False)
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    dest_name: str | None = Field(default=None, alias="destName")
    model_is_this: bool = Field(default=False, alias="modelIsThis")
    can_replace: bool = Field(default=False, alias="canReplace")


MethodSpec = Union[DestName, ModelIsThis, HandledMethodOptions]


def parse_method_spec(value: Any) -> MethodSpec:
    """
    Normalize a raw bulk spec value into a MethodSpec variant.

    Args:
        value: str, bool, mapping, or an existing variant

    Returns:
        DestName, ModelIsThis, or HandledMethodOptions

    Raises:
        TypeError: If the value has no spec interpretation
        pydantic.ValidationError: If a mapping has invalid option values
    """
    if isinstance(value, (DestName, ModelIsThis, HandledMethodOptions)):
        return value
    if isinstance(value, bool):
        return ModelIsThis(value)
    if isinstance(value, str):
        return DestName(value)
    if isinstance(value, Mapping):
        return HandledMethodOptions.model_validate(dict(value))
    raise TypeError(f"Unsupported handled method spec: {value!r}")


def spec_to_options(spec: MethodSpec) -> HandledMethodOptions:
    """Expand any variant into the full option set."""
    if isinstance(spec, DestName):
        return HandledMethodOptions(dest_name=spec.name)
    if isinstance(spec, ModelIsThis):
        return HandledMethodOptions(model_is_this=spec.flag)
    return spec
