"""
Initialization groups.

An InitGroup holds named initializer functions and runs each of them at
most once. Run bookkeeping lives on an InitEntry owned by the group, so the
same callable may be registered in several groups independently.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .result import InitResult

logger = logging.getLogger(__name__)


@dataclass
class InitEntry:
    """Registration record for one initializer"""
    name: str
    method: Callable[..., Any]
    bind_to_api: bool = False
    has_run: bool = False
    result: Any = None


class InitGroup:
    """
    A named collection of run-once initializers.

    Initializers are called as ``method(receiver, conf)``. The receiver is
    the group's ``api`` object when registered with ``api_is_this=True``
    (and an api is set), otherwise the group itself. This covers plain
    functions, functools.partial objects and callable instances alike.
    Bound methods already carry their own receiver and only get ``conf``.

    Usage:
        >>> group = InitGroup("main", api=model)
        >>> group.add("db", lambda api, conf: api.connect(conf["dsn"]), api_is_this=True)
        >>> group.run({"dsn": "sqlite://"})
    """

    def __init__(self, name: str, api: Any = None):
        self.name = name
        self.api = api
        self.methods: dict[str, InitEntry] = {}

    def __repr__(self) -> str:
        return f"InitGroup({self.name!r}, methods={list(self.methods)!r})"

    def __contains__(self, name: object) -> bool:
        return name in self.methods

    def __len__(self) -> int:
        return len(self.methods)

    def __iter__(self) -> Iterator[str]:
        return iter(self.methods)

    def add(
        self,
        name: str,
        method: Callable[..., Any],
        api_is_this: bool = False,
    ) -> InitResult:
        """
        Register an initializer.

        Args:
            name: Unique initializer name within this group
            method: Initializer callable, called as method(receiver, conf)
            api_is_this: Use the group's api object as receiver

        Returns:
            Successful InitResult, or a failed one if the arguments are
            invalid or the name is already taken (existing entry is kept)
        """
        if not isinstance(name, str) or not callable(method):
            logger.error(f"Invalid init method for group '{self.name}': {name!r} -> {method!r}")
            return InitResult.error(f"invalid init method: {name!r}")

        if name in self.methods:
            logger.error(f"Cannot overwrite init method '{name}' in group '{self.name}'")
            return InitResult.error(f"init method already registered: {name}")

        self.methods[name] = InitEntry(name=name, method=method, bind_to_api=bool(api_is_this))
        return InitResult.ok()

    def need(self, name: str, conf: Any = None) -> Any:
        """
        Run a named initializer unless it has already run.

        Args:
            name: Registered initializer name
            conf: Opaque config passed through to the initializer

        Returns:
            The initializer's return value on its first run, True if it had
            already run, or a failed InitResult if the name is unknown

        Raises:
            Whatever the initializer raises. The entry stays unrun.
        """
        entry = self.methods.get(name)
        if entry is None:
            logger.error(f"Invalid init method requested from group '{self.name}': {name!r}")
            return InitResult.error(f"unknown init method: {name!r}")

        if entry.has_run:
            return True

        receiver = self.api if entry.bind_to_api and self.api is not None else self

        logger.debug(f"Running init method '{name}' in group '{self.name}'")
        if inspect.ismethod(entry.method):
            ret = entry.method(conf)
        else:
            ret = entry.method(receiver, conf)

        entry.has_run = True
        entry.result = ret
        return ret

    def run(self, conf: Any = None) -> None:
        """Run every registered initializer in registration order."""
        for name in list(self.methods):
            self.need(name, conf)

    def has_run(self, name: str) -> bool:
        """Check whether a registered initializer has run."""
        entry = self.methods.get(name)
        return entry is not None and entry.has_run

    def pending(self) -> list[str]:
        """Names of initializers that have not run yet, in order."""
        return [name for name, entry in self.methods.items() if not entry.has_run]
