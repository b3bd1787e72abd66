"""Base extension class for Model extensions.

Extensions attach optional behavior to a Model at construction time and
may graft forwarding methods onto it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .config import settings
from .exceptions import InvalidParentError, MethodConflictError, MissingMethodError
from .handled_methods import (
    Forwarder,
    Receiver,
    parse_method_spec,
    spec_to_options,
)
from .model import Model
from .result import InitResult

logger = logging.getLogger(__name__)


class Extension:
    """
    Base class for all Model extensions.

    Extensions take part in the Model lifecycle in three optional hooks:
    1. setup(model) - called from the constructor, before any init group
    2. pre_init(config) - called by the Model after every extension is
       constructed and before the init groups run
    3. post_init(config) - called by the Model after every init group ran

    Example:
        >>> class Greeter(Extension):
        ...     def setup(self, model):
        ...         self.add_handled_methods(["greet"])
        ...
        ...     def greet(self, name):
        ...         return f"hello {name}"
        ...
        >>> model = Model(extensions=[Greeter])
        >>> model.greet("world")
        'hello world'
    """

    def __init__(self, parent: Model):
        """
        Bind the extension to its parent Model.

        Args:
            parent: The Model instance loading this extension

        Raises:
            InvalidParentError: If parent is not a Model
        """
        if not isinstance(parent, Model):
            raise InvalidParentError(parent)

        self.parent = parent
        self._handled: dict[str, Forwarder] = {}

        setup = getattr(self, "setup", None)
        if callable(setup):
            setup(parent)

    @property
    def handled_methods(self) -> dict[str, Forwarder]:
        """Forwarders installed on the parent by this extension, by name."""
        return dict(self._handled)

    def add_handled_method(
        self,
        src_name: str,
        dest_name: str | None = None,
        model_is_this: bool = False,
        can_replace: bool = False,
    ) -> Forwarder:
        """
        Add a method to the Model that forwards to a method of this extension.

        Call this from setup(), pre_init(), or post_init(). All arguments
        given to the Model method are passed on to the extension method.

        Args:
            src_name: Name of the method in the extension
            dest_name: Name of the method to add (default: src_name)
            model_is_this: Call the method with the Model as receiver
                instead of the extension
            can_replace: Allow overwriting an existing Model attribute.
                Only use this if you really know what you are doing.

        Returns:
            The installed Forwarder

        Raises:
            MissingMethodError: If src_name is not a method of the extension
            MethodConflictError: If dest_name already exists on the Model
                and can_replace is not set
        """
        dest_name = dest_name or src_name

        if not callable(getattr(self, src_name, None)):
            raise MissingMethodError(src_name)

        exists = hasattr(self.parent, dest_name)
        if exists and not can_replace:
            raise MethodConflictError(dest_name)

        if exists and settings.warn_on_replace:
            logger.warning(
                f"{type(self).__name__} replaced Model attribute '{dest_name}'"
            )

        receiver = Receiver.PARENT if model_is_this else Receiver.EXTENSION
        forwarder = Forwarder(self, src_name, receiver)
        setattr(self.parent, dest_name, forwarder)
        self._handled[dest_name] = forwarder

        logger.debug(
            f"Forwarding Model.{dest_name} -> {type(self).__name__}.{src_name} "
            f"({receiver.value})"
        )
        return forwarder

    def add_handled_methods(self, methods_to_add: Any) -> InitResult:
        """
        Add several forwarding methods at once.

        Args:
            methods_to_add: Either a list/tuple of source method names, all
                added with default options, or a mapping of source method
                name to spec. A spec may be:

                - str: the destination name
                - bool: model_is_this
                - mapping or HandledMethodOptions: dest_name / model_is_this /
                  can_replace (camelCase keys accepted)
                - DestName or ModelIsThis variants

        Returns:
            InitResult whose data["installed"] lists the destination names.
            A failed result if methods_to_add is neither a sequence nor a
            mapping; nothing is installed in that case.

        Raises:
            MissingMethodError, MethodConflictError: From add_handled_method
        """
        installed: list[str] = []

        if isinstance(methods_to_add, (list, tuple)):
            for src_name in methods_to_add:
                self.add_handled_method(src_name)
                installed.append(src_name)

        elif isinstance(methods_to_add, Mapping):
            for src_name, raw_spec in methods_to_add.items():
                try:
                    options = spec_to_options(parse_method_spec(raw_spec))
                except (TypeError, ValidationError) as e:
                    logger.error(f"Invalid handled method spec for '{src_name}': {e}")
                    continue

                self.add_handled_method(
                    src_name,
                    options.dest_name,
                    options.model_is_this,
                    options.can_replace,
                )
                installed.append(options.dest_name or src_name)

        else:
            logger.error(f"Non-collection sent to add_handled_methods(): {methods_to_add!r}")
            return InitResult.error("methods_to_add must be a list or a mapping")

        return InitResult.ok(data={"installed": installed})
