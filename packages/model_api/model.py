"""
Model host - owns init groups and extensions and drives their lifecycle.

Lifecycle:
1. Construct extensions (each extension's setup() runs)
2. pre_init(config) on every extension
3. run(config) on every init group, in creation order
4. post_init(config) on every extension
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from .init_group import InitGroup

if TYPE_CHECKING:
    from .extension import Extension

    E = TypeVar("E", bound=Extension)

logger = logging.getLogger(__name__)


class Model:
    """
    Host object for extensions and init groups.

    Subclasses list the groups they need in ``init_group_names``;
    extensions may add more through init_group() during setup().

    Usage:
        >>> model = Model({"debug": True}, extensions=[CacheExtension])
        >>> model.initialized
        True
    """

    init_group_names: tuple[str, ...] = ("main",)

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        extensions: Iterable[type[Extension]] = (),
        auto_init: bool = True,
    ):
        """
        Args:
            config: Opaque option mapping passed through every phase
            extensions: Extension classes to load, in order
            auto_init: Run initialize() at the end of construction
        """
        self.config = config if config is not None else {}
        self.extensions: list[Extension] = []
        self.init_groups: dict[str, InitGroup] = {}
        self.initialized = False
        self._pre_init_done = False

        for name in self.init_group_names:
            self.init_group(name)

        for ext_class in extensions:
            self.load_extension(ext_class)

        if auto_init:
            self.initialize()

    def init_group(self, name: str) -> InitGroup:
        """Get an init group by name, creating it if needed."""
        group = self.init_groups.get(name)
        if group is None:
            group = InitGroup(name, api=self)
            self.init_groups[name] = group
        return group

    def load_extension(self, ext_class: type[E]) -> E:
        """
        Construct an extension bound to this model.

        Extensions loaded after initialize() are constructed normally but
        miss the pre_init/post_init sweeps.
        """
        if self.initialized:
            logger.warning(
                f"Extension {ext_class.__name__} loaded after initialization; "
                "pre_init/post_init will not be called"
            )

        ext = ext_class(self)
        self.extensions.append(ext)
        logger.info(f"Extension loaded: {ext_class.__name__}")
        return ext

    def get_extension(self, ext_class: type[E]) -> E | None:
        """Return the first loaded extension of the given class."""
        for ext in self.extensions:
            if isinstance(ext, ext_class):
                return ext
        return None

    def initialize(self) -> None:
        """
        Run the pre_init, init group and post_init phases once.

        Groups created while the init groups run are run after the
        existing ones. If an initializer raises, calling initialize()
        again resumes with the groups: pre_init hooks are not repeated
        and initializers that already ran are skipped.
        """
        if self.initialized:
            logger.debug("Model already initialized")
            return

        if not self._pre_init_done:
            self._sweep("pre_init")
            self._pre_init_done = True

        index = 0
        while index < len(self.init_groups):
            group = list(self.init_groups.values())[index]
            group.run(self.config)
            index += 1

        self._sweep("post_init")
        self.initialized = True

    def _sweep(self, hook_name: str) -> None:
        for ext in self.extensions:
            hook = getattr(ext, hook_name, None)
            if callable(hook):
                logger.debug(f"Calling {type(ext).__name__}.{hook_name}()")
                hook(self.config)
