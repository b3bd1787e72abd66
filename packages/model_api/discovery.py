"""Extension discovery via entry points."""

import logging
from importlib.metadata import entry_points

from .config import settings
from .extension import Extension

logger = logging.getLogger(__name__)


def discover_extensions(group: str | None = None) -> list[type[Extension]]:
    """
    Auto-discover extension classes via entry_points.

    Classes are returned in discovery order, ready to be passed to
    Model(extensions=...).

    Args:
        group: Entry point group (default: settings.extension_entry_point_group)

    Returns:
        List of Extension subclasses

    Example pyproject.toml:
        [project.entry-points."model_api.extensions"]
        cache = "my_package.cache:CacheExtension"
    """
    group = group or settings.extension_entry_point_group
    discovered = entry_points(group=group)

    if not discovered:
        logger.info(f"No extensions found in entry point group '{group}'")
        return []

    classes: list[type[Extension]] = []
    for ep in discovered:
        try:
            cls = ep.load()
        except Exception as e:
            logger.error(f"Failed to load extension '{ep.name}': {e}")
            raise

        if not isinstance(cls, type) or not issubclass(cls, Extension):
            logger.warning(
                f"Entry point '{ep.name}' does not extend Extension, skipping"
            )
            continue

        classes.append(cls)
        logger.info(f"Extension discovered: {ep.name}")

    return classes
