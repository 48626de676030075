"""Rebuild hook wiring."""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable

from ava_cloudflare.models.purge import PurgeResult
from ava_cloudflare.models.settings import EnvSettings
from ava_cloudflare.utils.cf_cache import CachePurgeClient
from ava_cloudflare.utils.purge_log import append_entry

logger = logging.getLogger(__name__)

REBUILD_EVENT = "indexer.rebuild"


class Hooks:
    """Named actions, run synchronously in registration order."""

    def __init__(self):
        self._actions: defaultdict[str, list[Callable[..., Any]]] = defaultdict(list)

    def add_action(self, name: str, callback: Callable[..., Any]) -> None:
        self._actions[name].append(callback)

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def do_action(self, name: str, *args: Any) -> None:
        for callback in list(self._actions.get(name, ())):
            callback(*args)


def purge_and_log(settings: EnvSettings, client: CachePurgeClient) -> PurgeResult:
    """Run one purge and append its outcome to the plugin log."""
    result = client.purge(settings.credentials())
    try:
        append_entry(settings.log_file, result)
    except OSError as e:
        logger.warning("Could not write %s: %s", settings.log_file, e)
    logger.info("Cache purge %s: %s", result.status_label, result.message)
    return result


class RebuildHook:
    def __init__(self, settings: EnvSettings, client: CachePurgeClient | None = None):
        self.settings = settings
        self.client = client or CachePurgeClient()

    def __call__(self, *_: Any) -> PurgeResult:
        return purge_and_log(self.settings, self.client)


def boot(hooks: Hooks, settings: EnvSettings, client: CachePurgeClient | None = None) -> bool:
    """
    Register the purge on content rebuilds.
    Nothing is registered unless the plugin is enabled and configured.
    """
    if not settings.is_active:
        logger.debug("Cloudflare purge hook not registered (enabled=%s)", settings.enabled)
        return False

    hooks.add_action(REBUILD_EVENT, RebuildHook(settings, client))
    return True
