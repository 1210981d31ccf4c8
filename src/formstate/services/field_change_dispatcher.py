"""
Field Change Dispatcher.

Centralizes value merging and change notification for form engines.
A change is merged first; the change observer then receives the merged
values, never the snapshot that predates the change.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from formstate.core.exceptions import DispatchDepthError

if TYPE_CHECKING:
    from formstate.core.engine import FormEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldChangeEvent:
    """Immutable event representing a field change."""
    field_name: str                 # Declared field name
    value: Any                      # New value
    source_engine: 'FormEngine'     # Engine being changed
    notify: bool = True             # False for set_field (no change notification)


class FieldChangeDispatcher:
    """Singleton dispatcher for all field changes. Stateless."""

    _instance = None

    @classmethod
    def instance(cls) -> 'FieldChangeDispatcher':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def dispatch(self, event: FieldChangeEvent) -> None:
        """Merge one field change into its engine and notify the change observer."""
        source = event.source_engine
        debug = source.config.debug_dispatch

        if debug:
            tag = "" if event.notify else " [SILENT]"
            logger.info(f"DISPATCH{tag}: {event.field_name} = {repr(event.value)[:50]}")

        source.require_field(event.field_name)

        # A commit past the depth limit is rejected before it is merged
        if event.notify and source._dispatch_depth >= source.config.max_dispatch_depth:
            raise DispatchDepthError(
                f"Change observer re-entered commit_change more than "
                f"{source.config.max_dispatch_depth} times (rejected field: {event.field_name!r})"
            )

        # 1. Merge into a new mapping; earlier snapshots keep pointing at the old one
        merged = dict(source._values)
        merged[event.field_name] = event.value
        source._values = merged

        if not event.notify:
            return

        # 2. Notify with the merged result
        source._dispatch_depth += 1
        try:
            source._on_change(MappingProxyType(merged))
            if debug:
                logger.info(f"  notified change observer (depth={source._dispatch_depth})")
        finally:
            source._dispatch_depth -= 1
