"""
Abstract base class for services that dispatch on validation outcome type.

Handlers are discovered by naming convention instead of isinstance chains:

    class MyService(OutcomeServiceABC):
        def _get_handler_prefix(self) -> str:
            return '_apply_'

        def _apply_Valid(self, outcome, ...):
            ...

        def _apply_Invalid(self, outcome, ...):
            ...

Adding a new outcome type means adding one handler method to each service.
"""

from typing import Dict, Callable, Any
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class OutcomeServiceABC(ABC):
    """
    Abstract base for outcome services with auto-discovery dispatch.

    Subclasses must:
    1. Implement _get_handler_prefix() to return method prefix (e.g., '_fold_')
    2. Define handler methods following naming convention: {prefix}{ClassName}
    """

    def __init__(self):
        self._handlers: Dict[str, Callable] = {}
        prefix = self._get_handler_prefix()

        for attr_name in dir(self):
            if attr_name.startswith(prefix):
                # '_fold_Invalid' -> 'Invalid'
                class_name = attr_name[len(prefix):]
                handler = getattr(self, attr_name)
                if callable(handler):
                    self._handlers[class_name] = handler

        if self._handlers:
            logger.debug(
                f"{self.__class__.__name__} auto-discovered handlers: "
                f"{list(self._handlers.keys())}"
            )
        else:
            logger.warning(
                f"{self.__class__.__name__} found no handlers with prefix '{prefix}'. "
                f"Did you forget to define handler methods?"
            )

    @abstractmethod
    def _get_handler_prefix(self) -> str:
        """Return the method prefix for this service's handlers."""
        pass

    def dispatch(self, outcome: Any, *args, **kwargs) -> Any:
        """
        Auto-dispatch to handler based on the outcome's class name.

        Raises:
            ValueError: If no handler exists for the outcome type
        """
        class_name = outcome.__class__.__name__
        handler = self._handlers.get(class_name)

        if handler is None:
            raise ValueError(
                f"No handler for {class_name} in {self.__class__.__name__}. "
                f"Available handlers: {list(self._handlers.keys())}. "
                f"Did you forget to define {self._get_handler_prefix()}{class_name}()?"
            )

        return handler(outcome, *args, **kwargs)

    def get_supported_types(self) -> list[str]:
        """Get list of supported outcome type names."""
        return list(self._handlers.keys())
