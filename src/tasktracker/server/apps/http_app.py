from abc import ABC, abstractmethod
from typing import Any

from starlette.applications import Starlette


class HttpApp(ABC):
    """Task tracker HTTP application interface.

    Defines how an adapter exposes the task manager over HTTP.
    """

    @abstractmethod
    def build(self, **kwargs: Any) -> Starlette:
        """Builds and returns a Starlette application instance.

        Args:
            **kwargs: Additional keyword arguments to pass to the Starlette
              constructor.

        Returns:
            A configured Starlette application instance.
        """
