"""Base class for application-layer use cases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class ApplicationService(ABC, Generic[TInput, TOutput]):
    """A single use case executed against injected collaborators."""

    @abstractmethod
    def execute(self, data: TInput) -> TOutput:
        """Run the use case for ``data``."""
