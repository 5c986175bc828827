"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from idm.domain.value import CallerContext


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any, context: CallerContext) -> Any:
        pass
