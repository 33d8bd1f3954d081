"""Base class for nodes.

A node is a plugin unit a workflow host can execute: a declarative
``description`` plus an asynchronous ``execute`` routine that maps a batch
of input items to output items.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from htmltopdf.runtime.context import ExecutionContext
from schemas.description import NodeDescription
from schemas.item import NodeExecutionData


class Node(ABC):
    """Abstract base class for nodes.

    Subclasses set ``description`` and implement ``execute``.
    """

    description: ClassVar[NodeDescription]

    @abstractmethod
    async def execute(self, context: ExecutionContext) -> list[list[NodeExecutionData]]:
        """Process the context's input items.

        Args:
            context: Host-provided execution context

        Returns:
            One list of output items per output port
        """
        pass
