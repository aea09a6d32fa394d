"""Errors raised while building, validating and rendering flowcharts."""

from typing import Iterable, Tuple


class FlowchartError(ValueError):
    """Base class for all flowchart errors."""


class DuplicateNameError(FlowchartError):
    """A node name or subgraph title already exists somewhere in the tree."""


class MissingTitleError(FlowchartError):
    """A flowchart without a title was used where a subgraph name is required."""


class MissingEndpointError(FlowchartError):
    """A link is missing its origin or its target."""


class ValidationError(FlowchartError):
    """
    A flowchart cannot be rendered as Mermaid.

    Carries every violated category at once, in a fixed order, rather than
    just the first problem found.
    """

    PREFIX = "flowchart contains violations: "

    def __init__(self, violations: Iterable[str]):
        self.violations: Tuple[str, ...] = tuple(violations)
        super().__init__(self.PREFIX + ", ".join(self.violations))
