"""Core data structures and tree transforms for mermaidflow flowcharts."""

from .errors import (
    FlowchartError,
    DuplicateNameError,
    MissingTitleError,
    MissingEndpointError,
    ValidationError,
)
from .ir import ArrowType, Direction, Flowchart, LineType, Link, Linkable, Node, NodeType
from .transform import (
    collect_links,
    flatten_flowchart,
    flatten_subgraphs,
    get_mermaid_friendly_flowchart,
    remove_non_mermaid_names,
)
from .validation import Violation, find_violations, is_valid_mermaid_name, validate_mermaid

__all__ = [
    # Model
    "Direction",
    "NodeType",
    "LineType",
    "ArrowType",
    "Linkable",
    "Node",
    "Link",
    "Flowchart",
    # Errors
    "FlowchartError",
    "DuplicateNameError",
    "MissingTitleError",
    "MissingEndpointError",
    "ValidationError",
    # Validation
    "Violation",
    "find_violations",
    "is_valid_mermaid_name",
    "validate_mermaid",
    # Transforms
    "flatten_flowchart",
    "flatten_subgraphs",
    "remove_non_mermaid_names",
    "get_mermaid_friendly_flowchart",
    "collect_links",
]
