"""
mermaidflow - model flowcharts in Python and export them as Mermaid text.

Main APIs:
- Flowchart, Node, Link: the graph model
- FlowchartBuilder and factory functions: construction helpers
- validate_mermaid: checks names and nesting against Mermaid's limits
- get_mermaid_friendly_flowchart: flattens and prunes a tree so it renders
- MermaidExporter / render_mermaid: Mermaid flowchart syntax
"""

from mermaidflow.core.errors import (
    FlowchartError,
    DuplicateNameError,
    MissingTitleError,
    MissingEndpointError,
    ValidationError,
)
from mermaidflow.core.ir import ArrowType, Direction, Flowchart, LineType, Link, Node, NodeType
from mermaidflow.core.transform import collect_links, get_mermaid_friendly_flowchart
from mermaidflow.core.validation import validate_mermaid
from mermaidflow.frontend import FlowchartBuilder
from mermaidflow.backend import MermaidExporter, render_mermaid

__version__ = "0.1.0"

__all__ = [
    # Core model
    "Direction",
    "NodeType",
    "LineType",
    "ArrowType",
    "Node",
    "Link",
    "Flowchart",
    # Errors
    "FlowchartError",
    "DuplicateNameError",
    "MissingTitleError",
    "MissingEndpointError",
    "ValidationError",
    # Pipeline
    "validate_mermaid",
    "get_mermaid_friendly_flowchart",
    "collect_links",
    # Frontend
    "FlowchartBuilder",
    # Backend
    "MermaidExporter",
    "render_mermaid",
]
