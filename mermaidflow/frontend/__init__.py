"""
mermaidflow frontend: ways to construct flowcharts.

- Factory functions for each node shape, link style and direction
- FlowchartBuilder: imperative API for manual graph construction
"""

from .builder import (
    FlowchartBuilder,
    alternate_process_node,
    blank_link,
    connector_node,
    database_node,
    decision_node,
    dotted_link,
    input_output_node,
    lr_flowchart,
    process_node,
    rl_flowchart,
    solid_link,
    subprocess_node,
    terminator_node,
    thick_link,
    vertical_flowchart,
)

__all__ = [
    "FlowchartBuilder",
    "terminator_node",
    "process_node",
    "alternate_process_node",
    "subprocess_node",
    "decision_node",
    "input_output_node",
    "connector_node",
    "database_node",
    "blank_link",
    "solid_link",
    "dotted_link",
    "thick_link",
    "vertical_flowchart",
    "lr_flowchart",
    "rl_flowchart",
]
