"""
Tree transforms that turn an arbitrary flowchart into a Mermaid-friendly one.

Every function here returns new Flowchart objects and leaves its input
untouched. Node objects are shared between the input and the result.
"""

import logging
from typing import List

from mermaidflow.core.ir import Flowchart, Link
from mermaidflow.core.validation import is_valid_mermaid_name

logger = logging.getLogger(__name__)


def flatten_flowchart(chart: Flowchart) -> Flowchart:
    """
    Collapse all descendants of `chart` into a single grouping.

    The result keeps the direction and title of `chart`; its nodes and links
    are the chart's own followed by those of every descendant, depth-first in
    declaration order. The result has no subgraphs.
    """
    nodes = list(chart.nodes)
    links = list(chart.links)
    for subgraph in chart.subgraphs:
        flat = flatten_flowchart(subgraph)
        nodes.extend(flat.nodes)
        links.extend(flat.links)
    return Flowchart(direction=chart.direction, title=chart.title, nodes=nodes, links=links)


def flatten_subgraphs(chart: Flowchart) -> Flowchart:
    """Keep one level of grouping: each direct subgraph absorbs its descendants."""
    return Flowchart(
        direction=chart.direction,
        title=chart.title,
        nodes=list(chart.nodes),
        subgraphs=[flatten_flowchart(subgraph) for subgraph in chart.subgraphs],
        links=list(chart.links),
    )


def _is_valid_link(link: Link) -> bool:
    if link.origin is None or link.target is None:
        return False
    return is_valid_mermaid_name(link.origin.node_name) and is_valid_mermaid_name(link.target.node_name)


def remove_non_mermaid_names(chart: Flowchart) -> Flowchart:
    """
    Prune everything Mermaid cannot name.

    Keeps nodes with legal names, subgraphs with a non-empty legal title
    (sanitized recursively) and links whose endpoints both have legal names.
    An empty subgraph with a legal title is kept.
    """
    nodes = [node for node in chart.nodes if is_valid_mermaid_name(node.name)]
    subgraphs = [
        remove_non_mermaid_names(subgraph)
        for subgraph in chart.subgraphs
        if subgraph.title and is_valid_mermaid_name(subgraph.title)
    ]
    links = [link for link in chart.links if _is_valid_link(link)]

    dropped = (
        len(chart.nodes) - len(nodes),
        len(chart.subgraphs) - len(subgraphs),
        len(chart.links) - len(links),
    )
    if any(dropped):
        logger.warning(
            "Pruned %d node(s), %d subgraph(s) and %d link(s) with non-Mermaid names from %r",
            *dropped, chart.title,
        )

    return Flowchart(
        direction=chart.direction,
        title=chart.title,
        nodes=nodes,
        subgraphs=subgraphs,
        links=links,
    )


def get_mermaid_friendly_flowchart(chart: Flowchart) -> Flowchart:
    """
    Flatten every subgraph to one level, then prune illegal names.

    Links are kept whenever both endpoint names are legal, so a link to a
    subgraph that flattening folded into its parent still renders and Mermaid
    draws a bare node for it.
    """
    logger.debug("Building Mermaid-friendly copy of %r", chart)
    return remove_non_mermaid_names(flatten_subgraphs(chart))


def _gather_links(chart: Flowchart) -> List[Link]:
    links = list(chart.links)
    for subgraph in chart.subgraphs:
        links.extend(_gather_links(subgraph))
    return links


def link_sort_key(link: Link):
    return (
        link.origin.mermaid_name if link.origin is not None else "",
        link.target.mermaid_name if link.target is not None else "",
        link.label or "",
        str(link.line_type),
        str(link.arrow_type),
        link.origin_arrow,
        link.target_arrow,
    )


def collect_links(chart: Flowchart) -> List[Link]:
    """All links of the tree, sorted by origin then target name."""
    links = sorted(_gather_links(chart), key=link_sort_key)
    logger.debug("Collected %d link(s) from %r", len(links), chart.title)
    return links
