"""Factory functions and an imperative builder for flowcharts."""

from typing import Optional

from mermaidflow.core.errors import DuplicateNameError, MissingEndpointError
from mermaidflow.core.ir import ArrowType, Direction, Flowchart, LineType, Link, Linkable, Node, NodeType


def _node(name: str, label: Optional[str], node_type: NodeType) -> Node:
    return Node(name, node_type=node_type, label=label)


def terminator_node(name: str, label: Optional[str] = None) -> Node:
    """Start/end node."""
    return _node(name, label, NodeType.TERMINATOR)


def process_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.PROCESS)


def alternate_process_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.ALTERNATE_PROCESS)


def subprocess_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.SUBPROCESS)


def decision_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.DECISION)


def input_output_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.INPUT_OUTPUT)


def connector_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.CONNECTOR)


def database_node(name: str, label: Optional[str] = None) -> Node:
    return _node(name, label, NodeType.DATABASE)


def _link(origin: Linkable, target: Linkable, label: Optional[str], line_type: LineType) -> Link:
    if origin is None or target is None:
        raise MissingEndpointError("Links need both an origin and a target.")
    return Link(
        origin=origin,
        target=target,
        line_type=line_type,
        arrow_type=ArrowType.NORMAL,
        origin_arrow=False,
        target_arrow=True,
        label=label,
    )


def blank_link(origin: Linkable, target: Linkable, label: Optional[str] = None) -> Link:
    """Invisible link, used only to influence layout."""
    return _link(origin, target, label, LineType.NONE)


def solid_link(origin: Linkable, target: Linkable, label: Optional[str] = None) -> Link:
    return _link(origin, target, label, LineType.SOLID)


def dotted_link(origin: Linkable, target: Linkable, label: Optional[str] = None) -> Link:
    return _link(origin, target, label, LineType.DOTTED)


def thick_link(origin: Linkable, target: Linkable, label: Optional[str] = None) -> Link:
    return _link(origin, target, label, LineType.THICK)


def vertical_flowchart(title: Optional[str] = None) -> Flowchart:
    return Flowchart(direction=Direction.VERTICAL, title=title)


def lr_flowchart(title: Optional[str] = None) -> Flowchart:
    return Flowchart(direction=Direction.HORIZONTAL_RIGHT, title=title)


def rl_flowchart(title: Optional[str] = None) -> Flowchart:
    return Flowchart(direction=Direction.HORIZONTAL_LEFT, title=title)


class FlowchartBuilder:
    """
    Imperative API for building flowcharts by adding nodes, groups and links.

    Example:
        builder = FlowchartBuilder("Order", direction=Direction.HORIZONTAL_RIGHT)
        start = builder.node("Start", NodeType.TERMINATOR)
        billing = builder.subgraph("Billing")
        pay = builder.node("Pay", parent=billing)
        builder.connect(start, pay, label="checkout")
        chart = builder.build()
    """

    def __init__(self, title: Optional[str] = None, direction: Direction = Direction.VERTICAL):
        self.flowchart = Flowchart(direction=direction, title=title)

    def node(
        self,
        name: str,
        node_type: NodeType = NodeType.PROCESS,
        label: Optional[str] = None,
        parent: Optional[Flowchart] = None,
    ) -> Node:
        """Add a node to the root chart, or to `parent` if given.

        Uniqueness is always checked against the whole tree.
        """
        self._check_unique(name)
        container = parent if parent is not None else self.flowchart
        return container.add_node(Node(name, node_type=node_type, label=label))

    def subgraph(
        self,
        title: str,
        direction: Direction = Direction.VERTICAL,
        parent: Optional[Flowchart] = None,
    ) -> Flowchart:
        if title:
            self._check_unique(title)
        container = parent if parent is not None else self.flowchart
        return container.add_subgraph(Flowchart(direction=direction, title=title))

    def _check_unique(self, name: str) -> None:
        # parent.add_* only sees the parent's subtree, not its siblings
        if self.flowchart.contains_name(name):
            raise DuplicateNameError(f"Name '{name}' already exists in '{self.flowchart.title}'.")

    def connect(
        self,
        origin: Linkable,
        target: Linkable,
        label: Optional[str] = None,
        line_type: LineType = LineType.SOLID,
        arrow_type: ArrowType = ArrowType.NORMAL,
        origin_arrow: bool = False,
        target_arrow: bool = True,
    ) -> Link:
        link = Link(
            origin=origin,
            target=target,
            line_type=line_type,
            arrow_type=arrow_type,
            origin_arrow=origin_arrow,
            target_arrow=target_arrow,
            label=label,
        )
        return self.flowchart.add_link(link)

    def build(self) -> Flowchart:
        return self.flowchart
