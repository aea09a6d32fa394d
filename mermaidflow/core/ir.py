from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol

from mermaidflow.core.errors import DuplicateNameError, MissingEndpointError, MissingTitleError


class Direction(Enum):
    """Flow direction of a flowchart or subgraph."""
    HORIZONTAL_RIGHT = "horizontal_right"  # left to right
    HORIZONTAL_LEFT = "horizontal_left"  # right to left
    VERTICAL = "vertical"  # top to bottom


class NodeType(Enum):
    """Shape classification of a node."""
    TERMINATOR = "terminator"
    PROCESS = "process"
    ALTERNATE_PROCESS = "alternate_process"
    SUBPROCESS = "subprocess"
    DECISION = "decision"
    INPUT_OUTPUT = "input_output"
    CONNECTOR = "connector"
    DATABASE = "database"


class LineType(Enum):
    NONE = "none"
    SOLID = "solid"
    DOTTED = "dotted"
    THICK = "thick"


class ArrowType(Enum):
    NONE = "none"
    NORMAL = "normal"
    CIRCLE = "circle"
    CROSS = "cross"


def remove_spaces(value: str) -> str:
    return value.replace(" ", "")


class Linkable(Protocol):
    """Anything a link can point at: a node or a titled flowchart."""

    @property
    def node_name(self) -> str: ...

    @property
    def mermaid_name(self) -> str: ...


class Node:
    """A single flowchart node. The name is its identity and cannot change."""

    def __init__(self, name: str, node_type: NodeType = NodeType.PROCESS, label: Optional[str] = None):
        self._name = name
        self.node_type = node_type
        self.label = label

    @property
    def name(self) -> str:
        return self._name

    @property
    def node_name(self) -> str:
        return self._name

    @property
    def mermaid_name(self) -> str:
        return remove_spaces(self._name)

    def __repr__(self):
        node_type = getattr(self.node_type, "name", self.node_type)
        return f"<Node name='{self._name}' type={node_type} label={self.label!r}>"


@dataclass
class Link:
    """A connection between two linkable elements."""
    origin: Optional[Linkable]
    target: Optional[Linkable]
    line_type: LineType = LineType.SOLID
    arrow_type: ArrowType = ArrowType.NORMAL
    origin_arrow: bool = False
    target_arrow: bool = True
    label: Optional[str] = None

    def __repr__(self):
        origin = self.origin.node_name if self.origin is not None else None
        target = self.target.node_name if self.target is not None else None
        line_type = getattr(self.line_type, "name", self.line_type)
        return f"<Link {origin} -> {target} line={line_type} label={self.label!r}>"


@dataclass
class Flowchart:
    """
    A flowchart: owned nodes, owned nested flowcharts (subgraphs) and links.

    A flowchart used as a subgraph must carry a title, which doubles as the
    subgraph's unique name. The root flowchart's title is only displayed.
    The constructor does not check anything; use the add_* methods to grow a
    tree while keeping names unique.
    """
    direction: Direction = Direction.VERTICAL
    title: Optional[str] = None
    nodes: List[Node] = field(default_factory=list)
    subgraphs: List["Flowchart"] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)

    def __post_init__(self):
        if self.nodes is None:
            self.nodes = []
        if self.subgraphs is None:
            self.subgraphs = []
        if self.links is None:
            self.links = []

    @property
    def node_name(self) -> str:
        return self.title or ""

    @property
    def mermaid_name(self) -> str:
        return remove_spaces(self.node_name)

    def all_names(self) -> List[str]:
        """Every title and node name in this tree, descendants included."""
        names = []
        if self.title:
            names.append(self.title)
        names.extend(node.name for node in self.nodes)
        for subgraph in self.subgraphs:
            names.extend(subgraph.all_names())
        return names

    def contains_name(self, name: str) -> bool:
        return name in self.all_names()

    def add_node(self, node: Node) -> Node:
        if self.contains_name(node.name):
            raise DuplicateNameError(f"Cannot add node with non-unique name '{node.name}'.")
        self.nodes.append(node)
        return node

    def add_subgraph(self, subgraph: "Flowchart") -> "Flowchart":
        if not subgraph.title:
            raise MissingTitleError("Cannot add subgraph with no title.")
        existing = set(self.all_names())
        if subgraph.title in existing:
            raise DuplicateNameError(f"Cannot add subgraph with already existing title '{subgraph.title}'.")
        clashes = sorted(existing.intersection(subgraph.all_names()))
        if clashes:
            raise DuplicateNameError(f"Cannot add subgraph containing existing names: {', '.join(clashes)}.")
        self.subgraphs.append(subgraph)
        return subgraph

    def add_link(self, link: Link) -> Link:
        if link.origin is None:
            raise MissingEndpointError("Cannot add link with no origin.")
        if link.target is None:
            raise MissingEndpointError("Cannot add link with no target.")
        self.links.append(link)
        return link

    def __repr__(self):
        return (
            f"<Flowchart title={self.title!r} direction={getattr(self.direction, 'name', self.direction)} "
            f"nodes={len(self.nodes)} subgraphs={len(self.subgraphs)} links={len(self.links)}>"
        )
