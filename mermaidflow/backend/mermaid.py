import logging
from typing import Iterator, Optional, Tuple

from mermaidflow.core.errors import ValidationError
from mermaidflow.core.ir import ArrowType, Direction, Flowchart, LineType, Link, Node, NodeType
from mermaidflow.core.transform import collect_links, get_mermaid_friendly_flowchart
from mermaidflow.core.validation import Violation, validate_mermaid
from mermaidflow.ids import uuid_ids

logger = logging.getLogger(__name__)


class MermaidExporter:
    """
    Exports a Flowchart to Mermaid flowchart syntax.

    Nodes are declared first, then subgraph blocks, then every link of the
    tree once at the outermost scope, sorted by origin and target name.

    Args:
        id_source: Iterator of identifiers for subgraphs without a title.
        allow_anonymous_subgraphs: If False, an untitled subgraph is a
            validation error; if True it is rendered under an identifier
            drawn from `id_source`.
    """

    INDENT = "    "

    _DIRECTIONS = {
        Direction.HORIZONTAL_RIGHT: "LR",
        Direction.HORIZONTAL_LEFT: "RL",
        Direction.VERTICAL: "TB",
    }

    _SHAPES = {
        NodeType.TERMINATOR: ("(", ")"),
        NodeType.PROCESS: ("[", "]"),
        NodeType.ALTERNATE_PROCESS: ("([", "])"),
        NodeType.SUBPROCESS: ("[[", "]]"),
        NodeType.DECISION: ("{", "}"),
        NodeType.INPUT_OUTPUT: ("[/", "/]"),
        NodeType.CONNECTOR: ("((", "))"),
        NodeType.DATABASE: ("[(", ")]"),
    }

    # Bidirectional (arrowless) token for each line type
    _LINES = {
        LineType.NONE: "~~~",
        LineType.SOLID: "---",
        LineType.DOTTED: "-.-",
        LineType.THICK: "===",
    }

    _ORIGIN_ARROWS = {
        ArrowType.NORMAL: "<",
        ArrowType.CIRCLE: "o",
        ArrowType.CROSS: "x",
    }

    _TARGET_ARROWS = {
        ArrowType.NORMAL: ">",
        ArrowType.CIRCLE: "o",
        ArrowType.CROSS: "x",
    }

    def __init__(self, id_source: Optional[Iterator[str]] = None, allow_anonymous_subgraphs: bool = False):
        self.id_source = id_source if id_source is not None else uuid_ids()
        self.allow_anonymous_subgraphs = allow_anonymous_subgraphs

    @staticmethod
    def direction(direction: Direction) -> str:
        return MermaidExporter._DIRECTIONS.get(direction, "TB")

    @staticmethod
    def _sanitize(text: str) -> str:
        """Escape double quotes for use inside a quoted Mermaid label."""
        return text.replace('"', "#quot;")

    @staticmethod
    def render_arrows(link: Link) -> Tuple[str, str]:
        """
        Arrow glyphs for the origin and target ends of a link.

        Mermaid cannot draw an arrow on the origin end alone, so the origin
        glyph is only drawn together with the target glyph.
        """
        if not link.target_arrow:
            return "", ""
        target = MermaidExporter._TARGET_ARROWS.get(link.arrow_type, "")
        origin = MermaidExporter._ORIGIN_ARROWS.get(link.arrow_type, "") if link.origin_arrow else ""
        return origin, target

    @staticmethod
    def render_link(link: Link) -> str:
        """Render `<origin> <token> <target>`, or "" if the link cannot be drawn."""
        if link.origin is None or link.target is None:
            return ""
        origin, target = link.origin.mermaid_name, link.target.mermaid_name
        if not origin or not target:
            return ""

        line = MermaidExporter._LINES.get(link.line_type)
        if line is None:
            return ""
        if link.line_type == LineType.NONE:
            return f"{origin} {line} {target}"

        origin_arrow, target_arrow = MermaidExporter.render_arrows(link)
        if link.label:
            token = f'{line[:2]} "{MermaidExporter._sanitize(link.label)}" {line[1:]}'
        elif (origin_arrow or target_arrow) and link.line_type in (LineType.SOLID, LineType.THICK):
            token = line[:2]
        else:
            token = line

        return f"{origin} {origin_arrow}{token}{target_arrow} {target}"

    @staticmethod
    def render_node(node: Node, indents: int = 0) -> str:
        indent = MermaidExporter.INDENT * indents
        if not node.label:
            return f"{indent}{node.mermaid_name};\n"
        left, right = MermaidExporter._SHAPES.get(node.node_type, MermaidExporter._SHAPES[NodeType.TERMINATOR])
        return f'{indent}{node.mermaid_name}{left}"{MermaidExporter._sanitize(node.label)}"{right};\n'

    def render_subgraph(self, chart: Flowchart, indents: int = 0) -> str:
        """Render `chart` as a `subgraph ... end;` block."""
        indent = self.INDENT * indents
        if chart.title:
            header = f"{indent}subgraph {chart.mermaid_name} [{chart.title}];\n"
        elif self.allow_anonymous_subgraphs:
            header = f"{indent}subgraph {next(self.id_source)};\n"
        else:
            raise ValidationError([Violation.INVALID_NAMES])

        parts = [
            header,
            f"{indent}{self.INDENT}direction {self.direction(chart.direction)};\n",
            self._render_body(chart, indents + 1),
            f"{indent}end;\n",
        ]
        return "".join(parts)

    def _render_body(self, chart: Flowchart, indents: int) -> str:
        parts = [self.render_node(node, indents) for node in chart.nodes]
        parts.extend(self.render_subgraph(subgraph, indents) for subgraph in chart.subgraphs)
        return "".join(parts)

    def to_mermaid(self, chart: Flowchart) -> str:
        """
        Convert a flowchart to Mermaid diagram text.

        Raises:
            ValidationError: if the chart has illegal names, nested subgraphs
                or repeated names.
        """
        validate_mermaid(chart, self.allow_anonymous_subgraphs)

        lines = []
        if chart.title:
            lines.append(f"---\ntitle: {chart.title}\n---\n")
        lines.append(f"flowchart {self.direction(chart.direction)};\n")
        lines.append(self._render_body(chart, 1))

        for link in collect_links(chart):
            rendered = self.render_link(link)
            if not rendered:
                logger.debug("Skipping link that cannot be rendered: %r", link)
                continue
            lines.append(f"{self.INDENT}{rendered};\n")

        return "".join(lines)


def render_mermaid(
    chart: Flowchart,
    friendly: bool = False,
    id_source: Optional[Iterator[str]] = None,
    allow_anonymous_subgraphs: bool = False,
) -> str:
    """
    Render a flowchart as Mermaid text.

    With `friendly=True` the chart is first flattened to one subgraph level
    and stripped of illegal names, so only duplicate names can still fail.
    """
    if friendly:
        chart = get_mermaid_friendly_flowchart(chart)
    exporter = MermaidExporter(id_source=id_source, allow_anonymous_subgraphs=allow_anonymous_subgraphs)
    return exporter.to_mermaid(chart)
