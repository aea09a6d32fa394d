"""Tests for Mermaid name and structure validation."""

import pytest
from mermaidflow.core.errors import ValidationError
from mermaidflow.core.ir import Direction, Flowchart, Node
from mermaidflow.core.validation import (
    Violation,
    find_violations,
    has_nested_subgraphs,
    has_repeated_names,
    has_valid_mermaid_names,
    is_valid_mermaid_name,
    validate_mermaid,
)


@pytest.mark.parametrize("name, expected", [
    ("Valid test-case_1", True),
    ("ValidNode1", True),
    ("Valid Node 4", True),
    ("(", False),
    ("@", False),
    ("Invalid@Node", False),
    ("", False),
    (None, False),
])
def test_is_valid_mermaid_name(name, expected):
    assert is_valid_mermaid_name(name) is expected


class TestHasValidMermaidNames:
    def test_happy_path(self):
        chart = Flowchart(
            nodes=[Node("ValidNode1"), Node("Valid_Node_2"), Node("Valid-Node-3"), Node("Valid Node 4")],
            subgraphs=[Flowchart(title="Subgraph1", nodes=[Node("SubNode1"), Node("SubNode2")])],
        )
        assert has_valid_mermaid_names(chart)

    def test_invalid_node_name(self):
        chart = Flowchart(nodes=[Node("ValidNode"), Node("Invalid@Node")])
        assert not has_valid_mermaid_names(chart)

    def test_invalid_name_inside_subgraph(self):
        chart = Flowchart(
            nodes=[Node("MainNode")],
            subgraphs=[Flowchart(title="Subgraph1", nodes=[Node("ValidSubNode"), Node("Invalid!SubNode")])],
        )
        assert not has_valid_mermaid_names(chart)

    @pytest.mark.parametrize("title", [None, ""])
    def test_untitled_subgraph(self, title):
        chart = Flowchart(subgraphs=[Flowchart(title=title, nodes=[Node("ValidSubNode")])])
        assert not has_valid_mermaid_names(chart)
        assert has_valid_mermaid_names(chart, allow_anonymous_subgraphs=True)

    def test_invalid_name_deep_in_nested_subgraph(self):
        chart = Flowchart(subgraphs=[
            Flowchart(title="Valid Subgraph", subgraphs=[
                Flowchart(title="Also Valid Subgraph", nodes=[Node("Inv@alid")]),
            ]),
        ])
        assert not has_valid_mermaid_names(chart)

    def test_root_title_is_not_checked(self):
        chart = Flowchart(title="Anything: goes (here)", nodes=[Node("A")])
        assert has_valid_mermaid_names(chart)


def test_has_nested_subgraphs():
    flat = Flowchart(subgraphs=[Flowchart(title="One")])
    nested = Flowchart(subgraphs=[Flowchart(title="One", subgraphs=[Flowchart(title="Two")])])
    assert not has_nested_subgraphs(flat)
    assert has_nested_subgraphs(nested)


def test_has_repeated_names_across_levels():
    chart = Flowchart(nodes=[Node("A")], subgraphs=[Flowchart(title="G", nodes=[Node("A")])])
    assert has_repeated_names(chart)
    assert not has_repeated_names(Flowchart(nodes=[Node("A")], subgraphs=[Flowchart(title="G")]))


class TestValidateMermaid:
    """Validation reports every violated category in a fixed order."""

    @pytest.fixture
    def valid_node(self):
        return Node("ValidNode", label="Valid Node")

    @pytest.fixture
    def invalid_node(self):
        return Node("Invalid@Node", label="Invalid Node")

    @pytest.fixture
    def duplicate_node(self):
        return Node("DuplicateNode", label="Duplicate Node")

    @pytest.fixture
    def subgraph_with_nested(self):
        return Flowchart(
            title="SubgraphWithNested",
            nodes=[Node("NestedNode")],
            subgraphs=[Flowchart(title="NestedSubgraph", nodes=[Node("AnotherNestedNode")])],
        )

    @pytest.fixture
    def subgraph_without_nested(self):
        return Flowchart(
            title="SubgraphWithoutNested",
            direction=Direction.HORIZONTAL_LEFT,
            nodes=[Node("SubgraphNode")],
        )

    def test_valid_flowchart(self, valid_node, subgraph_without_nested):
        chart = Flowchart(title="MainFlowchart", nodes=[valid_node], subgraphs=[subgraph_without_nested])
        validate_mermaid(chart)
        assert find_violations(chart) == []

    def test_empty_flowchart(self):
        validate_mermaid(Flowchart(title="EmptyFlowchart"))

    def test_untitled_root(self, valid_node):
        validate_mermaid(Flowchart(nodes=[valid_node]))

    def test_invalid_names(self, valid_node, invalid_node, subgraph_without_nested):
        chart = Flowchart(title="MainFlowchart", nodes=[valid_node, invalid_node], subgraphs=[subgraph_without_nested])
        with pytest.raises(ValidationError) as excinfo:
            validate_mermaid(chart)
        assert str(excinfo.value) == "flowchart contains violations: contains invalid mermaid names"
        assert excinfo.value.violations == (Violation.INVALID_NAMES,)

    def test_nested_subgraphs(self, valid_node, subgraph_with_nested):
        chart = Flowchart(title="MainFlowchart", nodes=[valid_node], subgraphs=[subgraph_with_nested])
        with pytest.raises(ValidationError, match="^flowchart contains violations: contains nested subgraphs$"):
            validate_mermaid(chart)

    def test_duplicate_node_names(self, duplicate_node, subgraph_without_nested):
        chart = Flowchart(
            title="MainFlowchart",
            nodes=[duplicate_node, duplicate_node],
            subgraphs=[subgraph_without_nested],
        )
        with pytest.raises(ValidationError) as excinfo:
            validate_mermaid(chart)
        assert str(excinfo.value) == (
            "flowchart contains violations: contains repeated node and/or subgraph names"
        )

    def test_duplicate_subgraph_titles(self, valid_node, subgraph_without_nested):
        chart = Flowchart(
            title="MainFlowchart",
            nodes=[valid_node],
            subgraphs=[
                subgraph_without_nested,
                Flowchart(title="SubgraphWithoutNested", nodes=[Node("AnotherNode")]),
            ],
        )
        with pytest.raises(ValidationError) as excinfo:
            validate_mermaid(chart)
        assert excinfo.value.violations == (Violation.REPEATED_NAMES,)

    def test_invalid_names_and_nested_subgraphs(self, valid_node, invalid_node, subgraph_with_nested):
        chart = Flowchart(title="MainFlowchart", nodes=[valid_node, invalid_node], subgraphs=[subgraph_with_nested])
        with pytest.raises(ValidationError) as excinfo:
            validate_mermaid(chart)
        assert str(excinfo.value) == (
            "flowchart contains violations: contains invalid mermaid names, contains nested subgraphs"
        )
        assert excinfo.value.violations == (Violation.INVALID_NAMES, Violation.NESTED_SUBGRAPHS)

    def test_all_three_violations(self, valid_node, invalid_node, duplicate_node, subgraph_with_nested):
        chart = Flowchart(
            title="MainFlowchart",
            nodes=[valid_node, invalid_node, duplicate_node, duplicate_node],
            subgraphs=[subgraph_with_nested],
        )
        with pytest.raises(ValidationError) as excinfo:
            validate_mermaid(chart)
        assert str(excinfo.value) == (
            "flowchart contains violations: contains invalid mermaid names, contains nested subgraphs, "
            "contains repeated node and/or subgraph names"
        )

    def test_untitled_subgraph_is_invalid_name(self, valid_node):
        chart = Flowchart(title="MainFlowchart", nodes=[valid_node], subgraphs=[Flowchart(nodes=[Node("SubgraphNode")])])
        with pytest.raises(ValidationError, match="contains invalid mermaid names"):
            validate_mermaid(chart)
        validate_mermaid(chart, allow_anonymous_subgraphs=True)

    def test_validation_does_not_mutate(self, valid_node, invalid_node, subgraph_with_nested):
        chart = Flowchart(title="MainFlowchart", nodes=[valid_node, invalid_node], subgraphs=[subgraph_with_nested])
        before = chart.all_names()
        with pytest.raises(ValidationError):
            validate_mermaid(chart)
        assert chart.all_names() == before
        assert chart.subgraphs == [subgraph_with_nested]


def test_has_repeated_names_after_space_removal():
    assert has_repeated_names(Flowchart(nodes=[Node("Node One"), Node("NodeOne")]))
    assert has_repeated_names(Flowchart(nodes=[Node("Node One")], subgraphs=[Flowchart(title="NodeOne")]))
    assert has_repeated_names(
        Flowchart(subgraphs=[Flowchart(title="G", nodes=[Node("A B")]), Flowchart(title="H", nodes=[Node("AB")])])
    )


def test_root_title_is_not_an_identifier():
    chart = Flowchart(title="Main Flow", nodes=[Node("MainFlow")])
    assert not has_repeated_names(chart)
    validate_mermaid(chart)


def test_space_collision_is_reported_as_repeated_names():
    chart = Flowchart(nodes=[Node("Node One"), Node("NodeOne")])
    with pytest.raises(ValidationError) as excinfo:
        validate_mermaid(chart)
    assert excinfo.value.violations == (Violation.REPEATED_NAMES,)
