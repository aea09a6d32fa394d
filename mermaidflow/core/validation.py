"""
Checks that a flowchart can be expressed in Mermaid flowchart syntax.

Mermaid limits identifiers to a small character set and supports a single
level of subgraphs, and every node or subgraph identifier must be unique.
"""

import logging
import re
from collections import Counter
from enum import Enum
from typing import List

from mermaidflow.core.errors import ValidationError
from mermaidflow.core.ir import Flowchart, remove_spaces

logger = logging.getLogger(__name__)

MERMAID_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_\- ]+$")


class Violation(str, Enum):
    """Violation categories, declared in reporting order."""
    INVALID_NAMES = "contains invalid mermaid names"
    NESTED_SUBGRAPHS = "contains nested subgraphs"
    REPEATED_NAMES = "contains repeated node and/or subgraph names"


def is_valid_mermaid_name(name) -> bool:
    return isinstance(name, str) and MERMAID_NAME_PATTERN.match(name) is not None


def has_valid_mermaid_names(chart: Flowchart, allow_anonymous_subgraphs: bool = False) -> bool:
    """True if every node name and subgraph title in the tree is a legal identifier."""
    if not all(is_valid_mermaid_name(node.name) for node in chart.nodes):
        return False
    for subgraph in chart.subgraphs:
        untitled = not subgraph.title
        if untitled and not allow_anonymous_subgraphs:
            return False
        if not untitled and not is_valid_mermaid_name(subgraph.title):
            return False
        if not has_valid_mermaid_names(subgraph, allow_anonymous_subgraphs):
            return False
    return True


def has_nested_subgraphs(chart: Flowchart) -> bool:
    return any(subgraph.subgraphs for subgraph in chart.subgraphs)


def has_repeated_names(chart: Flowchart) -> bool:
    """
    True if a name repeats anywhere in the tree, or if two names render to
    the same identifier once spaces are removed.
    """
    if any(count > 1 for count in Counter(chart.all_names()).values()):
        return True
    # The root title is front matter, not an identifier
    identifiers = [node.mermaid_name for node in chart.nodes]
    for subgraph in chart.subgraphs:
        identifiers.extend(remove_spaces(name) for name in subgraph.all_names())
    return any(count > 1 for count in Counter(identifiers).values())


def find_violations(chart: Flowchart, allow_anonymous_subgraphs: bool = False) -> List[Violation]:
    """Return every violated category, in reporting order."""
    violations = []
    if not has_valid_mermaid_names(chart, allow_anonymous_subgraphs):
        violations.append(Violation.INVALID_NAMES)
    if has_nested_subgraphs(chart):
        violations.append(Violation.NESTED_SUBGRAPHS)
    if has_repeated_names(chart):
        violations.append(Violation.REPEATED_NAMES)
    return violations


def validate_mermaid(chart: Flowchart, allow_anonymous_subgraphs: bool = False) -> None:
    """Raise ValidationError listing all violations, or return if the chart is renderable."""
    violations = find_violations(chart, allow_anonymous_subgraphs)
    if violations:
        logger.debug("Flowchart %r failed validation: %s", chart.title, [v.name for v in violations])
        raise ValidationError(violations)
