"""
Writes a small call graph as a Mermaid flowchart to diagram.mmd.

Run directly, or export with the CLI:
    mermaidflow examples/function_calls.py -o build/
"""

import os
import sys

# Ensure mermaidflow is in path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from mermaidflow.backend import render_mermaid
from mermaidflow.frontend import process_node, solid_link, vertical_flowchart

FUNCTION_CALLS = [
    ("Main", "FunctionA"),
    ("FunctionA", "FunctionB"),
    ("FunctionB", "FunctionC"),
    ("FunctionC", "FunctionD"),
    ("Main", "FunctionE"),
]


def build_call_graph(calls):
    chart = vertical_flowchart("Function Calls")
    nodes = {}
    for caller, callee in calls:
        for name in (caller, callee):
            if name not in nodes:
                nodes[name] = chart.add_node(process_node(name))
        chart.add_link(solid_link(nodes[caller], nodes[callee]))
    return chart


call_graph = build_call_graph(FUNCTION_CALLS)


def main():
    with open("diagram.mmd", "w") as f:
        f.write(render_mermaid(call_graph))
    print("Mermaid diagram generated: diagram.mmd")


if __name__ == "__main__":
    main()
