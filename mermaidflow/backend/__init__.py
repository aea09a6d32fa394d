"""Backend exporters for flowcharts."""

from mermaidflow.backend.mermaid import MermaidExporter, render_mermaid

__all__ = [
    "MermaidExporter",
    "render_mermaid",
]
