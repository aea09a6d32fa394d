import sys
import os
import pytest
sys.path.append(os.path.dirname(__file__))

from sample_flow import create_sample_flowchart, SAMPLE_MERMAID


@pytest.fixture
def sample_flowchart():
    return create_sample_flowchart()


@pytest.fixture
def sample_mermaid():
    return SAMPLE_MERMAID


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Undo handlers and levels installed by setup_logging during a test."""
    import logging
    import mermaidflow.logging_utils as logging_utils

    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    monkeypatch.delenv("MERMAIDFLOW_LOG_LEVEL", raising=False)
    logger = logging.getLogger("mermaidflow")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
