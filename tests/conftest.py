"""Shared test fixtures for dotscribe."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from dotscribe.keywords import reset_keywords


@pytest.fixture(autouse=True)
def _builtin_keywords() -> Iterator[None]:
    """Drop keyword families registered by a test."""
    yield
    reset_keywords()


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary empty project directory."""
    return tmp_path


@pytest.fixture
def initialized_project(tmp_path: Path) -> Path:
    """Create a temporary project with dotscribe initialized."""
    dotscribe_dir = tmp_path / ".dotscribe"
    dotscribe_dir.mkdir()
    config = {
        "version": "0.1.0",
        "indent": 4,
        "keyword_files": [],
    }
    (dotscribe_dir / "config.json").write_text(json.dumps(config, indent=2))
    return tmp_path


@pytest.fixture
def sample_description() -> str:
    """Return a YAML graph description with defaults, a cluster and ports."""
    return """\
name: pipeline
comment: build pipeline
graph:
  rankdir: LR
node:
  shape: box
subgraphs:
  - name: cluster_src
    graph:
      label: sources
    nodes: [parse, lex]
nodes:
  - id: emit
    attrs:
      label: {html: "<b>emit</b>"}
      color: "#FF0000"
edges:
  - [lex, parse]
  - source: parse
    target: emit
    source_port: "out:e"
    attrs:
      style: dashed
"""


@pytest.fixture
def sample_description_file(tmp_path: Path, sample_description: str) -> Path:
    """Write the sample description to a file and return the path."""
    path = tmp_path / "pipeline.yaml"
    path.write_text(sample_description)
    return path


@pytest.fixture
def keyword_file(tmp_path: Path) -> Path:
    """Write a keyword file adding a custom shape."""
    path = tmp_path / "keywords.yaml"
    path.write_text("shape:\n  - hexbox\n  - Rhombus\n")
    return path
