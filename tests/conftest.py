"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from indoorgraph.document.loader import parse_document_from_string
from indoorgraph.graph.builder import build_graph

NAMESPACES = (
    'xmlns="http://www.opengis.net/indoorgml/1.0/core" '
    'xmlns:gml="http://www.opengis.net/gml/3.2" '
    'xmlns:xlink="http://www.w3.org/1999/xlink"'
)


def indoor_gml(body: str) -> str:
    """Wrap cell space and transition markup in an IndoorFeatures root."""
    return f"<IndoorFeatures {NAMESPACES}>{body}</IndoorFeatures>"


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def cycle_gml() -> str:
    """Return a document with three cell spaces connected in a cycle."""
    return indoor_gml("""
  <CellSpace gml:id="A"><gml:name>Room A</gml:name></CellSpace>
  <CellSpace gml:id="B"><gml:name>Room B</gml:name></CellSpace>
  <CellSpace gml:id="C"/>
  <Transition gml:id="AB">
    <connects xlink:href="#A"/>
    <connects xlink:href="#B"/>
  </Transition>
  <Transition gml:id="BC">
    <connects xlink:href="#B"/>
    <connects xlink:href="#C"/>
  </Transition>
  <Transition gml:id="CA">
    <connects xlink:href="#C"/>
    <connects xlink:href="#A"/>
  </Transition>
""")


@pytest.fixture
def cycle_document(cycle_gml):
    """Return the parsed cycle document."""
    return parse_document_from_string(cycle_gml)


@pytest.fixture
def cycle_graph(cycle_document):
    """Return a graph built from the cycle document."""
    return build_graph(cycle_document)
