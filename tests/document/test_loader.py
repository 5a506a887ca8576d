"""Tests for the IndoorGML document loader."""

import io

import pytest

from indoorgraph.document.errors import ParseError
from indoorgraph.document.loader import (
    load_document,
    parse_document,
    parse_document_from_string,
)
from indoorgraph.document.models import ExtractionConfig

from ..conftest import indoor_gml


class TestParseDocumentFromString:
    def test_reads_cell_spaces_in_document_order(self, cycle_document):
        assert cycle_document.get_cell_space_ids() == ["A", "B", "C"]

    def test_reads_names(self, cycle_document):
        names = [cs.name for cs in cycle_document.cell_spaces]
        assert names == ["Room A", "Room B", None]

    def test_reads_transitions(self, cycle_document):
        assert [t.id for t in cycle_document.transitions] == ["AB", "BC", "CA"]
        assert cycle_document.transitions[0].connects == ["#A", "#B"]

    def test_empty_document(self):
        document = parse_document_from_string(indoor_gml(""))
        assert document.cell_spaces == []
        assert document.transitions == []

    def test_malformed_xml(self):
        with pytest.raises(ParseError) as exc_info:
            parse_document_from_string("<IndoorFeatures><CellSpace>")
        assert "Invalid XML" in str(exc_info.value)

    def test_missing_id_reads_as_empty(self):
        document = parse_document_from_string(indoor_gml("<CellSpace/>"))
        assert document.cell_spaces[0].id == ""

    def test_first_name_wins(self):
        xml = indoor_gml(
            '<CellSpace gml:id="R1">'
            "<gml:name>First</gml:name><gml:name>Second</gml:name>"
            "</CellSpace>"
        )
        document = parse_document_from_string(xml)
        assert document.cell_spaces[0].name == "First"

    def test_name_text_includes_nested_text(self):
        xml = indoor_gml(
            '<CellSpace gml:id="R1"><gml:name>Room <b>12</b></gml:name></CellSpace>'
        )
        document = parse_document_from_string(xml)
        assert document.cell_spaces[0].name == "Room 12"

    def test_gml_name_preferred_over_foreign_name(self):
        xml = (
            '<IndoorFeatures xmlns:gml="http://www.opengis.net/gml/3.2" '
            'xmlns:x="http://example.com/other">'
            '<CellSpace gml:id="A"><x:name>Other</x:name><gml:name>Hall</gml:name></CellSpace>'
            "</IndoorFeatures>"
        )
        document = parse_document_from_string(xml)
        assert document.cell_spaces[0].name == "Hall"

    def test_foreign_name_used_without_gml_name(self):
        xml = (
            '<IndoorFeatures xmlns:gml="http://www.opengis.net/gml/3.2" '
            'xmlns:x="http://example.com/other">'
            '<CellSpace gml:id="A"><x:name>Other</x:name></CellSpace>'
            "</IndoorFeatures>"
        )
        document = parse_document_from_string(xml)
        assert document.cell_spaces[0].name == "Other"

    def test_undeclared_prefixes_are_rejected(self):
        xml = (
            '<IndoorFeatures><CellSpace gml:id="A">'
            "<gml:name>Hall</gml:name></CellSpace></IndoorFeatures>"
        )
        with pytest.raises(ParseError) as exc_info:
            parse_document_from_string(xml)
        assert "unbound prefix" in str(exc_info.value)

    def test_boundary_elements_are_not_cell_spaces(self):
        xml = indoor_gml(
            '<CellSpace gml:id="R1"/><CellSpaceBoundary gml:id="B1"/>'
        )
        document = parse_document_from_string(xml)
        assert document.get_cell_space_ids() == ["R1"]

    def test_connects_beyond_two_are_kept_in_record(self):
        xml = indoor_gml(
            '<Transition gml:id="T1">'
            '<connects xlink:href="#A"/>'
            '<connects xlink:href="#B"/>'
            '<connects xlink:href="#C"/>'
            "</Transition>"
        )
        transition = parse_document_from_string(xml).transitions[0]
        assert transition.connects == ["#A", "#B", "#C"]
        assert transition.endpoints == ("#A", "#B")

    def test_older_gml_namespace(self):
        xml = (
            '<IndoorFeatures xmlns:gml="http://www.opengis.net/gml" '
            'xmlns:xlink="http://www.w3.org/1999/xlink">'
            '<CellSpace gml:id="R1"><gml:name>Old</gml:name></CellSpace>'
            "</IndoorFeatures>"
        )
        document = parse_document_from_string(xml)
        assert document.cell_spaces[0].id == "R1"
        assert document.cell_spaces[0].name == "Old"

    def test_prefixed_cell_space_tag(self):
        xml = (
            '<core:IndoorFeatures xmlns:core="http://www.opengis.net/indoorgml/1.0/core" '
            'xmlns:gml="http://www.opengis.net/gml/3.2">'
            '<core:CellSpace gml:id="R1"/>'
            "</core:IndoorFeatures>"
        )
        document = parse_document_from_string(xml)
        assert document.get_cell_space_ids() == ["R1"]

    def test_extra_cell_space_tags(self):
        xml = indoor_gml(
            '<CellSpace gml:id="R1"/><GeneralSpace gml:id="R2"/>'
            '<TransitionSpace gml:id="R3"/>'
        )
        config = ExtractionConfig(
            cell_space_tags=["CellSpace", "GeneralSpace", "TransitionSpace"]
        )
        document = parse_document_from_string(xml, config)
        assert document.get_cell_space_ids() == ["R1", "R2", "R3"]

    def test_default_tags_ignore_subtypes(self):
        xml = indoor_gml('<CellSpace gml:id="R1"/><GeneralSpace gml:id="R2"/>')
        document = parse_document_from_string(xml)
        assert document.get_cell_space_ids() == ["R1"]


class TestParseDocument:
    def test_parse_bytes(self, cycle_gml):
        document = parse_document(cycle_gml.encode("utf-8"))
        assert len(document.cell_spaces) == 3

    def test_parse_binary_handle(self, cycle_gml):
        document = parse_document(io.BytesIO(cycle_gml.encode("utf-8")))
        assert len(document.transitions) == 3

    def test_parse_malformed_bytes(self):
        with pytest.raises(ParseError):
            parse_document(b"<not-closed>")

    def test_parse_malformed_handle(self):
        with pytest.raises(ParseError):
            parse_document(io.BytesIO(b"<not-closed>"))

    def test_parse_path(self, examples_dir):
        document = parse_document(examples_dir / "sample.gml")
        assert document.source is not None
        assert document.get_cell_space_ids() == ["C1", "C2", "C3", "C4"]


class TestLoadDocument:
    def test_file_not_found(self):
        with pytest.raises(ParseError) as exc_info:
            load_document("/nonexistent/path.gml")
        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.path == "/nonexistent/path.gml"

    def test_not_a_file(self, tmp_path):
        with pytest.raises(ParseError) as exc_info:
            load_document(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_malformed_file(self, examples_dir):
        with pytest.raises(ParseError) as exc_info:
            load_document(examples_dir / "invalid" / "malformed.gml")
        assert "Invalid XML" in str(exc_info.value)

    def test_empty_file(self, tmp_path):
        gml_file = tmp_path / "empty.gml"
        gml_file.write_text("")

        with pytest.raises(ParseError):
            load_document(gml_file)

    def test_load_sample(self, examples_dir):
        document = load_document(examples_dir / "sample.gml")

        assert document.get_cell_space_ids() == ["C1", "C2", "C3", "C4"]
        assert [t.id for t in document.transitions] == ["T1", "T2", "T3"]
        # The building's own gml:name is outside every cell space
        assert document.cell_spaces[0].name == "Lobby"
