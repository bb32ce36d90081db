"""
Outline Serializer Tests
"""

import json

import pytest

from codegraph_outline.errors import InvalidDocumentError, OutputWriteError
from codegraph_outline.models import CharSpan, Container, LocationSpan, OutlineFile, Terminal
from codegraph_outline.outline.normalizer import build_outline
from codegraph_outline.outline.serializer import OutlineSerializer


@pytest.fixture
def outline() -> OutlineFile:
    name = Terminal(
        item_type="identifier",
        name="main",
        location_span=LocationSpan(start=(1, 3), end=(1, 7)),
        span=CharSpan.of(3, 7),
    )
    body = Terminal(
        item_type="block",
        name="block",
        location_span=LocationSpan(start=(1, 10), end=(2, 1)),
        span=CharSpan.of(10, 14),
    )
    item = Container(
        item_type="function_item",
        name="main",
        location_span=LocationSpan(start=(1, 0), end=(2, 1)),
        header_span=CharSpan.of(0, 14),
        children=[name, body],
    )
    return OutlineFile(
        name="src/main.rs",
        location_span=LocationSpan(start=(1, 0), end=(2, 1)),
        parsing_errors_detected=False,
        children=[item],
    )


@pytest.fixture
def serializer() -> OutlineSerializer:
    return OutlineSerializer(indent=2)


class TestOutlineSerializer:
    def test_reserialization_is_identical(self, serializer, outline):
        document = serializer.dumps(outline)

        assert serializer.dumps(serializer.loads(document)) == document
        assert serializer.loads(document) == outline

    def test_pretty_printed_with_stable_indentation(self, serializer, outline):
        document = serializer.dumps(outline)

        assert document.startswith('{\n  "type": "file",\n  "name": "src/main.rs",')
        assert '\n    {\n      "type": "function_item",' in document

    def test_field_order(self, serializer, outline):
        data = json.loads(serializer.dumps(outline))

        assert list(data) == [
            "type",
            "name",
            "locationSpan",
            "footerSpan",
            "parsingErrorsDetected",
            "children",
            "parsingError",
        ]
        assert data["children"][0]["headerSpan"] == [0, 14]
        assert data["children"][0]["children"][0]["span"] == [3, 7]

    def test_compact_when_indent_is_zero(self, outline):
        assert "\n" not in OutlineSerializer(indent=0).dumps(outline)

    def test_write_overwrites(self, serializer, outline, tmp_path):
        target = tmp_path / "out.json"
        target.write_text("stale content that is much longer than nothing" * 100)

        document = serializer.write(outline, target)

        assert target.read_text(encoding="utf-8") == document

    def test_write_failure(self, serializer, outline, tmp_path):
        with pytest.raises(OutputWriteError):
            serializer.write(outline, tmp_path / "missing" / "out.json")

    def test_invalid_document(self, serializer):
        with pytest.raises(InvalidDocumentError):
            serializer.loads('{"type": "file"}')

    def test_not_json(self, serializer):
        with pytest.raises(InvalidDocumentError):
            serializer.loads("OK\n")


class TestDeepOutlines:
    def test_round_trip_at_depth_limit(self, serializer, make_chain):
        source, root = make_chain(300)
        outline = build_outline(root, source)

        document = serializer.dumps(outline)

        assert serializer.dumps(serializer.loads(document)) == document

    def test_too_deep_to_serialize(self, serializer, nest):
        outline = OutlineFile(
            name="deep.rs",
            location_span=LocationSpan(start=(1, 0), end=(1, 1)),
            children=[nest(400)],
        )

        with pytest.raises(OutputWriteError):
            serializer.dumps(outline)
