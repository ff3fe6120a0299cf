"""Tests for the JSON Schema export of the public contracts."""
import json
from pathlib import Path

from comment_analyzer import AnalyzeCommentRequest, AnalyzeCommentResponse, SuggestCommentScoreRequest
from comment_analyzer.schema import SCHEMA_MODELS, json_schema, json_schemas, write_json_schemas


def test_exports_every_top_level_contract() -> None:
    """Both request/response pairs should be exported, in a stable order."""

    assert list(json_schemas()) == [
        "AnalyzeCommentRequest",
        "AnalyzeCommentResponse",
        "SuggestCommentScoreRequest",
        "SuggestCommentScoreResponse",
    ]


def test_analyze_request_schema_uses_wire_names() -> None:
    """Property names and required fields should match the wire contract."""

    schema = json_schema(AnalyzeCommentRequest)

    assert schema["title"] == "AnalyzeCommentRequest"
    assert schema["required"] == ["comment", "requestedAttributes"]
    assert set(schema["properties"]) == {
        "comment",
        "context",
        "requestedAttributes",
        "languages",
        "doNotStore",
        "clientToken",
        "sessionId",
        "communityId",
        "spanAnnotations",
    }

    definitions = schema["$defs"]
    assert definitions["Comment"]["required"] == ["text"]
    assert set(definitions["RequestedAttributeConfig"]["properties"]) == {"scoreType", "scoreThreshold"}
    assert "required" not in definitions["RequestedAttributeConfig"]


def test_response_schema_describes_scores() -> None:
    """Nested score shapes should carry their required fields."""

    schema = json_schema(AnalyzeCommentResponse)

    assert "required" not in schema
    definitions = schema["$defs"]
    assert set(definitions["AttributeScore"]["properties"]) == {"summaryScore", "spanScores"}
    assert definitions["SpanScore"]["required"] == ["begin", "end", "score"]
    assert definitions["Score"]["required"] == ["value"]


def test_examples_are_valid_payloads() -> None:
    """Each documented example should parse into its own model and serialize back unchanged."""

    for name, model in SCHEMA_MODELS.items():
        example = json_schema(model).get("example")
        if example is None:
            continue
        assert model.from_wire(example).to_wire() == example, name


def test_suggest_request_example_is_documented() -> None:
    """The suggest-score request should advertise an example like the analyze request does."""

    example = json_schema(SuggestCommentScoreRequest)["example"]

    assert example["attributeScores"]["TOXICITY"]["summaryScore"] == {"value": 0.1}


def test_write_json_schemas_creates_one_file_per_contract(tmp_path: Path) -> None:
    """Schemas should be written as indented JSON files into a new directory."""

    target = tmp_path / "nested" / "schemas"

    written = write_json_schemas(target)

    assert [path.name for path in written] == [f"{name}.schema.json" for name in SCHEMA_MODELS]
    request_schema = json.loads((target / "AnalyzeCommentRequest.schema.json").read_text(encoding="utf-8"))
    assert request_schema == json_schema(AnalyzeCommentRequest)


def test_every_text_type_field_is_described() -> None:
    """Comment and context entry text types should both be documented in the schema."""

    definitions = json_schema(AnalyzeCommentRequest)["$defs"]

    assert definitions["Comment"]["properties"]["type"]["description"]
    assert "comment.type" in definitions["ContextEntry"]["properties"]["type"]["description"]
