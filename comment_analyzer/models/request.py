"""Request models for the analyze and suggest-score calls."""
from typing import Dict, List, Optional, Union

from pydantic import ConfigDict, Field, StrictBool, StrictFloat, StrictStr

from comment_analyzer.models.base import WireModel
from comment_analyzer.models.common import AttributeScore, Comment, Context, ScoreType


class RequestedAttributeConfig(WireModel):
    """Per-attribute scoring options; an empty object selects service defaults."""

    score_type: Optional[ScoreType] = Field(default=None, description='e.g. "PROBABILITY"')
    score_threshold: Optional[StrictFloat] = Field(
        default=None, description="Scores below this value are not returned. By default all are."
    )


class AnalyzeCommentRequest(WireModel):
    """Request payload for the analyze comment call.

    Only ``comment.text`` and ``requested_attributes`` are required by the
    service; every other field falls back to a service-side default when
    absent.
    """

    comment: Comment
    context: Optional[Context] = None
    requested_attributes: Dict[str, RequestedAttributeConfig] = Field(
        ..., description="Attribute name (e.g. TOXICITY) to its configuration; {} for defaults."
    )
    languages: Optional[List[StrictStr]] = Field(
        default=None,
        description="ISO 639-1 codes of the comment's language(s). Auto-detected when absent.",
    )
    do_not_store: Optional[StrictBool] = Field(
        default=None,
        description="Forbid the service from storing the comment and context. Service default: false.",
    )
    client_token: Optional[StrictStr] = Field(default=None, description="Opaque token echoed in the response.")
    session_id: Optional[StrictStr] = Field(
        default=None, description="Opaque session id used for abuse protection; not a user id."
    )
    community_id: Optional[StrictStr] = Field(
        default=None, description="Opaque id of the community the comment belongs to."
    )
    span_annotations: Optional[StrictBool] = Field(
        default=None, description="Return per-span scores as well. Service default: false."
    )

    # Provide an OpenAPI example to document the contract for clients.
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "comment": {"text": "What kind of idiot name is foo?"},
                "requestedAttributes": {"TOXICITY": {}, "INSULT": {"scoreType": "PROBABILITY"}},
                "languages": ["en"],
                "doNotStore": True,
                "spanAnnotations": True,
            }
        }
    )


class SuggestCommentScoreRequest(WireModel):
    """Request payload for suggesting the score a comment should have received."""

    comment: Comment
    context: Optional[Context] = None
    attribute_scores: Dict[str, AttributeScore] = Field(
        ..., description="Scores the client believes are correct, shaped like an analyze response."
    )
    languages: Optional[List[StrictStr]] = None
    community_id: Optional[StrictStr] = None
    client_token: Optional[StrictStr] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "comment": {"text": "What kind of idiot name is foo?"},
                "attributeScores": {"TOXICITY": {"summaryScore": {"value": 0.1}}},
                "languages": ["en"],
                "clientToken": "feedback-42",
            }
        }
    )


PerspectiveRequest = Union[AnalyzeCommentRequest, SuggestCommentScoreRequest]
