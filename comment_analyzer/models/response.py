"""Response models for the analyze and suggest-score calls."""
from typing import Dict, List, Optional, Union

from pydantic import ConfigDict, StrictStr

from comment_analyzer.models.base import WireModel
from comment_analyzer.models.common import AttributeScore


class AnalyzeCommentResponse(WireModel):
    """Scores returned by the analyze comment call."""

    # Keys mirror the request's requestedAttributes.
    attribute_scores: Optional[Dict[str, AttributeScore]] = None
    # The request's languages, or the auto-detected ones.
    languages: Optional[List[StrictStr]] = None
    client_token: Optional[StrictStr] = None

    # Provide an OpenAPI example to document the contract for clients.
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "attributeScores": {
                    "TOXICITY": {
                        "summaryScore": {"value": 0.83, "type": "PROBABILITY"},
                        "spanScores": [
                            {"begin": 0, "end": 31, "score": {"value": 0.83, "type": "PROBABILITY"}}
                        ],
                    }
                },
                "languages": ["en"],
            }
        }
    )


class SuggestCommentScoreResponse(WireModel):
    """Acknowledgement of a suggested score."""

    client_token: Optional[StrictStr] = None


PerspectiveResponse = Union[AnalyzeCommentResponse, SuggestCommentScoreResponse]
