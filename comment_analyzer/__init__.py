"""Request/response contracts for the Perspective Comment Analyzer API.

See https://developers.perspectiveapi.com/s/about-the-api-methods
"""

from comment_analyzer.models import (
    PROBABILITY,
    AnalyzeCommentRequest,
    AnalyzeCommentResponse,
    AttributeScore,
    Comment,
    Context,
    ContextEntry,
    PerspectiveRequest,
    PerspectiveResponse,
    RequestedAttributeConfig,
    Score,
    ScoreType,
    SpanScore,
    SuggestCommentScoreRequest,
    SuggestCommentScoreResponse,
    TextType,
    WireModel,
)

__version__ = "1.0.0"

__all__ = [
    "PROBABILITY",
    "AnalyzeCommentRequest",
    "AnalyzeCommentResponse",
    "AttributeScore",
    "Comment",
    "Context",
    "ContextEntry",
    "PerspectiveRequest",
    "PerspectiveResponse",
    "RequestedAttributeConfig",
    "Score",
    "ScoreType",
    "SpanScore",
    "SuggestCommentScoreRequest",
    "SuggestCommentScoreResponse",
    "TextType",
    "WireModel",
]
