"""Pydantic models for requests and responses."""

from .base import WireModel
from .common import (
    PROBABILITY,
    AttributeScore,
    Comment,
    Context,
    ContextEntry,
    Score,
    ScoreType,
    SpanScore,
    TextType,
)
from .request import (
    AnalyzeCommentRequest,
    PerspectiveRequest,
    RequestedAttributeConfig,
    SuggestCommentScoreRequest,
)
from .response import AnalyzeCommentResponse, PerspectiveResponse, SuggestCommentScoreResponse

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
