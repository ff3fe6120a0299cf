"""Substructures shared by the analyze and suggest-score contracts."""
from typing import List, Literal, Optional

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from comment_analyzer.models.base import WireModel

# Text type of a comment or context entry. The service recommends PLAIN_TEXT;
# HTML is accepted but may score differently.
TextType = Literal["PLAIN_TEXT", "HTML"]

# Score types are left open so the service can add new ones without breaking
# callers. PROBABILITY is the only type currently returned.
ScoreType = StrictStr
PROBABILITY = "PROBABILITY"


class Comment(WireModel):
    """A piece of text to be scored."""

    text: StrictStr = Field(
        ...,
        description="UTF-8 text to score. Emoji and other non-ASCII characters are allowed.",
    )
    type: Optional[TextType] = Field(
        default=None, description="Text type of `text`; the service assumes PLAIN_TEXT when absent."
    )


class ContextEntry(WireModel):
    """One piece of text surrounding the comment."""

    text: Optional[StrictStr] = Field(
        default=None, description="Context text. The service caps each entry at roughly 1MB."
    )
    type: Optional[TextType] = Field(
        default=None, description="Text type of `text`, same values as `comment.type`."
    )


class Context(WireModel):
    """Ordered context entries related to the comment."""

    entries: Optional[List[ContextEntry]] = None


class Score(WireModel):
    """A single numeric score for an attribute or a span."""

    value: StrictFloat = Field(..., description="Score value; probability scores fall in [0, 1].")
    type: Optional[ScoreType] = Field(default=None, description="Mirrors the requested scoreType.")


class SpanScore(WireModel):
    """Score for the character range [begin, end) of the original text."""

    begin: StrictInt
    end: StrictInt
    score: Score


class AttributeScore(WireModel):
    """Scores returned for one requested attribute."""

    summary_score: Optional[Score] = Field(
        default=None,
        description="Score for the whole comment. Absent when filtered out by scoreThreshold.",
    )
    span_scores: Optional[List[SpanScore]] = None
