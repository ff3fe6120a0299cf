"""JSON Schema export for the public request/response contracts."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Type, Union

from comment_analyzer.models import (
    AnalyzeCommentRequest,
    AnalyzeCommentResponse,
    SuggestCommentScoreRequest,
    SuggestCommentScoreResponse,
    WireModel,
)

logger = logging.getLogger(__name__)

SCHEMA_MODELS: Dict[str, Type[WireModel]] = {
    "AnalyzeCommentRequest": AnalyzeCommentRequest,
    "AnalyzeCommentResponse": AnalyzeCommentResponse,
    "SuggestCommentScoreRequest": SuggestCommentScoreRequest,
    "SuggestCommentScoreResponse": SuggestCommentScoreResponse,
}


def json_schema(model: Type[WireModel]) -> Dict[str, Any]:
    """Return the JSON Schema of ``model`` as it appears on the wire."""

    return model.model_json_schema(by_alias=True, mode="serialization")


def json_schemas() -> Dict[str, Dict[str, Any]]:
    """Return the JSON Schema of every top-level contract, keyed by name."""

    return {name: json_schema(model) for name, model in SCHEMA_MODELS.items()}


def write_json_schemas(directory: Union[str, Path]) -> List[Path]:
    """Write one ``<Name>.schema.json`` file per contract into ``directory``."""

    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for name, schema in json_schemas().items():
        path = target / f"{name}.schema.json"
        path.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
        logger.info("Wrote %s schema to %s", name, path)
        written.append(path)
    return written
