"""Shared base model for Comment Analyzer wire payloads."""
from __future__ import annotations

import logging
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError, model_serializer
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="WireModel")


class WireModel(BaseModel):
    """Base for every request/response shape exchanged with the API.

    Attributes use snake_case in Python and camelCase on the wire; either name
    is accepted when constructing or parsing. Optional fields default to
    ``None`` and are left out of serialized payloads entirely, so an absent
    field is never confused with a null or zero value. Keys the service sends
    that are not declared here are kept and written back out unchanged, nulls
    included.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    @model_serializer(mode="wrap")
    def _keep_null_extras(self, handler, info):
        data = handler(self)
        # exclude_none only applies to declared fields.
        if info.exclude_none and self.model_extra:
            for key, value in self.model_extra.items():
                if value is None:
                    data.setdefault(key, None)
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-compatible payload with absent fields omitted."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, **kwargs: Any) -> str:
        """Serialize to a JSON string using the same rules as :meth:`to_wire`.

        Keyword arguments are forwarded to ``model_dump_json``; ``by_alias``
        and ``exclude_none`` may be overridden.
        """

        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_none", True)
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_wire(cls: Type[ModelT], payload: Any) -> ModelT:
        """Parse a decoded JSON payload (usually a dict) into this shape."""

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            logger.debug("Rejected %s payload with %d error(s)", cls.__name__, exc.error_count())
            raise

    @classmethod
    def from_json(cls: Type[ModelT], data: Union[str, bytes]) -> ModelT:
        """Parse a raw JSON document into this shape."""

        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            logger.debug("Rejected %s JSON with %d error(s)", cls.__name__, exc.error_count())
            raise
