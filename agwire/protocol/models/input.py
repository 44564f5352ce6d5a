"""Multimodal input content parts.

A user message's content may be a list of typed parts.  Each part has a
``type`` that determines which fields carry the payload:

- ``text``: a non-empty ``text``.
- ``binary``: a non-empty ``mimeType`` plus at least one source, either
  ``id`` (previously uploaded content), ``url``, or inline base64 ``data``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, TypeAdapter, model_validator

from agwire.protocol.errors import MissingContentSource
from agwire.protocol.models.base import NonEmptyStr, WireModel
from agwire.protocol.models.enums import InputContentType


class TextInputContent(WireModel):
    """A plain-text part."""

    type: Literal[InputContentType.TEXT] = InputContentType.TEXT
    text: NonEmptyStr


class BinaryInputContent(WireModel):
    """A binary part referenced by id, URL, or carried inline.

    Attributes
    ----------
    mime_type:
        MIME type of the content (required).
    id:
        Reference to previously uploaded content.
    url:
        Resource URL.
    data:
        Base64-encoded content.
    filename:
        Optional display name; not checked.
    """

    type: Literal[InputContentType.BINARY] = InputContentType.BINARY
    mime_type: NonEmptyStr
    id: str | None = None
    url: str | None = None
    data: str | None = None
    filename: str | None = None

    @model_validator(mode="after")
    def _validate_source(self) -> BinaryInputContent:
        """Ensure at least one source field is set."""
        if not (self.id or self.url or self.data):
            raise MissingContentSource()
        return self


InputContent = Annotated[TextInputContent | BinaryInputContent, Field(discriminator="type")]

INPUT_CONTENT_ADAPTER: TypeAdapter[InputContent] = TypeAdapter(InputContent)


# ---------------------------------------------------------------------------
# Convenience constructors
# ---------------------------------------------------------------------------


def text_content(text: str) -> TextInputContent:
    """Create a text part."""
    return TextInputContent(text=text)


def binary_content(
    mime_type: str,
    *,
    url: str | None = None,
    data: str | None = None,
    id: str | None = None,  # noqa: A002
    filename: str | None = None,
) -> BinaryInputContent:
    """Create a binary part; at least one of url, data or id is required."""
    return BinaryInputContent(mime_type=mime_type, url=url, data=data, id=id, filename=filename)
