"""Pipeline item schemas.

Items are the unit of data a workflow host hands to a node. Each carries a
structured ``json`` payload and, optionally, named binary attachments.

Serialised shape (host aliases):
    {
        "json": {...},
        "binary": {
            "data": {"mimeType": "application/pdf", "data": "<base64>", "fileName": "output.pdf"}
        },
        "pairedItem": 0
    }
"""

from typing import Any

from pydantic import BaseModel, Field, field_serializer


class BinaryData(BaseModel):
    """A named byte payload attached to an item.

    Attributes:
        mime_type: MIME type of the payload
        data: Base64-encoded payload bytes
        file_name: File name presented to downstream nodes
    """

    mime_type: str = Field(alias="mimeType")
    data: str
    file_name: str | None = Field(default=None, alias="fileName")

    model_config = {"populate_by_name": True, "frozen": True}


class NodeExecutionData(BaseModel):
    """One item flowing into or out of a node.

    Attributes:
        json_data: Structured payload (serialised as ``json``)
        binary: Binary attachments keyed by property name
        error: Exception recorded for an item that failed under continue-on-fail
        paired_item: Index of the input item this item was derived from
    """

    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")
    binary: dict[str, BinaryData] | None = None
    error: Exception | None = None
    paired_item: int | None = Field(default=None, alias="pairedItem")

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": True,
        "frozen": True,
    }

    @field_serializer("error")
    def _serialize_error(self, error: Exception | None) -> dict | None:
        if error is None:
            return None
        serialized = {"name": type(error).__name__, "message": str(error)}
        context = getattr(error, "context", None)
        if context:
            serialized["context"] = dict(context)
        return serialized

    def to_host(self) -> dict[str, Any]:
        """Dump the item in the host's camelCase shape, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
