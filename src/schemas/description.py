"""Node description schemas.

A node description is the declarative half of a plugin: the metadata and
input fields a workflow host shows in its editor and uses to resolve
parameter defaults. The node's behaviour lives in its ``execute`` routine.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class NodeProperty(BaseModel):
    """A user-facing input field of a node.

    Attributes:
        display_name: Label shown in the editor
        name: Parameter name used by ``get_node_parameter``
        type: Field type understood by the host's form layer
        default: Value used when the workflow leaves the field unset
        placeholder: Hint text shown in an empty field
        description: Help text
    """

    display_name: str = Field(alias="displayName")
    name: str
    type: Literal["string", "number", "boolean", "options", "json"] = "string"
    default: Any = None
    placeholder: str | None = None
    description: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}


class NodeDefaults(BaseModel):
    """Defaults applied when a node is placed in a workflow."""

    name: str

    model_config = {"frozen": True}


class NodeDescription(BaseModel):
    """Declarative description of a node type.

    Attributes:
        display_name: Human-readable node name
        name: Unique node type name, the registry key
        icon: Icon reference for the editor
        group: Editor groups the node appears in
        version: Node type version
        description: One-line summary
        defaults: Instance defaults
        inputs: Input connection types
        outputs: Output connection types
        properties: User-facing input fields
    """

    display_name: str = Field(alias="displayName")
    name: str
    icon: str | None = None
    group: list[str] = []
    version: int = 1
    description: str = ""
    defaults: NodeDefaults
    inputs: list[str] = ["main"]
    outputs: list[str] = ["main"]
    properties: list[NodeProperty] = []

    model_config = {"populate_by_name": True, "frozen": True}

    def property_defaults(self) -> dict[str, Any]:
        """Map each property name to its default value."""
        return {prop.name: prop.default for prop in self.properties}


class NodeIdentity(BaseModel):
    """A node instance as placed in a workflow.

    Attributes:
        name: Instance name, unique within a workflow
        type: Node type name
        type_version: Version of the node type
    """

    name: str
    type: str
    type_version: int = Field(default=1, alias="typeVersion")

    model_config = {"populate_by_name": True, "frozen": True}
