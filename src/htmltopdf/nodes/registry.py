"""Registry of node types, keyed by their unique description name."""

from .node import Node

NODE_TYPES: dict[str, type[Node]] = {}


def register_node(node_type: type[Node]) -> type[Node]:
    """Class decorator adding a node type to the registry.

    Raises:
        ValueError: If another node type is registered under the same name
    """
    name = node_type.description.name
    existing = NODE_TYPES.get(name)
    if existing is not None and existing is not node_type:
        raise ValueError(f"node type already registered: {name}")
    NODE_TYPES[name] = node_type
    return node_type


def get_node_type(name: str) -> type[Node]:
    """Look up a node type by name.

    Raises:
        ValueError: If no node type has that name
    """
    if node_type := NODE_TYPES.get(name):
        return node_type
    else:
        raise ValueError(f"no such node type: {name}")


def list_node_types() -> list[str]:
    return sorted(NODE_TYPES)
