from .errors import DeserializationError

# Maps a persisted nodeType tag to the callable that builds an empty node of that type
NODE_TYPES = {}


def register_node_type(node_type: str):
    """Class decorator registering a node class under its persisted type tag."""
    def decorator(cls):
        cls.node_type = node_type
        NODE_TYPES[node_type] = cls
        return cls
    return decorator


def create_node(node_type: str, node_id: str = None):
    """
    Builds a fresh node of the given type.

    Raises:
        DeserializationError: If no node class is registered for the type.
    """
    try:
        factory = NODE_TYPES[node_type]
    except KeyError:
        raise DeserializationError(f"Unknown node type '{node_type}'") from None
    return factory(node_id=node_id)
