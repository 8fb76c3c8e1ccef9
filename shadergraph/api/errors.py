class ShaderGraphError(Exception):
    """Base class for every error raised by shadergraph."""


class ConfigurationError(ShaderGraphError, ValueError):
    """A placeholder fragment in a function template is malformed."""
    def __init__(self, fragment: str, reason: str):
        super().__init__(f"Malformed placeholder '{{{fragment}}}': {reason}")
        self.fragment = fragment
        self.reason = reason


class UnsupportedType(ShaderGraphError, TypeError):
    """A value or type tag has no scalar/vector shader equivalent."""


class CyclicGraph(ShaderGraphError):
    """The link graph contains a cycle and cannot be ordered."""
    def __init__(self, node_ids):
        self.node_ids = list(node_ids)
        super().__init__(f"Graph contains a cycle through nodes: {', '.join(self.node_ids)}")


class MissingUpstream(ShaderGraphError):
    """
    An input port is not connected.

    Never raised during compilation: every node substitutes a default for
    an unconnected input. Kept so callers can signal the condition themselves.
    """


class DeserializationMismatch(ShaderGraphError):
    """A persisted value has no matching control on the restored node."""
    def __init__(self, node_id: str, key: str):
        super().__init__(f"Node '{node_id}' has no control for persisted key '{key}'")
        self.node_id = node_id
        self.key = key


class DeserializationError(ShaderGraphError):
    """A persisted record cannot be turned into a node at all."""


class NodeEvaluationError(ShaderGraphError):
    """Evaluating a single node failed; the whole compile pass is aborted."""
    def __init__(self, node_id: str, cause: Exception):
        super().__init__(f"Evaluation of node '{node_id}' failed: {cause}")
        self.node_id = node_id
        self.cause = cause
