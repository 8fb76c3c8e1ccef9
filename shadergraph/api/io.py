import sys
import json
from .core import Node, SerializedNode
from .graph import Graph
from .sockets import Link
from .registry import create_node
from .compiler import GraphCompiler
# Imported for their node type registrations
from . import compositors, functions  # noqa: F401


def serialize_node(node: Node) -> dict:
    """Converts a node to its flat persisted record."""
    return node.serialize(SerializedNode()).to_dict()


def deserialize_node(data) -> Node:
    """
    Builds a node from a persisted record.

    Missing fields fall back to defaults and values without a matching
    control are ignored, so graphs saved by older versions still load.

    Raises:
        DeserializationError: If the record's nodeType is not registered.
    """
    record = data if isinstance(data, SerializedNode) else SerializedNode.from_dict(data)
    node = create_node(record.node_type, node_id=record.id)
    node.deserialize(record)
    return node


def graph_to_dict(graph: Graph) -> dict:
    return {
        "nodes": [serialize_node(n) for n in graph],
        "connections": [l.to_dict() for l in graph.links],
    }


def graph_from_dict(data: dict) -> Graph:
    graph = Graph()
    for node_data in data.get("nodes", []):
        graph.add_node(deserialize_node(node_data))

    for conn in data.get("connections", []):
        try:
            link = Link.from_dict(conn)
            graph.connect(link.source, link.source_output, link.target, link.target_input)
        except (KeyError, ValueError) as e:
            print(f"WARNING: Skipping connection {conn}: {e}", file=sys.stderr)
    return graph


def save_graph(graph: Graph, path: str):
    """Writes a graph to a JSON file."""
    with open(path, 'w') as f:
        json.dump(graph_to_dict(graph), f, indent=2)


def load_graph(path: str) -> Graph:
    """Reads a graph written by `save_graph`."""
    with open(path, 'r') as f:
        return graph_from_dict(json.load(f))


def assemble_shader(graph: Graph, root=None, function_name: str = "evaluateImage") -> str:
    """Compiles a graph into a complete WGSL function."""
    program = GraphCompiler().compile(graph, root)
    return program.to_shader(function_name=function_name)


def export_shader(graph: Graph, path: str, root=None, function_name: str = "evaluateImage"):
    """Compiles a graph and writes the resulting WGSL function to a file."""
    shader_code = assemble_shader(graph, root, function_name)
    with open(path, 'w') as f:
        f.write(shader_code)
    print(f"SUCCESS: Shader exported to '{path}'.")
