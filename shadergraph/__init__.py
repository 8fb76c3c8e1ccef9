from .api.core import Node, EvaluationResult, SerializedNode, id_to_variable_name
from .api.controls import ParameterControl
from .api.sockets import Port, Link, Input, Output
from .api.types import value_to_type, type_to_value_code, type_to_value
from .api.template import parse_template, ExpressionTemplate, Placeholder, Literal
from .api.compositors import CombineNode
from .api.functions import MathFunctionNode
from .api.graph import Graph
from .api.compiler import GraphCompiler, CompiledProgram, compile_graph
from .api.registry import NODE_TYPES, register_node_type, create_node
from .api.presets import FUNCTION_PRESETS, math_function
from .api.io import (
    serialize_node, deserialize_node, save_graph, load_graph,
    assemble_shader, export_shader
)
from .api.watch import GraphWatcher
from .api.errors import (
    ShaderGraphError, ConfigurationError, UnsupportedType, CyclicGraph,
    MissingUpstream, DeserializationMismatch, DeserializationError, NodeEvaluationError
)
