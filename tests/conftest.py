import pytest
import numpy as np
from shadergraph import Graph, CombineNode, MathFunctionNode, EvaluationResult

SINE = "sin({amp,0,2,1,0.1,same}*input2)"

@pytest.fixture
def graph():
    return Graph()

@pytest.fixture
def sine_node():
    return MathFunctionNode("Sine", SINE, node_id="m1")

@pytest.fixture
def combine_node():
    return CombineNode(node_id="c1")

@pytest.fixture
def vec3_upstream():
    """An upstream result holding a 3-component vector."""
    return EvaluationResult(np.zeros(3, dtype='f4'), "", "ref_up")

@pytest.fixture
def blend_graph(graph):
    """Two sine functions feeding both sides of a blend."""
    a = graph.add_node(MathFunctionNode("Sine", SINE, node_id="a"))
    b = graph.add_node(MathFunctionNode("Sine", SINE, node_id="b"))
    blend = graph.add_node(CombineNode(node_id="blend"))
    graph.connect(a, 'value', blend, 'param1')
    graph.connect(b, 'value', blend, 'param2')
    return graph
