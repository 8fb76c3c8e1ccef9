from collections import deque
from .errors import CyclicGraph, NodeEvaluationError
from .graph import Graph, _node_id


class CompiledProgram:
    """
    The result of compiling a graph.

    `code` holds the statements in evaluation order and `root_ref_id` the
    variable carrying the final result. `uniforms` maps node ids to their
    current control values, for the engine layer to bind each frame.
    """
    def __init__(self, code: str, root_ref_id: str, uniforms: dict, order: list, terminals: list):
        self.code = code
        self.root_ref_id = root_ref_id
        self.uniforms = uniforms
        self.order = order
        self.terminals = terminals

    def to_shader(self, function_name: str = "evaluateImage", input_name: str = "input2") -> str:
        """Wraps the statements in a WGSL function returning the root value."""
        body = "\n    ".join(self.code.splitlines())
        result = self.root_ref_id or "vec3f(0.0, 0.0, 0.0)"
        return f"""fn {function_name}({input_name}: vec2f) -> vec3f {{
    {body}
    return {result};
}}
"""

    def __str__(self):
        return self.code


class GraphCompiler:
    """Compiles a Graph into a flat WGSL program."""

    def topological_order(self, graph: Graph) -> list:
        """
        Orders the nodes so that every node comes after its upstream nodes.

        Independent nodes keep their insertion order.

        Raises:
            CyclicGraph: If the links form a cycle.
        """
        indegree = {node_id: 0 for node_id in graph.nodes}
        downstream = {node_id: [] for node_id in graph.nodes}
        for link in graph.links:
            if link.source in indegree and link.target in indegree:
                indegree[link.target] += 1
                downstream[link.source].append(link.target)

        ready = deque(node_id for node_id, deg in indegree.items() if deg == 0)
        order = []
        while ready:
            node_id = ready.popleft()
            order.append(graph.nodes[node_id])
            for target in downstream[node_id]:
                indegree[target] -= 1
                if indegree[target] == 0:
                    ready.append(target)

        if len(order) != len(graph.nodes):
            raise CyclicGraph(node_id for node_id, deg in indegree.items() if deg > 0)
        return order

    def compile(self, graph: Graph, root=None) -> CompiledProgram:
        """
        Evaluates every node in dependency order and concatenates the code.

        Args:
            graph (Graph): The graph to compile.
            root (Node or str, optional): The node whose value is the program
                                          result. Defaults to the last terminal
                                          node in evaluation order.

        Raises:
            CyclicGraph: Before any node is evaluated, if the graph has a cycle.
            NodeEvaluationError: If a node fails to evaluate. No partial
                                 program is produced.
        """
        order = self.topological_order(graph)
        results = {}
        statements = []

        for node in order:
            inputs = {}
            for port_name, link in graph.incoming(node).items():
                upstream = results.get(link.source, {})
                inputs[port_name] = upstream.get(link.source_output)
            try:
                outputs = node.evaluate(inputs)
            except Exception as e:
                raise NodeEvaluationError(node.id, e) from e
            results[node.id] = outputs
            statements.extend(r.code for r in outputs.values() if r.code)

        terminal_ids = {n.id for n in graph.terminals()}
        terminals = [n for n in order if n.id in terminal_ids]
        if root is not None:
            root_node = graph.get_node(_node_id(root))
        else:
            root_node = terminals[-1] if terminals else None

        uniforms = {
            node.id: {name: control.value for name, control in node.controls.items()}
            for node in order if node.controls
        }
        return CompiledProgram(
            code="\n".join(statements),
            root_ref_id=root_node.ref_id if root_node else None,
            uniforms=uniforms,
            order=[n.id for n in order],
            terminals=[n.id for n in terminals],
        )


def compile_graph(graph: Graph, root=None) -> CompiledProgram:
    return GraphCompiler().compile(graph, root)
