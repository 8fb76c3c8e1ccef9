import sys
from shadergraph import Graph, CombineNode, MathFunctionNode, compile_graph, math_function

def blend_example():
    """Blends a sine shape with a wave shape, half and half."""
    graph = Graph()
    sine = graph.add_node(math_function('Sine'))
    wave = graph.add_node(math_function('Wave'))
    blend = graph.add_node(CombineNode(factor=0.5))
    graph.connect(sine, 'value', blend, 'param1')
    graph.connect(wave, 'value', blend, 'param2')
    return graph

def one_sided_blend_example():
    """Only one side connected: the other side contributes the zero vector."""
    graph = Graph()
    ripple = graph.add_node(math_function('Ripple'))
    blend = graph.add_node(CombineNode(factor=0.25))
    graph.connect(ripple, 'value', blend, 'param2')
    return graph

def chained_example():
    """Feeds a blend into a custom function."""
    graph = Graph()
    a = graph.add_node(math_function('Sine'))
    b = graph.add_node(math_function('Cosine'))
    blend = graph.add_node(CombineNode(factor=0.7))
    shaped = graph.add_node(MathFunctionNode("Fold", "abs(input2)*{fold,0,3,1.5,0.1,same}"))
    graph.connect(a, 'value', blend, 'param1')
    graph.connect(b, 'value', blend, 'param2')
    graph.connect(blend, 'value', shaped, 'param')
    return graph

def main():
    print("--- shadergraph Combine Examples ---")
    examples = {
        "blend": blend_example,
        "one_sided": one_sided_blend_example,
        "chained": chained_example,
    }

    if len(sys.argv) < 2:
        print("Available examples:", ", ".join(examples.keys()))
        return

    func = examples.get(sys.argv[1])
    if func:
        print(compile_graph(func()).to_shader())
    else: print(f"Example '{sys.argv[1]}' not found.")

if __name__ == "__main__":
    main()
