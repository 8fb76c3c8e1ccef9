import sys
from shadergraph import Graph, MathFunctionNode, compile_graph, math_function, FUNCTION_PRESETS

def sine_example():
    """A single function applied to the shader input directly."""
    graph = Graph()
    graph.add_node(math_function('Sine'))
    return graph

def custom_function_example():
    """A hand-written template with a scalar and an inferred-type control."""
    graph = Graph()
    graph.add_node(MathFunctionNode(
        "Swirl",
        "sin(input2*{speed,0,10,2,0.1,f32})+cos(input2.yx*{twist,0,5,1,0.05,same})",
    ))
    return graph

def stacked_example():
    """Feeds one function into another. The second infers its types from the first."""
    graph = Graph()
    wave = graph.add_node(math_function('Wave'))
    scale = graph.add_node(math_function('Scale'))
    graph.connect(wave, 'value', scale, 'param')
    scale.get_control('factor').value = 2.5
    return graph

def main():
    print("--- shadergraph Function Examples ---")
    print("Presets:", ", ".join(FUNCTION_PRESETS))
    examples = {
        "sine": sine_example,
        "custom": custom_function_example,
        "stacked": stacked_example,
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
