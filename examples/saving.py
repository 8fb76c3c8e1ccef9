import os
import time
from shadergraph import load_graph, save_graph, export_shader, GraphWatcher
from examples.combine import blend_example

def save_and_load_example():
    """
    Saves a graph to JSON and loads it back.
    Control values, labels and node types survive the round trip.
    """
    graph = blend_example()
    output_path = "blend_graph.json"
    print(f"\nSaving graph to '{output_path}'...")
    save_graph(graph, output_path)

    restored = load_graph(output_path)
    print(f"Restored {len(restored)} nodes and {len(restored.links)} connections.")
    return restored

def export_example():
    """Compiles a graph and writes the WGSL function to disk."""
    graph = blend_example()
    export_shader(graph, "blend.wgsl")

def watch_example():
    """
    Rebuilds 'blend.wgsl' every time 'blend_graph.json' is saved.
    Requires the 'watchdog' library.
    """
    if not os.path.exists("blend_graph.json"):
        save_graph(blend_example(), "blend_graph.json")

    with GraphWatcher("blend_graph.json", "blend.wgsl") as watcher:
        watcher.rebuild()
        try:
            while True:
                watcher.poll()
                time.sleep(0.1)
        except KeyboardInterrupt:
            pass

if __name__ == "__main__":
    save_and_load_example()
    export_example()
