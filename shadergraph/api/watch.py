import os
import sys
from pathlib import Path
from .io import load_graph, assemble_shader
from .errors import ShaderGraphError

try:
    from watchdog.observers import Observer
    from watchdog.events import FileSystemEventHandler
    WATCHDOG_AVAILABLE = True
except ImportError:
    WATCHDOG_AVAILABLE = False


class GraphWatcher:
    """
    Recompiles a saved graph file into a shader file whenever it changes.

    The watchdog observer thread only raises a flag. Reloading and compiling
    happen in `poll()`, on the thread that owns the watcher, at most once per
    batch of file events.
    """
    def __init__(self, graph_path: str, output_path: str, function_name: str = "evaluateImage"):
        self.graph_path = os.path.abspath(graph_path)
        self.output_path = output_path
        self.function_name = function_name
        self.reload_pending = False
        self.observer = None

    def start(self) -> bool:
        """Starts watching. Returns False if watchdog is not installed."""
        if not WATCHDOG_AVAILABLE:
            print("INFO: Graph watching disabled. `watchdog` not installed. Run 'pip install watchdog'.")
            return False

        class ChangeHandler(FileSystemEventHandler):
            def __init__(self, watcher_instance):
                self.watcher = watcher_instance
            def on_modified(self, event):
                if os.path.abspath(event.src_path) == self.watcher.graph_path:
                    self.watcher.reload_pending = True

        self.observer = Observer()
        self.observer.schedule(ChangeHandler(self), str(Path(self.graph_path).parent), recursive=False)
        self.observer.daemon = True
        self.observer.start()
        print(f"INFO: Watching '{Path(self.graph_path).name}' for changes...")
        return True

    def stop(self):
        if self.observer is not None:
            self.observer.stop()
            self.observer.join()
            self.observer = None

    def rebuild(self) -> bool:
        """Reloads the graph file and rewrites the shader. Keeps the previous shader on failure."""
        try:
            graph = load_graph(self.graph_path)
            shader_code = assemble_shader(graph, function_name=self.function_name)
        except (OSError, ValueError, ShaderGraphError) as e:
            print(f"ERROR: Failed to rebuild '{Path(self.graph_path).name}'. Keeping previous shader. Details:\n{e}", file=sys.stderr)
            return False
        with open(self.output_path, 'w') as f:
            f.write(shader_code)
        print(f"INFO: Shader rebuilt from '{Path(self.graph_path).name}'.")
        return True

    def poll(self) -> bool:
        """Rebuilds if a change was seen since the last call. Returns True if it rebuilt."""
        if not self.reload_pending:
            return False
        self.reload_pending = False
        return self.rebuild()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
