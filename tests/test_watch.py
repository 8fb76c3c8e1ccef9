import pytest
from unittest.mock import patch
from shadergraph import GraphWatcher, save_graph

@pytest.fixture
def graph_file(blend_graph, tmp_path):
    path = tmp_path / "graph.json"
    save_graph(blend_graph, str(path))
    return path

def test_poll_without_changes_does_nothing(graph_file, tmp_path):
    output = tmp_path / "out.wgsl"
    watcher = GraphWatcher(str(graph_file), str(output))
    assert watcher.poll() is False
    assert not output.exists()

def test_poll_rebuilds_pending_change(graph_file, tmp_path, capsys):
    output = tmp_path / "out.wgsl"
    watcher = GraphWatcher(str(graph_file), str(output))
    watcher.reload_pending = True
    assert watcher.poll() is True
    assert "return ref_blend;" in output.read_text()
    assert watcher.reload_pending is False
    assert "INFO: Shader rebuilt" in capsys.readouterr().out

def test_failed_rebuild_keeps_previous_shader(graph_file, tmp_path, capsys):
    output = tmp_path / "out.wgsl"
    output.write_text("previous")
    graph_file.write_text("{ not json")
    watcher = GraphWatcher(str(graph_file), str(output))
    assert watcher.rebuild() is False
    assert output.read_text() == "previous"
    assert "ERROR: Failed to rebuild" in capsys.readouterr().err

@patch('shadergraph.api.watch.WATCHDOG_AVAILABLE', False)
def test_start_without_watchdog(graph_file, tmp_path, capsys):
    watcher = GraphWatcher(str(graph_file), str(tmp_path / "out.wgsl"))
    assert watcher.start() is False
    assert "Graph watching disabled" in capsys.readouterr().out

def test_start_and_stop_observer(graph_file, tmp_path):
    pytest.importorskip("watchdog")
    with GraphWatcher(str(graph_file), str(tmp_path / "out.wgsl")) as watcher:
        assert watcher.observer is not None
    assert watcher.observer is None
