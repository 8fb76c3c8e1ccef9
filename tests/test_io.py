import json
import os
import pytest
from shadergraph import (
    CombineNode, MathFunctionNode, SerializedNode, serialize_node, deserialize_node,
    save_graph, load_graph, export_shader, compile_graph, DeserializationError,
)

SINE = "sin({amp,0,2,1,0.1,same}*input2)"

def test_combine_record_format():
    node = CombineNode(factor=0.37, node_id="c1")
    node.position = (10.0, -4.5)
    data = serialize_node(node)
    assert data == {
        "id": "c1",
        "label": "Combine Shapes",
        "position": {"x": 10.0, "y": -4.5},
        "nodeType": "Combine",
        "extraStringInformation": [],
        "extraNumberInformation": [{"key": "cf", "value": 0.37}],
    }

def test_combine_round_trip():
    node = CombineNode(factor=0.37)
    node.label = "Blend A/B"
    restored = deserialize_node(serialize_node(node))
    assert isinstance(restored, CombineNode)
    assert restored.id == node.id
    assert restored.factor == 0.37
    assert restored.label == "Blend A/B"

def test_math_function_record_format():
    node = MathFunctionNode("Sine", SINE, node_id="m1")
    data = serialize_node(node)
    assert data["nodeType"] == "MathFunction"
    assert data["extraStringInformation"] == [
        {"key": "name", "value": "Sine"},
        {"key": "func", "value": SINE},
    ]
    assert data["extraNumberInformation"] == [{"key": "{amp,0,2,1,0.1,same}/same", "value": 1.0}]

def test_math_function_round_trip():
    node = MathFunctionNode("Sine", SINE)
    node.get_control("amp").value = 1.3
    node.label = "Wobble"
    restored = deserialize_node(serialize_node(node))
    assert isinstance(restored, MathFunctionNode)
    assert restored.func == SINE
    assert list(restored.controls) == ["amp"]
    assert restored.get_control("amp").value == 1.3
    assert restored.label == "Wobble"
    assert restored.evaluate({})["value"].code.replace(restored.ref_id, "X") == \
           node.evaluate({})["value"].code.replace(node.ref_id, "X")

def test_deserialize_into_existing_node_keeps_id():
    source = CombineNode(factor=0.9, node_id="src")
    target = CombineNode(node_id="dst")
    target.deserialize(source.serialize())
    assert target.id == "dst"
    assert target.factor == 0.9

def test_missing_fields_default():
    node = deserialize_node({"nodeType": "Combine"})
    assert node.factor == 0.0
    assert node.label == "Combine Shapes"
    assert node.position == (0.0, 0.0)

def test_unmatched_keys_are_ignored(capsys):
    data = {
        "id": "m1",
        "nodeType": "MathFunction",
        "extraStringInformation": [{"key": "name", "value": "Sine"}, {"key": "func", "value": SINE}],
        "extraNumberInformation": [
            {"key": "{amp,0,2,1,0.1,same}/same", "value": 0.4},
            {"key": "{gone,0,1,0,0.1,f32}/f32", "value": 0.9},
        ],
    }
    node = deserialize_node(data)
    assert node.get_control("amp").value == 0.4
    assert not node.has_control("gone")
    assert "{gone,0,1,0,0.1,f32}/f32" in capsys.readouterr().err

def test_unknown_node_type():
    with pytest.raises(DeserializationError, match="Teleport"):
        deserialize_node({"id": "t", "nodeType": "Teleport"})

def test_serialized_node_from_dict_tolerates_bad_entries():
    record = SerializedNode.from_dict({"extraNumberInformation": [{"key": "cf"}, {"value": 1}]})
    assert record.numbers() == {}
    assert record.id is None

def test_save_and_load_graph(blend_graph, tmp_path):
    blend_graph.get_node("blend").factor = 0.62
    blend_graph.get_node("a").get_control("amp").value = 0.2
    path = tmp_path / "graph.json"
    save_graph(blend_graph, str(path))

    restored = load_graph(str(path))
    assert [n.id for n in restored] == ["a", "b", "blend"]
    assert restored.links == blend_graph.links
    assert restored.get_node("blend").factor == 0.62
    assert compile_graph(restored).code == compile_graph(blend_graph).code

def test_load_skips_dangling_connections(blend_graph, tmp_path, capsys):
    path = tmp_path / "graph.json"
    save_graph(blend_graph, str(path))
    with open(path) as f:
        data = json.load(f)
    data["connections"].append({"source": "ghost", "sourceOutput": "value", "target": "blend", "targetInput": "param1"})
    with open(path, 'w') as f:
        json.dump(data, f)

    restored = load_graph(str(path))
    assert len(restored.links) == 2
    assert "WARNING: Skipping connection" in capsys.readouterr().err

def test_export_shader(blend_graph, tmp_path, capsys):
    output_file = tmp_path / "blend.wgsl"
    export_shader(blend_graph, str(output_file))
    assert os.path.exists(output_file)
    with open(output_file) as f:
        content = f.read()
    assert "fn evaluateImage(input2: vec2f) -> vec3f" in content
    assert "return ref_blend;" in content
    assert "SUCCESS: Shader exported" in capsys.readouterr().out

def test_null_values_are_treated_as_missing():
    combine = deserialize_node({"nodeType": "Combine", "extraNumberInformation": [{"key": "cf", "value": None}]})
    assert combine.factor == 0.0

    func = deserialize_node({
        "id": "m1",
        "nodeType": "MathFunction",
        "extraStringInformation": [{"key": "name", "value": "Sine"}, {"key": "func", "value": None}],
        "extraNumberInformation": [{"key": "{amp,0,2,1,0.1,same}/same", "value": "high"}],
    })
    assert func.name == "Sine"
    assert func.func == ""
    assert len(func.controls) == 0

def test_serialized_node_skips_wrongly_typed_values():
    record = SerializedNode.from_dict({
        "extraStringInformation": [{"key": "name", "value": 3}, {"key": "func", "value": "x"}],
        "extraNumberInformation": [{"key": "a", "value": True}, {"key": "b", "value": 2}],
    })
    assert record.strings() == {"func": "x"}
    assert record.numbers() == {"b": 2}

def test_empty_label_round_trip():
    node = CombineNode()
    node.label = ""
    assert deserialize_node(serialize_node(node)).label == ""

def test_function_empty_label_round_trip():
    node = MathFunctionNode("Sine", SINE)
    node.label = ""
    assert deserialize_node(serialize_node(node)).label == ""

def test_key_keeps_type_field_as_written():
    func = "sin({amp,0,2,1,0.1, f32}*input2)"
    node = MathFunctionNode("Sine", func)
    node.get_control("amp").value = 1.5
    data = serialize_node(node)
    assert data["extraNumberInformation"] == [{"key": "{amp,0,2,1,0.1, f32}/ f32", "value": 1.5}]
    assert deserialize_node(data).get_control("amp").value == 1.5
