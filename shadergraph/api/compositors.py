from .core import Node, EvaluationResult, SerializedNode
from .controls import ParameterControl
from .sockets import Input, Output
from .registry import register_node_type
from .types import VEC3, zero_code, zero_value


@register_node_type("Combine")
class CombineNode(Node):
    """
    Blends two shapes by linear interpolation.

    The `cfactor` control selects the mix: 0 gives `param1`, 1 gives `param2`.
    An unconnected input contributes the zero vector.
    """

    FACTOR_KEY = "cf"

    def __init__(self, factor: float = 0.5, node_id: str = None):
        super().__init__("Combine Shapes", node_id=node_id)
        self.cf_control = ParameterControl(factor, 0.0, 1.0, 0.01, "Combine Factor", static=True)

        self.add_input("param1", Input("shape 1/vec3f"))
        self.add_input("param2", Input("shape 2/vec3f"))
        self.add_control("cfactor", self.cf_control)
        self.add_output("value", Output("output[x, y, z]/vec3f"))

    @property
    def factor(self) -> float:
        return self.cf_control.value

    @factor.setter
    def factor(self, value: float):
        self.cf_control.value = value

    def evaluate(self, inputs: dict) -> dict:
        param1 = inputs.get("param1")
        param2 = inputs.get("param2")
        p1 = param1.ref_id if param1 else zero_code(VEC3)
        p2 = param2.ref_id if param2 else zero_code(VEC3)
        code = f"{self.declaration()} = mix({p1}, {p2}, {self.cf_control.to_wgsl()});"
        return {"value": EvaluationResult(zero_value(VEC3), code, self.ref_id)}

    def serialize(self, record: SerializedNode = None) -> SerializedNode:
        record = record or SerializedNode()
        record.node_type = self.node_type
        record.extra_number_information = [{"key": self.FACTOR_KEY, "value": self.cf_control.value}]
        return super().serialize(record)

    def deserialize(self, record: SerializedNode):
        super().deserialize(record)
        self.cf_control.value = record.numbers().get(self.FACTOR_KEY, 0.0)
