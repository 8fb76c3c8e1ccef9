import sys
from .core import Node, EvaluationResult, SerializedNode
from .controls import ParameterControl
from .sockets import Input, Output
from .registry import register_node_type
from .template import SAME, parse_template
from .types import SCALAR, VEC2, type_to_value_code, value_to_type, zero_value
from .errors import DeserializationMismatch

INPUT_SENTINEL = "input2"


def _value_code(value) -> str:
    """Writes a sample value as a literal, for upstreams that have no variable."""
    type_tag = value_to_type(value)
    if type_tag == SCALAR:
        return type_to_value_code(type_tag, value)
    return type_to_value_code(type_tag, *value)


class _PlaceholderBinding:
    """Registry entry tying a control to the placeholder that declared it."""
    __slots__ = ('placeholder', 'control', 'type_tag')

    def __init__(self, placeholder, control):
        self.placeholder = placeholder
        self.control = control
        self.type_tag = placeholder.type_tag

    @property
    def key(self) -> str:
        return self.placeholder.key


@register_node_type("MathFunction")
class MathFunctionNode(Node):
    """
    Applies a user-defined expression to the upstream shape.

    The expression is a template (see `shadergraph.api.template`) whose
    placeholders become controls. The word `input2` stands for the upstream
    value; when nothing is connected it is left as is and refers to the
    `input2` parameter of the generated shader function.
    """

    def __init__(self, name: str = "", func: str = "", node_id: str = None, verbose: bool = True):
        """
        Initializes a math function node.

        Args:
            name (str): Display name of the function, used in the label.
            func (str): The expression template, e.g. "sin({amp,0,2,1,0.1,same}*input2)".
            node_id (str, optional): A fixed id. A random one is generated otherwise.
            verbose (bool, optional): Report skipped placeholder fragments on stderr.
        """
        super().__init__(f"Apply {name} Function", node_id=node_id)
        self.name = name
        self.func = func
        self.verbose = verbose
        self.template = parse_template(func)
        self.bindings = {}

        self.setup()

        self.add_input("param", Input("param / vec3f"))
        self.add_output("value", Output("result / vec3f"))

    def setup(self):
        """
        Creates the controls declared by the current template.

        Safe to run repeatedly: existing controls keep their values and
        controls of placeholders no longer in the template are removed.
        """
        self.label = f"Apply {self.name} Function"
        self.template = parse_template(self.func)
        if self.verbose:
            for err in self.template.skipped:
                print(f"WARNING: Skipping placeholder in '{self.name}': {err}", file=sys.stderr)

        declared = {ph.name: ph for ph in self.template.placeholders}
        for name in list(self.bindings):
            if name not in declared:
                del self.bindings[name]
                self.remove_control(name)

        for name, ph in declared.items():
            binding = self.bindings.get(name)
            if binding is not None:
                if binding.placeholder.source != ph.source:
                    binding.control.set_range(ph.min_val, ph.max_val, ph.step)
                binding.placeholder = ph
                binding.type_tag = ph.type_tag
                continue
            if self.has_control(name):
                continue
            control = ParameterControl(ph.default, ph.min_val, ph.max_val, ph.step, name, static=False)
            self.add_control(name, control)
            self.bindings[name] = _PlaceholderBinding(ph, control)

    def set_function(self, name: str, func: str):
        """Replaces the expression template and rebuilds the controls."""
        self.name = name
        self.func = func
        self.setup()
        self.notify_changed()

    def evaluate(self, inputs: dict) -> dict:
        param = inputs.get("param")
        if param is None:
            upstream = INPUT_SENTINEL
        else:
            upstream = param.ref_id if param.ref_id is not None else _value_code(param.value)

        def literal(text):
            return text.replace(INPUT_SENTINEL, upstream)

        def placeholder(ph):
            binding = self.bindings.get(ph.name)
            v = binding.control.value if binding else ph.default
            type_tag = binding.type_tag if binding else ph.type_tag
            if type_tag == SAME:
                type_tag = value_to_type(param.value if param is not None else zero_value(VEC2))
            return type_to_value_code(type_tag, v, v, v, v)

        expression = self.template.resolve(literal, placeholder)

        ref = self.ref_id
        x = f"{upstream}.x" if param is not None else "0.0"
        z = f"{upstream}.z" if param is not None else "0.0"
        code = (f"{self.declaration('_1')} = {expression};\n"
                f"{self.declaration()} = vec3f({x}, {ref}_1.x * {ref}_1.y, {z});")
        value = param.value if param is not None else 0.0
        return {"value": EvaluationResult(value, code, ref)}

    def serialize(self, record: SerializedNode = None) -> SerializedNode:
        record = record or SerializedNode()
        record.node_type = self.node_type
        record.extra_string_information = [
            {"key": "name", "value": self.name},
            {"key": "func", "value": self.func},
        ]
        record.extra_number_information = [
            {"key": b.key, "value": b.control.value} for b in self.bindings.values()
        ]
        return super().serialize(record)

    def deserialize(self, record: SerializedNode):
        strings = record.strings()
        self.name = strings.get("name", self.name)
        self.func = strings.get("func", self.func)
        self.setup()

        by_key = {b.key: b for b in self.bindings.values()}
        for key, value in record.numbers().items():
            binding = by_key.get(key)
            if binding is None:
                if self.verbose:
                    print(f"INFO: {DeserializationMismatch(self.id, key)}. Ignoring.", file=sys.stderr)
                continue
            binding.control.value = value
        super().deserialize(record)
