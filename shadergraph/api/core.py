from numbers import Real
import uuid
from abc import ABC, abstractmethod
from collections import namedtuple
from .sockets import Port

EvaluationResult = namedtuple('EvaluationResult', ['value', 'code', 'ref_id'])
EvaluationResult.__doc__ = """
The output of a node's evaluation.

value: a representative runtime sample (float or float32 vector) used for type inference.
code: the emitted WGSL statements.
ref_id: the variable name downstream nodes use to refer to this result.
"""


def id_to_variable_name(node_id: str) -> str:
    """
    Derives a WGSL identifier from a node id.

    ASCII letters and digits are kept; every other character is escaped as
    `_<hex codepoint>_`, so distinct ids always map to distinct names.
    """
    parts = []
    for ch in str(node_id):
        if ch.isascii() and ch.isalnum():
            parts.append(ch)
        else:
            parts.append(f"_{ord(ch):x}_")
    return "ref_" + "".join(parts)


class SerializedNode:
    """The flat persisted form of a node."""
    def __init__(self, id: str = None, label: str = None, position=(0.0, 0.0), node_type: str = "",
                 extra_string_information=None, extra_number_information=None):
        self.id = id
        self.label = label
        self.position = position
        self.node_type = node_type
        self.extra_string_information = extra_string_information or []
        self.extra_number_information = extra_number_information or []

    def strings(self) -> dict:
        """String extras by key. Entries without a key or a string value are skipped."""
        return {e["key"]: e["value"] for e in self.extra_string_information
                if "key" in e and isinstance(e.get("value"), str)}

    def numbers(self) -> dict:
        """Number extras by key. Null, boolean and non-numeric values are skipped."""
        return {e["key"]: e["value"] for e in self.extra_number_information
                if "key" in e and isinstance(e.get("value"), Real)
                and not isinstance(e.get("value"), bool)}

    def to_dict(self) -> dict:
        x, y = self.position
        return {
            "id": self.id,
            "label": self.label,
            "position": {"x": x, "y": y},
            "nodeType": self.node_type,
            "extraStringInformation": [dict(e) for e in self.extra_string_information],
            "extraNumberInformation": [dict(e) for e in self.extra_number_information],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SerializedNode':
        """Builds a record from persisted data. Missing keys fall back to defaults."""
        pos = data.get("position") or {}
        if isinstance(pos, dict):
            position = (float(pos.get("x", 0.0)), float(pos.get("y", 0.0)))
        else:
            position = (float(pos[0]), float(pos[1]))
        return cls(
            id=data.get("id"),
            label=data.get("label"),
            position=position,
            node_type=data.get("nodeType", ""),
            extra_string_information=list(data.get("extraStringInformation") or []),
            extra_number_information=list(data.get("extraNumberInformation") or []),
        )


class Node(ABC):
    """
    Abstract base class for all nodes of a shader graph.

    A node owns ordered input ports, output ports and parameter controls.
    Its only coupling to other nodes is the textual variable name (`ref_id`)
    its emitted code assigns.
    """

    node_type = None

    def __init__(self, label: str = "", node_id: str = None):
        self._id = node_id if node_id is not None else uuid.uuid4().hex
        self.label = label
        self.position = (0.0, 0.0)
        self.inputs = {}
        self.outputs = {}
        self.controls = {}
        self.observer = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def ref_id(self) -> str:
        return id_to_variable_name(self._id)

    def declaration(self, suffix: str = "") -> str:
        """Returns the left-hand side of the node's variable declaration."""
        return f"var {self.ref_id}{suffix}"

    def _add_port(self, ports: dict, name: str, port: Port):
        if name in self.inputs or name in self.outputs:
            raise ValueError(f"Node '{self.id}' already has a port named '{name}'")
        port.name = name
        port.node = self
        ports[name] = port

    def add_input(self, name: str, port: Port):
        port.is_input = True
        self._add_port(self.inputs, name, port)

    def add_output(self, name: str, port: Port):
        port.is_input = False
        self._add_port(self.outputs, name, port)

    def add_control(self, name: str, control):
        if name in self.controls:
            raise ValueError(f"Node '{self.id}' already has a control named '{name}'")
        if control.on_change is None:
            control.on_change = self._control_changed
        self.controls[name] = control

    def remove_control(self, name: str):
        self.controls.pop(name, None)

    def has_control(self, name: str) -> bool:
        return name in self.controls

    def get_control(self, name: str):
        return self.controls[name]

    def _control_changed(self, value):
        self.notify_changed()

    def notify_changed(self):
        """Posts a dirty notification to the observing graph, if any."""
        if self.observer is not None:
            self.observer.notify_changed(self.id)

    @abstractmethod
    def evaluate(self, inputs: dict) -> dict:
        """
        Generates this node's code from its current controls and upstream results.

        Args:
            inputs (dict): Maps input port names to the upstream EvaluationResult.
                           Unconnected ports are missing or None.

        Returns:
            dict: Maps output port names to EvaluationResult.
        """
        raise NotImplementedError

    def serialize(self, record: SerializedNode = None) -> SerializedNode:
        """Fills the core fields of the record. Subclasses add their type tag and extras first."""
        if record is None:
            record = SerializedNode()
        record.id = self.id
        record.label = self.label
        record.position = tuple(self.position)
        if not record.node_type:
            record.node_type = self.node_type or ""
        return record

    def deserialize(self, record: SerializedNode):
        """Restores the core fields. The id is never changed on an existing node."""
        if record.label is not None:
            self.label = record.label
        if record.position is not None:
            self.position = tuple(record.position)

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id!r}, label={self.label!r})"
