class Port:
    """
    A named, typed connection point on a node.

    The label carries both the display text and the expected shader type,
    e.g. "shape 1/vec3f".
    """
    def __init__(self, label: str, is_input: bool = True):
        self.label = label
        self.is_input = is_input
        self.name = None
        self.node = None

    @property
    def type_tag(self) -> str:
        """The shader type written after the last '/' of the label."""
        return self.label.rsplit('/', 1)[-1].strip()

    def __repr__(self):
        direction = "in" if self.is_input else "out"
        return f"Port({self.name!r}, {self.label!r}, {direction})"


def Input(label: str) -> Port:
    return Port(label, is_input=True)


def Output(label: str) -> Port:
    return Port(label, is_input=False)


class Link:
    """A directed connection from one node's output port to another's input port."""
    def __init__(self, source: str, source_output: str, target: str, target_input: str):
        self.source = source
        self.source_output = source_output
        self.target = target
        self.target_input = target_input

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "sourceOutput": self.source_output,
            "target": self.target,
            "targetInput": self.target_input,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Link':
        return cls(data["source"], data["sourceOutput"], data["target"], data["targetInput"])

    def __eq__(self, other):
        if not isinstance(other, Link):
            return NotImplemented
        return (self.source, self.source_output, self.target, self.target_input) == \
               (other.source, other.source_output, other.target, other.target_input)

    def __hash__(self):
        return hash((self.source, self.source_output, self.target, self.target_input))

    def __repr__(self):
        return f"Link({self.source}.{self.source_output} -> {self.target}.{self.target_input})"
