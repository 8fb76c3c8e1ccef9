"""
Parsing of MathFunction templates.

A template is shader expression text with embedded placeholders of the form
`{name,min,max,default,step,type}`. Each placeholder declares a numeric
control; `type` is a shader type tag or `same` (take the upstream's type).

The tokenizer turns the text into an immutable sequence of Literal and
Placeholder segments once, so substitution never has to search the text for
placeholder names.
"""
from .errors import ConfigurationError

SAME = "same"
PLACEHOLDER_FIELDS = 6


class Literal:
    __slots__ = ('text',)

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, Literal) and other.text == self.text

    def __hash__(self):
        return hash(('literal', self.text))

    def __repr__(self):
        return f"Literal({self.text!r})"


class Placeholder:
    """A parsed `{name,min,max,default,step,type}` fragment."""
    __slots__ = ('name', 'min_val', 'max_val', 'default', 'step', 'type_tag', 'source')

    def __init__(self, name, min_val, max_val, default, step, type_tag, source):
        self.name = name
        self.min_val = min_val
        self.max_val = max_val
        self.default = default
        self.step = step
        self.type_tag = type_tag
        self.source = source

    @property
    def token(self) -> str:
        """The placeholder exactly as written in the template, braces included."""
        return "{" + self.source + "}"

    @property
    def key(self) -> str:
        """Key under which the control value is persisted. The type field is kept as written."""
        return f"{self.token}/{self.source.split(',')[5]}"

    @property
    def infers_type(self) -> bool:
        return self.type_tag == SAME

    def __eq__(self, other):
        return isinstance(other, Placeholder) and other.source == self.source

    def __hash__(self):
        return hash(('placeholder', self.source))

    def __repr__(self):
        return f"Placeholder({self.token!r})"


def parse_placeholder(fragment: str) -> Placeholder:
    """
    Parses the text between a pair of braces.

    Raises:
        ConfigurationError: If the fragment has fewer than six fields or a
                            bound, default or step is not a number.
    """
    fields = fragment.split(",")
    if len(fields) < PLACEHOLDER_FIELDS:
        raise ConfigurationError(fragment, f"expected {PLACEHOLDER_FIELDS} fields, found {len(fields)}")
    name = fields[0].strip()
    if not name:
        raise ConfigurationError(fragment, "empty control name")
    try:
        min_val, max_val, default, step = (float(f) for f in fields[1:5])
    except ValueError as e:
        raise ConfigurationError(fragment, str(e)) from None
    return Placeholder(name, min_val, max_val, default, step, fields[5].strip(), fragment)


class ExpressionTemplate:
    """An immutable, tokenized function template."""
    def __init__(self, text: str, segments, skipped=()):
        self.text = text
        self.segments = tuple(segments)
        self.skipped = tuple(skipped)

    @property
    def placeholders(self) -> tuple:
        """The placeholders in order of appearance, first occurrence per control name."""
        seen = {}
        for seg in self.segments:
            if isinstance(seg, Placeholder) and seg.name not in seen:
                seen[seg.name] = seg
        return tuple(seen.values())

    def resolve(self, literal, placeholder) -> str:
        """
        Produces the final expression text.

        Args:
            literal (callable): Maps the text of a literal segment to output text.
            placeholder (callable): Maps a Placeholder to its substituted text.
        """
        parts = []
        for seg in self.segments:
            if isinstance(seg, Placeholder):
                parts.append(placeholder(seg))
            else:
                parts.append(literal(seg.text))
        return "".join(parts)

    def __repr__(self):
        return f"ExpressionTemplate({self.text!r})"


def parse_template(text: str) -> ExpressionTemplate:
    """
    Splits a template into literal and placeholder segments.

    Malformed fragments stay in the output as literal text and are reported
    in `ExpressionTemplate.skipped`. An unmatched '{' is literal text.
    """
    segments, skipped = [], []
    buf = []
    i = 0
    while i < len(text):
        start = text.find("{", i)
        if start < 0:
            buf.append(text[i:])
            break
        end = text.find("}", start + 1)
        if end < 0:
            buf.append(text[i:])
            break
        # With nested openers only the innermost brace starts a fragment
        start = text.rfind("{", start, end)
        buf.append(text[i:start])
        fragment = text[start + 1:end]
        try:
            ph = parse_placeholder(fragment)
        except ConfigurationError as e:
            skipped.append(e)
            buf.append(text[start:end + 1])
        else:
            pending = "".join(buf)
            if pending:
                segments.append(Literal(pending))
            buf = []
            segments.append(ph)
        i = end + 1
    tail = "".join(buf)
    if tail:
        segments.append(Literal(tail))
    return ExpressionTemplate(text, segments, skipped)
