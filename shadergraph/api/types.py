import numbers
import numpy as np
from .errors import UnsupportedType

SCALAR = "f32"
VEC2 = "vec2f"
VEC3 = "vec3f"
VEC4 = "vec4f"

# Type tag -> number of components
_COMPONENTS = {SCALAR: 1, VEC2: 2, VEC3: 3, VEC4: 4}
_VECTOR_TAGS = {2: VEC2, 3: VEC3, 4: VEC4}

TYPE_TAGS = tuple(_COMPONENTS)


def _wgsl_format(val) -> str:
    """Formats a number as a WGSL float literal."""
    return repr(float(val))


def components(type_tag: str) -> int:
    """Returns the number of scalar components of a type tag."""
    try:
        return _COMPONENTS[type_tag]
    except KeyError:
        raise UnsupportedType(f"Unknown shader type '{type_tag}'") from None


def value_to_type(sample) -> str:
    """
    Classifies a runtime sample value as a shader type tag.

    Python and NumPy scalars are 'f32'. One-dimensional sequences or arrays
    with 2, 3 or 4 components are 'vec2f', 'vec3f' and 'vec4f'.

    Raises:
        UnsupportedType: If the value has no scalar/vector equivalent.
    """
    if isinstance(sample, (bool, np.bool_)):
        raise UnsupportedType(f"Cannot classify boolean value {sample!r}")
    if isinstance(sample, numbers.Real):
        return SCALAR
    if isinstance(sample, np.ndarray) and sample.ndim == 0:
        return SCALAR
    if isinstance(sample, (list, tuple, np.ndarray)):
        try:
            arr = np.asarray(sample)
        except ValueError:
            raise UnsupportedType(f"Cannot classify ragged value {sample!r}") from None
        if arr.ndim == 1 and arr.dtype.kind in 'iuf' and len(arr) in _VECTOR_TAGS:
            return _VECTOR_TAGS[len(arr)]
    raise UnsupportedType(f"Cannot classify value {sample!r} as a scalar or vector")


def type_to_value_code(type_tag: str, a, b=0.0, c=0.0, d=0.0) -> str:
    """
    Builds a type-correct WGSL literal from up to four scalar components.

    Example:
        >>> type_to_value_code('vec3f', 1, 2, 3, 4)
        'vec3f(1.0, 2.0, 3.0)'
    """
    n = components(type_tag)
    if n == 1:
        return _wgsl_format(a)
    args = ", ".join(_wgsl_format(v) for v in (a, b, c, d)[:n])
    return f"{type_tag}({args})"


def type_to_value(type_tag: str, a, b=0.0, c=0.0, d=0.0):
    """Builds a sample value of the given type: a float or a float32 vector."""
    n = components(type_tag)
    if n == 1:
        return float(a)
    return np.array((a, b, c, d)[:n], dtype='f4')


def zero_value(type_tag: str):
    return type_to_value(type_tag, 0.0)


def zero_code(type_tag: str) -> str:
    return type_to_value_code(type_tag, 0.0)
