import numpy as np
from .types import _wgsl_format


class ParameterControl:
    """
    A bounded, user-adjustable numeric value read during node evaluation.

    Assigning `value` clamps it into [min_val, max_val] and fires the
    `on_change` hook when the stored value actually changes. The hook is
    expected to do nothing more than mark the owning graph dirty.
    """
    def __init__(self, value: float, min_val: float, max_val: float, step: float = 0.01,
                 label: str = "", static: bool = True, on_change=None):
        """
        Initializes a parameter control.

        Args:
            value (float): The initial value. Clamped into range.
            min_val (float): The lower bound of the value.
            max_val (float): The upper bound of the value.
            step (float, optional): Slider granularity. Only used by UIs. Defaults to 0.01.
            label (str, optional): The display name of the control.
            static (bool, optional): Layout flag. True places the control in the
                                     node body, False next to its instance data.
            on_change (callable, optional): Called with the new value after a change.
        """
        if min_val > max_val:
            min_val, max_val = max_val, min_val
        self.min_val = float(min_val)
        self.max_val = float(max_val)
        self.step = float(step)
        self.label = label
        self.static = static
        self.on_change = on_change
        self._value = self._clamp(value)

    def _clamp(self, value) -> float:
        return float(np.clip(float(value), self.min_val, self.max_val))

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value):
        clamped = self._clamp(new_value)
        if clamped == self._value:
            return
        self._value = clamped
        if self.on_change is not None:
            self.on_change(clamped)

    def set_range(self, min_val: float, max_val: float, step: float = None):
        """Changes the bounds and re-clamps the current value into them."""
        if min_val > max_val:
            min_val, max_val = max_val, min_val
        self.min_val = float(min_val)
        self.max_val = float(max_val)
        if step is not None:
            self.step = float(step)
        self.value = self._value

    def to_wgsl(self) -> str:
        """Returns the current value as a WGSL float literal."""
        return _wgsl_format(self._value)

    def __repr__(self):
        return (f"ParameterControl({self.label!r}, value={self._value}, "
                f"range=[{self.min_val}, {self.max_val}], step={self.step})")
