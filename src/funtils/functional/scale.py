"""Clamped linear scaling functions.

:func:`generate_scale` maps an input interval onto an output interval:

$$y = o_{min} + (o_{max} - o_{min}) \\frac{x - i_{min}}{i_{max} - i_{min}}$$

and clamps ``y`` to the output interval. The bounds are validated once, when
the scale is generated, by the :class:`ScaleRange` model.

Key Features:
    - Works on Python scalars and on NumPy arrays element-wise
    - Inverted output ranges (``output_min > output_max``) invert the input
    - Equal input bounds are rejected up front instead of dividing by zero

Examples:
    >>> from funtils.functional.scale import generate_scale
    >>> scale = generate_scale(5, 10, 0, 10)
    >>> scale(7.5)
    5.0
    >>> scale(11)
    10.0
    >>> invert = generate_scale(0, 10, 1, 0)
    >>> invert(2)
    0.8
"""

from typing import Callable, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

__all__ = ["ScaleRange", "generate_scale", "gen_scale"]

Number = Union[int, float]


class ScaleRange(BaseModel):
    """Input and output bounds of a linear scale.

    Attributes:
        input_min: Input value mapped to ``output_min``.
        input_max: Input value mapped to ``output_max``.
        output_min: Output for ``input_min``.
        output_max: Output for ``input_max``.
    """

    model_config = ConfigDict(frozen=True)

    input_min: float = Field(..., description="Input value mapped to output_min.")
    input_max: float = Field(..., description="Input value mapped to output_max.")
    output_min: float = Field(..., description="Output for input_min.")
    output_max: float = Field(..., description="Output for input_max.")

    @model_validator(mode="after")
    def check_input_span(self) -> "ScaleRange":
        if self.input_min == self.input_max:
            raise ValueError(
                f"input_min and input_max must differ, both are {self.input_min}."
            )
        return self

    @computed_field
    @property
    def lower(self) -> float:
        """Smaller of the two output bounds."""
        return min(self.output_min, self.output_max)

    @computed_field
    @property
    def upper(self) -> float:
        """Larger of the two output bounds."""
        return max(self.output_min, self.output_max)


def generate_scale(
    input_min: Number, input_max: Number, output_min: Number, output_max: Number
) -> Callable:
    """Generate a scaling function for the given input/output ranges.

    Args:
        input_min: Smallest expected input.
        input_max: Largest expected input.
        output_min: Output produced at ``input_min``.
        output_max: Output produced at ``input_max``.

    Returns:
        ``scale(x)`` returning a value between ``output_min`` and
        ``output_max`` (inclusive). A scalar ``x`` gives a Python ``float``,
        an array gives an array of the same shape.

    Raises:
        ValueError: If ``input_min == input_max`` or a bound is not numeric.
    """
    bounds = ScaleRange(
        input_min=input_min,
        input_max=input_max,
        output_min=output_min,
        output_max=output_max,
    )
    input_diff = bounds.input_max - bounds.input_min
    output_diff = bounds.output_max - bounds.output_min

    def _scale(x):
        test = output_diff * (np.asarray(x) - bounds.input_min) / input_diff
        result = np.clip(test + bounds.output_min, bounds.lower, bounds.upper)
        if np.ndim(x) == 0:
            return result.item()
        return result

    return _scale


gen_scale = generate_scale
