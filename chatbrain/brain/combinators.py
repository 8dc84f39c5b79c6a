import numpy as np

from .errors import LayerShapeError
from .layers import DTYPE, Layer, Rectify, Split, check_size


class Sequential(Layer):
    """
    Feeds the outputs of `above` into `below`.
    The output sizes of `above` must equal the input sizes of `below`.
    """

    def __init__(self, above, below):
        if tuple(above.output_sizes) != tuple(below.input_sizes):
            raise LayerShapeError(
                f"Cannot stack {below!r} under {above!r}: "
                f"{above.output_sizes} != {below.input_sizes}"
            )
        self.above = above
        self.below = below
        self.input_sizes = tuple(above.input_sizes)
        self.output_sizes = tuple(below.output_sizes)

    def forward(self, *inputs):
        return self.below(*self.above(*inputs))


class SideBySide(Layer):
    """
    Runs two single-output layers independently and concatenates their outputs.
    Inputs are handed out in order: first the ones `left` takes, then `right`'s.
    """

    def __init__(self, left, right):
        for name, layer in (("left", left), ("right", right)):
            if layer.num_outputs != 1:
                raise LayerShapeError(
                    f"SideBySide {name} layer must produce exactly one vector, {layer!r} produces {layer.num_outputs}"
                )
        self.left = left
        self.right = right
        self.input_sizes = tuple(left.input_sizes) + tuple(right.input_sizes)
        self.output_sizes = (left.output_sizes[0] + right.output_sizes[0],)

    def forward(self, *inputs):
        n_left = self.left.num_inputs
        (left_out,) = self.left(*inputs[:n_left])
        (right_out,) = self.right(*inputs[n_left:])
        return (np.concatenate([left_out, right_out]).astype(DTYPE),)


class RecurrentWrap(Layer):
    """
    Threads a persistent memory vector through `inner` across calls.

    Each call:
        1. [input | memory] is fed to `inner`
        2. inner's output is split into [external | next memory]
        3. next memory is rectified and stored
        4. external segment is returned

    Args:
        inner: single-input, single-output layer whose input and output
            both end with a memory_size segment
        memory_size: width of the memory vector
    """

    def __init__(self, inner, memory_size):
        memory_size = check_size("memory_size", memory_size, allow_zero=True)
        if inner.num_inputs != 1 or inner.num_outputs != 1:
            raise LayerShapeError(f"RecurrentWrap inner layer must be 1 -> 1, got {inner!r}")

        (inner_in,) = inner.input_sizes
        (inner_out,) = inner.output_sizes
        if inner_in < memory_size or inner_out < memory_size:
            raise LayerShapeError(
                f"Memory size {memory_size} does not fit {inner!r}"
            )

        self.inner = inner
        self.memory_size = memory_size
        self.input_sizes = (inner_in - memory_size,)
        self.output_sizes = (inner_out - memory_size,)

        self._split = Split(inner_out, inner_out - memory_size)
        self._rectify = Rectify(memory_size) if memory_size else None
        self._memory = np.zeros(memory_size, dtype=DTYPE)

    @property
    def memory(self):
        """Copy of the current memory vector."""
        return self._memory.copy()

    def reset(self):
        self._memory = np.zeros(self.memory_size, dtype=DTYPE)

    def forward(self, x):
        combined = np.concatenate([x, self._memory]).astype(DTYPE)
        (out,) = self.inner(combined)
        external, next_memory = self._split(out)

        if self._rectify is not None:
            (next_memory,) = self._rectify(next_memory)
        self._memory = next_memory

        return (external,)
