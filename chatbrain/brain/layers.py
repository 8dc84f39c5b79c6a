import numpy as np

from .config import BrainConfig
from .errors import LayerShapeError

DTYPE = np.float32


def check_size(name, value, allow_zero=False):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise LayerShapeError(f"{name} must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        raise LayerShapeError(f"{name} must be {'>= 0' if allow_zero else '> 0'}, got {value}")
    return int(value)


def uniform32(rng, size, low=-1.0, high=1.0):
    """Sample float32 values from [low, high), drawn in float32 directly."""
    low, high = DTYPE(low), DTYPE(high)
    values = low + (high - low) * rng.random(size, dtype=DTYPE)
    # Strictly below high
    return np.minimum(values, np.nextafter(high, low)).astype(DTYPE)


class Layer:
    """
    Base class for every vector transform in the brain graph.

    A layer declares how many vectors it consumes and produces, and the length
    of each one, through `input_sizes` and `output_sizes`. Composition checks
    these tuples when the graph is built. Calling a layer checks the actual
    vectors against them and then runs `forward`.
    """

    input_sizes = ()
    output_sizes = ()

    @property
    def num_inputs(self):
        return len(self.input_sizes)

    @property
    def num_outputs(self):
        return len(self.output_sizes)

    def __call__(self, *inputs):
        if len(inputs) != self.num_inputs:
            raise LayerShapeError(
                f"{self!r} takes {self.num_inputs} input vector(s), got {len(inputs)}"
            )
        for i, (vec, size) in enumerate(zip(inputs, self.input_sizes)):
            if np.ndim(vec) != 1 or len(vec) != size:
                raise LayerShapeError(
                    f"{self!r} input {i} must have length {size}, got shape {np.shape(vec)}"
                )
        return tuple(self.forward(*inputs))

    def forward(self, *inputs):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}(in={self.input_sizes}, out={self.output_sizes})"


class Rectify(Layer):
    def __init__(self, size):
        size = check_size("size", size)
        self.input_sizes = (size,)
        self.output_sizes = (size,)

    def forward(self, x):
        return (np.maximum(x, 0).astype(DTYPE),)


class Affine(Layer):
    """
    Dense layer using the bias trick: a constant 1.0 is appended to the input
    so the bias is the last column of the weight matrix.

    Args:
        input_size: length of the incoming vector
        output_size: length of the produced vector
        rng: numpy Generator used to sample the weights once
        weights: optional explicit (output_size, input_size + 1) matrix
    """

    def __init__(self, input_size, output_size, rng=None, weights=None):
        self.input_size = check_size("input_size", input_size, allow_zero=True)
        self.output_size = check_size("output_size", output_size)
        self.input_sizes = (self.input_size,)
        self.output_sizes = (self.output_size,)

        shape = (self.output_size, self.input_size + 1)
        if weights is None:
            if rng is None:
                rng = np.random.default_rng()
            weights = uniform32(rng, shape, BrainConfig.WEIGHT_INIT_LOW, BrainConfig.WEIGHT_INIT_HIGH)
        weights = np.array(weights, dtype=DTYPE)
        if weights.shape != shape:
            raise LayerShapeError(f"Affine weights must have shape {shape}, got {weights.shape}")

        # Fixed after construction
        weights.setflags(write=False)
        self.weights = weights

    def forward(self, x):
        biased = np.append(x, DTYPE(1.0)).astype(DTYPE)
        return (self.weights @ biased,)


class ConcatN(Layer):
    """N vectors of equal length L -> one vector of length N * L, in argument order."""

    def __init__(self, sizes):
        sizes = tuple(check_size("size", s, allow_zero=True) for s in sizes)
        if not sizes:
            raise LayerShapeError("ConcatN needs at least one input")
        if len(set(sizes)) != 1:
            raise LayerShapeError(f"ConcatN inputs must all have the same length, got {sizes}")
        self.input_sizes = sizes
        self.output_sizes = (sum(sizes),)

    def forward(self, *inputs):
        return (np.concatenate(inputs).astype(DTYPE),)


class Split(Layer):
    """One vector -> its first `at` elements and the rest."""

    def __init__(self, size, at):
        size = check_size("size", size, allow_zero=True)
        at = check_size("at", at, allow_zero=True)
        if at > size:
            raise LayerShapeError(f"Split offset {at} is past the end of a length-{size} vector")
        self.at = at
        self.input_sizes = (size,)
        self.output_sizes = (at, size - at)

    def forward(self, x):
        return (np.array(x[:self.at], dtype=DTYPE), np.array(x[self.at:], dtype=DTYPE))


class PassThrough(Layer):
    """Identity. Brings the externally supplied vector into the graph."""

    def __init__(self, size):
        size = check_size("size", size)
        self.input_sizes = (size,)
        self.output_sizes = (size,)

    def forward(self, x):
        return (np.array(x, dtype=DTYPE),)


class RandomNoise(Layer):
    """Takes no input; every call samples a fresh vector uniformly from [-1, 1)."""

    def __init__(self, size, rng=None):
        size = check_size("size", size)
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()
        self.input_sizes = ()
        self.output_sizes = (size,)

    def forward(self):
        return (uniform32(self.rng, self.size),)
