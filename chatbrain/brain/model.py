import numpy as np

from ..debug_utils import log_debug
from .codec import decode_output, encode_input
from .combinators import RecurrentWrap, Sequential, SideBySide
from .config import BrainConfig
from .errors import LayerShapeError
from .layers import Affine, PassThrough, RandomNoise, Rectify


def softmax(x):
    """Probability distribution over the slots of x. Shifted by max(x) so large inputs do not overflow."""
    x = np.asarray(x, dtype=np.float64)
    exps = np.exp(x - np.max(x))
    return (exps / np.sum(exps)).astype(np.float32)


def build_brain_graph(memory_size, noise_size, hidden_size, rng):
    """
    Fixed topology:

        RecurrentWrap(
            Sequential(
                SideBySide(PassThrough, RandomNoise),
                Sequential(Affine(-> hidden), Rectify)),
            memory_size)

    The hidden layer must be exactly [external(ENCODING_SIZE) | memory] wide.
    """
    expected_hidden = BrainConfig.ENCODING_SIZE + memory_size
    if hidden_size != expected_hidden:
        raise LayerShapeError(
            f"Hidden size must be ENCODING_SIZE + memory_size = {expected_hidden}, got {hidden_size}"
        )

    wrapped_input = BrainConfig.ENCODING_SIZE + memory_size

    mixer = SideBySide(PassThrough(wrapped_input), RandomNoise(noise_size, rng=rng))
    dense = Sequential(
        Affine(mixer.output_sizes[0], hidden_size, rng=rng),
        Rectify(hidden_size),
    )
    return RecurrentWrap(Sequential(mixer, dense), memory_size)


class Brain:
    """
    Turns one input event into one output event, remembering a recurrent
    memory vector between calls.

    Every encoded input and every softmaxed output is appended to
    `input_log` / `output_log` for inspection. Nothing trims them.
    """

    def __init__(self, memory_size=None, noise_size=None, hidden_size=None, rng=None, seed=None):
        self.memory_size = BrainConfig.MEMORY_SIZE if memory_size is None else memory_size
        self.noise_size = BrainConfig.NOISE_SIZE if noise_size is None else noise_size
        self.hidden_size = BrainConfig.ENCODING_SIZE + self.memory_size if hidden_size is None else hidden_size

        if rng is None:
            rng = np.random.default_rng(BrainConfig.SEED if seed is None else seed)
        self.rng = rng

        self.root = build_brain_graph(self.memory_size, self.noise_size, self.hidden_size, rng)

        self.input_log = []
        self.output_log = []

        log_debug(
            f"Brain built: memory={self.memory_size} noise={self.noise_size} "
            f"hidden={self.hidden_size} root={self.root!r}"
        )

    @property
    def memory(self):
        return self.root.memory

    def step(self, event):
        """
        Process one event.

        Args:
            event: ChatCharacter or TimeTick
        Returns:
            ChatCharacter or Nothing
        """
        # 1. Encode
        input_vec = encode_input(event)
        self.input_log.append(input_vec)

        # 2. Run the graph (updates memory)
        (raw_out,) = self.root(input_vec)

        # 3. Normalize
        output_vec = softmax(raw_out)
        self.output_log.append(output_vec)

        # 4. Decode
        output = decode_output(output_vec)
        log_debug(f"step {len(self.input_log)}: {event} -> {output}")
        return output

    def feedback(self, reward):
        raise NotImplementedError(f"Brain.feedback({reward}) is not implemented: the brain cannot learn yet")
