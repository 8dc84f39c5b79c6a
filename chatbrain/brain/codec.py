import numpy as np
from dataclasses import dataclass

from .config import BrainConfig
from .errors import EncodingError


@dataclass(frozen=True)
class ChatCharacter:
    """A single typed character. Used both as brain input and brain output."""
    char: str

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"ChatCharacter needs exactly one character, got {self.char!r}")


@dataclass(frozen=True)
class TimeTick:
    """Emitted by the timer once per interval."""


@dataclass(frozen=True)
class Nothing:
    """The brain chose not to say anything this step."""


def encode_input(event):
    """
    One-hot encode an input event.

    Args:
        event: ChatCharacter or TimeTick
    Returns:
        vector: (ENCODING_SIZE,) float32, 1.0 at the character code or at TICK_INDEX
    """
    vector = np.zeros(BrainConfig.ENCODING_SIZE, dtype=np.float32)

    if isinstance(event, ChatCharacter):
        code = ord(event.char)
        if code >= BrainConfig.VOCAB_SIZE:
            raise EncodingError(
                f"Character {event.char!r} (U+{code:04X}) is outside the single-byte alphabet"
            )
        vector[code] = 1.0
    elif isinstance(event, TimeTick):
        vector[BrainConfig.TICK_INDEX] = 1.0
    else:
        raise TypeError(f"Cannot encode {type(event).__name__} as brain input")

    return vector


def decode_output(vector):
    """
    Interpret the highest slot of an output vector as an event.
    Ties go to the lowest index.
    """
    vector = np.asarray(vector)
    if vector.shape != (BrainConfig.ENCODING_SIZE,):
        raise EncodingError(
            f"Output vector must have shape ({BrainConfig.ENCODING_SIZE},), got {vector.shape}"
        )

    idx = int(np.argmax(vector))

    if idx < BrainConfig.VOCAB_SIZE:
        return ChatCharacter(chr(idx))
    return Nothing()
