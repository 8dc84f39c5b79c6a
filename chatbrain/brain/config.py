# Configuration for the Brain Architecture

class BrainConfig:
    # Alphabet
    VOCAB_SIZE = 256  # Single-byte codes 0-255
    TICK_INDEX = 256  # Slot reserved for the timer tick / "nothing"
    ENCODING_SIZE = VOCAB_SIZE + 1

    # Recurrent memory
    MEMORY_SIZE = 16

    # Noise mixed into the dense stage
    NOISE_SIZE = 16

    # Dense stage output: external segment + next memory
    HIDDEN_SIZE = ENCODING_SIZE + MEMORY_SIZE

    # Weight initialization range [low, high)
    WEIGHT_INIT_LOW = -1.0
    WEIGHT_INIT_HIGH = 1.0

    # None draws fresh OS entropy on every run
    SEED = None

    # Interface
    TICK_INTERVAL_SECONDS = 1.0
