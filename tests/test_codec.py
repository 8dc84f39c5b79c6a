import unittest
import numpy as np
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from chatbrain.brain.codec import ChatCharacter, TimeTick, Nothing, encode_input, decode_output
from chatbrain.brain.config import BrainConfig
from chatbrain.brain.errors import EncodingError

class TestCodec(unittest.TestCase):

    def test_encode_character_is_one_hot(self):
        vec = encode_input(ChatCharacter('a'))
        self.assertEqual(vec.shape, (257,))
        self.assertEqual(vec.dtype, np.float32)
        self.assertEqual(vec[ord('a')], 1.0)
        self.assertEqual(vec.sum(), 1.0)

    def test_encode_tick_uses_last_slot(self):
        vec = encode_input(TimeTick())
        self.assertEqual(vec[BrainConfig.TICK_INDEX], 1.0)
        self.assertEqual(vec.sum(), 1.0)

    def test_every_character_round_trips(self):
        for code in range(BrainConfig.VOCAB_SIZE):
            event = ChatCharacter(chr(code))
            self.assertEqual(decode_output(encode_input(event)), event)

    def test_tick_decodes_to_nothing(self):
        out = decode_output(encode_input(TimeTick()))
        self.assertEqual(out, Nothing())
        self.assertNotIsInstance(out, ChatCharacter)

    def test_rejects_multibyte_character(self):
        with self.assertRaises(EncodingError):
            encode_input(ChatCharacter('€'))
        # Still a ValueError for callers that catch broadly
        with self.assertRaises(ValueError):
            encode_input(ChatCharacter('Ā'))

    def test_highest_single_byte_code(self):
        vec = encode_input(ChatCharacter('\xff'))
        self.assertEqual(vec[255], 1.0)

    def test_unknown_event_type(self):
        with self.assertRaises(TypeError):
            encode_input("a")

    def test_character_must_be_single(self):
        with self.assertRaises(ValueError):
            ChatCharacter("ab")
        with self.assertRaises(ValueError):
            ChatCharacter("")

    def test_decode_tie_goes_to_first_index(self):
        vec = np.zeros(257, dtype=np.float32)
        vec[66] = 0.5
        vec[200] = 0.5
        vec[256] = 0.5
        self.assertEqual(decode_output(vec), ChatCharacter('B'))

    def test_decode_uniform_vector_is_nul(self):
        vec = np.full(257, 1.0 / 257, dtype=np.float32)
        self.assertEqual(decode_output(vec), ChatCharacter('\x00'))

    def test_decode_rejects_wrong_length(self):
        with self.assertRaises(EncodingError):
            decode_output(np.zeros(256, dtype=np.float32))

if __name__ == '__main__':
    unittest.main()
