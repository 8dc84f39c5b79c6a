import unittest
import numpy as np
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from chatbrain.brain.layers import Rectify, Affine, ConcatN, Split, PassThrough, RandomNoise, uniform32
from chatbrain.brain.errors import LayerShapeError

class TopOfRangeGenerator:
    """Generator stand-in whose every draw is the largest value below 1."""

    def random(self, size=None, dtype=np.float64):
        return np.full(size, np.nextafter(dtype(1.0), dtype(0.0)), dtype=dtype)

class TestPrimitives(unittest.TestCase):

    def setUp(self):
        self.rng = np.random.default_rng(1234)

    def test_rectify(self):
        layer = Rectify(4)
        (out,) = layer(np.array([-1.0, 0.0, 2.5, -0.1], dtype=np.float32))
        np.testing.assert_array_equal(out, [0.0, 0.0, 2.5, 0.0])
        self.assertEqual(layer.input_sizes, (4,))
        self.assertEqual(layer.output_sizes, (4,))

    def test_affine_uses_bias_column(self):
        weights = np.array([[1.0, 2.0, 0.5],
                            [0.0, -1.0, -3.0]])
        layer = Affine(2, 2, weights=weights)
        (out,) = layer(np.array([1.0, 1.0], dtype=np.float32))
        np.testing.assert_allclose(out, [3.5, -4.0])

    def test_affine_random_weights_shape_and_range(self):
        layer = Affine(5, 3, rng=self.rng)
        self.assertEqual(layer.weights.shape, (3, 6))
        self.assertEqual(layer.weights.dtype, np.float32)
        self.assertTrue(np.all(layer.weights >= -1.0))
        self.assertTrue(np.all(layer.weights < 1.0))

    def test_affine_weights_are_frozen(self):
        layer = Affine(3, 2, rng=self.rng)
        with self.assertRaises(ValueError):
            layer.weights[0, 0] = 5.0

    def test_affine_rejects_wrong_weight_shape(self):
        with self.assertRaises(LayerShapeError):
            Affine(3, 2, weights=np.zeros((2, 3)))

    def test_concat(self):
        layer = ConcatN([2, 2, 2])
        (out,) = layer(np.array([1, 2], dtype=np.float32),
                       np.array([3, 4], dtype=np.float32),
                       np.array([5, 6], dtype=np.float32))
        np.testing.assert_array_equal(out, [1, 2, 3, 4, 5, 6])
        self.assertEqual(layer.output_sizes, (6,))

    def test_concat_rejects_unequal_lengths(self):
        with self.assertRaises(LayerShapeError):
            ConcatN([3, 4])
        with self.assertRaises(LayerShapeError):
            ConcatN([])

    def test_split(self):
        layer = Split(5, 2)
        first, second = layer(np.arange(5, dtype=np.float32))
        np.testing.assert_array_equal(first, [0, 1])
        np.testing.assert_array_equal(second, [2, 3, 4])
        self.assertEqual(layer.output_sizes, (2, 3))

    def test_split_edges(self):
        first, second = Split(3, 3)(np.ones(3, dtype=np.float32))
        self.assertEqual(len(first), 3)
        self.assertEqual(len(second), 0)
        with self.assertRaises(LayerShapeError):
            Split(3, 4)

    def test_pass_through_copies(self):
        x = np.array([1.0, -2.0], dtype=np.float32)
        (out,) = PassThrough(2)(x)
        np.testing.assert_array_equal(out, x)
        out[0] = 9.0
        self.assertEqual(x[0], 1.0)

    def test_random_noise_resamples(self):
        layer = RandomNoise(8, rng=self.rng)
        self.assertEqual(layer.input_sizes, ())
        (a,) = layer()
        (b,) = layer()
        self.assertEqual(a.shape, (8,))
        self.assertTrue(np.all((a >= -1.0) & (a < 1.0)))
        self.assertFalse(np.array_equal(a, b))

    def test_random_noise_is_reproducible_with_seed(self):
        (a,) = RandomNoise(8, rng=np.random.default_rng(7))()
        (b,) = RandomNoise(8, rng=np.random.default_rng(7))()
        np.testing.assert_array_equal(a, b)

    def test_noise_never_reaches_upper_bound(self):
        (out,) = RandomNoise(4, rng=TopOfRangeGenerator())()
        self.assertEqual(out.dtype, np.float32)
        self.assertTrue(np.all(out < 1.0))

    def test_affine_weights_never_reach_upper_bound(self):
        layer = Affine(2, 2, rng=TopOfRangeGenerator())
        self.assertTrue(np.all(layer.weights < 1.0))
        self.assertTrue(np.all(layer.weights >= -1.0))

    def test_uniform32_custom_range(self):
        values = uniform32(TopOfRangeGenerator(), 3, low=0.0, high=0.1)
        self.assertTrue(np.all(values < np.float32(0.1)))
        values = uniform32(self.rng, 1000, low=-0.5, high=0.5)
        self.assertTrue(np.all((values >= -0.5) & (values < 0.5)))

    def test_deterministic_layers_repeat(self):
        x = np.linspace(-1, 1, 6).astype(np.float32)
        for layer in (Rectify(6), Affine(6, 4, rng=self.rng), ConcatN([6, 6]), Split(6, 2)):
            args = (x, x) if isinstance(layer, ConcatN) else (x,)
            first = layer(*args)
            second = layer(*args)
            for a, b in zip(first, second):
                np.testing.assert_array_equal(a, b)

    def test_call_checks_vector_count_and_length(self):
        with self.assertRaises(LayerShapeError):
            Rectify(3)(np.zeros(4, dtype=np.float32))
        with self.assertRaises(LayerShapeError):
            Rectify(3)()
        with self.assertRaises(LayerShapeError):
            RandomNoise(3, rng=self.rng)(np.zeros(3, dtype=np.float32))

    def test_sizes_must_be_valid(self):
        with self.assertRaises(LayerShapeError):
            Rectify(0)
        with self.assertRaises(LayerShapeError):
            PassThrough(-1)
        with self.assertRaises(LayerShapeError):
            RandomNoise(2.5)

if __name__ == '__main__':
    unittest.main()
