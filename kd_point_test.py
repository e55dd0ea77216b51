import unittest
import numpy as np
from kd_point import KDPoint, ArrayPoint, as_points, euclidean_delta, squared_distance


class TestArrayPoint(unittest.TestCase):
    def test_capability(self):
        p = ArrayPoint([1.0, 2.0, 3.0])
        self.assertIsInstance(p, KDPoint)
        self.assertEqual(p.dimensions(), 3)
        self.assertEqual(p.value_along_axis(1), 2.0)

    def test_rejects_bad_shapes(self):
        with self.assertRaises(ValueError):
            ArrayPoint([])
        with self.assertRaises(ValueError):
            ArrayPoint([[1.0, 2.0]])

    def test_equality_and_hash(self):
        self.assertEqual(ArrayPoint([1, 2]), ArrayPoint([1.0, 2.0]))
        self.assertNotEqual(ArrayPoint([1, 2]), ArrayPoint([2, 1]))
        self.assertEqual(len({ArrayPoint([1, 2]), ArrayPoint([1.0, 2.0])}), 1)

    def test_as_points(self):
        points = as_points(np.arange(6).reshape(3, 2))
        self.assertEqual(len(points), 3)
        self.assertEqual(points[2], ArrayPoint([4, 5]))

        points = as_points([1, 2, 3])
        self.assertEqual([p.dimensions() for p in points], [1, 1, 1])


class TestDistance(unittest.TestCase):
    def test_signed_delta(self):
        a = ArrayPoint([1.0, 5.0])
        b = ArrayPoint([3.0, 2.0])
        self.assertEqual(euclidean_delta(a, b, 0), -2.0)
        self.assertEqual(euclidean_delta(a, b, 1), 3.0)
        self.assertEqual(euclidean_delta(b, a, 0), 2.0)

    def test_squared_distance(self):
        a = ArrayPoint([9.0, 2.0])
        b = ArrayPoint([8.0, 1.0])
        self.assertEqual(squared_distance(a, b, euclidean_delta), 2.0)
        self.assertEqual(squared_distance(a, a, euclidean_delta), 0.0)

    def test_squared_distance_matches_numpy(self):
        np.random.seed(1)
        x, y = np.random.randn(2, 7)
        d = squared_distance(ArrayPoint(x), ArrayPoint(y), euclidean_delta)
        self.assertAlmostEqual(d, np.linalg.norm(x - y) ** 2)

    def test_squared_distance_saturates_to_inf(self):
        a = ArrayPoint([1e200, 0.0])
        b = ArrayPoint([0.0, 0.0])
        self.assertEqual(squared_distance(a, b, euclidean_delta), float('inf'))


if __name__ == '__main__':
    unittest.main()
