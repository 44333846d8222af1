import unittest
from itertools import product

from coretensor import CoreTensor
from coretensor.typing import (
    Tensor,
    TensorShape,
    ShapeMismatchError,
    ShapeSizeMismatchError,
    OutOfBoundsError,
    InvalidRankAccessError,
    UnsupportedUnitError,
)
from utils import backends

class TestTensor(unittest.TestCase):

    def setUp(self):
        self.coretensor = [CoreTensor(backend) for backend in backends]
        self.shapes = [(5,), (4, 3), (5, 4, 3), (2, 1, 3, 2)]

    def test_storage(self):
        for ct, dims in product(self.coretensor, self.shapes):
            t = ct.increasing(dims)
            self.assertEqual(t.shape, ct.shape(*dims))
            self.assertEqual(t.rank, len(dims))
            self.assertEqual(t.unit_count, t.shape.volume)
            self.assertEqual(t.units.shape, (t.shape.volume,))
            self.assertEqual(t.element_shape, ct.shape(*dims[1:]))
            self.assertEqual(t.unit_count_per_element, t.shape.dropping_first().volume)
            self.assertEqual(len(t), dims[0])

        for ct in self.coretensor:
            xp = ct.namespace
            self.assertRaises(ShapeSizeMismatchError, Tensor, TensorShape([3]), xp.arange(5))
            self.assertRaises(ShapeSizeMismatchError, Tensor, None, xp.arange(2))
            t = Tensor(TensorShape([3]), xp.arange(6))
            self.assertEqual(t.shape, TensorShape([2, 3]))

            s = ct.scalar(7)
            self.assertTrue(s.is_scalar)
            self.assertIsNone(s.element_shape)
            self.assertEqual(s.unit_count, 1)
            self.assertEqual(s.unit_count_per_element, 0)
            self.assertRaises(TypeError, len, s)

    def test_index_calculation(self):
        for ct in self.coretensor:
            t = ct.increasing([1, 2, 3])
            self.assertEqual(t[0, 0, 1].item(), 1)
            self.assertEqual(t.unit(ct.index(0, 0, 1)), 1)
            self.assertEqual(t.unit(ct.index(0, 1)), 3)

            t = ct.increasing([2, 3, 4])
            for idx in t.coordinates():
                self.assertEqual(t.unit(idx), t.shape.contiguous_index(idx))
                self.assertEqual(t[idx].item(), t.shape.contiguous_index(idx))
            self.assertEqual(len(list(t.coordinates())), 24)

    def test_addressing(self):
        for ct in self.coretensor:
            t = ct.full([5, 4, 3], 0)
            self.assertEqual(t[0].shape, ct.shape(4, 3))
            self.assertEqual(t[0, 0].shape, ct.shape(3))
            self.assertEqual(t[0, 0, 0].shape, TensorShape.SCALAR)
            self.assertEqual(t[()].shape, t.shape)
            self.assertEqual(t[ct.index(1, 2)].shape, ct.shape(3))
            self.assertEqual(t[-1].shape, ct.shape(4, 3))

            self.assertRaises(InvalidRankAccessError, t.__getitem__, (0, 0, 0, 0))
            self.assertRaises(OutOfBoundsError, t.__getitem__, 5)
            self.assertRaises(OutOfBoundsError, t.__getitem__, (0, -5))
            self.assertRaises(IndexError, t.__getitem__, (0, 4))
            self.assertRaises(TypeError, t.__getitem__, "a")
            self.assertRaises(TypeError, t.__getitem__, (slice(0, 1), 0))

            s = ct.scalar(3)
            self.assertRaises(InvalidRankAccessError, s.__getitem__, 0)
            self.assertEqual(s[()].item(), 3)

    def test_negative_coordinates(self):
        for ct in self.coretensor:
            t = ct.increasing([3, 4])
            self.assertEqual(t[-1, -1].item(), 11)
            self.assertEqual(t[-3, 0].item(), 0)
            self.assertEqual(t.unit(-1), 11)
            self.assertRaises(OutOfBoundsError, t.unit, 12)
            self.assertRaises(OutOfBoundsError, t.unit, -13)

    def test_scalar_reshape(self):
        for ct in self.coretensor:
            s = ct.scalar(1)
            r = s.reshaped([1, 1, 1])
            self.assertEqual(r.shape, ct.shape(1, 1, 1))
            self.assertTrue(r.is_similar(s))
            self.assertFalse(r.is_isomorphic(s))
            self.assertIsNone(s.reshaped([2]))

            t = ct.increasing([2, 3])
            r = t.reshaped([3, 2])
            self.assertEqual(r.units.tolist(), t.units.tolist())
            r.update_unit(0, 10)
            self.assertEqual(t.unit(0), 0)
            self.assertIsNone(t.reshaped(ct.shape(4)))

            for dims in [(), (2, 0, 3), (1, 4), (1, 1, 3, 2)]:
                t = ct.increasing(dims)
                self.assertEqual(t.reshaped(t.shape), t)

    def test_append(self):
        for ct in self.coretensor:
            xp = ct.namespace
            t = ct.empty([4, 3], dtype=xp.int64)
            self.assertEqual(t.shape, ct.shape(0, 4, 3))
            t.extend(ct.increasing([2, 4, 3]))
            self.assertEqual(t.shape, ct.shape(2, 4, 3))
            self.assertEqual(t.units.tolist(), list(range(24)))
            t.append(ct.full([4, 3], 7))
            self.assertEqual(t.shape, ct.shape(3, 4, 3))
            self.assertEqual(t[2].units.tolist(), [7] * 12)
            t.extend([])
            self.assertEqual(len(t), 3)

            self.assertRaises(ShapeMismatchError, t.append, ct.full([3, 4], 0))
            self.assertRaises(ShapeMismatchError, t.append, ct.full([1, 4, 3], 0))
            self.assertRaises(InvalidRankAccessError, ct.scalar(1).append, ct.scalar(2))

            v = ct.scalar_elements([1, 2])
            v.append(ct.scalar(3))
            self.assertEqual(v.units.tolist(), [1, 2, 3])

    def test_equality(self):
        for ct in self.coretensor:
            a = ct.increasing([2, 3])
            b = ct.increasing([3, 2])
            c = ct.increasing([1, 2, 3])
            self.assertTrue(a.units_equal(b))
            self.assertNotEqual(a, b)
            self.assertFalse(a.is_isomorphic(b))
            self.assertFalse(a.is_similar(b))
            self.assertTrue(a.is_similar(c))
            self.assertFalse(a.is_isomorphic(c))
            self.assertEqual(a, ct.tensor([[0, 1, 2], [3, 4, 5]]))
            self.assertTrue(a.elements_equal(ct.increasing([2, 3])))
            self.assertFalse(a.units_equal(ct.increasing([2, 2])))
            self.assertNotEqual(a, [[0, 1, 2], [3, 4, 5]])
            self.assertRaises(TypeError, hash, a)

    def test_text_output(self):
        for ct in self.coretensor:
            self.assertEqual(str(ct.tensor([1, 2, 3, 4, 5])), "[1, 2, 3, 4, 5]")
            self.assertEqual(str(ct.tensor([[1, 2, 3], [4, 5, 6]])), "[[1, 2, 3], [4, 5, 6]]")
            self.assertEqual(str(ct.increasing([2, 3, 2], start=1)),
                             "[[[1, 2], [3, 4], [5, 6]], [[7, 8], [9, 10], [11, 12]]]")
            self.assertEqual(str(ct.scalar(5)), "5")
            self.assertEqual(str(ct.empty([3])), "[]")
            self.assertEqual(repr(ct.tensor([1, 2])), "Tensor([1, 2])")
            self.assertEqual(repr(ct.tensor([1, 2])[1:]), "TensorSlice([2])")

    def test_mutating(self):
        for ct in self.coretensor:
            t = ct.full([5, 4, 3], 1)
            for i in range(t.unit_count):
                t.multiply_unit(i, i)
                t.increment_unit(i, 1)
            self.assertEqual(t.units.tolist(), list(range(1, 61)))

            for i in range(t.unit_count):
                t.decrement_unit(i, 1)
            self.assertEqual(t, ct.increasing([5, 4, 3]))

            t.update_unit(-1, 100)
            self.assertEqual(t[4, 3, 2].item(), 100)

    def test_division(self):
        for ct in self.coretensor:
            t = ct.tensor([7, -7, 6])
            t.divide_unit(0, 2)
            t.divide_unit(1, 2)
            t.divide_unit(2, -4)
            self.assertEqual(t.units.tolist(), [3, -3, -1])

            f = ct.tensor([1.0, 3.0])
            f.divide_unit(0, 4)
            self.assertEqual(f.unit(0), 0.25)

            b = ct.tensor([True, False])
            self.assertRaises(UnsupportedUnitError, b.increment_unit, 0, 1)
            self.assertRaises(UnsupportedUnitError, b.multiply_unit, 0, 1)
            self.assertRaises(UnsupportedUnitError, b.divide_unit, 0, 1)
            self.assertRaises(TypeError, b.decrement_unit, 0, 1)
            b.update_unit(1, True)
            self.assertEqual(b.units.tolist(), [True, True])

    def test_assignment(self):
        for ct in self.coretensor:
            matrix = ct.full([2, 3], 0)
            m2 = ct.increasing([3, 3])
            m2.update_unit(4, 50)
            matrix[0, 0] = m2[1, 1]
            self.assertEqual(matrix[0, 0].item(), 50)
            self.assertEqual(matrix.unit(0), 50)

            matrix[1] = ct.tensor([7, 8, 9])
            self.assertEqual(matrix[1].units.tolist(), [7, 8, 9])
            matrix[0, 2] = 4
            self.assertEqual(matrix.units.tolist(), [50, 0, 4, 7, 8, 9])
            matrix[:] = ct.full([2, 3], 1)
            self.assertEqual(matrix.units.tolist(), [1] * 6)

            self.assertRaises(ShapeMismatchError, matrix.__setitem__, 0, ct.tensor([1, 2]))
            self.assertRaises(ShapeMismatchError, matrix.__setitem__, 0, ct.tensor([[1, 2, 3]]))
            self.assertRaises(ShapeMismatchError, matrix.__setitem__, 0, 3)

            # overlapping source and target
            t = ct.increasing([4])
            t[1:4] = t[0:3]
            self.assertEqual(t.units.tolist(), [0, 0, 1, 2])

    def test_transpose(self):
        for ct in self.coretensor:
            m = ct.tensor([[1, 2, 3], [4, 5, 6]])
            units = [m[i, j].item() for j in range(3) for i in range(2)]
            self.assertEqual(units, [1, 4, 2, 5, 3, 6])

    def test_iteration(self):
        for ct in self.coretensor:
            t = ct.increasing([3, 2])
            rows = list(t)
            self.assertEqual(len(rows), 3)
            self.assertEqual([row.units.tolist() for row in rows], [[0, 1], [2, 3], [4, 5]])
            self.assertRaises(TypeError, iter, ct.scalar(1))

    def test_item(self):
        for ct in self.coretensor:
            self.assertEqual(ct.full([1, 1], 4).item(), 4)
            self.assertEqual(ct.scalar(2).item(), 2)
            self.assertRaises(ShapeMismatchError, ct.full([2], 0).item)

    def test_copy(self):
        for ct in self.coretensor:
            t = ct.increasing([2, 3])
            c = Tensor.from_slice(t[1])
            self.assertEqual(c.shape, ct.shape(3))
            c.update_unit(0, 99)
            self.assertEqual(t.unit(3), 3)

            c = t.copy()
            self.assertEqual(c, t)
            c.update_unit(0, 99)
            self.assertEqual(t.unit(0), 0)

if __name__ == '__main__':
    unittest.main()
