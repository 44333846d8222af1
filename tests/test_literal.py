import unittest

from coretensor.literal import parse_literal, literal_rank
from coretensor.typing import MalformedLiteralError

class TestLiteral(unittest.TestCase):

    def test_rank(self):
        self.assertEqual(literal_rank(5), 0)
        self.assertEqual(literal_rank([1, 2]), 1)
        self.assertEqual(literal_rank([[[1], [2]]]), 3)
        self.assertEqual(literal_rank([]), 1)
        self.assertEqual(literal_rank(["ab", "cd"]), 1)

    def test_parse(self):
        self.assertEqual(parse_literal(5), ([], [5]))
        self.assertEqual(parse_literal([[1, 2], [3, 4], [5, 6]]), ([3, 2], [1, 2, 3, 4, 5, 6]))
        self.assertEqual(parse_literal((("a", "b"),)), ([1, 2], ["a", "b"]))
        self.assertEqual(parse_literal([[1], [2]], 2), ([2, 1], [1, 2]))

    def test_malformed(self):
        with self.assertRaisesRegex(MalformedLiteralError, "1st dimension cannot be empty"):
            parse_literal([])
        with self.assertRaisesRegex(MalformedLiteralError, "2nd dimension cannot be empty"):
            parse_literal([[]])
        with self.assertRaisesRegex(MalformedLiteralError, "2nd dimension have mismatching shapes"):
            parse_literal([[1, 2], [3]])
        with self.assertRaisesRegex(MalformedLiteralError, "3rd dimension have mismatching shapes"):
            parse_literal([[[1], [2]], [[3], [4, 5]]])
        self.assertRaises(MalformedLiteralError, parse_literal, [[1], 2])
        self.assertRaises(MalformedLiteralError, parse_literal, [[1, 2]], 1)
        self.assertRaises(MalformedLiteralError, parse_literal, [1, 2], 2)
        self.assertRaises(ValueError, parse_literal, [[1, 2], [3]])

if __name__ == '__main__':
    unittest.main()
