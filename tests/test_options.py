import unittest
import threading

from coretensor import CoreTensor
from coretensor.typing import OptionType, StorageOptions
from utils import backends

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.coretensor = [CoreTensor(backend) for backend in backends]

    def test_options(self) -> None:
        for ct in self.coretensor:
            xp = ct.namespace
            default = ct.get_options(OptionType.STORAGE)
            self.assertIsNone(default.dtype)

            with ct.storage(xp.float32) as opts1:
                with ct.storage(xp.int32) as opts2:
                    self.assertEqual(opts2, ct.get_options(OptionType.STORAGE))
                    self.assertEqual(ct.full([2], 1).dtype, xp.int32)
                self.assertEqual(opts1, ct.get_options(OptionType.STORAGE))
                self.assertEqual(ct.full([2], 1).dtype, xp.float32)
                self.assertEqual(ct.full([2], 1, dtype=xp.int16).dtype, xp.int16)
            self.assertEqual(default, ct.get_options())

            opt = ct.storage(xp.float64)
            ct.set_options(opt)
            self.assertEqual(opt, ct.get_options())
            self.assertEqual(ct.scalar(1).dtype, xp.float64)
            ct.set_options(ct.storage())

    def test_thread_local(self) -> None:
        for ct in self.coretensor:
            xp = ct.namespace
            seen = []

            def worker():
                seen.append(ct.get_options())

            with ct.storage(xp.float32):
                thread = threading.Thread(target=worker)
                thread.start()
                thread.join()
            self.assertIsInstance(seen[0], StorageOptions)
            self.assertIsNone(seen[0].dtype)

if __name__ == '__main__':
    unittest.main()
