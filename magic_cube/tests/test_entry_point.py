import importlib.util
import unittest


class TestEntryPoint(unittest.TestCase):
    def test_main_lives_inside_package(self):
        spec = importlib.util.find_spec("magic_cube.__main__")
        self.assertIsNotNone(spec)
        with open(spec.origin, encoding="utf-8") as fh:
            source = fh.read()
        self.assertIn("def main(", source)


if __name__ == "__main__":
    unittest.main()
