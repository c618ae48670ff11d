import unittest
from ferrisay.src.core.mascot import Mascot, FERRIS, CLIPPY


class TestMascot(unittest.TestCase):

    def test_art(self):
        self.assertIs(Mascot.FERRIS.art, FERRIS)
        self.assertIs(Mascot.CLIPPY.art, CLIPPY)

    def test_art_brings_its_own_line_breaks(self):
        for mascot in Mascot:
            self.assertTrue(mascot.art.startswith(b"\n"))
            self.assertTrue(mascot.art.endswith(b"\n"))

    def test_ferris_picture(self):
        self.assertEqual(FERRIS.split(b"\n")[3], b"            _~^~^~_")
        self.assertEqual(FERRIS.split(b"\n")[4], b"        \\) /  o o  \\ (/")

    def test_from_name(self):
        self.assertIs(Mascot.from_name("ferris"), Mascot.FERRIS)
        self.assertIs(Mascot.from_name(" Clippy "), Mascot.CLIPPY)

    def test_from_name_unknown(self):
        with self.assertRaises(ValueError) as ctx:
            Mascot.from_name("tux")
        self.assertIn("ferris, clippy", str(ctx.exception))

    def test_names(self):
        self.assertEqual(Mascot.names(), ["ferris", "clippy"])


if __name__ == '__main__':
    unittest.main()
