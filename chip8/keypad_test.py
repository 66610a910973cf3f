import unittest

from chip8.keypad import Keypad


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_set_and_read(self):
        self.keypad.set_key(0xA, True)
        self.assertTrue(self.keypad.is_pressed(0xA))
        self.assertTrue(self.keypad[0xA])
        self.assertFalse(self.keypad.is_pressed(0xB))
        self.keypad[0xA] = False
        self.assertFalse(self.keypad[0xA])
        self.assertFalse(any(self.keypad.is_pressed(k) for k in range(16)))

    def test_invalid_index(self):
        for key in (-1, 16, 0xFF):
            with self.subTest(key=key):
                with self.assertRaises(ValueError):
                    self.keypad.set_key(key, True)
                with self.assertRaises(ValueError):
                    self.keypad.is_pressed(key)

    def test_poll_new_press(self):
        self.assertIsNone(self.keypad.poll_new_press())
        self.keypad.set_key(3, True)
        self.assertEqual(self.keypad.poll_new_press(), 3)
        # still held, not a new press anymore
        self.assertIsNone(self.keypad.poll_new_press())

    def test_latch_ignores_held_keys(self):
        self.keypad.set_key(2, True)
        self.keypad.latch()
        self.assertIsNone(self.keypad.poll_new_press())
        self.keypad.set_key(2, False)
        self.assertIsNone(self.keypad.poll_new_press())
        self.keypad.set_key(2, True)
        self.assertEqual(self.keypad.poll_new_press(), 2)

    def test_lowest_new_key_wins(self):
        self.keypad.set_key(9, True)
        self.keypad.set_key(4, True)
        self.assertEqual(self.keypad.poll_new_press(), 4)


if __name__ == "__main__":
    unittest.main()
