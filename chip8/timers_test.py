import unittest

from chip8.timers import Timers


class TestTimers(unittest.TestCase):
    def setUp(self):
        self.timers = Timers()

    def test_starts_at_zero(self):
        self.assertEqual((self.timers.get_delay(), self.timers.get_sound()),
                         (0, 0))

    def test_tick_decrements(self):
        self.timers.set_delay(10)
        self.timers.set_sound(3)
        self.timers.tick()
        self.assertEqual((self.timers.get_delay(), self.timers.get_sound()),
                         (9, 2))

    def test_zero_stays_zero(self):
        self.timers.tick()
        self.assertEqual((self.timers.get_delay(), self.timers.get_sound()),
                         (0, 0))

    def test_timers_are_independent(self):
        self.timers.set_delay(2)
        self.timers.set_sound(5)
        for _ in range(4):
            self.timers.tick()
        self.assertEqual((self.timers.get_delay(), self.timers.get_sound()),
                         (0, 1))

    def test_values_are_8_bit(self):
        self.timers.set_delay(0x1FF)
        self.assertEqual(self.timers.get_delay(), 0xFF)

    def test_reset(self):
        self.timers.set_delay(4)
        self.timers.set_sound(4)
        self.timers.reset()
        self.assertEqual((self.timers.get_delay(), self.timers.get_sound()),
                         (0, 0))


if __name__ == "__main__":
    unittest.main()
