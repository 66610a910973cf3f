from chip8.constants import KEY_COUNT


class Keypad:
    """
    16 keys, 0x0 to 0xF, written by the host on every key transition and only read by the CPU
    the previous poll is remembered so that the CPU can wait for a fresh key press
    """

    def __init__(self):
        self.pressed = [False] * KEY_COUNT
        self.previous = [False] * KEY_COUNT

    def __getitem__(self, key):
        return self.is_pressed(key)

    def __setitem__(self, key, value):
        self.set_key(key, value)

    def __repr__(self):
        return "".join(f"{k:X}" if p else "." for k, p in enumerate(self.pressed))

    @staticmethod
    def _check(key):
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"the CHIP-8 keypad has keys 0x0 to 0xF, got {key!r}")

    def set_key(self, key, pressed):
        self._check(key)
        self.pressed[key] = bool(pressed)

    def is_pressed(self, key):
        self._check(key)
        return self.pressed[key]

    def latch(self):
        """remember the current state as the previous poll"""
        self.previous = list(self.pressed)

    def poll_new_press(self):
        """return the first key pressed now that was released on the previous poll, None otherwise"""
        key = next((k for k in range(KEY_COUNT) if self.pressed[k] and not self.previous[k]), None)
        self.latch()
        return key
