class Timers:
    """delay and sound timers, both count down to zero at 60Hz whatever the CPU is doing"""

    def __init__(self):
        self.dt = 0     # delay timer, active when non-zero
        self.st = 0     # sound timer, active when non-zero

    def __repr__(self):
        return f"DT:{self.dt} | ST:{self.st}"

    def tick(self):
        if self.dt > 0:
            self.dt -= 1
        if self.st > 0:
            self.st -= 1

    def get_delay(self):
        return self.dt

    def set_delay(self, value):
        self.dt = value & 0xFF

    def get_sound(self):
        return self.st

    def set_sound(self, value):
        self.st = value & 0xFF

    def reset(self):
        self.dt = self.st = 0
