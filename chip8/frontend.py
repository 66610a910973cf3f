"""pygame host for the interpreter core: window, keyboard, beeper and the emulation loop"""
import argparse
import logging
import sys
from array import array

import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "no welcome message"   # this env var disable pygame's welcome message when imported
import pygame
from pygame.locals import (
    K_1, K_2, K_3, K_4,
    K_q, K_w, K_e, K_r,
    K_a, K_s, K_d, K_f,
    K_z, K_x, K_c, K_v,
)

from chip8.constants import (
    BLUE,
    CLOCK_HZ,
    DEBUG,
    LIGHT_BLUE,
    SCALE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TIMER_HZ,
    TONE_HZ,
    WINDOW_TITLE,
)
from chip8.cpu import Chip8
from chip8.errors import Chip8Error, ProgramTooLarge


logger = logging.getLogger(__name__)

# CHIP-8 keypad    keyboard
#   1 2 3 C        1 2 3 4
#   4 5 6 D   =>   Q W E R
#   7 8 9 E        A S D F
#   A 0 B F        Z X C V
KEY_MAPPINGS = {
    K_1: 0x1, K_2: 0x2, K_3: 0x3, K_4: 0xC,
    K_q: 0x4, K_w: 0x5, K_e: 0x6, K_r: 0xD,
    K_a: 0x7, K_s: 0x8, K_d: 0x9, K_f: 0xE,
    K_z: 0xA, K_x: 0x0, K_c: 0xB, K_v: 0xF,
}


# ******************** UTILITIES SECTION
def translate_key(key):
    """return the CHIP-8 key index bound to a pygame key, None if the key is not bound"""
    return KEY_MAPPINGS.get(key)


def read_rom(path):
    with open(path, mode='rb') as f:
        return f.read()


def steps_per_frame(clock_hz):
    return max(1, clock_hz // TIMER_HZ)


def positive_int(value):
    """argparse type for flags that must be a strictly positive integer"""
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def square_wave(tone_hz, sample_rate, channels=1, duration=0.1):
    """signed 16 bit square wave, every sample repeated once per channel (interleaved frames)"""
    half_period = max(1, sample_rate // (tone_hz * 2))
    # whole periods only, the sound is played in a loop
    frames = max(1, int(sample_rate * duration) // (2 * half_period)) * 2 * half_period
    samples = array('h')
    for frame in range(frames):
        value = 32767 if (frame // half_period) % 2 == 0 else -32768
        samples.extend([value] * channels)
    return samples


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="CHIP-8 interpreter")
    parser.add_argument("rom", help="input rom file")
    parser.add_argument("--scale", type=positive_int, default=SCALE, help=f"pixel scale factor (default {SCALE})")
    parser.add_argument("--clock", type=positive_int, default=CLOCK_HZ, help=f"instructions per second (default {CLOCK_HZ})")
    parser.add_argument("--tone", type=positive_int, default=TONE_HZ, help=f"beep frequency in Hz (default {TONE_HZ})")
    parser.add_argument("--log-level", default="DEBUG" if DEBUG else "INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    return parser.parse_args(argv)


# ******************** I/O SECTION
class Screen:
    def __init__(self, w=SCREEN_WIDTH, h=SCREEN_HEIGHT, s=SCALE, bg_color=BLUE, fg_color=LIGHT_BLUE):
        self.w, self.h, self.scale = w, h, s
        self.background = pygame.Color(*bg_color)
        self.foreground = pygame.Color(*fg_color)
        self.surface = pygame.display.set_mode(
            (w * self.scale, h * self.scale),
        )
        self.surface.fill(self.background)

    def render(self, snapshot):
        """draw every ON pixel of a display snapshot, the change is visible after the flip"""
        self.surface.fill(self.background)
        for y, row in enumerate(snapshot):
            for x, pixel in enumerate(row):
                if pixel:
                    pygame.draw.rect(
                        self.surface,
                        self.foreground,
                        (x * self.scale, y * self.scale, self.scale, self.scale)
                    )
        pygame.display.flip()


class Beeper:
    """square wave played in a loop for as long as the sound timer is active"""

    SAMPLE_RATE = 44100

    def __init__(self, tone_hz=TONE_HZ, volume=0.2):
        self.sound = None
        self.playing = False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(self.SAMPLE_RATE, -16, 1)
        except pygame.error as err:
            logger.warning("no audio device, running silent: %s", err)
            return
        # the mixer may have been opened by someone else, build the buffer in its format
        sample_rate, _, channels = pygame.mixer.get_init()
        samples = square_wave(tone_hz, sample_rate, channels)
        self.sound = pygame.mixer.Sound(buffer=samples.tobytes())
        self.sound.set_volume(volume)

    def update(self, sound_on):
        if self.sound is None or sound_on == self.playing:
            return
        if sound_on:
            self.sound.play(loops=-1)
        else:
            self.sound.stop()
        self.playing = sound_on


# ******************** EMULATION LOOP SECTION
def init_pygame():
    """open pygame with a mono 16 bit mixer, pygame.init() alone would open it in stereo"""
    pygame.mixer.pre_init(Beeper.SAMPLE_RATE, -16, 1)
    pygame.init()


def handle_events(keypad):
    """feed key transitions to the keypad, return False when the user asks to quit"""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            if event.key == pygame.K_ESCAPE:
                return False
            key = translate_key(event.key)
            if key is not None:
                keypad.set_key(key, event.type == pygame.KEYDOWN)
    return True


def run(chip, screen, beeper, clock_hz=CLOCK_HZ):
    """one iteration per 60Hz frame: input, a batch of instructions, one timer tick, sound and video"""
    clock = pygame.time.Clock()
    batch = steps_per_frame(clock_hz)
    while handle_events(chip.keypad):
        for _ in range(batch):
            chip.step()
        chip.tick_timers()
        beeper.update(chip.sound_on)
        if chip.display.dirty:
            screen.render(chip.display.snapshot())
            chip.display.dirty = False
        clock.tick(TIMER_HZ)


# ******************** ENTRY POINT SECTION
def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(
        format='%(asctime)s,%(msecs)d %(name)s %(levelname)s %(message)s',
        datefmt='%H:%M:%S',
        level=getattr(logging, args.log_level),
    )
    chip = Chip8()
    try:
        chip.load_rom(read_rom(args.rom))
    except (OSError, ProgramTooLarge) as err:
        sys.exit(f"cannot load {args.rom}: {err}")
    # pygame initialization
    init_pygame()
    pygame.display.set_caption(f"{WINDOW_TITLE} - {os.path.basename(args.rom)}")
    s = Screen(s=args.scale)
    b = Beeper(tone_hz=args.tone)
    try:
        run(chip, s, b, clock_hz=args.clock)
    except Chip8Error:
        sys.exit(f"********** THE EMULATOR CRASHED WITH THE FOLLOWING STATE\n{chip}")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
