# CHIP-8 INFO
# https://chip-8.github.io/extensions/#chip-8
# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
import os


# ******************** MEMORY LAYOUT
MEMORY_SIZE = 4096
MAX_ADDRESS = MEMORY_SIZE - 1
FONT_START_ADDRESS = 0x000
ROM_START_ADDRESS = 0x200
MAX_ROM_SIZE = MAX_ADDRESS - ROM_START_ADDRESS + 1
STACK_SIZE = 16
FONT_SPRITE_SIZE = 5        # each character font is made of 5 bytes

C8_FONTS = [0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
            0x20, 0x60, 0x20, 0x20, 0x70,  # 1
            0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
            0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
            0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
            0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
            0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
            0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
            0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
            0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
            0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
            0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
            0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
            0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
            0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
            0xF0, 0x80, 0xF0, 0x80, 0x80]  # F


# ******************** DEVICES
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
KEY_COUNT = 16


# ******************** HOST DEFAULTS
DEBUG = True if int(os.getenv('DEBUG', 0)) >= 1 else False
CLOCK_HZ = 700              # instructions per second
TIMER_HZ = 60
SCALE = 15
TONE_HZ = 440
BLUE = (80, 69, 155)
LIGHT_BLUE = (136, 126, 203)
WINDOW_TITLE = "CHIP-8"
