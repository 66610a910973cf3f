from chip8.cpu import Chip8, State
from chip8.display import Display
from chip8.errors import (
    AddressOutOfRange,
    Chip8Error,
    ProgramTooLarge,
    StackOverflow,
    StackUnderflow,
    UnknownOpcode,
)
from chip8.keypad import Keypad
from chip8.memory import Memory, Stack
from chip8.timers import Timers

__version__ = "0.1.0"
