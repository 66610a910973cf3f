import logging

from chip8.constants import (
    C8_FONTS,
    FONT_START_ADDRESS,
    MAX_ADDRESS,
    MAX_ROM_SIZE,
    MEMORY_SIZE,
    ROM_START_ADDRESS,
    STACK_SIZE,
)
from chip8.errors import AddressOutOfRange, ProgramTooLarge, StackOverflow, StackUnderflow


logger = logging.getLogger(__name__)


# ********** WRAPS A LIST TO REPRESENT A STACK WITH A LIMITED SIZE OF 16 ADDRESSES
class Stack:
    def __init__(self):
        self.addr_list = []

    def __len__(self):
        return len(self.addr_list)

    def __repr__(self):
        return "[" + ", ".join(f"0x{addr:03x}" for addr in self.addr_list) + "]"

    def push(self, address):
        if len(self.addr_list) >= STACK_SIZE:
            raise StackOverflow(address)
        self.addr_list.append(address)

    def pop(self):
        if not self.addr_list:
            raise StackUnderflow()
        return self.addr_list.pop()

    def clear(self):
        self.addr_list.clear()


# ********** WRAPS A BYTEARRAY TO REPRESENT THE MAIN MEMORY WITH A LIMITED SIZE OF 4KB
class Memory:
    """
    0x000-0x1FF: reserved for the interpreter, the font sprites live at FONT_START_ADDRESS
    0x200-0xFFF: program and working storage
    """

    def __init__(self):
        self.inner = bytearray(MEMORY_SIZE)
        self.load_font()

    def __setitem__(self, key, value):
        self.write_byte(key, value)

    def __getitem__(self, index):
        return self.read_byte(index)

    @staticmethod
    def _check(address):
        if not 0 <= address <= MAX_ADDRESS:
            raise AddressOutOfRange(address)

    def check_range(self, address, length):
        """raise AddressOutOfRange unless every address in [address, address+length) exists"""
        self._check(address)
        self._check(address + length - 1)

    def read_byte(self, address):
        self._check(address)
        return self.inner[address]

    def write_byte(self, address, value):
        self._check(address)
        self.inner[address] = value & 0xFF

    def read_word(self, address):
        """big-endian combination of the bytes at address and address+1"""
        return self.read_byte(address) << 8 | self.read_byte(address + 1)

    def load_font(self):
        self.inner[FONT_START_ADDRESS:FONT_START_ADDRESS+len(C8_FONTS)] = bytes(C8_FONTS)

    def clear(self):
        self.inner[:] = bytes(MEMORY_SIZE)
        self.load_font()

    def load_program(self, data):
        """copy the ROM image at ROM_START_ADDRESS, memory is left untouched if it doesn't fit"""
        if len(data) > MAX_ROM_SIZE:
            raise ProgramTooLarge(len(data), MAX_ROM_SIZE)
        self.inner[ROM_START_ADDRESS:ROM_START_ADDRESS+len(data)] = bytes(data)
        logger.info("loaded %d bytes at 0x%03x", len(data), ROM_START_ADDRESS)
