"""Error kinds raised by the interpreter core.

ProgramTooLarge is raised while loading and leaves the machine untouched.
Everything else is raised while stepping and is fatal: the CPU keeps the
fault and refuses to run until it is reset.
"""


class Chip8Error(Exception):
    """base class for every error the core raises"""
    # address of the instruction that was executing, filled in by the CPU
    pc = None


class ProgramTooLarge(Chip8Error):
    def __init__(self, size, limit):
        super().__init__(f"ROM of {size} bytes does not fit in {limit} bytes of program memory")
        self.size = size
        self.limit = limit


class AddressOutOfRange(Chip8Error):
    def __init__(self, address):
        super().__init__(f"memory access out of range at 0x{address:04x}")
        self.address = address


class UnknownOpcode(Chip8Error):
    def __init__(self, opcode, address=None):
        where = "" if address is None else f" at 0x{address:04x}"
        super().__init__(f"unknown opcode 0x{opcode:04x}{where}")
        self.opcode = opcode
        self.address = address


class StackOverflow(Chip8Error):
    def __init__(self, address):
        super().__init__(f"the CHIP-8 stack can contain at most 16 addresses, cannot push 0x{address:04x}")
        self.address = address


class StackUnderflow(Chip8Error):
    def __init__(self):
        super().__init__("return with an empty stack")
