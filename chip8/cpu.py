# CHIP-8 INFO
# https://chip-8.github.io/extensions/#chip-8
# https://chip-8.github.io/links/
#
# TECHNICAL REFERENCE, the opcode behaviour implemented here (none of the later compatibility quirks)
# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
#
# MASTERING CHIP-8
# https://github.com/mattmikolay/chip-8/wiki/Mastering-CHIP%E2%80%908
#
# TEST SUITE
# https://github.com/Timendus/chip8-test-suite
import enum
import logging
import random
from functools import wraps

from chip8.constants import FONT_SPRITE_SIZE, FONT_START_ADDRESS, MAX_ROM_SIZE, ROM_START_ADDRESS
from chip8.display import Display
from chip8.errors import Chip8Error, ProgramTooLarge, UnknownOpcode
from chip8.keypad import Keypad
from chip8.memory import Memory, Stack
from chip8.timers import Timers


logger = logging.getLogger(__name__)


# ******************** UTILITIES SECTION
def asm(msg):
    """decorator to log the ASM of the instruction being executed"""
    def decorator(fn):
        @wraps(fn)
        def wrapper_fn(self, opcode):
            vals = fn(self, opcode)     # use the locals() values of each decorated function in the message
            if logger.isEnabledFor(logging.DEBUG):
                vals['mem_addr'] = self.instruction_address
                logger.debug(msg.format(**vals))
        return wrapper_fn
    return decorator


class State(enum.Enum):
    RUNNING = "running"
    WAITING_FOR_KEY = "waiting for key"


# the 35 instructions of the classic set as (mask, pattern) pairs
# WATCH OUT: masks order is important!!!
# 00E0 and 00EE must be matched before the catch-all 0nnn
MASKS = {
    0xFFFF: [0x00E0, 0x00EE],
    0xF0FF: [0xE09E, 0xE0A1, 0xF007, 0xF00A, 0xF015, 0xF018, 0xF01E, 0xF029, 0xF033, 0xF055, 0xF065],
    0xF00F: [0x5000, 0x8000, 0x8001, 0x8002, 0x8003, 0x8004, 0x8005, 0x8006, 0x8007, 0x800E, 0x9000],
    0xF000: [0x0000, 0x1000, 0x2000, 0x3000, 0x4000, 0x6000, 0x7000, 0xA000, 0xB000, 0xC000, 0xD000],
}


# ******************** CPU SECTION
class Chip8:
    def __init__(self, display=None, keypad=None, rng=None):
        self.mem = Memory()
        self.stack = Stack()
        self.timers = Timers()
        self.display = display if display is not None else Display()
        self.keypad = keypad if keypad is not None else Keypad()
        self.rng = rng if rng is not None else random.Random()
        self.v_regs = [0] * 16
        self.pc = ROM_START_ADDRESS
        self.idx = 0    # specify where the sprites reside in memory
        self.instruction_address = ROM_START_ADDRESS
        self.state = State.RUNNING
        self.fault = None
        self.instructions = {
            0x0000: self._sys,
            0x00E0: self._clear_screen,
            0x00EE: self._return,
            0x1000: self._jump,
            0x2000: self._call_addr,
            0x3000: self._skip_if_eq,
            0x4000: self._skip_if_not_eq,
            0x5000: self._skip_if_eq_regs,
            0x6000: self._set_vk,
            0x7000: self._add_to_vk,
            0x8000: self._set_vx_to_vy,
            0x8001: self._set_vx_or_vy,
            0x8002: self._set_vx_and_vy,
            0x8003: self._set_vx_xor_vy,
            0x8004: self._add_vx_vy,
            0x8005: self._sub_vx_vy,
            0x8006: self._shr,
            0x8007: self._subn_vx_vy,
            0x800E: self._shl,
            0x9000: self._skip_if_not_eq_regs,
            0xA000: self._set_idx,
            0xB000: self._jump_plus,
            0xC000: self._random_byte_and,
            0xD000: self._to_screen,
            0xE09E: self._skip_if_pressed,
            0xE0A1: self._skip_if_not_pressed,
            0xF007: self._set_vx_dt,
            0xF00A: self._wait_keypress,
            0xF015: self._set_dt_vx,
            0xF018: self._set_st,
            0xF01E: self._add_to_idx,
            0xF029: self._select_char,
            0xF033: self._bcd_repr,
            0xF055: self._store_vregs,
            0xF065: self._load_vregs,
        }

    def __str__(self):
        registers = f"PC_REGISTER:0x{self.pc:03x} | IDX_REGISTER:0x{self.idx:03x} | VARIABLE_REGISTERS:{self.v_regs}"
        stack = f"STACK:{self.stack}"
        devices = f"TIMERS:{self.timers} | KEYPAD:{self.keypad}"
        state = f"STATE:{self.state.value}"
        if self.fault is not None:
            state += f" | FAULT:{self.fault}"
        return f"{registers}\n{stack}\n{devices}\n{state}"

    # ********** LIFECYCLE
    def reset(self):
        """back to power-on state, the keys stay as the host left them"""
        self.mem.clear()
        self.stack.clear()
        self.timers.reset()
        self.display.clear()
        self.keypad.latch()
        self.v_regs = [0] * 16
        self.pc = ROM_START_ADDRESS
        self.idx = 0
        self.instruction_address = ROM_START_ADDRESS
        self.state = State.RUNNING
        self.fault = None

    def load_rom(self, data):
        """reset the machine and load a ROM image, raise ProgramTooLarge (without resetting) if it doesn't fit"""
        data = bytes(data)
        if len(data) > MAX_ROM_SIZE:
            raise ProgramTooLarge(len(data), MAX_ROM_SIZE)
        self.reset()
        self.mem.load_program(data)

    def tick_timers(self):
        self.timers.tick()

    @property
    def sound_on(self):
        return self.timers.get_sound() > 0

    # ********** INSTRUCTIONS
    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SYS 0x{address:04x}")
    def _sys(self, opcode):
        """jump to a machine code routine of the host, ignored by modern interpreters"""
        address = opcode & 0x0FFF
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: CLS")
    def _clear_screen(self, opcode):
        self.display.clear()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: RET")
    def _return(self, opcode):
        """return from a subroutine"""
        self.pc = self.stack.pop()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: JP 0x{address:04x}")
    def _jump(self, opcode):
        address = opcode & 0x0FFF
        self.pc = address
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: CALL 0x{address:04x}")
    def _call_addr(self, opcode):
        address = opcode & 0x0FFF
        self.stack.push(self.pc)    # pc already points to the instruction after the call
        self.pc = address
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SE V{x}, {comparison_value}")
    def _skip_if_eq(self, opcode):
        x = (opcode & 0x0F00) >> 8
        comparison_value = opcode & 0x00FF
        if self.v_regs[x] == comparison_value:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SNE V{x}, {comparison_value}")
    def _skip_if_not_eq(self, opcode):
        x = (opcode & 0x0F00) >> 8
        comparison_value = opcode & 0x00FF
        if self.v_regs[x] != comparison_value:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SE V{x}, V{y}")
    def _skip_if_eq_regs(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        if self.v_regs[x] == self.v_regs[y]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SNE V{x}, V{y}")
    def _skip_if_not_eq_regs(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        if self.v_regs[x] != self.v_regs[y]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, {value}")
    def _set_vk(self, opcode):
        """set the value of one of the 16 variable registers, Vx"""
        x, value = (opcode & 0x0F00) >> 8, opcode & 0x00FF
        self.v_regs[x] = value
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: ADD V{x}, {value}")
    def _add_to_vk(self, opcode):
        """add to the value already present in one of the variable registers, VF is untouched"""
        x, value = (opcode & 0x0F00) >> 8, opcode & 0x00FF
        self.v_regs[x] = (self.v_regs[x] + value) & 0xFF    # keep only the lowest 8 bits
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, V{y}")
    def _set_vx_to_vy(self, opcode):
        """set the value of Vx equal to that of Vy"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] = self.v_regs[y]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: OR V{x}, V{y}")
    def _set_vx_or_vy(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] |= self.v_regs[y]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: AND V{x}, V{y}")
    def _set_vx_and_vy(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] &= self.v_regs[y]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: XOR V{x}, V{y}")
    def _set_vx_xor_vy(self, opcode):
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        self.v_regs[x] ^= self.v_regs[y]
        return locals()

    # the flag producing instructions compute both result and flag before writing anything
    # and write VF last, so with x=F the register ends up holding the flag

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: ADD V{x}, V{y}")
    def _add_vx_vy(self, opcode):
        """set Vx = Vx + Vy, VF = carry"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        total = self.v_regs[x] + self.v_regs[y]
        self.v_regs[x] = total & 0xFF
        self.v_regs[0xF] = 1 if total > 0xFF else 0
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SUB V{x}, V{y}")
    def _sub_vx_vy(self, opcode):
        """set Vx = Vx - Vy, VF = NOT borrow"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        not_borrow = 1 if self.v_regs[x] >= self.v_regs[y] else 0
        self.v_regs[x] = (self.v_regs[x] - self.v_regs[y]) & 0xFF
        self.v_regs[0xF] = not_borrow
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SHR V{x}")
    def _shr(self, opcode):
        """set Vx = Vx SHR 1, VF = shifted out bit"""
        x = (opcode & 0x0F00) >> 8
        lsb = self.v_regs[x] & 0x1
        self.v_regs[x] = self.v_regs[x] >> 1
        self.v_regs[0xF] = lsb
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SUBN V{x}, V{y}")
    def _subn_vx_vy(self, opcode):
        """set Vx = Vy - Vx, VF = NOT borrow"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        not_borrow = 1 if self.v_regs[y] >= self.v_regs[x] else 0
        self.v_regs[x] = (self.v_regs[y] - self.v_regs[x]) & 0xFF
        self.v_regs[0xF] = not_borrow
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SHL V{x}")
    def _shl(self, opcode):
        """set Vx = Vx SHL 1, VF = shifted out bit"""
        x = (opcode & 0x0F00) >> 8
        msb = (self.v_regs[x] & 0x80) >> 7
        self.v_regs[x] = (self.v_regs[x] << 1) & 0xFF
        self.v_regs[0xF] = msb
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD I, 0x{value:04x}")
    def _set_idx(self, opcode):
        value = opcode & 0x0FFF
        self.idx = value
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: JP V0, 0x{address:04x}")
    def _jump_plus(self, opcode):
        address = opcode & 0x0FFF
        self.pc = address + self.v_regs[0x0]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: RND V{x}, 0x{kk:02x}")
    def _random_byte_and(self, opcode):
        x, kk = (opcode & 0x0F00) >> 8, opcode & 0x00FF
        self.v_regs[x] = self.rng.randint(0, 255) & kk
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: DRW V{x}, V{y}, {n_bytes}")
    def _to_screen(self, opcode):
        """display n-byte sprite starting at memory location I at (Vx, Vy), set VF = collision"""
        x, y = (opcode & 0x0F00) >> 8, (opcode & 0x00F0) >> 4
        n_bytes = opcode & 0x000F
        sprite = [self.mem[self.idx + i] for i in range(n_bytes)]
        collision = self.display.draw_sprite(self.v_regs[x], self.v_regs[y], sprite)
        self.v_regs[0xF] = 1 if collision else 0
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SKP V{x}")
    def _skip_if_pressed(self, opcode):
        """skip the following instruction if the key corresponding to the hex value stored in Vx is pressed"""
        x = (opcode & 0x0F00) >> 8
        if self.keypad[self.v_regs[x] & 0xF]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: SKNP V{x}")
    def _skip_if_not_pressed(self, opcode):
        """skip the following instruction if the key corresponding to the hex value stored in Vx is NOT pressed"""
        x = (opcode & 0x0F00) >> 8
        if not self.keypad[self.v_regs[x] & 0xF]:
            self._goto_next_instruction()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, DT")
    def _set_vx_dt(self, opcode):
        x = (opcode & 0x0F00) >> 8
        self.v_regs[x] = self.timers.get_delay()
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, K")
    def _wait_keypress(self, opcode):
        """
        wait for a key press and store its value in Vx
        keys already held when the wait starts don't count, they must be released and pressed again
        """
        x = (opcode & 0x0F00) >> 8
        key = None
        if self.state is State.RUNNING:
            self.keypad.latch()
            self.state = State.WAITING_FOR_KEY
        else:
            key = self.keypad.poll_new_press()
        if key is None:
            self.pc -= 0x2      # stay on the same instruction until a key is pressed
        else:
            self.v_regs[x] = key
            self.state = State.RUNNING
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD DT, V{x}")
    def _set_dt_vx(self, opcode):
        x = (opcode & 0x0F00) >> 8
        self.timers.set_delay(self.v_regs[x])
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD ST, V{register}")
    def _set_st(self, opcode):
        register = (opcode & 0x0F00) >> 8
        self.timers.set_sound(self.v_regs[register])
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: ADD I, V{register}")
    def _add_to_idx(self, opcode):
        register = (opcode & 0x0F00) >> 8
        self.idx = (self.idx + self.v_regs[register]) & 0xFFFF
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD F, V{register}")
    def _select_char(self, opcode):
        """set I to location of sprite for the hex digit in Vx"""
        register = (opcode & 0x0F00) >> 8
        self.idx = FONT_START_ADDRESS + (self.v_regs[register] & 0xF) * FONT_SPRITE_SIZE
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD B, V{x}")
    def _bcd_repr(self, opcode):
        """the hundreds digit of Vx goes in memory at I, the tens digit at I+1, the ones digit at I+2"""
        x = (opcode & 0x0F00) >> 8
        value = self.v_regs[x]
        hundreds, tens, ones = value // 100, (value // 10) % 10, value % 10
        self.mem.check_range(self.idx, 3)
        self.mem[self.idx], self.mem[self.idx+1], self.mem[self.idx+2] = hundreds, tens, ones
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD [I], V{x}")
    def _store_vregs(self, opcode):
        """store registers V0 through Vx (included) in memory starting at location I, I is left unchanged"""
        x = (opcode & 0x0F00) >> 8
        self.mem.check_range(self.idx, x + 1)
        for i in range(x + 1):
            self.mem[self.idx + i] = self.v_regs[i]
        return locals()

    @asm("mem_addr: 0x{mem_addr:04x}    instruction: LD V{x}, [I]")
    def _load_vregs(self, opcode):
        """read registers V0 through Vx (included) from memory starting at location I, I is left unchanged"""
        x = (opcode & 0x0F00) >> 8
        self.mem.check_range(self.idx, x + 1)
        for i in range(x + 1):
            self.v_regs[i] = self.mem[self.idx + i]
        return locals()

    def _goto_next_instruction(self):
        self.pc += 0x2

    # ********** FETCH / DECODE / EXECUTE
    def decode(self, opcode):
        """decode opcodes using masks and return respective function, raise UnknownOpcode if none matches"""
        for mask, patterns in MASKS.items():
            if (opcode & mask) in patterns:
                return self.instructions[opcode & mask]
        raise UnknownOpcode(opcode, self.instruction_address)

    def step(self):
        """
        run one instruction and return the state the CPU is left in
        a runtime error is kept as the CPU fault, every following step raises it again until reset
        """
        if self.fault is not None:
            raise self.fault.with_traceback(None)
        self.instruction_address = self.pc
        try:
            # fetch (each instruction is two bytes long)
            opcode = self.mem.read_word(self.pc)
            # decode + execute
            instruction = self.decode(opcode)
            self._goto_next_instruction()
            instruction(opcode)
        except Chip8Error as err:
            err.pc = self.instruction_address
            self.pc = self.instruction_address
            self.fault = err
            logger.error("machine halted at 0x%04x: %s", self.instruction_address, err)
            raise
        return self.state
