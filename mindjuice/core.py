import collections
import enum
import io


MEMORY_SIZE = 32768


class ParseError(Exception):
    MESSAGE = "Unable to parse program."

    def __init__(self, offset=None):
        super(ParseError, self).__init__(self.MESSAGE)
        self.offset = offset

    def __str__(self):
        if self.offset is None:
            return self.MESSAGE

        return "{} (offset {})".format(self.MESSAGE, self.offset)


class UnbalancedRightBracket(ParseError):
    """A `]` was found with no unmatched `[` preceding it."""

    MESSAGE = "Expected matching `[` before `]`, found lone `]` first."


class UnbalancedLeftBracket(ParseError):
    """The input ended before every `[` found its `]`."""

    MESSAGE = "Unbalanced `[`. Expected matching `]`, found end of file."


class TerminationCondition(enum.Enum):
    MAXIMUM_ITERATIONS_REACHED = "Maximum iterations reached."
    ALL_INSTRUCTIONS_FINISHED = "Finished normally."

    def __str__(self):
        return self.value


class Machine(object):
    """
    The state owned by a single execution: the tape, the memory pointer,
    the program counter and the two streams.

    The tape is a bytearray so that every cell is an unsigned 8-bit value;
    arithmetic on cells and moves of the pointer wrap around.

    """

    def __init__(self, output, input):
        self.tape = bytearray(MEMORY_SIZE)
        self.ptr = 0
        self.counter = 0
        self.output = output
        self.input = input
        self._text_output = isinstance(output, io.TextIOBase)

    def read(self):
        return self.tape[self.ptr]

    def write(self, value):
        self.tape[self.ptr] = value % 256

    def move(self, offset):
        self.ptr = (self.ptr + offset) % MEMORY_SIZE

    def emit(self):
        value = self.read()
        if self._text_output:
            self.output.write(chr(value))
        else:
            self.output.write(bytes((value,)))

    def receive(self):
        # Poll until the source hands over at least one byte. An empty read
        # (or None from a non-blocking stream) means no data yet, so this
        # spins without a timeout.
        while True:
            data = self.input.read(1)
            if data:
                break

        # Text sources hand over characters, and only the low byte of the code
        # point is kept, so anything above U+00FF is truncated.
        if isinstance(data, str):
            return ord(data[0]) & 0xFF

        return data[0]


class Instruction(collections.namedtuple("Instruction", "mneumonic symbol target")):
    """
    Instructions are immutable values. Two instructions are equal when they
    are the same kind of instruction with the same target.

    """

    def __new__(cls, target=0):
        return super(Instruction, cls).__new__(
                cls,
                cls.MNEUMONIC,
                cls.SYMBOL,
                int(target),
                )

    def __repr__(self):
        return "{}()".format(type(self).__name__)


class NullaryInstruction(Instruction):
    def __new__(cls):
        return super(NullaryInstruction, cls).__new__(cls)

    def __getnewargs__(self):
        return ()


class JumpInstruction(Instruction):
    def __new__(cls, target):
        if int(target) < 0:
            raise ValueError("jump target must be non-negative")

        return super(JumpInstruction, cls).__new__(cls, target)

    def __getnewargs__(self):
        return (self.target,)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.target)


class MoveRight(NullaryInstruction):
    MNEUMONIC = "MVR"
    SYMBOL = ">"

    def execute(self, machine):
        machine.move(1)


class MoveLeft(NullaryInstruction):
    MNEUMONIC = "MVL"
    SYMBOL = "<"

    def execute(self, machine):
        machine.move(-1)


class Increment(NullaryInstruction):
    MNEUMONIC = "INC"
    SYMBOL = "+"

    def execute(self, machine):
        machine.write(machine.read() + 1)


class Decrement(NullaryInstruction):
    MNEUMONIC = "DEC"
    SYMBOL = "-"

    def execute(self, machine):
        machine.write(machine.read() - 1)


class Output(NullaryInstruction):
    MNEUMONIC = "OUT"
    SYMBOL = "."

    def execute(self, machine):
        machine.emit()


class Input(NullaryInstruction):
    MNEUMONIC = "INP"
    SYMBOL = ","

    def execute(self, machine):
        machine.write(machine.receive())


class JumpToLeft(JumpInstruction):
    """
    The left side of a loop. If the current cell is zero, execution
    continues at the matching JumpToRight.

    """

    MNEUMONIC = "JTL"
    SYMBOL = "["

    def execute(self, machine):
        if machine.read() == 0:
            machine.counter = self.target - 1


class JumpToRight(JumpInstruction):
    """
    The right side of a loop. If the current cell is non-zero, execution
    continues at the matching JumpToLeft.

    """

    MNEUMONIC = "JTR"
    SYMBOL = "]"

    def execute(self, machine):
        if machine.read() != 0:
            machine.counter = self.target - 1
