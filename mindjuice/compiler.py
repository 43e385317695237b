import logging

from . import core

logger = logging.getLogger(__name__)


class Compiler(object):
    def __init__(self):
        self._instructions = {op.SYMBOL: op for op in (
            core.MoveRight,
            core.MoveLeft,
            core.Increment,
            core.Decrement,
            core.Output,
            core.Input,
            )}

    def compile(self, program):
        """
        Compile the characters of a program into a list of instructions.

        The program may be any iterable of characters and is consumed in a
        single pass. Characters that are not instructions are ignored. Each
        `[` is emitted as a placeholder that is patched with the position of
        its `]` once that is found, so every loop pair refers to the other.

        """
        instructions = list()

        # (offset, position) of each `[` still waiting for its `]`
        pending = list()

        for offset, char in enumerate(program):
            if char in self._instructions:
                instructions.append(self._instructions[char]())
                continue

            if char == core.JumpToLeft.SYMBOL:
                pending.append((offset, len(instructions)))
                instructions.append(core.JumpToLeft(0))
                continue

            if char == core.JumpToRight.SYMBOL:
                if not pending:
                    raise core.UnbalancedRightBracket(offset)

                _, left = pending.pop()
                instructions[left] = core.JumpToLeft(len(instructions))
                instructions.append(core.JumpToRight(left))

        if pending:
            raise core.UnbalancedLeftBracket(pending[-1][0])

        logger.debug("compiled {} instructions".format(len(instructions)))

        return instructions


def parse(program):
    return Compiler().compile(program)


def decompile(instructions):
    return ''.join(instruction.symbol for instruction in instructions)


def dump(instructions):
    for index, instruction in enumerate(instructions):
        line = '[{0:#06x}] {1}'.format(index, instruction.mneumonic)
        if isinstance(instruction, core.JumpInstruction):
            line += ' {0:#06x}'.format(instruction.target)

        yield line
