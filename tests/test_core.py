import copy
import io
import pickle

import pytest

from mindjuice import core


def test_instruction_repr():
    assert repr(core.Increment()) == 'Increment()'
    assert repr(core.JumpToRight(4)) == 'JumpToRight(4)'


def test_instruction_fields():
    jump = core.JumpToLeft(7)
    assert jump.mneumonic == 'JTL'
    assert jump.symbol == '['
    assert jump.target == 7
    assert core.Output().target == 0


def test_negative_jump_target():
    with pytest.raises(ValueError):
        core.JumpToLeft(-1)


def test_machine_starts_zeroed():
    machine = core.Machine(io.BytesIO(), io.BytesIO())
    assert len(machine.tape) == core.MEMORY_SIZE
    assert not any(machine.tape)
    assert machine.ptr == 0
    assert machine.counter == 0


def test_jumps_set_counter_before_increment():
    machine = core.Machine(io.BytesIO(), io.BytesIO())

    core.JumpToLeft(5).execute(machine)
    assert machine.counter == 4

    machine.counter = 0
    core.JumpToRight(5).execute(machine)
    assert machine.counter == 0

    machine.write(1)
    core.JumpToRight(2).execute(machine)
    assert machine.counter == 1


def test_instructions_copy_and_pickle():
    instructions = [
            core.Increment(),
            core.JumpToLeft(3),
            core.Decrement(),
            core.JumpToRight(1),
            ]

    assert copy.deepcopy(instructions) == instructions
    assert copy.copy(core.JumpToLeft(3)) == core.JumpToLeft(3)

    restored = pickle.loads(pickle.dumps(instructions))
    assert restored == instructions
    assert [type(op) for op in restored] == [type(op) for op in instructions]


def test_text_input_keeps_low_byte():
    machine = core.Machine(io.BytesIO(), io.StringIO('€'))
    assert machine.receive() == 0xAC

    machine = core.Machine(io.BytesIO(), io.StringIO('\xe9'))
    assert machine.receive() == 0xE9
