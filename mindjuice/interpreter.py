import logging

from . import core


logger = logging.getLogger(__name__)


class Interpreter(object):
    def run(self, instructions, output, input, maximum_iterations):
        """
        Execute instructions until the program counter runs past the last
        instruction or `maximum_iterations` instructions have been
        dispatched, whichever comes first.

        Both outcomes are returned as a core.TerminationCondition. Errors
        raised by the output or input streams are not caught.

        """
        if maximum_iterations < 0:
            raise ValueError("maximum_iterations must be non-negative")

        instructions = tuple(instructions)
        machine = core.Machine(output, input)
        trace = logger.isEnabledFor(logging.DEBUG)

        logger.info('run start')

        for _ in range(maximum_iterations):
            if machine.counter >= len(instructions):
                logger.info('run stop')
                return core.TerminationCondition.ALL_INSTRUCTIONS_FINISHED

            instruction = instructions[machine.counter]
            if trace:
                logger.debug("@{}: {} {}".format(
                    machine.counter,
                    instruction.mneumonic,
                    instruction.target,
                    ))

            instruction.execute(machine)

            machine.counter += 1

        logger.info('run stop')
        return core.TerminationCondition.MAXIMUM_ITERATIONS_REACHED


def execute(instructions, output, input, maximum_iterations):
    return Interpreter().run(instructions, output, input, maximum_iterations)
