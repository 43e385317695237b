import argparse
import logging
import logging.config
import os
import sys

from . import compiler
from . import core
from . import interpreter

logger = logging.getLogger('mindjuice')


def iterations(value):
    value = int(value)
    if value < 0:
        raise argparse.ArgumentTypeError("must be non-negative: {}".format(value))

    return value


def configure_logging():
    cfg = os.path.expandvars("${XDG_CONFIG_HOME}/mindjuice/logging.cfg")
    if os.path.exists(cfg):
        logging.config.fileConfig(cfg)

    else:
        logging.basicConfig()


def main(argv=sys.argv[1:], stdout=None, stdin=None):
    parser = argparse.ArgumentParser(prog='mindjuice')
    parser.add_argument("--dump", "-d", action='store_true')
    parser.add_argument("--log-level", "-l", choices=('debug', 'info', 'error'), default='error')
    parser.add_argument("--max-iterations", "-m", type=iterations, default=30000000)
    parser.add_argument("file")

    args = parser.parse_args(argv)

    logging_levels = {
            'debug': logging.DEBUG,
            'error': logging.ERROR,
            'info': logging.INFO,
            }

    logging.getLogger('mindjuice').setLevel(logging_levels[args.log_level])

    stdout = sys.stdout.buffer if stdout is None else stdout
    stdin = sys.stdin.buffer if stdin is None else stdin

    with open(args.file) as fp:
        program = fp.read()

    try:
        instructions = compiler.parse(program)
    except core.ParseError as e:
        logger.error("{}: {}".format(args.file, e))
        return 1

    condition = interpreter.execute(
            instructions,
            stdout,
            stdin,
            args.max_iterations,
            )

    stdout.flush()
    logger.info(str(condition))

    if args.dump:
        print()
        for line in compiler.dump(instructions):
            print(line)

    return 0
