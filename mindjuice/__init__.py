from .compiler import parse
from .core import (
        MEMORY_SIZE,
        ParseError,
        TerminationCondition,
        UnbalancedLeftBracket,
        UnbalancedRightBracket,
        )
from .interpreter import execute
