r"""
'   ________  ____ ___ __ __  ___  ______ __  __
'  / ___/ _ \/ __ `/ // // / / _ \/ ___/ // / / /
' (__  )  __/ /_/ / // // /_/  __/ /  / // /_/ /
'/____/\___/\__, /\_,_/\__, /\___/_/   \_, /___/
'             /_/     /____/          /____/
"""

# expose the main classes
from .query import Query, OrderedQuery

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    sequery,
    P,
)

# expose supporting types
from .types import ValueKind, kind_of
from .errors import MissingArgumentError
from .eventlog import LogEntry, Severity, count_entries_of_type

# the exercises
from .tasks import *
from .tasks import __all__ as _task_names

# define what `import *` does
__all__ = [
    "Query",
    "OrderedQuery",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "sequery",
    "P",
    "ValueKind",
    "kind_of",
    "MissingArgumentError",
    "LogEntry",
    "Severity",
    "count_entries_of_type",
] + list(_task_names)
