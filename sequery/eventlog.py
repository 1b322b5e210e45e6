"""
counting entries of a system event log.

reading a real operating system log is left to the caller; this module only
queries whatever iterable of entries it is handed.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from .factories import P
from .types import *

logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = 'error'
    WARNING = 'warning'
    INFORMATION = 'information'
    SUCCESS_AUDIT = 'success_audit'
    FAILURE_AUDIT = 'failure_audit'


@dataclass(frozen=True)
class LogEntry:
    source: str
    severity: Severity
    message: str = ""


def count_entries_of_type(log_source: Iterable[Any], severity: Severity) -> int:
    """number of entries whose severity matches. any object with a .severity attribute is accepted."""
    count = P(log_source).to.count(lambda entry: entry.severity == severity)
    logger.debug("counted %d entries of %s", count, severity)
    return count
