"""
Small helpers shared by the pattern demos: number rendering for displays and
the ring-buffer logging used to keep a short event history.
"""
from patternlab.core.formatting import format_fixed, format_number
from patternlab.core.logging import EventLog, RingBufferHandler, create_logger

__all__ = ["format_number", "format_fixed", "EventLog", "RingBufferHandler", "create_logger"]
