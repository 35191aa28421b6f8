"""Warning sink adapters implementing WarningSinkPort."""

from promresults.adapters.sinks.in_memory import InMemoryWarningSink
from promresults.adapters.sinks.ring_buffer import RingBufferWarningSink

__all__ = [
    "InMemoryWarningSink",
    "RingBufferWarningSink",
]
