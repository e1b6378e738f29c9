"""Kernel time – Clock port + implementations."""
from logging_service.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
