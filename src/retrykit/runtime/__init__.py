"""Runtime layer: clock, cancellation and the retry loop."""

from .cancel import CancelToken, StopSignal
from .clock import FIRED, WALL_CLOCK, Clock, Timer, WallClock
from .retry import (
    CallArgs,
    RetryPolicy,
    backoff_delays,
    build_args,
    call,
    call_async,
    chain_notify,
    fatal_on,
    log_attempts,
    retrying,
    scale_duration,
    validate_policy,
)

__all__ = [
    # Clock
    "Clock", "Timer", "WallClock", "WALL_CLOCK", "FIRED",
    # Cancellation
    "StopSignal", "CancelToken",
    # Retry
    "CallArgs", "RetryPolicy", "validate_policy", "call", "call_async", "build_args", "retrying",
    "scale_duration", "backoff_delays", "log_attempts", "chain_notify", "fatal_on",
]
