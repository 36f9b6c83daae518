"""Metrics hook protocol and no-op default implementation.

The converter reports counters and timings for every document it
processes.  Without a configured backend a :class:`NoopMetricsHook` absorbs
them.  Any object with matching ``increment``/``timing``/``gauge`` methods
can be supplied through :attr:`ConverterConfig.metrics` to forward them to
StatsD, Prometheus or similar.

Emitted metric names:

* ``notionsync.conversions_total``          -- counter
* ``notionsync.conversion_failures_total``  -- counter
* ``notionsync.blocks_converted_total``     -- counter, tagged by block type
* ``notionsync.conversion_warnings_total``  -- counter, tagged by warning code
* ``notionsync.conversion_duration_ms``     -- timing
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* is an optional ``str -> str`` mapping that backends translate
    into their own labelling scheme.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment the counter *name* by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds under *name*."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set the gauge *name* to *value*."""
        ...


class NoopMetricsHook:
    """Metrics backend that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
