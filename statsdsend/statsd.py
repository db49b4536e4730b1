# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
"""
StatsD client

Counters, gauges and timers are sent as independent UDP datagrams. Nothing is
buffered or retried and delivery failures never reach the caller.

"""
from .encoder import format_tags, send_metric
from .types import DEFAULT_PORT, MetricType, NumberType, TagsType
from typing import Dict, Iterator, List, Mapping, Optional, Union

import contextlib
import logging
import time


def send_timing(
    host: str,
    bucket: str,
    elapsed_ms: NumberType,
    port: int = DEFAULT_PORT,
    sample_rate: float = 1.0,
    tags: Optional[TagsType] = None,
) -> None:
    """Send a timer sample, elapsed_ms is sent as given without unit conversion"""
    send_metric(host, bucket, elapsed_ms, MetricType.TIMER, port=port, sample_rate=sample_rate, tags=tags)


def send_increment(
    host: str,
    bucket: str,
    port: int = DEFAULT_PORT,
    value: NumberType = 1,
    sample_rate: float = 1.0,
    tags: Optional[TagsType] = None,
) -> None:
    send_metric(host, bucket, value, MetricType.COUNTER, port=port, sample_rate=sample_rate, tags=tags)


def send_decrement(
    host: str,
    bucket: str,
    port: int = DEFAULT_PORT,
    value: NumberType = 1,
    sample_rate: float = 1.0,
    tags: Optional[TagsType] = None,
) -> None:
    """Send a counter sample of -value"""
    send_metric(host, bucket, -value, MetricType.COUNTER, port=port, sample_rate=sample_rate, tags=tags)


def send_gauge(
    host: str,
    bucket: str,
    value: NumberType,
    port: int = DEFAULT_PORT,
    sample_rate: float = 1.0,
    tags: Optional[TagsType] = None,
) -> None:
    send_metric(host, bucket, value, MetricType.GAUGE, port=port, sample_rate=sample_rate, tags=tags)


def _normalize_prefix(prefix: str) -> str:
    if prefix and not prefix.endswith("."):
        return prefix + "."
    return prefix


class StatsClient:
    """
    Sends metrics to a single StatsD destination with a common bucket prefix and default tags.

    Setting host to None disables sending altogether. No socket is kept open between calls.
    """

    def __init__(
        self,
        host: Optional[str] = "127.0.0.1",
        port: int = DEFAULT_PORT,
        tags: Optional[TagsType] = None,
        prefix: str = "",
    ) -> None:
        self.log = logging.getLogger("StatsClient")
        self.host = host
        self.port = port
        self.prefix = _normalize_prefix(prefix)
        self._tags = tags
        if self.enabled:
            self.log.debug("Sending stats to %s:%s with prefix %r", host, port, self.prefix)
        else:
            self.log.debug("Stats sending is disabled")

    @property
    def enabled(self) -> bool:
        return self.host is not None

    def _merge_tags(self, tags: Optional[TagsType]) -> Union[Dict[str, Optional[str]], List[str]]:
        if isinstance(self._tags, Mapping) and (tags is None or isinstance(tags, Mapping)):
            send_tags = dict(self._tags.items())
            send_tags.update(tags or {})
            return send_tags
        return format_tags(self._tags) + format_tags(tags)

    def gauge(self, metric: str, value: NumberType, sample_rate: float = 1.0, tags: Optional[TagsType] = None) -> None:
        if not self.enabled:
            return
        send_gauge(
            self.host, self.prefix + metric, value, port=self.port, sample_rate=sample_rate, tags=self._merge_tags(tags)
        )

    def increase(
        self, metric: str, inc_value: NumberType = 1, sample_rate: float = 1.0, tags: Optional[TagsType] = None
    ) -> None:
        if not self.enabled:
            return
        send_increment(
            self.host,
            self.prefix + metric,
            port=self.port,
            value=inc_value,
            sample_rate=sample_rate,
            tags=self._merge_tags(tags),
        )

    def decrease(
        self, metric: str, dec_value: NumberType = 1, sample_rate: float = 1.0, tags: Optional[TagsType] = None
    ) -> None:
        if not self.enabled:
            return
        send_decrement(
            self.host,
            self.prefix + metric,
            port=self.port,
            value=dec_value,
            sample_rate=sample_rate,
            tags=self._merge_tags(tags),
        )

    def timing(self, metric: str, value: NumberType, sample_rate: float = 1.0, tags: Optional[TagsType] = None) -> None:
        if not self.enabled:
            return
        send_timing(
            self.host, self.prefix + metric, value, port=self.port, sample_rate=sample_rate, tags=self._merge_tags(tags)
        )

    @contextlib.contextmanager
    def timer(self, metric: str, sample_rate: float = 1.0, tags: Optional[TagsType] = None) -> Iterator[None]:
        """Time the enclosed block in milliseconds, the sample is sent even if the block raises"""
        start = time.monotonic()
        try:
            yield
        finally:
            self.timing(metric, (time.monotonic() - start) * 1000, sample_rate=sample_rate, tags=tags)

    def unexpected_exception(self, ex: BaseException, where: str, tags: Optional[TagsType] = None) -> None:
        all_tags: Dict[str, Optional[str]] = {
            "exception": ex.__class__.__name__,
            "where": where,
        }
        if tags is None or isinstance(tags, Mapping):
            all_tags.update(tags or {})
            self.increase("exception", tags=all_tags)
        else:
            self.increase("exception", tags=format_tags(all_tags) + format_tags(tags))
