"""
StatsD line protocol encoder

Supports DogStatsD's sample rate and tag extensions:

  <bucket>:<value>|<type>[|@<sample-rate>][|#<tag>,<tag>,...]

  http://docs.datadoghq.com/guides/dogstatsd/#datagram-format

"""
from .transport import send_raw
from .types import DEFAULT_PORT, MetricType, NumberType, TagsType
from typing import List, Mapping, Optional

import decimal
import math


def format_number(value: NumberType) -> str:
    """Render value in plain positional notation, never with an exponent"""
    if not isinstance(value, float) or not math.isfinite(value):
        return str(value)
    number = decimal.Decimal(repr(value))
    if value.is_integer():
        number = number.to_integral_value()
    return format(number, "f")


def format_tags(tags: Optional[TagsType]) -> List[str]:
    if not tags:
        return []
    if isinstance(tags, str):
        return [tags]
    if isinstance(tags, Mapping):
        return [tag if tag_value is None else "{}:{}".format(tag, tag_value) for tag, tag_value in tags.items()]
    return [str(tag) for tag in tags]


def format_metric(
    bucket: str,
    value: NumberType,
    metric_type: MetricType,
    sample_rate: float = 1.0,
    tags: Optional[TagsType] = None,
) -> str:
    # format: "user.logins:1|c|@0.1|#service:payroll,region:us-west"
    parts = ["{}:{}|{}".format(bucket, format_number(value), str(metric_type))]
    # a rate of exactly 1 is the protocol default and is left out
    if 0 < sample_rate < 1:
        parts.append("|@{}".format(format_number(sample_rate)))
    tag_list = format_tags(tags)
    if tag_list:
        parts.append("|#{}".format(",".join(tag_list)))
    return "".join(parts)


def send_metric(
    host: str,
    bucket: str,
    value: NumberType,
    metric_type: MetricType,
    port: int = DEFAULT_PORT,
    sample_rate: float = 1.0,
    tags: Optional[TagsType] = None,
) -> None:
    send_raw(host, format_metric(bucket, value, metric_type, sample_rate=sample_rate, tags=tags), port=port)
