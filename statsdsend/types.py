"""statsdsend internal types"""

from typing import Mapping, Optional, Sequence, Union

import enum

DEFAULT_PORT = 8125

NumberType = Union[int, float]
TagsType = Union[Sequence[str], Mapping[str, Optional[str]]]


class StrEnum(str, enum.Enum):
    def __str__(self):
        return str(self.value)


class MetricType(StrEnum):
    COUNTER = "c"
    GAUGE = "g"
    TIMER = "ms"
