"""
Build a StatsClient from the "statsd" section of an application config

  {
      "statsd": {
          "host": "127.0.0.1",
          "port": 8125,
          "prefix": "myapp",
          "tags": {"region": "us-west"}
      }
  }

"host": null disables sending.

"""
from .errors import ConfigError
from .statsd import StatsClient
from .types import DEFAULT_PORT
from typing import Any, Mapping

STATSD_CONFIG_KEYS = {"host", "port", "prefix", "tags"}


def _validate_port(port: Any) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigError("statsd port must be an integer, got {!r}".format(port))
    if not 0 <= port <= 65535:
        raise ConfigError("statsd port {} is out of range".format(port))
    return port


def client_from_config(config: Mapping[str, Any]) -> StatsClient:
    stats = config.get("statsd") or {}
    unknown_keys = set(stats) - STATSD_CONFIG_KEYS
    if unknown_keys:
        raise ConfigError("Unknown statsd config keys: {}".format(", ".join(sorted(unknown_keys))))

    tags = stats.get("tags")
    if tags is not None and (isinstance(tags, str) or not isinstance(tags, (list, tuple, Mapping))):
        raise ConfigError("statsd tags must be a list or an object, got {!r}".format(tags))

    return StatsClient(
        host=stats.get("host", "127.0.0.1"),
        port=_validate_port(stats.get("port", DEFAULT_PORT)),
        tags=tags,
        prefix=stats.get("prefix") or "",
    )
