# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
"""
Fire-and-forget UDP transport

Every send resolves the destination again and uses its own short-lived socket.
Resolution and transmission failures are logged and never raised to the caller.

"""
from .types import DEFAULT_PORT
from typing import Any, Iterable, NamedTuple, Optional, Tuple

import logging
import socket

log = logging.getLogger("Transport")


class ResolveResult(NamedTuple):
    family: Optional[int] = None
    sockaddr: Optional[Tuple[Any, ...]] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.sockaddr is not None


def resolve(host: str, port: int = DEFAULT_PORT) -> ResolveResult:
    """Resolve host to the first datagram address returned by the resolver"""
    try:
        addr_infos = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_DGRAM)
    except (OSError, UnicodeError) as ex:
        return ResolveResult(error=ex)

    if not addr_infos:
        return ResolveResult(error=socket.gaierror("No address found for {!r}".format(host)))

    family, _, _, _, sock_addr = addr_infos[0]
    return ResolveResult(family=family, sockaddr=sock_addr)


def send_datagram(host: str, message: str, port: int = DEFAULT_PORT) -> bool:
    """Send message as a single datagram, return True if it was handed to the kernel"""
    resolved = resolve(host, port)
    if not resolved.ok:
        log.debug("Could not resolve %s:%s, dropping message: %s", host, port, resolved.error)
        return False

    payload = message.encode("ascii", "replace")
    try:
        with socket.socket(resolved.family, socket.SOCK_DGRAM) as sock:
            sock.sendto(payload, resolved.sockaddr)
    except OSError:
        log.warning("Error sending message to statsd at %s:%s", host, port, exc_info=True)
        return False

    return True


def send_raw(host: str, message: str, port: int = DEFAULT_PORT) -> None:
    send_datagram(host, message, port=port)


def send_raw_many(host: str, messages: Iterable[str], port: int = DEFAULT_PORT) -> int:
    """Send each message independently, return the count of datagrams sent"""
    sent = 0
    for message in messages:
        if send_datagram(host, message, port=port):
            sent += 1
    return sent
