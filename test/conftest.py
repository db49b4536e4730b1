from typing import List, Optional

import pytest
import socket


class UdpReceiver:
    """Local UDP endpoint capturing datagrams sent to an ephemeral port"""

    def __init__(self, host: str = "127.0.0.1"):
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._socket.bind((host, 0))
        self.host, self.port = self._socket.getsockname()

    def receive(self, timeout: float = 5.0) -> Optional[bytes]:
        self._socket.settimeout(timeout)
        try:
            data, _ = self._socket.recvfrom(65535)
        except socket.timeout:
            return None
        return data

    def receive_all(self, timeout: float = 0.5) -> List[bytes]:
        datagrams = []
        while True:
            data = self.receive(timeout=timeout)
            if data is None:
                return datagrams
            datagrams.append(data)

    def close(self):
        self._socket.close()


@pytest.fixture(name="udp_receiver")
def fixture_udp_receiver():
    receiver = UdpReceiver()
    yield receiver
    receiver.close()
