from statsdsend import client_from_config, send_gauge, send_increment, send_raw, send_raw_many
from unittest import mock

import socket


def test_increment_delivers_one_datagram(udp_receiver):
    send_increment("127.0.0.1", "hits", port=udp_receiver.port)
    assert udp_receiver.receive_all() == [b"hits:1|c"]


def test_gauge_with_rate_and_tags(udp_receiver):
    send_gauge("127.0.0.1", "disk.used", 85, port=udp_receiver.port, sample_rate=0.1, tags=["env:prod", "az:1"])
    assert udp_receiver.receive().decode("ascii") == "disk.used:85|g|@0.1|#env:prod,az:1"


def test_raw_message_is_sent_verbatim(udp_receiver):
    send_raw("127.0.0.1", "custom:7|c|#a", port=udp_receiver.port)
    assert udp_receiver.receive() == b"custom:7|c|#a"


def test_send_raw_many(udp_receiver):
    assert send_raw_many("127.0.0.1", ["a:1|c", "b:2|g"], port=udp_receiver.port) == 2
    assert sorted(udp_receiver.receive_all()) == [b"a:1|c", b"b:2|g"]


def test_configured_client(udp_receiver):
    client = client_from_config({"statsd": {"host": "127.0.0.1", "port": udp_receiver.port, "prefix": "myapp"}})
    client.timing("request", 320, tags={"status": "200"})
    assert udp_receiver.receive() == b"myapp.request:320|ms|#status:200"


def test_unresolvable_host_does_not_raise(udp_receiver):
    with mock.patch("statsdsend.transport.socket.getaddrinfo", side_effect=socket.gaierror("unknown host")):
        send_increment("statsd.invalid", "hits", port=udp_receiver.port)
    assert udp_receiver.receive_all() == []
