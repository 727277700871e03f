"""Tests for FirewallService path and body mapping."""

from __future__ import annotations

import json

import pytest

from nodesty.models import (
    ErrorKind,
    FirewallAttackNotificationParams,
    FirewallRdnsParams,
    FirewallRuleParams,
)
from nodesty.services import FirewallService


PREFIX = "/api/services/1234/firewall/203.0.113.10"


@pytest.mark.parametrize(
    "method_name, suffix",
    [
        ("get_attack_logs", "attack-logs"),
        ("get_attack_notification", "attack-notification"),
        ("get_rdns", "rdns"),
        ("get_rules", "rules"),
        ("get_stats", "stats"),
    ],
)
def test_get_endpoints(make_transport, method_name, suffix) -> None:
    transport, backend = make_transport()
    getattr(FirewallService(transport), method_name)("1234", "203.0.113.10")

    assert backend.last.method == "GET"
    assert backend.last.url.path == f"{PREFIX}/{suffix}"


def test_update_attack_notification_is_put(make_transport) -> None:
    transport, backend = make_transport()
    FirewallService(transport).update_attack_notification(
        "1234", "203.0.113.10", FirewallAttackNotificationParams(enabled=True, severity="high")
    )

    assert backend.last.method == "PUT"
    assert backend.last.url.path == f"{PREFIX}/attack-notification"
    assert json.loads(backend.last.content) == {"enabled": True, "severity": "high"}


def test_rdns_update_and_delete(make_transport) -> None:
    transport, backend = make_transport()
    service = FirewallService(transport)

    service.update_rdns("1234", "203.0.113.10", FirewallRdnsParams(hostname="mc.example.com"))
    assert backend.last.method == "PUT"
    assert json.loads(backend.last.content) == {"hostname": "mc.example.com"}

    service.delete_rdns("1234", "203.0.113.10")
    assert backend.last.method == "DELETE"
    assert backend.last.url.path == f"{PREFIX}/rdns"


def test_create_and_delete_rule(make_transport) -> None:
    transport, backend = make_transport()
    service = FirewallService(transport)

    service.create_rule("1234", "203.0.113.10", FirewallRuleParams(port=25565, app_id=3))
    assert backend.last.method == "POST"
    assert json.loads(backend.last.content) == {"port": 25565, "appId": 3}

    service.delete_rule("1234", "203.0.113.10", 7)
    assert backend.last.method == "DELETE"
    assert backend.last.url.path == f"{PREFIX}/rules/7"


def test_create_port_rule(make_transport) -> None:
    transport, backend = make_transport()
    FirewallService(transport).create_port_rule("1234", "203.0.113.10", 80, 1)
    assert json.loads(backend.last.content) == {"port": 80, "appId": 1}


@pytest.mark.parametrize(
    "method_name, args, body",
    [
        ("enable_email_notifications", (), {"emailNotification": True}),
        ("disable_email_notifications", (), {"emailNotification": False}),
        ("set_discord_webhook", ("https://hook",), {"discordWebhookURL": "https://hook"}),
        (
            "enable_all_notifications",
            ("https://hook",),
            {"emailNotification": True, "discordWebhookURL": "https://hook"},
        ),
        ("enable_all_notifications", (), {"emailNotification": True, "discordWebhookURL": ""}),
        ("disable_all_notifications", (), {"emailNotification": False, "discordWebhookURL": ""}),
    ],
)
def test_notification_conveniences(make_transport, method_name, args, body) -> None:
    transport, backend = make_transport()
    getattr(FirewallService(transport), method_name)("1234", "203.0.113.10", *args)

    assert backend.last.method == "PUT"
    assert backend.last.url.path == f"{PREFIX}/attack-notification"
    assert json.loads(backend.last.content) == body


def test_ipv6_and_slashes_stay_in_one_segment(make_transport) -> None:
    transport, backend = make_transport()
    FirewallService(transport).get_rules("1234", "2001:db8::1/64")
    assert backend.last.url.raw_path.decode() == (
        "/api/services/1234/firewall/2001:db8::1%2F64/rules"
    )


@pytest.mark.parametrize("port", [70000, -1])
def test_create_port_rule_out_of_range_is_request_error(make_transport, port) -> None:
    transport, backend = make_transport()
    result = FirewallService(transport).create_port_rule("1234", "203.0.113.10", port, 3)

    assert result.success is False
    assert result.kind == ErrorKind.REQUEST_ERROR
    assert result.error == "Request Error"
    assert "port" in result.message
    assert backend.requests == []


def test_invalid_webhook_is_request_error(make_transport) -> None:
    transport, backend = make_transport()
    result = FirewallService(transport).set_discord_webhook("1234", "203.0.113.10", ["not", "a", "url"])

    assert result.success is False
    assert result.kind == ErrorKind.REQUEST_ERROR
    assert backend.requests == []
