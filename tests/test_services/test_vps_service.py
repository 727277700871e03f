"""Tests for VpsService path and body mapping."""

from __future__ import annotations

import json

import pytest

from nodesty.models import ErrorKind, VpsActionParams, VpsChangePasswordParams, VpsReinstallParams
from nodesty.services import VpsService


@pytest.mark.parametrize(
    "method_name, suffix",
    [
        ("get_vps_info", "info"),
        ("get_vps_graphs", "graphs"),
        ("get_vps_backups", "backups"),
        ("get_vps_os_templates", "os-templates"),
        ("get_vps_tasks", "tasks"),
    ],
)
def test_get_endpoints(make_transport, method_name, suffix) -> None:
    transport, backend = make_transport()
    getattr(VpsService(transport), method_name)("1234")

    assert backend.last.method == "GET"
    assert backend.last.url.path == f"/api/services/1234/vps/{suffix}"


@pytest.mark.parametrize(
    "method_name, action",
    [
        ("start_vps", "start"),
        ("stop_vps", "stop"),
        ("restart_vps", "restart"),
        ("power_off_vps", "poweroff"),
    ],
)
def test_power_shortcuts(make_transport, method_name, action) -> None:
    transport, backend = make_transport()
    getattr(VpsService(transport), method_name)(1234)

    assert backend.last.method == "POST"
    assert backend.last.url.path == "/api/services/1234/vps/action"
    assert json.loads(backend.last.content) == {"action": action}


def test_perform_vps_action(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).perform_vps_action("1", VpsActionParams(action="restart"))
    assert json.loads(backend.last.content) == {"action": "restart"}


def test_change_password(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).change_vps_password(
        "1", VpsChangePasswordParams(username="root", password="s3cret")
    )
    assert backend.last.url.path == "/api/services/1/vps/change-password"
    assert json.loads(backend.last.content) == {"username": "root", "password": "s3cret"}


def test_reinstall_uses_camel_case(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).reinstall_vps("1", VpsReinstallParams(password="pw", os_id=7))
    assert backend.last.url.path == "/api/services/1/vps/reinstall"
    assert json.loads(backend.last.content) == {"password": "pw", "osId": 7}


def test_restore_backup(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).restore_vps_backup("1", "2024-01-15", "backup-001.tar.gz")

    assert backend.last.method == "POST"
    assert backend.last.url.path == "/api/services/1/vps/backups/2024-01-15/backup-001.tar.gz"
    assert json.loads(backend.last.content) == {
        "date": "2024-01-15",
        "file": "backup-001.tar.gz",
    }


def test_restore_backup_encodes_segments(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).restore_vps_backup("1", "2024/01/15", "a b")
    assert backend.last.url.raw_path.decode() == (
        "/api/services/1/vps/backups/2024%2F01%2F15/a%20b"
    )


def test_restore_from_object(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).restore_vps_backup_from_object(
        "1", {"date": "2024-02-01", "file": "nightly.tar", "size": 10, "createdAt": "x"}
    )
    assert backend.last.url.path == "/api/services/1/vps/backups/2024-02-01/nightly.tar"


def test_health_check(make_transport) -> None:
    transport, backend = make_transport()
    VpsService(transport).health_check()
    assert backend.last.url.path == "/health"


@pytest.mark.parametrize(
    "backup, missing",
    [
        ({"date": "2024-01-01"}, "file"),
        ({"file": "nightly.tar"}, "date"),
        ({"date": "", "file": "nightly.tar"}, "date"),
        ({}, "date, file"),
    ],
)
def test_restore_from_incomplete_object_is_request_error(make_transport, backup, missing) -> None:
    transport, backend = make_transport()
    result = VpsService(transport).restore_vps_backup_from_object("1", backup)

    assert result.success is False
    assert result.kind == ErrorKind.REQUEST_ERROR
    assert result.message == f"Backup entry is missing: {missing}"
    assert backend.requests == []


def test_restore_from_non_mapping_is_request_error(make_transport) -> None:
    transport, backend = make_transport()
    result = VpsService(transport).restore_vps_backup_from_object("1", ["2024-01-01", "x"])

    assert result.kind == ErrorKind.REQUEST_ERROR
    assert backend.requests == []


def test_restore_with_missing_date_is_request_error(make_transport) -> None:
    transport, backend = make_transport()
    result = VpsService(transport).restore_vps_backup("1", None, "nightly.tar")

    assert result.success is False
    assert result.kind == ErrorKind.REQUEST_ERROR
    assert backend.requests == []
