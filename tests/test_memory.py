"""Tests for the in-memory format registry and channel table."""

from __future__ import annotations

from message_events.repos.memory import ChannelTable, FormatRegistry, noop


def test_noop_accepts_anything():
    assert noop() is None
    assert noop(1, 2, key="value") is None


def test_format_registry_overwrites():
    registry = FormatRegistry()
    assert registry.get("info") is None
    assert "info" not in registry

    registry.set("info", str)
    registry.set("info", repr)
    assert registry.get("info") is repr
    assert "info" in registry


def test_channel_table_install_and_resolve():
    table = ChannelTable()
    assert table.get("info") is None
    assert table.resolve("info") is noop

    table.install("info", print)
    assert table.get("info") is print
    assert table.resolve("info") is print
    assert table.ids() == ["info"]


def test_channel_table_reset_only_known_ids():
    table = ChannelTable()
    table.install("info", print)
    table.reset("info")
    table.reset("unknown")
    assert table.get("info") is noop
    assert "unknown" not in table


def test_channel_table_reset_all():
    table = ChannelTable()
    table.install("info", print)
    table.install("error", repr)
    table.reset_all()
    assert table.ids() == ["info", "error"]
    assert all(table.get(channel_id) is noop for channel_id in table.ids())
