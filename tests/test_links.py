"""Tests for the link table."""

import dataclasses

import pytest

from supa_sleuth.links import LINKS, Action, LinkEntry, link_for


class TestLinkTable:
    """Test suite for LINKS."""

    def test_one_entry_per_action(self):
        """Verify every action has exactly one link."""
        assert set(LINKS) == set(Action)
        assert len(LINKS) == len(Action)

    def test_entries_match_their_keys(self):
        """Verify each entry is stored under its own action."""
        for action, entry in LINKS.items():
            assert entry.action is action

    def test_link_for_returns_url(self):
        """Verify link_for resolves known URLs."""
        assert link_for(Action.BUY) == "https://swap.supapump.fun/"
        assert link_for(Action.STAKE) == "https://stake.smithii.io/supa"
        assert link_for(Action.REGISTER) == "https://www.sns.id/sub-registrar/supapump"

    def test_scan_base_is_prefix(self):
        """Verify the scan link ends ready for an address suffix."""
        assert link_for(Action.SCAN_BASE) == "https://scan.supapump.fun/token/"

    def test_table_is_read_only(self):
        """Verify the table cannot be modified."""
        with pytest.raises(TypeError):
            LINKS[Action.BUY] = LinkEntry(Action.BUY, "https://example.com/")

    def test_entries_are_frozen(self):
        """Verify link entries are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            LINKS[Action.BUY].url = "https://example.com/"
