"""
KyuuBot - Database Tests
========================

Tests for the settings provider and reminder storage.
"""

import time
import pytest


class TestSettings:
    """Tests for scoped settings operations."""

    def test_set_and_get_list(self, test_db):
        """Test an array document survives a round trip."""
        test_db.set_setting("global", "snippet", ["one", "two"])
        assert test_db.get_setting("global", "snippet") == ["one", "two"]

    def test_set_and_get_mapping(self, test_db):
        """Test a mapping document with nested arrays survives a round trip."""
        data = {"kyuu": ["http://a.com/1.png"], "lenny": "( ͡° ͜ʖ ͡°)"}
        test_db.set_setting("global", "tag", data)
        assert test_db.get_setting("global", "tag") == data

    def test_get_setting_default(self, test_db):
        """Test a missing key returns the default."""
        assert test_db.get_setting("global", "nonexistent", "fallback") == "fallback"
        assert test_db.get_setting("global", "nonexistent") is None

    def test_set_setting_overwrites(self, test_db):
        """Test writing a key twice keeps the last value."""
        test_db.set_setting("global", "snippet", ["one"])
        test_db.set_setting("global", "snippet", ["two"])
        assert test_db.get_setting("global", "snippet") == ["two"]

    def test_scopes_are_isolated(self, test_db):
        """Test the same key in different scopes holds different values."""
        test_db.set_setting("global", "mod_log", {"enabled": False})
        test_db.set_setting(987654321, "mod_log", {"enabled": True, "channel_id": 1})

        assert test_db.get_setting("global", "mod_log") == {"enabled": False}
        assert test_db.get_setting(987654321, "mod_log")["enabled"] is True

    def test_guild_id_and_string_share_scope(self, test_db):
        """Test a guild id and its string form address the same row."""
        test_db.set_setting(987654321, "mod_log", {"enabled": True})
        assert test_db.get_setting("987654321", "mod_log") == {"enabled": True}

    def test_remove_setting(self, test_db):
        """Test removing a stored value."""
        test_db.set_setting("global", "tag", {})
        assert test_db.remove_setting("global", "tag") is True
        assert test_db.get_setting("global", "tag") is None

    def test_remove_setting_missing(self, test_db):
        """Test removing a value that was never stored."""
        assert test_db.remove_setting("global", "tag") is False

    def test_clear_scope(self, test_db):
        """Test clearing a guild scope leaves other scopes alone."""
        test_db.set_setting(111, "mod_log", {"enabled": True})
        test_db.set_setting(111, "other", 1)
        test_db.set_setting("global", "snippet", ["kept"])

        assert test_db.clear_scope(111) == 2
        assert test_db.get_setting(111, "mod_log") is None
        assert test_db.get_setting("global", "snippet") == ["kept"]

    def test_corrupted_value_returns_default(self, test_db):
        """Test a value that is not valid JSON falls back to the default."""
        test_db.execute(
            "INSERT INTO settings (scope, key, value, updated_at) VALUES (?, ?, ?, ?)",
            ("global", "broken", "{not json", time.time()),
        )
        assert test_db.get_setting("global", "broken", []) == []

    def test_set_setting_rejects_unserializable(self, test_db):
        """Test non-JSON values raise TypeError."""
        with pytest.raises(TypeError):
            test_db.set_setting("global", "bad", {"value": object()})


class TestReminders:
    """Tests for reminder operations."""

    def _add(self, db, due_at, author_id=123, remindee="<@123>", content="take out the trash"):
        return db.add_reminder(
            channel_id=555,
            author_id=author_id,
            remindee=remindee,
            content=content,
            due_at=due_at,
            guild_id=987654321,
        )

    def test_add_reminder_returns_id(self, test_db):
        """Test each reminder gets a new id."""
        first = self._add(test_db, time.time() + 60)
        second = self._add(test_db, time.time() + 120)
        assert second > first

    def test_get_due_reminders(self, test_db):
        """Test only reminders past their due time are returned."""
        now = time.time()
        due_id = self._add(test_db, now - 10)
        self._add(test_db, now + 3600)

        due = test_db.get_due_reminders(now)
        assert [row["id"] for row in due] == [due_id]
        assert due[0]["content"] == "take out the trash"
        assert due[0]["guild_id"] == 987654321

    def test_due_reminders_ordered(self, test_db):
        """Test due reminders come back oldest first."""
        now = time.time()
        later = self._add(test_db, now - 10)
        earlier = self._add(test_db, now - 100)

        assert [row["id"] for row in test_db.get_due_reminders(now)] == [earlier, later]

    def test_mark_delivered(self, test_db):
        """Test delivered reminders are not returned again."""
        now = time.time()
        reminder_id = self._add(test_db, now - 10)

        test_db.mark_reminder_delivered(reminder_id)
        assert test_db.get_due_reminders(now) == []

    def test_get_pending_reminders(self, test_db):
        """Test pending reminders are filtered by author."""
        now = time.time()
        mine = self._add(test_db, now + 60, author_id=1)
        self._add(test_db, now + 60, author_id=2)
        delivered = self._add(test_db, now + 30, author_id=1)
        test_db.mark_reminder_delivered(delivered)

        assert [row["id"] for row in test_db.get_pending_reminders(1)] == [mine]

    def test_cancel_reminder(self, test_db):
        """Test an author can cancel their own reminder."""
        reminder_id = self._add(test_db, time.time() + 60, author_id=1)
        assert test_db.cancel_reminder(reminder_id, 1) is True
        assert test_db.get_pending_reminders(1) == []

    def test_cancel_reminder_wrong_author(self, test_db):
        """Test another user cannot cancel the reminder."""
        reminder_id = self._add(test_db, time.time() + 60, author_id=1)
        assert test_db.cancel_reminder(reminder_id, 2) is False
        assert len(test_db.get_pending_reminders(1)) == 1

    def test_cancel_delivered_reminder(self, test_db):
        """Test a delivered reminder cannot be cancelled."""
        reminder_id = self._add(test_db, time.time() - 60, author_id=1)
        test_db.mark_reminder_delivered(reminder_id)
        assert test_db.cancel_reminder(reminder_id, 1) is False
