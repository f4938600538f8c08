"""
KyuuBot - Logger Tests
======================

Tests for TreeLogger output files and log retention.
"""

from datetime import datetime, timedelta

from kyuubot.core.logger import LOG_RETENTION_DAYS, NY_TZ, TreeLogger


class TestTreeLogger:
    """Tests for TreeLogger."""

    def test_tree_written_with_branches(self, tmp_path):
        log = TreeLogger(tmp_path)
        log.tree("List Updated", [("List", "tag"), ("Entries", "4")], emoji="📝")

        lines = log.log_file.read_text(encoding="utf-8").splitlines()
        assert lines[-3].endswith("📝 List Updated")
        assert lines[-2] == "  ├─ List: tag"
        assert lines[-1] == "  └─ Entries: 4"

    def test_errors_copied_to_error_file(self, tmp_path):
        log = TreeLogger(tmp_path)
        log.info("fine")
        log.error("Broken", [("Error", "boom")])

        errors = log.error_file.read_text(encoding="utf-8")
        assert "❌ Broken" in errors
        assert "└─ Error: boom" in errors
        assert "fine" not in errors

    def test_old_folders_pruned(self, tmp_path):
        """Test dated folders past retention are removed and undated ones kept."""
        today = datetime.now(NY_TZ).date()
        old = tmp_path / (today - timedelta(days=LOG_RETENTION_DAYS + 1)).isoformat()
        recent = tmp_path / (today - timedelta(days=1)).isoformat()
        for folder in (old, recent, tmp_path / "errors"):
            folder.mkdir()
            (folder / "x.log").write_text("x")

        TreeLogger(tmp_path)

        assert not old.exists()
        assert recent.exists()
        assert (tmp_path / "errors").exists()
