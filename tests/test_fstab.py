"""Tests for fstab entry composition and idempotent append."""

import pytest

from paperless_sshfs.config import SetupConfig
from paperless_sshfs.lib.fstab import already_contains, compose_entry, persist_entry

DEFAULT_LINE = (
    "sshfs#paperless@192.168.1.10:/srv/paperless_data /mnt/paperless_data fuse "
    "defaults,_netdev,allow_other,IdentityFile=/root/.ssh/id_rsa_paperless_share 0 0"
)


class TestComposeEntry:
    """Test compose_entry."""

    def test_defaults(self):
        assert compose_entry(SetupConfig()).render() == DEFAULT_LINE

    def test_overridden_values(self):
        cfg = SetupConfig(
            remote_user="docs",
            remote_host="nas.lan",
            remote_path="/tank/paperless",
            local_mount="/mnt/docs",
            ssh_key_path="/root/.ssh/nas",
        )
        assert compose_entry(cfg).render() == (
            "sshfs#docs@nas.lan:/tank/paperless /mnt/docs fuse "
            "defaults,_netdev,allow_other,IdentityFile=/root/.ssh/nas 0 0"
        )

    def test_fields(self):
        entry = compose_entry(SetupConfig())
        assert entry.fstype == "fuse"
        assert entry.dump == 0
        assert entry.passno == 0


class TestAlreadyContains:
    """Test already_contains exact line matching."""

    def test_present(self):
        assert already_contains(f"proc /proc proc defaults 0 0\n{DEFAULT_LINE}\n", DEFAULT_LINE)

    def test_present_without_trailing_newline(self):
        assert already_contains(DEFAULT_LINE, DEFAULT_LINE)

    def test_absent(self):
        assert not already_contains("proc /proc proc defaults 0 0\n", DEFAULT_LINE)

    def test_empty_table(self):
        assert not already_contains("", DEFAULT_LINE)

    def test_commented_out_line_does_not_count(self):
        assert not already_contains(f"#{DEFAULT_LINE}\n", DEFAULT_LINE)

    def test_semantically_equal_line_does_not_count(self):
        """Extra whitespace makes it a different line."""
        assert not already_contains(DEFAULT_LINE.replace(" fuse ", "  fuse ") + "\n", DEFAULT_LINE)


class TestPersistEntry:
    """Test persist_entry."""

    @pytest.fixture
    def table(self, tmp_path):
        p = tmp_path / "fstab"
        p.write_text("proc /proc proc defaults 0 0\n")
        return p

    def test_appends(self, table):
        assert persist_entry(DEFAULT_LINE, str(table)) is True
        assert table.read_text() == f"proc /proc proc defaults 0 0\n{DEFAULT_LINE}\n"

    def test_twice_yields_one_line(self, table):
        persist_entry(DEFAULT_LINE, str(table))
        assert persist_entry(DEFAULT_LINE, str(table)) is False
        assert table.read_text().splitlines().count(DEFAULT_LINE) == 1

    def test_backup_taken_before_append(self, table, tmp_path):
        original = table.read_text()
        persist_entry(DEFAULT_LINE, str(table))
        assert (tmp_path / "fstab.bak").read_text() == original

    def test_custom_backup_path(self, table, tmp_path):
        backup = tmp_path / "backups" / "fstab.orig"
        backup.parent.mkdir()
        persist_entry(DEFAULT_LINE, str(table), backup_path=str(backup))
        assert backup.exists()

    def test_no_backup_when_nothing_appended(self, table, tmp_path):
        table.write_text(f"{DEFAULT_LINE}\n")
        persist_entry(DEFAULT_LINE, str(table))
        assert not (tmp_path / "fstab.bak").exists()

    def test_adds_missing_newline(self, table):
        table.write_text("proc /proc proc defaults 0 0")
        persist_entry(DEFAULT_LINE, str(table))
        assert table.read_text() == f"proc /proc proc defaults 0 0\n{DEFAULT_LINE}\n"

    def test_missing_table_is_created_without_backup(self, tmp_path):
        table = tmp_path / "fstab"
        assert persist_entry(DEFAULT_LINE, str(table)) is True
        assert table.read_text() == f"{DEFAULT_LINE}\n"
        assert not (tmp_path / "fstab.bak").exists()

    def test_dry_run_leaves_files_alone(self, table, tmp_path):
        original = table.read_text()
        assert persist_entry(DEFAULT_LINE, str(table), dry_run=True) is True
        assert table.read_text() == original
        assert not (tmp_path / "fstab.bak").exists()
