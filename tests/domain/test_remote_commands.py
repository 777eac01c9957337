"""Tests for remote command construction."""

from bindeploy.domain.services import remote_commands


class TestQuotePath:
    def test_plain_path_unquoted(self):
        assert remote_commands.quote_path("/srv/app") == "/srv/app"

    def test_spaces_quoted(self):
        assert remote_commands.quote_path("/srv/my app") == "'/srv/my app'"

    def test_injection_quoted(self):
        assert remote_commands.quote_path("/srv/$(reboot)") == "'/srv/$(reboot)'"

    def test_home_prefix_kept_outside_quotes(self):
        assert remote_commands.quote_path("~/my app") == "~/'my app'"

    def test_bare_home(self):
        assert remote_commands.quote_path("~") == "~"
        assert remote_commands.quote_path("~/") == "~/"


class TestCommands:
    def test_make_dirs(self):
        assert remote_commands.make_dirs("/srv/app/versions") == "mkdir -p /srv/app/versions"

    def test_remove_link(self):
        assert remote_commands.remove_link("/srv/app/app") == "rm -f /srv/app/app"

    def test_create_link(self):
        assert (
            remote_commands.create_link("/srv/app/versions/v1", "/srv/app/app")
            == "ln -s /srv/app/versions/v1 /srv/app/app"
        )

    def test_create_link_forced(self):
        assert remote_commands.create_link_forced("/a", "/b") == "ln -sfn /a /b"

    def test_rename_over(self):
        assert remote_commands.rename_over("/b.tmp", "/b") == "mv -Tf /b.tmp /b"

    def test_make_executable(self):
        assert remote_commands.make_executable("/srv/app/app") == "chmod +x /srv/app/app"

    def test_detached(self):
        assert (
            remote_commands.detached("systemctl restart app")
            == "nohup sh -c 'systemctl restart app' </dev/null"
        )

    def test_detached_quotes_inner_quotes(self):
        cmd = remote_commands.detached("echo 'hi'")
        assert cmd.startswith("nohup sh -c ")
        assert cmd.endswith(" </dev/null")
        assert "'\"'\"'" in cmd
