"""Tests for RemoteTarget value object."""

import pytest
from unittest.mock import patch
from bindeploy.domain.value_objects.remote_target import RemoteTarget


class TestRemoteTarget:
    def test_custom_values(self):
        target = RemoteTarget(host="10.0.0.1", user="deploy", port=2222)
        assert target.host == "10.0.0.1"
        assert target.user == "deploy"
        assert target.port == 2222

    def test_str_default_port(self):
        target = RemoteTarget(host="web1.example.com", user="admin")
        assert str(target) == "admin@web1.example.com"

    def test_str_custom_port(self):
        target = RemoteTarget(host="web1.example.com", user="admin", port=2222)
        assert str(target) == "admin@web1.example.com:2222"

    def test_str_ipv6(self):
        target = RemoteTarget(host="::1", user="root", port=2222)
        assert str(target) == "root@[::1]:2222"

    def test_frozen(self):
        target = RemoteTarget(host="example.com", user="root")
        with pytest.raises(AttributeError):
            target.host = "other.com"


class TestRemoteTargetValidation:
    def test_empty_host_rejected(self):
        with pytest.raises(ValueError, match="Invalid hostname"):
            RemoteTarget(host="", user="root")

    def test_empty_user_rejected(self):
        with pytest.raises(ValueError, match="user cannot be empty"):
            RemoteTarget(host="example.com", user="")

    def test_port_out_of_range(self):
        with pytest.raises(ValueError, match="Port must be"):
            RemoteTarget(host="example.com", user="root", port=70000)

    def test_hostname_with_shell_chars_rejected(self):
        with pytest.raises(ValueError, match="Invalid hostname"):
            RemoteTarget(host="host;reboot", user="root")


class TestRemoteTargetParse:
    def test_user_at_host(self):
        target = RemoteTarget.parse("deploy@server.example.com")
        assert target == RemoteTarget("server.example.com", "deploy", 22)

    def test_user_at_host_port(self):
        target = RemoteTarget.parse("deploy@10.0.0.5:2222")
        assert target == RemoteTarget("10.0.0.5", "deploy", 2222)

    def test_ipv6_with_port(self):
        target = RemoteTarget.parse("root@[fe80::1]:2200")
        assert target.host == "fe80::1"
        assert target.port == 2200

    def test_ipv6_without_port(self):
        target = RemoteTarget.parse("root@[::1]")
        assert target.host == "::1"
        assert target.port == 22

    def test_bare_host_uses_local_user(self):
        with patch(
            "bindeploy.domain.value_objects.remote_target.getpass.getuser",
            return_value="alice",
        ):
            target = RemoteTarget.parse("server")
        assert target.user == "alice"
        assert target.host == "server"

    def test_unterminated_bracket(self):
        with pytest.raises(ValueError, match="Unterminated IPv6"):
            RemoteTarget.parse("root@[::1")

    def test_bad_port(self):
        with pytest.raises(ValueError, match="Invalid port"):
            RemoteTarget.parse("root@host:ssh")

    def test_empty(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            RemoteTarget.parse("  ")
