"""Tests for value objects: ContentDigest, CommitIdentifier, RemoteVersionName, RemoteLayout."""

import pytest
from bindeploy.domain.value_objects.commit_id import CommitIdentifier
from bindeploy.domain.value_objects.content_digest import ContentDigest
from bindeploy.domain.value_objects.remote_layout import RemoteLayout
from bindeploy.domain.value_objects.segments import is_safe_segment
from bindeploy.domain.value_objects.version_name import RemoteVersionName


class TestContentDigest:
    def test_valid_digest(self):
        d = ContentDigest("deadbeef")
        assert str(d) == "deadbeef"

    def test_valid_sha256(self):
        value = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        assert ContentDigest(value).value == value

    def test_invalid_too_short(self):
        with pytest.raises(ValueError, match="Invalid content digest"):
            ContentDigest("abc")

    def test_invalid_uppercase(self):
        with pytest.raises(ValueError, match="Invalid content digest"):
            ContentDigest("DEADBEEF")

    def test_invalid_non_hex(self):
        with pytest.raises(ValueError, match="Invalid content digest"):
            ContentDigest("deadbeeg")

    def test_frozen(self):
        d = ContentDigest("deadbeef")
        with pytest.raises(AttributeError):
            d.value = "cafebabe"


class TestCommitIdentifier:
    def test_valid(self):
        c = CommitIdentifier("abc123")
        assert str(c) == "abc123"

    def test_from_output_strips_newline(self):
        c = CommitIdentifier.from_output("0123456789abcdef\n")
        assert c.value == "0123456789abcdef"

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            CommitIdentifier("")

    def test_path_separator_rejected(self):
        with pytest.raises(ValueError, match="not a safe path segment"):
            CommitIdentifier("abc/def")

    def test_shell_metacharacters_rejected(self):
        with pytest.raises(ValueError, match="not a safe path segment"):
            CommitIdentifier("abc;rm -rf /")


class TestSegments:
    @pytest.mark.parametrize("value", ["app", "my-app", "app_2", "app.v1", "c++"])
    def test_safe(self, value):
        assert is_safe_segment(value)

    @pytest.mark.parametrize("value", ["", "-app", ".hidden", "a/b", "a b", "..", "$(x)"])
    def test_unsafe(self, value):
        assert not is_safe_segment(value)


class TestRemoteVersionName:
    def _name(self, **overrides):
        fields = dict(
            binary_name="app",
            timestamp=1700000000,
            commit=CommitIdentifier("abc123"),
            digest=ContentDigest("deadbeef"),
        )
        fields.update(overrides)
        return RemoteVersionName(**fields)

    def test_str_format(self):
        assert str(self._name()) == "app-1700000000-abc123-deadbeef"

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            self._name(timestamp=-1)

    def test_unsafe_binary_name_rejected(self):
        with pytest.raises(ValueError, match="Binary name"):
            self._name(binary_name="../app")

    def test_parse(self):
        name = RemoteVersionName.parse("app-1700000000-abc123-deadbeef", "app")
        assert name == self._name()

    def test_parse_hyphenated_binary_name(self):
        name = RemoteVersionName.parse(
            "my-app-1700000000-abc123-deadbeef", "my-app"
        )
        assert name.binary_name == "my-app"
        assert name.timestamp == 1700000000
        assert str(name.commit) == "abc123"
        assert str(name.digest) == "deadbeef"

    def test_parse_wrong_binary(self):
        with pytest.raises(ValueError, match="is not a version of"):
            RemoteVersionName.parse("app-1700000000-abc123-deadbeef", "other")

    def test_parse_malformed(self):
        with pytest.raises(ValueError, match="Malformed"):
            RemoteVersionName.parse("app-notatime-abc123-deadbeef", "app")

    def test_parse_missing_digest(self):
        with pytest.raises(ValueError, match="Malformed"):
            RemoteVersionName.parse("app-1700000000-abc123", "app")


class TestRemoteLayout:
    def _version(self):
        return RemoteVersionName(
            "example", 1700000000, CommitIdentifier("c1"), ContentDigest("deadbeef")
        )

    def test_paths(self):
        layout = RemoteLayout("/srv/example", "example")
        assert layout.versions_dir == "/srv/example/versions"
        assert layout.link_path == "/srv/example/example"
        assert (
            layout.artifact_path(self._version())
            == "/srv/example/versions/example-1700000000-c1-deadbeef"
        )

    def test_trailing_slash_normalised(self):
        layout = RemoteLayout("/srv/example/", "example")
        assert layout.versions_dir == "/srv/example/versions"
        assert "//" not in layout.artifact_path(self._version())

    def test_root_server_path(self):
        layout = RemoteLayout("/", "example")
        assert layout.versions_dir == "/versions"
        assert layout.link_path == "/example"

    def test_home_relative_path(self):
        layout = RemoteLayout("~/apps", "example")
        assert layout.link_path == "~/apps/example"

    def test_empty_server_path_rejected(self):
        with pytest.raises(ValueError, match="Server path cannot be empty"):
            RemoteLayout("", "example")

    def test_unsafe_binary_name_rejected(self):
        with pytest.raises(ValueError, match="Binary name"):
            RemoteLayout("/srv", "a/b")
