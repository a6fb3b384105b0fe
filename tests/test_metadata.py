"""Tests for package name and version helpers."""

from __future__ import annotations

import pytest

from toolbelt.metadata import get_package_name, packed_version, to_title_case


class TestPackedVersion:
    def test_release_version(self) -> None:
        assert packed_version("1.2.3") == (1 << 19) | (2 << 15) | (3 << 11)

    def test_numeric_pre_release(self) -> None:
        assert packed_version("0.1.0-5") == (1 << 15) | 5

    def test_non_numeric_pre_release_counts_as_zero(self) -> None:
        assert packed_version("1.2.3-rc.1") == packed_version("1.2.3")

    def test_fields_are_masked(self) -> None:
        assert packed_version("8.16.16-512") == 0

    def test_invalid_version_raises(self) -> None:
        with pytest.raises(ValueError):
            packed_version("not-a-version")

    def test_defaults_to_installed_version(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("toolbelt.metadata.dist_version", lambda name: "0.2.0")
        assert packed_version() == 2 << 15


class TestPackageName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("toolbelt", "Toolbelt"),
            ("my-app_name", "My App Name"),
            ("myCrate", "My Crate"),
        ],
    )
    def test_title_case(self, name: str, expected: str) -> None:
        assert to_title_case(name) == expected

    def test_without_version(self) -> None:
        assert get_package_name("my-app") == "My App"

    def test_with_version(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("toolbelt.metadata.dist_version", lambda name: "1.4.0")
        assert get_package_name("my-app", with_version=True) == "My App 1.4.0"
