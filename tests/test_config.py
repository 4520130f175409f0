"""Tests for connect_os configuration."""

import pytest

from vosa import RealOSConfig, VirtualOSConfig, connect_os


class TestConnectOS:
    """Test connect_os()."""

    def test_virtual_defaults(self):
        config = connect_os()
        assert config == VirtualOSConfig()
        assert config.temp_dir == "/temp"
        assert config.home_dir == "/home"

    def test_virtual_options(self):
        config = connect_os(
            "virtual",
            temp_dir="/tmp",
            home_dir="/Users/me",
            cache_dir_name="Caches",
            temp_suffix_limit=10,
        )
        assert config.temp_dir == "/tmp"
        assert config.home_dir == "/Users/me"
        assert config.cache_dir_name == "Caches"
        assert config.config_dir_name == ".config"
        assert config.temp_suffix_limit == 10

    def test_real(self):
        assert connect_os(type="real") == RealOSConfig()

    def test_unexpected_virtual_argument(self):
        with pytest.raises(ValueError, match="Unexpected arguments for virtual os"):
            connect_os("virtual", root="/")

    def test_unexpected_real_argument(self):
        with pytest.raises(ValueError, match="Unexpected arguments for real os"):
            connect_os("real", home_dir="/home")

    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="Unsupported os type"):
            connect_os("cloud")

    @pytest.mark.parametrize("key", ["temp_dir", "home_dir"])
    def test_relative_dirs_rejected(self, key):
        with pytest.raises(ValueError, match=f"{key} must be an absolute path"):
            connect_os("virtual", **{key: "relative"})

    @pytest.mark.parametrize("name", ["", "a/b"])
    def test_dir_names_must_be_single_component(self, name):
        with pytest.raises(ValueError, match="single path component"):
            connect_os("virtual", cache_dir_name=name)

    def test_suffix_limit_must_be_positive(self):
        with pytest.raises(ValueError, match="must be positive"):
            connect_os("virtual", temp_suffix_limit=0)
