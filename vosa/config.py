"""Configuration for OS implementations.

Provides configuration dataclasses and the connect_os factory function for
choosing an OS implementation (virtual or real).
"""

from dataclasses import dataclass
from typing import Literal


@dataclass
class VirtualOSConfig:
    """Configuration for the virtual (in-memory) OS.

    Attributes:
        type: Always "virtual".
        temp_dir: Absolute path of the temp root (default for mkdir_temp).
        home_dir: Absolute path of the home directory (also the initial
            working directory).
        cache_dir_name: Name of the cache directory under home.
        config_dir_name: Name of the config directory under home.
        temp_suffix_limit: Highest numeric suffix mkdir_temp will try
            before giving up.
    """

    type: Literal["virtual"] = "virtual"
    temp_dir: str = "/temp"
    home_dir: str = "/home"
    cache_dir_name: str = ".cache"
    config_dir_name: str = ".config"
    temp_suffix_limit: int = 2**32 - 1


@dataclass
class RealOSConfig:
    """Configuration for the real (host) OS.

    Attributes:
        type: Always "real".
    """

    type: Literal["real"] = "real"


# Type alias for all OS configs
OSConfig = VirtualOSConfig | RealOSConfig


def connect_os(
    type: Literal["virtual", "real"] = "virtual",
    **kwargs,
) -> OSConfig:
    """Configure OS access.

    Args:
        type: OS type.
            - "virtual": In-memory filesystem and streams. Nothing touches
                        the host.
            - "real": Pass-through to the host OS. Takes no options.
        **kwargs: Additional configuration for the OS type.
            For type="virtual":
                - temp_dir (str): Absolute temp root (default "/temp").
                - home_dir (str): Absolute home directory (default "/home").
                - cache_dir_name (str): Cache folder under home.
                - config_dir_name (str): Config folder under home.
                - temp_suffix_limit (int): mkdir_temp attempt cap.

    Returns:
        OSConfig for initialization.

    Examples:
        Virtual OS:
        >>> connect_os(type="virtual", home_dir="/Users/me")
        VirtualOSConfig(type='virtual', temp_dir='/temp', home_dir='/Users/me', cache_dir_name='.cache', config_dir_name='.config', temp_suffix_limit=4294967295)

        Real OS:
        >>> connect_os(type="real")
        RealOSConfig(type='real')
    """
    if type == "virtual":
        config = VirtualOSConfig()
        for key in ("temp_dir", "home_dir", "cache_dir_name", "config_dir_name"):
            if key in kwargs:
                setattr(config, key, kwargs.pop(key))
        if "temp_suffix_limit" in kwargs:
            config.temp_suffix_limit = kwargs.pop("temp_suffix_limit")
        if kwargs:
            raise ValueError(
                f"Unexpected arguments for virtual os: {list(kwargs.keys())}"
            )

        for key in ("temp_dir", "home_dir"):
            if not getattr(config, key).startswith("/"):
                raise ValueError(f"{key} must be an absolute path")
        for key in ("cache_dir_name", "config_dir_name"):
            name = getattr(config, key)
            if not name or "/" in name:
                raise ValueError(f"{key} must be a single path component")
        if config.temp_suffix_limit < 1:
            raise ValueError("temp_suffix_limit must be positive")

        return config

    elif type == "real":
        if kwargs:
            raise ValueError(
                f"Unexpected arguments for real os: {list(kwargs.keys())}"
            )
        return RealOSConfig()

    else:
        raise ValueError(f"Unsupported os type: {type}. Use 'virtual' or 'real'.")
