"""Tests for simpleroute.config — RouterConfig frozen dataclass."""

import pytest

from simpleroute.config import RouterConfig
from simpleroute.errors import ConfigurationError


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.separator == "/"
        assert cfg.root_key == "root"
        assert cfg.log_steps is False

    def test_override(self) -> None:
        cfg = RouterConfig(separator=".", root_key="app", log_steps=True)

        assert cfg.separator == "."
        assert cfg.root_key == "app"
        assert cfg.log_steps is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.log_steps = True  # type: ignore[misc]

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="separator"):
            RouterConfig(separator="")

    def test_blank_root_key_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="root_key"):
            RouterConfig(root_key="  ")
