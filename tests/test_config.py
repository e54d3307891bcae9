"""Tests for configuration and logging helpers."""

import logging
from collections.abc import Iterator

import pytest

import pyoseq as ps


@pytest.fixture
def restore_config() -> Iterator[None]:
    """Restore the default configuration after a test."""
    yield
    ps.set_config(max_repr_items=20, repr_width=80)


@pytest.mark.usefixtures("restore_config")
def test_set_config_changes_repr() -> None:
    """Test max_repr_items is used by `Seq.__repr__`."""
    ps.set_config(max_repr_items=3)
    assert ps.get_config().max_repr_items == 3
    assert repr(ps.Seq.of(range(5))) == "Seq(0, 1, 2, ...)"


@pytest.mark.usefixtures("restore_config")
def test_repr_width_truncates_elements() -> None:
    """Test long elements are shortened."""
    ps.set_config(repr_width=10)
    rendered = repr(ps.Seq.of(["x" * 50]))
    assert len(rendered) < 30
    assert "..." in rendered


@pytest.mark.parametrize("value", [0, -1, 1.5, True])
def test_set_config_validates(value: object) -> None:
    """Test invalid values are rejected, and the previous config kept."""
    with pytest.raises(ValueError, match="max_repr_items"):
        ps.set_config(max_repr_items=value)  # type: ignore[arg-type]
    assert ps.get_config().max_repr_items == 20


def test_set_config_unknown_field() -> None:
    """Test unknown fields raise TypeError."""
    with pytest.raises(TypeError):
        ps.set_config(colour=1)


def test_setup_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test setup_logger reads the level from the environment."""
    monkeypatch.setenv("PYOSEQ_LOG_LEVEL", "debug")
    logger = ps.setup_logger()
    try:
        assert logger.name == "pyoseq"
        assert logger.level == logging.DEBUG
        ps.setup_logger()
        stream_handlers = [
            h for h in logger.handlers if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, logging.StreamHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
