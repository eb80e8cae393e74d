"""Tests for ContextVar-based render configuration."""

import threading

import pytest

from chatmark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_render_config()


class TestRenderConfig:
    def test_defaults(self) -> None:
        config = RenderConfig()
        assert config.highlight is False
        assert config.code_label == "Code"
        assert config.pad_table_rows is False
        assert config.text_transformer is None

    def test_frozen(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.highlight = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = RenderConfig.from_dict({"code_label": "Query", "theme": "dark"})
        assert config.code_label == "Query"
        assert config.highlight is False

    def test_from_empty_dict(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()


class TestContextVar:
    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_reset(self) -> None:
        set_render_config(RenderConfig(highlight=True))
        assert get_render_config().highlight is True
        reset_render_config()
        assert get_render_config().highlight is False

    def test_context_manager_restores(self) -> None:
        outer = RenderConfig(code_label="Outer")
        set_render_config(outer)
        with render_config_context(RenderConfig(code_label="Inner")) as inner:
            assert get_render_config() is inner
        assert get_render_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(code_label="Inner")):
                raise RuntimeError("boom")
        assert get_render_config().code_label == "Code"

    def test_threads_do_not_share_config(self) -> None:
        seen: dict[str, str] = {}

        def worker(label: str) -> None:
            with render_config_context(RenderConfig(code_label=label)):
                barrier.wait()
                seen[label] = get_render_config().code_label

        barrier = threading.Barrier(2)
        threads = [threading.Thread(target=worker, args=(label,)) for label in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"a": "a", "b": "b"}
        assert get_render_config().code_label == "Code"
