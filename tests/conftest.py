# tests/conftest.py
from __future__ import annotations

import importlib
import logging
from typing import Any, Iterable, List

import pytest


# -------------------------
# Glyph engine stand-ins
# -------------------------
class FakeGlyphEngine:
    """Deterministic engine: returns a fixed block (or the text) and records calls."""

    def __init__(self, block: str | None = None, error: BaseException | None = None):
        self.block = block
        self.error = error
        self.calls: List[dict] = []

    def render(self, text, font="Slant", horizontal_layout="default",
               vertical_layout="default", width=80):
        self.calls.append(
            {
                "text": text,
                "font": font,
                "horizontal_layout": horizontal_layout,
                "vertical_layout": vertical_layout,
                "width": width,
            }
        )
        if self.error is not None:
            raise self.error
        return text if self.block is None else self.block


@pytest.fixture
def fake_engine() -> FakeGlyphEngine:
    return FakeGlyphEngine()


@pytest.fixture
def make_engine():
    def _factory(block: str | None = None, error: BaseException | None = None) -> FakeGlyphEngine:
        return FakeGlyphEngine(block=block, error=error)
    return _factory


# -------------------------
# PromptSession stub
# -------------------------
class SessionStub:
    def __init__(self, inputs: Iterable[Any]):
        self._inputs = list(inputs)
        self._idx = 0

    def prompt(self, _html):
        if self._idx >= len(self._inputs):
            raise EOFError()
        nxt = self._inputs[self._idx]
        self._idx += 1
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt


@pytest.fixture
def patch_prompt_session(monkeypatch):
    def _apply(inputs):
        import lettercli.interactive as sut
        monkeypatch.setattr(sut, "PromptSession", lambda **_kw: SessionStub(inputs), raising=True)
        return inputs
    return _apply


# -------------------------
# Logging isolation
# -------------------------
@pytest.fixture(autouse=True)
def reset_lettercli_logger():
    """Drop handlers attached during a test so later tests never log to a closed stream."""
    yield
    logger = logging.getLogger("lettercli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if hasattr(logger, "_lettercli_stream_handler_attached"):
        delattr(logger, "_lettercli_stream_handler_attached")
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# -------------------------
# Module fixtures
# -------------------------
@pytest.fixture(scope="session")
def render_mod():
    return importlib.import_module("lettercli.render")


@pytest.fixture(scope="session")
def cli_mod():
    return importlib.import_module("lettercli.cli")


@pytest.fixture(scope="session")
def interactive_mod():
    return importlib.import_module("lettercli.interactive")
