from __future__ import annotations

from types import SimpleNamespace

import pytest

from store_catalog import utils


def test_is_yes() -> None:
    assert utils.is_yes("Y")
    assert utils.is_yes("y")
    assert not utils.is_yes("yes")
    assert not utils.is_yes("N")
    assert not utils.is_yes(None)


def test_fold_lowercases() -> None:
    assert utils.fold("КиЇв ATB") == "київ atb"


def test_notify_desktop_passes_through(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(utils, "notification", SimpleNamespace(notify=lambda **kwargs: calls.append(kwargs)))

    assert utils.notify_desktop("Title", "Body")
    assert calls == [{"title": "Title", "message": "Body", "timeout": 5}]


def test_notify_desktop_without_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_backend(**kwargs):
        raise NotImplementedError("No usable implementation found!")

    monkeypatch.setattr(utils, "notification", SimpleNamespace(notify=no_backend))
    assert utils.notify_desktop("Title", "Body") is False
