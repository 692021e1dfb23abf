"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

SessionWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("SESSIONLINK_SESSIONS_ROOT", raising=False)
    return config_home


def _write_session(
    folder: Path,
    file_name: str,
    first_message: str = "hello",
    messages: int = 1,
    name: str | None = None,
) -> Path:
    """Write a minimal session file in the agent's JSON Lines format."""
    records: list[dict[str, object]] = [
        {"type": "session", "id": file_name.removesuffix(".jsonl"), "cwd": "/work/project"},
    ]
    for index in range(messages):
        role = "user" if index % 2 == 0 else "assistant"
        text = first_message if index == 0 else f"reply {index}"
        content = [{"type": "text", "text": text}]
        records.append({"type": "message", "message": {"role": role, "content": content}})
    if name is not None:
        records.append({"type": "session_info", "name": name})

    folder.mkdir(parents=True, exist_ok=True)
    path = folder / file_name
    path.write_text("\n".join(json.dumps(r) for r in records) + "\n")
    return path


@pytest.fixture
def write_session() -> SessionWriter:
    """Factory writing session files: write_session(folder, "a.jsonl", ...)."""
    return _write_session
