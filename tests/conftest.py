"""Shared test fixtures.

Provides a temporary git repository and a scripted chat model standing in
for the LLM provider.
"""

import shutil
import subprocess
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from langchain_core.messages import AIMessageChunk, BaseMessage


def run_git(repo_path: Path, *args: str) -> str:
    """Run a git command with a throwaway identity."""
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test User",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Git repository with one commit and a clean working tree."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    run_git(repo, "init", "-q")

    (repo / "app.py").write_text("a\nb\nc\n", encoding="utf-8")
    (repo / "old.py").write_text("x\ny\n", encoding="utf-8")
    (repo / "bun.lock").write_text("lock 1\n", encoding="utf-8")
    (repo / "dist").mkdir()
    (repo / "dist" / "bundle.js").write_text("bundle 1\n", encoding="utf-8")
    (repo / "pkg").mkdir()
    (repo / "pkg" / "mod.py").write_text("value = 1\n", encoding="utf-8")

    run_git(repo, "add", "-A")
    run_git(repo, "commit", "-q", "-m", "initial")
    return repo


class FakeChatModel:
    """Chat model replaying one scripted response per step.

    Each response is a list of chunks. An exception in the list is raised
    when the stream reaches it.
    """

    def __init__(self, responses: list[list[Any]]) -> None:
        self._responses = list(responses)
        self.bound_tools: list[Any] | None = None
        self.calls: list[list[BaseMessage]] = []

    def bind_tools(self, tools: list[Any]) -> "FakeChatModel":
        self.bound_tools = list(tools)
        return self

    def stream(self, messages: list[BaseMessage]) -> Iterator[AIMessageChunk]:
        self.calls.append(list(messages))
        for item in self._responses.pop(0):
            if isinstance(item, Exception):
                raise item
            yield item
