"""Tests for msh.shell.prompt.make_prompt."""

from __future__ import annotations

from msh.line.utils import visible_length
from msh.shell.prompt import make_prompt
from msh.shell.settings import PromptSettings
from msh.shell.style import C_PATH, C_PROMPT


def test_plain_prompt() -> None:
    assert make_prompt(PromptSettings(color=False), cwd="/tmp") == "[/tmp] $ "


def test_colored_prompt_has_same_visible_length() -> None:
    prompt = make_prompt(PromptSettings(), cwd="/tmp")
    assert C_PATH in prompt
    assert C_PROMPT in prompt
    assert visible_length(prompt) == len("[/tmp] $ ")


def test_custom_symbol() -> None:
    assert make_prompt(PromptSettings(color=False, symbol="%"), cwd="/") == "[/] % "


def test_follows_working_directory(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert make_prompt(PromptSettings(color=False)) == f"[{tmp_path.resolve()}] $ "
