"""The interactive prompt line."""

from __future__ import annotations

import os
import socket


class PromptError(OSError):
    """Raised when the user, host or directory for the prompt is unknown."""


def format_prompt() -> str:
    """Return ``[user@ host cwd ]$ `` for the current session."""
    try:
        user_name = os.getlogin()
    except OSError as error:
        raise PromptError("getlogin() error") from error
    try:
        host_name = socket.gethostname()
    except OSError as error:
        raise PromptError("gethostname() error") from error
    try:
        current_dir = os.getcwd()
    except OSError as error:
        raise PromptError("getcwd() error") from error
    return f"[{user_name}@ {host_name} {current_dir} ]$ "