"""Show environment variables."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping


def environ_lines(env: Mapping[str, str] | None = None) -> list[str]:
    """The environment as 'name=value' lines."""
    env = os.environ if env is None else env
    return [f"{key}={value}" for key, value in env.items()]


def get_lang(env: Mapping[str, str] | None = None) -> str | None:
    """The LANG setting, or None when it is not set."""
    env = os.environ if env is None else env
    return env.get("LANG")


def main(argv: list[str] | None = None) -> int:
    for line in environ_lines():
        print(line)
    return 0


def main_lang(argv: list[str] | None = None) -> int:
    lang = get_lang()
    if lang is not None:
        print(lang)
    return 0