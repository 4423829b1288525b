"""Checks for required command-line options and environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any


class RequiredArgsError(Exception):
    """A required argument or environment variable was not given."""


def string_flag_required(options: Mapping[str, Any], flag_name: str) -> str:
    """Return the value of the string option ``flag_name``, raising if it is empty or missing."""
    value = options.get(flag_name)
    if value is None or value == "":
        raise RequiredArgsError(f"--{flag_name} is required")
    return str(value)


def environment_var_required(var_name: str) -> str:
    """Return the environment variable ``var_name``, raising if it is empty or unset."""
    value = os.environ.get(var_name, "")
    if value == "":
        raise RequiredArgsError(f"The environment variable {var_name} is required to be set")
    return value