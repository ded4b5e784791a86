# -*- coding: utf-8 -*-
"""Errors raised by subnetconf. Only the CLI turns them into exit messages."""

from pathlib import Path
from typing import Optional, Union


class SubnetConfError(Exception):
    pass


class InvalidIdentifier(SubnetConfError):
    def __init__(self, value: str, reason: str):
        super().__init__(f"invalid subnet id '{value}': {reason}")
        self.value = value
        self.reason = reason


class ConfigLoadError(SubnetConfError):
    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None, detail: str = ""):
        msg = detail or (str(cause) if cause is not None else "unknown error")
        super().__init__(f"failed to load configuration '{path}': {msg}")
        self.path = Path(path)
        self.cause = cause


class ConfigSaveError(SubnetConfError):
    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        msg = str(cause) if cause is not None else "unknown error"
        super().__init__(f"failed to save configuration '{path}': {msg}")
        self.path = Path(path)
        self.cause = cause
