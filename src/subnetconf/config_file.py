# -*- coding: utf-8 -*-
"""
노드 설정 파일 로드/저장
- JSON: 키 순서 유지, 정렬 없이 저장하여 건드리지 않은 필드는 그대로
- TOML: tomlkit으로 주석/서식 보존
- 저장은 같은 디렉터리의 임시 파일에 쓴 뒤 os.replace (원본은 덮어쓰지 않음)
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import tomlkit
from tomlkit.exceptions import TOMLKitError

from subnetconf.errors import ConfigLoadError, ConfigSaveError

TRACKED_SUBNETS_KEY = "tracked_subnets"


def _is_toml(path: Path) -> bool:
    return path.suffix.lower() == ".toml"


class ConfigDocument:
    """A loaded configuration; only tracked_subnets is ever modified."""

    def __init__(self, data, fmt: str = "json"):
        self.data = data
        self.format = fmt

    @property
    def tracked_subnets(self) -> Optional[str]:
        value = self.data.get(TRACKED_SUBNETS_KEY)
        return None if value is None else str(value)

    @tracked_subnets.setter
    def tracked_subnets(self, value: Optional[str]) -> None:
        if value is None:
            if TRACKED_SUBNETS_KEY in self.data:
                del self.data[TRACKED_SUBNETS_KEY]
        else:
            self.data[TRACKED_SUBNETS_KEY] = value

    def dumps(self) -> str:
        if self.format == "toml":
            return tomlkit.dumps(self.data)
        return json.dumps(self.data, ensure_ascii=False, indent=2) + "\n"


def load_config(path: Union[str, Path]) -> ConfigDocument:
    path = Path(os.path.expanduser(str(path)))
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(path, exc) from exc

    if _is_toml(path):
        try:
            data = tomlkit.parse(text)
        except TOMLKitError as exc:
            raise ConfigLoadError(path, exc) from exc
        doc = ConfigDocument(data, "toml")
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(path, exc) from exc
        if not isinstance(data, dict):
            raise ConfigLoadError(path, detail=f"top-level JSON value must be an object, got {type(data).__name__}")
        doc = ConfigDocument(data, "json")

    value = doc.data.get(TRACKED_SUBNETS_KEY)
    if value is not None and not isinstance(value, str):
        raise ConfigLoadError(path, detail=f"'{TRACKED_SUBNETS_KEY}' must be a string, got {type(value).__name__}")
    return doc


def _default_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_config(doc: ConfigDocument, path: Union[str, Path]) -> Path:
    path = Path(os.path.expanduser(str(path)))
    tmp_name = None
    try:
        text = doc.dumps()
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile("w", delete=False, dir=str(path.parent), encoding="utf-8") as tf:
            tmp_name = tf.name
            tf.write(text)
        # NamedTemporaryFile is always 0600
        os.chmod(tmp_name, _default_mode())
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, UnicodeError, ValueError) as exc:
        raise ConfigSaveError(path, exc) from exc
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    return path
