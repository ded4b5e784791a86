import hashlib
import json
from types import SimpleNamespace

import pytest

from subnetconf.ids import encode_cb58


def make_id(seed):
    """Deterministic valid CB58 subnet ID derived from seed."""
    return encode_cb58(hashlib.sha256(str(seed).encode()).digest())


@pytest.fixture()
def subnet_ids():
    return [make_id(i) for i in range(4)]


@pytest.fixture()
def config_env(tmp_path):
    """Provide original/new config paths under a temporary directory."""
    original = tmp_path / "config.json"
    new = tmp_path / "out" / "config.json"

    def write_config(obj):
        original.write_text(json.dumps(obj, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        return original

    def read_new():
        return json.loads(new.read_text(encoding="utf-8"))

    return SimpleNamespace(
        original=original,
        new=new,
        write_config=write_config,
        read_new=read_new,
    )
