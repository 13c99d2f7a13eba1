# mail_storage_api/infrastructure/storage/naming.py
from __future__ import annotations

import random
import time
from typing import Callable
from uuid import uuid4

StoredNameGenerator = Callable[[str], str]


def client_basename(original_name: str) -> str:
    # parsers multipart descartam o caminho enviado pelo cliente (ex.: C:\tmp\a.pdf)
    return original_name.replace("\\", "/").rsplit("/", 1)[-1]


def timestamp_stored_name(original_name: str) -> str:
    """
    `<epoch ms>-<random 0..1e9>-<original>`.

    Not collision-proof: two uploads of the same name in the same
    millisecond with the same random draw overwrite each other.
    """
    now_ms = int(time.time() * 1000)
    return f"{now_ms}-{random.randint(0, 10**9)}-{client_basename(original_name)}"


def uuid_stored_name(original_name: str) -> str:
    return f"{uuid4().hex}-{client_basename(original_name)}"


STORED_NAME_STRATEGIES: dict[str, StoredNameGenerator] = {
    "timestamp": timestamp_stored_name,
    "uuid": uuid_stored_name,
}
