import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from netanon.anonymization.anonymizer import DataAnonymizer
from netanon.anonymization.models import AnonymizationConfig


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host ANONYMIZE_* variables and any .env file out of Settings()."""
    for name in list(os.environ):
        if name.startswith("ANONYMIZE_") or name in ("LOG_LEVEL", "APP_ENV"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logger() -> Generator[None, None, None]:
    """Undo handler and level changes made by Log.configure()."""
    logger = logging.getLogger("netanon")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture()
def anonymizer() -> DataAnonymizer:
    """Structure-preserving engine with a fixed test salt."""
    return DataAnonymizer(AnonymizationConfig(hash_salt="test-salt"))


@pytest.fixture()
def sequential_anonymizer() -> DataAnonymizer:
    return DataAnonymizer(AnonymizationConfig(preserve_structure=False))


@pytest.fixture()
def vpc_document() -> dict[str, object]:
    """Nested VPC description with addresses, IDs and non-sensitive fields."""
    return {
        "vpc": {
            "id": "vpc-12345678",
            "cidr": "10.0.0.0/16",
            "instances": [
                {
                    "id": "i-1234567890abcdef0",
                    "privateIp": "10.0.1.100",
                    "publicIp": "203.0.113.1",
                }
            ],
        },
        "account": "123456789012",
    }
