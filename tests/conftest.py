"""Pytest configuration and fixtures for draftval tests."""

import logging
from pathlib import Path

import pytest

from draftval.core import FileRefResolver, RegistryRefResolver, ValidationOptions
from draftval.documents import load_document

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("draftval"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration directory at a per-test temporary path."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DRAFTVAL_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("DRAFTVAL_LOG_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return config_dir


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the JSON test documents."""
    return DATA_DIR


@pytest.fixture
def load_json(data_dir: Path):
    """Load a test document by file name."""

    def _load(name: str):
        return load_document(data_dir / name)

    return _load


@pytest.fixture
def file_options(data_dir: Path):
    """Options factory resolving external refs relative to the data dir."""

    def _options(schema, *, draft3_required: bool = False) -> ValidationOptions:
        return ValidationOptions(
            ref_resolver=FileRefResolver(data_dir),
            root=schema,
            draft3_required=draft3_required,
        )

    return _options


@pytest.fixture
def registry_resolver() -> RegistryRefResolver:
    """In-memory resolver with a couple of registered documents."""
    return RegistryRefResolver(
        {
            "tag.json": {"type": "string"},
            "defs.json": {
                "definitions": {
                    "count": {"type": "integer", "minimum": 0},
                    "alias": {"$ref": "#/definitions/count"},
                }
            },
        }
    )
