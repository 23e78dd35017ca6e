import json
from pathlib import Path

import pytest
import yaml


def _base_config() -> dict:
    return {
        "functions": [
            "Phi",
            {"name": "Fa", "arguments": ["y", "z"]},
            {"name": "f_PS", "arguments": ["w"]},
        ],
        "grid": {
            "x": [0.5, 1.0],
            "y": {"start": 0.5, "stop": 2.0, "step": 0.5},
            "z": 3.0,
            "w": [-1.0, 0.25, 1.0],
        },
        "output": {"file": "results.csv"},
        "processes": 1,
    }


@pytest.fixture
def base_config() -> dict:
    return _base_config()


@pytest.fixture
def write_config(tmp_path: Path):
    def write(config: dict, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        if path.suffix == ".json":
            path.write_text(json.dumps(config))
        else:
            path.write_text(yaml.safe_dump(config, sort_keys=False))
        return path

    return write
