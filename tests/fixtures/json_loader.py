import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Request payloads shared by the API tests (fixtures/test_data.json)"""

    __test__ = False

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get_copy(cls, key: str) -> Any:
        """Deep copy, so tests can edit payloads freely"""
        if key not in cls.load():
            raise KeyError(f"No test payload named {key!r}")
        return copy.deepcopy(cls.load()[key])
