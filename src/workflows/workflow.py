from abc import ABC, abstractmethod
from typing import Any, Dict


class Workflow(ABC):
    @staticmethod
    def _require_dict(payload: Any) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        return payload

    @abstractmethod
    def run(self, input: Dict) -> Any:
        pass
