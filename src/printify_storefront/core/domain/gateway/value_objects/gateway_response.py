from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    payload: Any = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status_code, "body": self.payload}
