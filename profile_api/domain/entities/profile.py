from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ProfileEntity:
    email: str
    name: str
    stack: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
