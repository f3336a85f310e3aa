"""Team data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Team:
    name: str
    seed: int

    def __str__(self):
        return f"({self.seed}) {self.name}"

    def to_dict(self) -> dict:
        return {"seed": self.seed, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Team | None":
        if data is None:
            return None
        return cls(name=str(data["name"]), seed=int(data["seed"]))
