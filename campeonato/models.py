from dataclasses import dataclass


@dataclass(frozen=True)
class Tournament:
    id: int
    name: str
    year: int

    def to_dict(self) -> dict:
        return {
            'ID': self.id,
            'Nome': self.name,
            'Ano': self.year
        }
