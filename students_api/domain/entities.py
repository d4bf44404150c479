from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Identity:
    username: str
    role: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Student:
    id: int
    name: str
    age: int | float
    email: str
    is_active: bool

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        return cls(
            id=data["id"],
            name=data["name"],
            age=data["age"],
            email=data["email"],
            is_active=data["isActive"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "email": self.email,
            "isActive": self.is_active,
        }
