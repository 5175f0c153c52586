"""User profile: unauthenticated local family member (id, name, avatar color, created)."""


class User:
    def __init__(self, id: str = "", name: str = "", color: str = "", created: str = ""):
        self.id = id
        self.name = name
        self.color = color
        self.created = created

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return User(d.get("id", ""), d.get("name", ""), d.get("color", ""), d.get("created", ""))

    def to_dict(self):
        return {"id": self.id, "name": self.name, "color": self.color, "created": self.created}
