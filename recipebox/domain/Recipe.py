"""Recipe domain entity: timings, servings, category tags, ingredient lines, steps, author."""
from typing import Any, Dict, List, Optional


class Recipe:
    def __init__(self, id: str = "", name: str = "", prep_time: int = 0, cook_time: int = 0,
                 servings: int = 1, categories: Optional[List[str]] = None,
                 ingredients: Optional[List[str]] = None, instructions: Optional[List[str]] = None,
                 author_id: str = "", author_name: str = "", date_added: str = "",
                 last_made: Optional[str] = None, photo_url: str = "", notes: str = ""):
        self.id = id
        self.name = name
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.servings = servings
        # Avoid mutable default arguments
        self.categories = categories[:] if categories else []
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.author_id = author_id
        self.author_name = author_name
        self.date_added = date_added
        self.last_made = last_made
        self.photo_url = photo_url
        self.notes = notes

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {self.total_time} min - Tags: {', '.join(self.categories)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        '''Builds a Recipe from its stored (camelCase) form. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe(
            id=d.get("id", ""),
            name=d.get("name", ""),
            prep_time=int(d.get("prepTime") or 0),
            cook_time=int(d.get("cookTime") or 0),
            servings=int(d.get("servings") or 1),
            categories=list(d.get("categories") or []),
            ingredients=list(d.get("ingredients") or []),
            instructions=list(d.get("instructions") or []),
            author_id=d.get("authorId", ""),
            author_name=d.get("authorName", ""),
            date_added=d.get("dateAdded", ""),
            last_made=d.get("lastMade"),
            photo_url=d.get("photoUrl", "") or "",
            notes=d.get("notes", "") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the Recipe to the dictionary persisted under recipes:<id>.'''
        return {
            "id": self.id,
            "name": self.name,
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "categories": self.categories,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "authorId": self.author_id,
            "authorName": self.author_name,
            "dateAdded": self.date_added,
            "lastMade": self.last_made,
            "photoUrl": self.photo_url,
            "notes": self.notes,
        }
