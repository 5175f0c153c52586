"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from recipebox.domain.ShoppingList import CATEGORIES, DEFAULT_CATEGORY
from recipebox.utilities.constants import MAX_RATING, MEAL_SLOTS, MIN_RATING


def _clean_lines(v):
    """Strip lines and drop the empty ones."""
    return [line.strip() for line in v if line and line.strip()]


class RecipeInput(BaseModel):
    """Schema for a new recipe. Field names are the stored (camelCase) ones."""
    name: str = Field(..., min_length=1, max_length=200)
    prepTime: int = Field(0, ge=0)
    cookTime: int = Field(0, ge=0)
    servings: int = Field(1, ge=1)
    categories: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    authorId: str = ""
    authorName: str = ""
    photoUrl: str = ""
    notes: str = ""

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('categories', 'ingredients', 'instructions')
    @classmethod
    def strip_lines(cls, v):
        return _clean_lines(v)


class RecipeUpdateInput(BaseModel):
    """Partial update; only the fields sent with a value are applied."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    prepTime: Optional[int] = Field(None, ge=0)
    cookTime: Optional[int] = Field(None, ge=0)
    servings: Optional[int] = Field(None, ge=1)
    categories: Optional[List[str]] = None
    ingredients: Optional[List[str]] = None
    instructions: Optional[List[str]] = None
    photoUrl: Optional[str] = None
    notes: Optional[str] = None
    lastMade: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is None or not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('categories', 'ingredients', 'instructions')
    @classmethod
    def strip_lines(cls, v):
        return _clean_lines(v) if v is not None else v


class RatingInput(BaseModel):
    userId: str = Field(..., min_length=1)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)


class CommentInput(BaseModel):
    userId: str = Field(..., min_length=1)
    userName: str = ""
    text: str = Field(..., min_length=1)

    @field_validator('text')
    @classmethod
    def validate_text(cls, v):
        if not v.strip():
            raise ValueError('Comment cannot be empty')
        return v.strip()


class PhotoInput(BaseModel):
    userId: str = Field(..., min_length=1)
    userName: str = ""
    url: str = Field(..., min_length=1)


class UserInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class CurrentUserInput(BaseModel):
    userId: str = Field(..., min_length=1)


class SlotAssignmentInput(BaseModel):
    """Schema for meal plan slot updates; recipeId null clears the slot."""
    date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    slot: str = Field(..., pattern=r'^(' + '|'.join(MEAL_SLOTS) + r')$')
    recipeId: Optional[str] = None


class CustomItemInput(BaseModel):
    """Schema for a hand-typed shopping list line."""
    text: str = Field(..., min_length=1, max_length=200)
    category: str = DEFAULT_CATEGORY

    @field_validator('text')
    @classmethod
    def validate_text(cls, v):
        if not v.strip():
            raise ValueError('Item cannot be empty')
        return v.strip()

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if v not in CATEGORIES:
            raise ValueError(f"Unknown category; expected one of {', '.join(CATEGORIES)}")
        return v
