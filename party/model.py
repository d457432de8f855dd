import enum
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class Category(str, enum.Enum):
    NICE = "nice"
    NOT_NICE = "not_nice"

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """Parse a category from its value or name, e.g. ``"not-nice"`` or ``"NOT_NICE"``."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        for category in cls:
            if category.value == normalized:
                return category
        raise ValueError(f"Unknown visitor category: {value!r}")


class Visitor(BaseModel):
    """A party visitor. Immutable; identity is its fields."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"


class LookupFailure(Exception):
    """Raised by a VisitorLister when it cannot produce a category's visitors."""

    def __init__(self, category: Category, msg: str = ""):
        self.category = category
        self.msg = msg or f"could not list {category.value} visitors"
        super().__init__(category, self.msg)

    def __str__(self) -> str:
        return self.msg


class VisitorLister(ABC):
    @abstractmethod
    def list_visitors(self, category: Category) -> list[Visitor]:
        """
        Return the visitors of ``category`` in the order they should be greeted.

        Raises:
            LookupFailure: the list could not be produced.
        """


class Greeter(ABC):
    @abstractmethod
    def hello(self, full_name: str) -> None:
        pass
