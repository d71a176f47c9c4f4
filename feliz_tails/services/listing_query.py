"""Filter and sizing rules for pet listings.

One ``ListingFilter`` drives both the SQL WHERE clause and in-process
matching, so every store applies the same rules.
"""

from dataclasses import dataclass

from sqlalchemy import ColumnElement

from feliz_tails.models.pet import Pet

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 9


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class ListingFilter:
    category: str | None = None
    name: str | None = None
    exclude_adopted: bool = True

    def __post_init__(self) -> None:
        # Blank query params mean "no filter".
        if self.category is not None and not self.category.strip():
            object.__setattr__(self, "category", None)
        if self.name is not None and not self.name.strip():
            object.__setattr__(self, "name", None)

    def where_clauses(self) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if self.category is not None:
            clauses.append(Pet.category == self.category)
        if self.name is not None:
            clauses.append(Pet.name.ilike(f"%{_escape_like(self.name)}%", escape="\\"))
        if self.exclude_adopted:
            clauses.append(Pet.adopted.is_(False))
        return clauses

    def matches(self, pet: Pet) -> bool:
        if self.category is not None and pet.category != self.category:
            return False
        if self.name is not None and self.name.casefold() not in pet.name.casefold():
            return False
        if self.exclude_adopted and pet.adopted:
            return False
        return True


def result_cap(page: int, limit: int) -> int:
    """Rows returned for ``page``: everything up to and including that page.

    The front-end's infinite scroll re-requests the whole list with a larger
    page number, so this is ``page * limit`` rather than an offset window.
    """
    return page * limit
