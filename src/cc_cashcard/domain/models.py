"""Domain models for cc_cashcard. Pure dataclasses, no business logic."""

from dataclasses import dataclass

SORTABLE_FIELDS: frozenset[str] = frozenset({"id", "amount", "owner"})


@dataclass
class CashCard:
    id: int | None
    amount: float
    owner: str | None


@dataclass(frozen=True)
class SortOrder:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page of `size` rows, ordered by `sort` then id ascending."""

    page: int
    size: int
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def clamped(
        cls,
        page: int,
        size: int,
        sort: tuple[SortOrder, ...] = (),
        *,
        default_size: int,
        max_size: int,
    ) -> "PageRequest":
        """Correct out-of-range paging instead of rejecting it.

        A negative page becomes 0, a size below 1 falls back to default_size
        and a size above max_size is capped.
        """
        if size < 1:
            size = default_size
        return cls(page=max(page, 0), size=min(size, max_size), sort=sort)
