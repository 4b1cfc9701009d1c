"""Item list, sorting, deletion and grid layout of the content browser."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Callable, Iterable, Sequence, TypeVar

__all__ = [
    "ContentBrowser",
    "ContentItem",
    "DeletionSelection",
    "SortSpec",
    "sort_items",
]

T = TypeVar("T")

ID_COLUMN = 0
TYPE_COLUMN = 1


@dataclass(frozen=True)
class ContentItem:
    """An entry shown in the browser."""

    id: int
    type: int


@dataclass(frozen=True)
class SortSpec:
    """Sort by one column, ascending or descending."""

    column_index: int
    ascending: bool = True


def _compare(specs: Sequence[SortSpec], a: ContentItem, b: ContentItem) -> int:
    for spec in specs:
        if spec.column_index == ID_COLUMN:
            delta = a.id - b.id
        elif spec.column_index == TYPE_COLUMN:
            delta = a.type - b.type
        else:
            delta = 0
        if delta > 0:
            return 1 if spec.ascending else -1
        if delta < 0:
            return -1 if spec.ascending else 1
    return a.id - b.id


def sort_items(
    items: Iterable[ContentItem], sort_specs: Sequence[SortSpec]
) -> list[ContentItem]:
    """Items ordered by the specs in turn, ties broken by ascending id."""
    specs = tuple(sort_specs)
    return sorted(items, key=cmp_to_key(lambda a, b: _compare(specs, a, b)))


@dataclass
class DeletionSelection:
    """Selected storage ids, with help for deleting them from a list.

    ``storage_id`` maps a list index to the id kept in the selection; by
    default the index itself.
    """

    selected: set[int] = field(default_factory=set)
    storage_id: Callable[[int], int] = field(default=lambda index: index)
    range_src_reset: bool = False

    def __contains__(self, storage_id: int) -> bool:
        return storage_id in self.selected

    def __len__(self) -> int:
        return len(self.selected)

    def _is_selected(self, index: int) -> bool:
        return self.storage_id(index) in self.selected

    def deletion_pre_loop(
        self, focused_index: int, focused_selected: bool, items_count: int
    ) -> int | None:
        """Index of the item to focus once the selection is deleted, if any.

        When the focused item is not selected it keeps focus and the range
        source is marked for reset. Otherwise the first unselected item after
        it is chosen, then the nearest unselected one before it.
        """
        if not self.selected:
            return None
        if not focused_selected:
            self.range_src_reset = True
            return focused_index
        for index in range(focused_index + 1, items_count):
            if not self._is_selected(index):
                return index
        for index in range(min(focused_index, items_count) - 1, -1, -1):
            if not self._is_selected(index):
                return index
        return None

    def apply_deletion(
        self, items: Sequence[T], index_to_select: int | None, focused_selected: bool
    ) -> list[T]:
        """Return the items left after removing the selected ones.

        The selection is cleared; when the focused item was selected, the
        item chosen by ``deletion_pre_loop`` becomes selected at its new index.
        """
        remaining: list[T] = []
        next_index: int | None = None
        for index, item in enumerate(items):
            if not self._is_selected(index):
                remaining.append(item)
            if index == index_to_select:
                next_index = len(remaining) - 1
        self.selected.clear()
        if next_index is not None and next_index != -1 and focused_selected:
            self.selected.add(self.storage_id(next_index))
        return remaining


@dataclass
class ContentBrowser:
    """Content browser state: options, items, selection and grid layout."""

    show_type_overlay: bool = True
    allow_sorting: bool = True
    allow_box_select: bool = True
    allow_drag_unselected: bool = False
    icon_size: float = 32.0
    icon_spacing: int = 10
    icon_hit_spacing: int = 4
    stretch_spacing: bool = True

    items: list[ContentItem] = field(default_factory=list, init=False)
    selection: DeletionSelection = field(default_factory=DeletionSelection, init=False)
    next_item_id: int = field(default=0, init=False)
    request_delete: bool = field(default=False, init=False)
    request_sort: bool = field(default=False, init=False)
    zoom_wheel_accum: float = field(default=0.0, init=False)

    layout_item_size: tuple[float, float] = field(default=(0.0, 0.0), init=False)
    layout_item_step: tuple[float, float] = field(default=(0.0, 0.0), init=False)
    layout_item_spacing: float = field(default=0.0, init=False)
    layout_selectable_spacing: float = field(default=0.0, init=False)
    layout_outer_padding: float = field(default=0.0, init=False)
    layout_column_count: int = field(default=0, init=False)
    layout_line_count: int = field(default=0, init=False)

    def add_items(self, count: int) -> None:
        """Append ``count`` items; ids restart at 0 when the list was empty."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if not self.items:
            self.next_item_id = 0
        for _ in range(count):
            item_id = self.next_item_id
            bucket = item_id % 20
            item_type = 0 if bucket < 15 else 1 if bucket < 18 else 2
            self.items.append(ContentItem(item_id, item_type))
            self.next_item_id += 1
        self.request_sort = True

    def clear_items(self) -> None:
        self.items.clear()

    def update_layout_sizes(self, avail_width: float) -> None:
        """Fit the icon grid to ``avail_width``."""
        spacing = float(self.icon_spacing)
        if not self.stretch_spacing:
            avail_width += math.floor(spacing * 0.5)

        side = float(math.floor(self.icon_size))
        self.layout_item_size = (side, side)
        columns = max(int(avail_width / (side + spacing)), 1)
        self.layout_column_count = columns
        self.layout_line_count = (len(self.items) + columns - 1) // columns

        if self.stretch_spacing and columns > 1:
            spacing = math.floor(avail_width - side * columns) / columns

        self.layout_item_spacing = spacing
        self.layout_item_step = (side + spacing, side + spacing)
        self.layout_selectable_spacing = max(
            float(math.floor(spacing)) - self.icon_hit_spacing, 0.0
        )
        self.layout_outer_padding = float(math.floor(spacing * 0.5))