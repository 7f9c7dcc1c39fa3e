"""
core/layout.py

Геометрия доски: прямоугольная сетка, где клетка — либо лунка
с уникальным номером, либо None (клетки нет).

Номера лунок назначаются при построении обходом по строкам слева
направо, начиная с 1, и больше не меняются.
"""

from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union
from types import MappingProxyType
import collections.abc

from .utils import is_valid_position
from utils.error_handling import InvalidLayoutError

Cell = Optional[int]
Position = Tuple[int, int]

# Символы "нет клетки" в текстовой маске
EMPTY_MARKS = frozenset('. _-0')


class Layout:
    """
    Иммутабельная раскладка доски.

    Хранит сетку номеров и производный индекс номер → (row, col),
    который строится один раз.
    """
    __slots__ = ('_rows', '_positions', '_holes', '_width', '_hash')

    def __init__(self, rows: Sequence[Sequence[Cell]]):
        grid = [tuple(row) for row in rows]
        self._width = max((len(row) for row in grid), default=0)
        # Короткие строки дополняются пустыми клетками справа
        self._rows: Tuple[Tuple[Cell, ...], ...] = tuple(
            row + (None,) * (self._width - len(row)) for row in grid
        )

        positions: Dict[int, Position] = {}
        for r, row in enumerate(self._rows):
            for c, cell in enumerate(row):
                if cell is None:
                    continue
                if not isinstance(cell, int) or isinstance(cell, bool) or cell <= 0:
                    raise InvalidLayoutError(f"Номер лунки должен быть положительным целым: {cell!r}")
                if cell in positions:
                    raise InvalidLayoutError(f"Номер лунки {cell} повторяется")
                positions[cell] = (r, c)

        self._positions = MappingProxyType(positions)
        self._holes = tuple(sorted(positions))
        self._hash = hash(self._rows)

    @property
    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def holes(self) -> Tuple[int, ...]:
        """Все номера лунок по возрастанию."""
        return self._holes

    @property
    def hole_count(self) -> int:
        return len(self._holes)

    @property
    def position_index(self) -> Mapping[int, Position]:
        """Индекс номер → (row, col), только для чтения."""
        return self._positions

    def position(self, hole: int) -> Position:
        return self._positions[hole]

    def hole_at(self, row: int, col: int) -> Cell:
        """Номер лунки в клетке или None (вне сетки / клетки нет)."""
        if not is_valid_position(row, col, self.height, self._width):
            return None
        return self._rows[row][col]

    def __contains__(self, hole: object) -> bool:
        return hole in self._positions

    def __iter__(self) -> Iterator[int]:
        return iter(self._holes)

    def __len__(self) -> int:
        return len(self._holes)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return False
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Layout({self.height}x{self.width}, {self.hole_count} holes)"


def build_centered_layout(row_widths: Sequence[int]) -> Layout:
    """
    Строит центрированную доску ("плюс", "ромб").

    Каждая строка центрируется по максимальной ширине: слева
    floor((max - w) / 2) пустых клеток, справа — ceil.

    Args:
        row_widths: количество лунок в каждой строке

    Returns:
        Layout
    """
    widths = list(row_widths)
    if not widths:
        raise InvalidLayoutError("Пустое описание формы")
    if any(w < 0 for w in widths):
        raise InvalidLayoutError(f"Ширина строки не может быть отрицательной: {widths}")

    max_width = max(widths)
    rows: List[List[Cell]] = []
    num = 1
    for count in widths:
        left_pad = (max_width - count) // 2
        right_pad = max_width - count - left_pad
        row: List[Cell] = [None] * left_pad
        for _ in range(count):
            row.append(num)
            num += 1
        row.extend([None] * right_pad)
        rows.append(row)
    return Layout(rows)


def build_rectangular_layout(rows: int, cols: int) -> Layout:
    """Прямоугольная доска: номер = r * cols + c + 1."""
    if rows <= 0 or cols <= 0:
        raise InvalidLayoutError(f"Некорректный размер доски: {rows}x{cols}")
    return Layout([[r * cols + c + 1 for c in range(cols)] for r in range(rows)])


def build_grid_layout(mask: Sequence[Sequence]) -> Layout:
    """
    Доска по явной маске.

    Строка маски — последовательность значений (истинное = лунка)
    или строка, где '.', ' ', '_', '-', '0' означают отсутствие клетки.
    Номера назначаются по строкам слева направо.
    """
    if not mask:
        raise InvalidLayoutError("Пустая маска доски")

    rows: List[List[Cell]] = []
    num = 1
    for mask_row in mask:
        row: List[Cell] = []
        for cell in mask_row:
            present = cell not in EMPTY_MARKS if isinstance(cell, str) else bool(cell)
            if present:
                row.append(num)
                num += 1
            else:
                row.append(None)
        rows.append(row)
    return Layout(rows)


ShapeSpec = Union[Sequence[int], Sequence[Sequence], Mapping[str, int], str]


def build_layout(shape: ShapeSpec) -> Layout:
    """
    Строит раскладку по описанию формы.

    Поддерживаемые формы:
    - последовательность int — ширины строк центрированной доски;
    - {'rows': R, 'cols': C} или строка "RxC" — прямоугольник;
    - последовательность строк/списков — явная маска.

    Raises:
        InvalidLayoutError: если описание не распознано
    """
    if isinstance(shape, Layout):
        return shape

    if isinstance(shape, collections.abc.Mapping):
        try:
            return build_rectangular_layout(int(shape['rows']), int(shape['cols']))
        except (KeyError, TypeError, ValueError):
            raise InvalidLayoutError(f"Ожидается {{'rows': R, 'cols': C}}, получено {dict(shape)}")

    if isinstance(shape, str):
        parts = shape.lower().split('x')
        if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
            raise InvalidLayoutError(f"Ожидается размер вида RxC, получено {shape!r}")
        return build_rectangular_layout(int(parts[0]), int(parts[1]))

    items = list(shape)
    if not items:
        raise InvalidLayoutError("Пустое описание формы")
    if all(isinstance(w, int) and not isinstance(w, bool) for w in items):
        return build_centered_layout(items)
    if all(isinstance(row, (str, list, tuple)) for row in items):
        return build_grid_layout(items)

    raise InvalidLayoutError(f"Неизвестное описание формы: {shape!r}")
