"""
validation.py — Parameter Checks
=================================
Generators trust their inputs.  Everything a caller can pass in is
checked here first, at selection time, so a bad request fails before a
single step is produced.

Checks are keyed by parameter name; the same name means the same thing
in every generator (``array`` is always a list of numbers, ``start`` is
always a vertex of ``graph``, …).
"""

import logging
import math
from numbers import Real
from typing import Any, Callable, Collection, Dict, List, Mapping, Optional, Sequence

from algotrace.errors import InvalidInputError
from algotrace.graph import Graph

LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Scalar checks
# ---------------------------------------------------------------------------
def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if math.isnan(value):
        raise InvalidInputError(f"{name} must not be NaN")
    return value


def _non_negative_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value


def _positive_int(name: str, value: Any) -> int:
    value = _non_negative_int(name, value)
    if value == 0:
        raise InvalidInputError(f"{name} must be positive, got 0")
    return value


def _text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string, got {value!r}")
    return value


def _sequence(name: str, value: Any) -> Sequence:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise InvalidInputError(f"{name} must be a list, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Per-parameter checks
# ---------------------------------------------------------------------------
def check_numbers(name: str, value: Any) -> List[float]:
    return [_number(f"{name}[{i}]", v) for i, v in enumerate(_sequence(name, value))]


def check_non_negative_numbers(name: str, value: Any) -> List[float]:
    numbers = check_numbers(name, value)
    for i, v in enumerate(numbers):
        if v < 0:
            raise InvalidInputError(f"{name}[{i}] must be non-negative, got {v}")
    return numbers


def check_optional_number(name: str, value: Any) -> Optional[float]:
    return None if value is None else _number(name, value)


def check_positive_ints(name: str, value: Any) -> List[int]:
    return [_positive_int(f"{name}[{i}]", v) for i, v in enumerate(_sequence(name, value))]


def check_dimensions(name: str, value: Any) -> List[int]:
    dims = check_positive_ints(name, value)
    if len(dims) < 2:
        raise InvalidInputError(f"{name} needs at least two entries to describe one matrix")
    return dims


def check_items(name: str, value: Any) -> List[tuple]:
    items = []
    for i, item in enumerate(_sequence(name, value)):
        pair = _sequence(f"{name}[{i}]", item)
        if len(pair) != 2:
            raise InvalidInputError(f"{name}[{i}] must be a (weight, value) pair, got {item!r}")
        items.append((_non_negative_int(f"{name}[{i}].weight", pair[0]), _number(f"{name}[{i}].value", pair[1])))
    return items


def check_graph(name: str, value: Any) -> Optional[Graph]:
    if value is None:
        return None
    if isinstance(value, Mapping):
        value = Graph.from_dict(value)
    if not isinstance(value, Graph):
        raise InvalidInputError(f"{name} must be a graph, got {value!r}")
    for edge in value.edges:
        _number(f"{name} edge {edge.source}-{edge.target} weight", edge.weight)
    return value


def check_optional_vertex(name: str, value: Any) -> Optional[int]:
    return None if value is None else _non_negative_int(name, value)


def check_words(name: str, value: Any) -> List[str]:
    words = [_text(f"{name}[{i}]", w) for i, w in enumerate(_sequence(name, value))]
    for i, w in enumerate(words):
        if not w:
            raise InvalidInputError(f"{name}[{i}] must not be empty")
    return words


def check_word(name: str, value: Any) -> str:
    value = _text(name, value)
    if not value:
        raise InvalidInputError(f"{name} must not be empty")
    return value


def check_order(name: str, value: Any) -> int:
    value = _positive_int(name, value)
    if value < 2:
        raise InvalidInputError(f"{name} must be at least 2, got {value}")
    return value


BOARD_SIZES = (4, 9)


def check_board(name: str, value: Any) -> List[List[int]]:
    """A 4×4 or 9×9 grid of 0 (empty) … n whose givens do not clash."""
    rows = [list(_sequence(f"{name}[{r}]", row)) for r, row in enumerate(_sequence(name, value))]
    n = len(rows)
    if n not in BOARD_SIZES:
        raise InvalidInputError(f"{name} must have {' or '.join(map(str, BOARD_SIZES))} rows, got {n}")
    board: List[List[int]] = []
    for r, row in enumerate(rows):
        if len(row) != n:
            raise InvalidInputError(f"{name}[{r}] must have {n} cells, got {len(row)}")
        cells = [_non_negative_int(f"{name}[{r}][{c}]", v) for c, v in enumerate(row)]
        for c, v in enumerate(cells):
            if v > n:
                raise InvalidInputError(f"{name}[{r}][{c}] must be 0 … {n}, got {v}")
        board.append(cells)

    box = math.isqrt(n)
    units = [[(r, c) for c in range(n)] for r in range(n)]
    units += [[(r, c) for r in range(n)] for c in range(n)]
    units += [
        [(br + r, bc + c) for r in range(box) for c in range(box)]
        for br in range(0, n, box) for bc in range(0, n, box)
    ]
    for unit in units:
        seen: Dict[int, tuple] = {}
        for r, c in unit:
            v = board[r][c]
            if v and v in seen:
                raise InvalidInputError(f"{name} repeats {v} at {seen[v]} and {(r, c)}")
            seen[v] = (r, c)
    return board


CHECKS: Dict[str, Callable[[str, Any], Any]] = {
    "array":       check_numbers,
    "numbers":     check_non_negative_numbers,
    "target":      check_optional_number,
    "n":           _non_negative_int,
    "amount":      _non_negative_int,
    "capacity":    _non_negative_int,
    "coins":       check_positive_ints,
    "dimensions":  check_dimensions,
    "items":       check_items,
    "first":       _text,
    "second":      _text,
    "text":        _text,
    "graph":       check_graph,
    "start":       _non_negative_int,
    "source":      _non_negative_int,
    "destination": check_optional_vertex,
    "method":      _text,
    "mode":        _text,
    "operation":   _text,
    "keys":        check_numbers,
    "value":       _number,
    "order":       check_order,
    "words":       check_words,
    "word":        check_word,
    "board":       check_board,
}

VERTEX_PARAMS = ("start", "source", "destination")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def validate_params(
    params: Dict[str, Any],
    choices: Optional[Mapping[str, Sequence[str]]] = None,
    nullable: Optional[Collection[str]] = None,
    directed_only: bool = False,
) -> Dict[str, Any]:
    """
    Check and normalise bound generator parameters.

    Args:
        params        : name → value, already bound against the generator's signature.
        choices       : name → allowed values for enumerated parameters (``method``, ``mode``).
        nullable      : names that may be None; every other None is rejected.
                        None (the default) accepts None anywhere.
        directed_only : reject an undirected ``graph``.

    Returns:
        A new dict with normalised values (lists instead of tuples, a Graph
        instead of a graph dict).

    Raises:
        InvalidInputError on the first bad value.
    """
    checked: Dict[str, Any] = {}
    for name, value in params.items():
        if value is None and nullable is not None and name not in nullable:
            raise InvalidInputError(f"{name} must not be null")
        check = CHECKS.get(name)
        checked[name] = check(name, value) if check else value

    for name, allowed in (choices or {}).items():
        if name in checked and checked[name] not in allowed:
            raise InvalidInputError(f"{name} must be one of {list(allowed)}, got {checked[name]!r}")

    graph = checked.get("graph")
    if graph is not None:
        if directed_only and not graph.directed:
            raise InvalidInputError("graph must be directed")
        for name in VERTEX_PARAMS:
            if checked.get(name) is not None and checked[name] >= graph.num_vertices:
                raise InvalidInputError(
                    f"{name} vertex {checked[name]} out of range 0…{graph.num_vertices - 1}"
                )

    LOGGER.debug("Validated params: %s", sorted(checked))
    return checked
