import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union

from pydantic import ValidationError

from .bar_spec import BarDatum
from .errors import EmptyDatasetError, InvalidValueError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedData:
    labels: Tuple[str, ...]
    values: Tuple[float, ...]
    item_count: int
    max_value: float
    min_value: float


def _as_datum(i: int, item: Union[BarDatum, Mapping[str, Any]]) -> BarDatum:
    if isinstance(item, BarDatum):
        return item
    if not isinstance(item, Mapping):
        raise InvalidValueError(f"data[{i}]: expected a mapping with 'label' and 'value', got {type(item).__name__}")
    try:
        return BarDatum.model_validate(item)
    except ValidationError as e:
        errs = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise InvalidValueError(f"data[{i}]: {errs}") from e


def normalize(data: Iterable[Union[BarDatum, Mapping[str, Any]]]) -> NormalizedData:
    """
    Split the (label, value) items into parallel tuples and scan them.
    - order is preserved, input is left untouched
    - empty input is rejected up front
    """
    items = [_as_datum(i, item) for i, item in enumerate(() if data is None else data)]
    if not items:
        raise EmptyDatasetError("bar chart needs at least one data item")

    labels = tuple(d.label for d in items)
    values = tuple(d.value for d in items)

    max_value = min_value = values[0]
    for v in values[1:]:
        if v > max_value:
            max_value = v
        if v < min_value:
            min_value = v

    if min_value < 0:
        logger.warning("negative values (min=%s) are not supported by bar rendering", min_value)

    return NormalizedData(
        labels=labels,
        values=values,
        item_count=len(items),
        max_value=max_value,
        min_value=min_value,
    )
