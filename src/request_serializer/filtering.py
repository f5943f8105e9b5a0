"""
Property filtering for serialized records.

Merges allow-list (``only``) and deny-list (``except``) criteria from the
call-site options and the request query parameters, then applies them to a
transformed record:

- ``except``: ordered union of both sources
- ``only``: intersection when both sources are set, otherwise whichever
  source is set; disabled when neither is
- ``only`` is applied first, ``except`` second, so a path named in both is
  absent from the output

Filtering never mutates its input. Picked values are shared with the source
record; nested dicts on an omitted path are copied before being edited.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import FilterConfig
from .core.constants import OPTION_EXCEPT, OPTION_ONLY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSpec:
    """Resolved filter criteria for a single call.

    Attributes:
        only: Paths to retain (meaningful only when ``only_enabled``)
        only_enabled: Whether the allow-list restricts the output
        exclude: Paths to remove
    """

    only: tuple[str, ...] = ()
    only_enabled: bool = False
    exclude: tuple[str, ...] = ()

    @property
    def is_noop(self) -> bool:
        """True when filtering would leave the record untouched."""
        return not self.only_enabled and not self.exclude


def normalize_paths(value: Any) -> list[str]:
    """Normalize a path argument into a list of paths.

    ``None`` gives an empty list, a single path gives a one-element list and
    a list or tuple is taken as is. Falsy entries are dropped and the
    rest are converted to strings.

    Args:
        value: Path, sequence of paths or None

    Returns:
        List of non-empty paths
    """
    values = list(value) if isinstance(value, (list, tuple)) else [value]
    return [str(path) for path in values if path]


def _union(*groups: list[str]) -> list[str]:
    return list(dict.fromkeys(path for group in groups for path in group))


def _intersection(first: list[str], second: list[str]) -> list[str]:
    allowed = set(second)
    return [path for path in dict.fromkeys(first) if path in allowed]


def _option_value(options: Any, name: str) -> Any:
    if isinstance(options, Mapping):
        return options.get(name)
    return None


def _query_value(request: Any, name: str) -> Any:
    query = getattr(request, "query", None)
    if query is None:
        return None

    # Multi-value containers return only the first value from get()
    getlist = getattr(query, "getlist", None)
    if callable(getlist):
        return getlist(name)

    getall = getattr(query, "getall", None)
    if callable(getall):
        return getall(name, [])

    return query.get(name)


def resolve_filter_spec(request: Any, options: Any = None, config: FilterConfig | None = None) -> FilterSpec:
    """Merge options and query parameters into a FilterSpec.

    Args:
        request: Request whose ``query`` supplies criteria
        options: Call-site options mapping
        config: Query parameter names (resolved from env if None)

    Returns:
        Resolved FilterSpec
    """
    config = config or FilterConfig.resolve()

    exclude = _union(
        normalize_paths(_option_value(options, OPTION_EXCEPT)),
        normalize_paths(_query_value(request, config.except_param)),
    )

    only_from_options = normalize_paths(_option_value(options, OPTION_ONLY))
    only_from_request = normalize_paths(_query_value(request, config.only_param))

    only = only_from_options
    only_enabled = len(only) >= 1
    if only and only_from_request:
        # Enabled even when the intersection is empty
        only = _intersection(only, only_from_request)
    elif only_from_request:
        only = only_from_request
        only_enabled = True

    return FilterSpec(only=tuple(only), only_enabled=only_enabled, exclude=tuple(exclude))


def _has_path(source: Any, path: str, separator: str) -> bool:
    if not isinstance(source, Mapping):
        return False
    if path in source:
        return True

    head, found, rest = path.partition(separator)
    return bool(found) and head in source and _has_path(source[head], rest, separator)


def _pick_path(source: Mapping, target: dict, path: str, separator: str) -> None:
    if path in source:
        target[path] = source[path]
        return

    head, _, rest = path.partition(separator)
    value = source[head]
    if head in target:
        nested = target[head]
        if nested is value:
            # Whole value already picked by a bare name
            return
    else:
        nested = target[head] = {}

    _pick_path(value, nested, rest, separator)


def pick_paths(record: Any, paths: list[str] | tuple[str, ...], separator: str = ".") -> dict:
    """Build a new dict holding only the given paths of a record.

    Dotted paths keep only the addressed nested key; several paths under the
    same prefix compose. A bare name keeps the whole value. Paths missing
    from the record are ignored.

    Args:
        record: Source mapping (anything else yields an empty dict)
        paths: Property paths to retain
        separator: Property path separator

    Returns:
        New dict with the retained paths

    Example:
        ```python
        person = {"first": "John", "address": {"city": "Sunnydale", "state": "California"}}
        pick_paths(person, ["first", "address.city"])
        # {"first": "John", "address": {"city": "Sunnydale"}}
        ```
    """
    result: dict = {}
    if not isinstance(record, Mapping):
        return result

    for path in paths:
        if _has_path(record, path, separator):
            _pick_path(record, result, path, separator)

    return result


def _omit_path(target: dict, path: str, separator: str) -> None:
    if path in target:
        del target[path]
        return

    head, found, rest = path.partition(separator)
    if not found or head not in target or not isinstance(target[head], Mapping):
        return

    nested = dict(target[head])
    target[head] = nested
    _omit_path(nested, rest, separator)


def omit_paths(record: Any, paths: list[str] | tuple[str, ...], separator: str = ".") -> dict:
    """Build a copy of a record without the given paths.

    Dotted paths remove only the addressed nested key and leave its siblings.
    Paths missing from the record are ignored.

    Args:
        record: Source mapping (anything else yields an empty dict)
        paths: Property paths to remove
        separator: Property path separator

    Returns:
        New dict without the removed paths
    """
    if not isinstance(record, Mapping):
        return {}

    result = dict(record)
    for path in paths:
        _omit_path(result, path, separator)

    return result


def apply_filter_spec(item: Any, spec: FilterSpec, separator: str = ".") -> Any:
    """Apply a resolved FilterSpec to a single record.

    Args:
        item: Transformed record
        spec: Resolved criteria
        separator: Property path separator

    Returns:
        The record itself when there are no criteria, otherwise a new dict
    """
    if spec.is_noop:
        return item

    if spec.only_enabled:
        item = pick_paths(item, spec.only, separator)

    if spec.exclude:
        item = omit_paths(item, spec.exclude, separator)

    return item


def filter_data(request: Any, item: Any, options: Any = None, config: FilterConfig | None = None) -> Any:
    """Filter a transformed record with criteria from options and the request.

    Args:
        request: Request whose ``query`` supplies criteria
        item: Transformed record
        options: Call-site options mapping with ``only``/``except``
        config: Query parameter names and path separator

    Returns:
        Filtered record
    """
    config = config or FilterConfig.resolve()
    spec = resolve_filter_spec(request, options, config)

    if not spec.is_noop:
        only = list(spec.only) if spec.only_enabled else None
        logger.debug(f"Filtering record with only={only} except={list(spec.exclude)}")

    return apply_filter_spec(item, spec, config.separator)
