# ============================================================================
# DASHBOARD FILTER NORMALIZER
# ============================================================================
# STATUS: Service - Untrusted query parameters -> canonical list filter
# PURPOSE: Parse submission list filters and build patched query parameters
# EXPORTS: parse_dashboard_filters, build_dashboard_search_params, to_query_string
# DEPENDENCIES: core.models.filters
# ============================================================================
"""
Dashboard Filter Normalizer.

Query parameter names on the wire are camelCase:
    search, status, desaId, kecamatan, dateFrom, dateTo

Parsing never fails: anything invalid collapses to the unfiltered value.
Building a new query keeps unrelated parameters (e.g. page) in place and
removes parameters whose value is the default, so URLs stay minimal.

Query parameters may be given as a raw query string, a mapping (values may
be lists), or an iterable of (key, value) pairs. Multi-valued keys are
kept; the first value wins when reading.

Exports:
    parse_dashboard_filters: Canonical DashboardFilters from query parameters
    build_dashboard_search_params: Apply a DashboardFilterPatch to query parameters
    to_query_string: URL-encode a parameter list
"""

import re
from typing import Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode

from core.models.enums import DashboardStatus
from core.models.filters import DashboardFilters, DashboardFilterPatch
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.SERVICE, "DashboardFilters")

QueryParams = List[Tuple[str, str]]
QueryParamsInput = Union[str, Mapping[str, Union[str, Iterable[str]]], Iterable[Tuple[str, str]], None]

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
DESA_ID_PATTERN = re.compile(r"^\d+$", re.ASCII)

ALLOWED_STATUSES = frozenset(status.value for status in DashboardStatus)

# Query parameter names
PARAM_SEARCH = "search"
PARAM_STATUS = "status"
PARAM_DESA_ID = "desaId"
PARAM_KECAMATAN = "kecamatan"
PARAM_DATE_FROM = "dateFrom"
PARAM_DATE_TO = "dateTo"


# ============================================================================
# QUERY PARAMETER LIST HELPERS
# ============================================================================

def _to_pairs(params: QueryParamsInput) -> QueryParams:
    """Copy any accepted input form into an ordered pair list."""
    if params is None:
        return []
    if isinstance(params, str):
        return parse_qsl(params.lstrip("?"), keep_blank_values=True)
    if isinstance(params, Mapping):
        pairs = []
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((key, str(v)) for v in value)
            else:
                pairs.append((key, str(value)))
        return pairs
    return [(str(key), str(value)) for key, value in params]


def _get(pairs: QueryParams, key: str) -> Optional[str]:
    for k, v in pairs:
        if k == key:
            return v
    return None


def _delete(pairs: QueryParams, key: str) -> None:
    pairs[:] = [(k, v) for k, v in pairs if k != key]


def _set(pairs: QueryParams, key: str, value: str) -> None:
    """Replace the first occurrence in place and drop the rest; append if absent."""
    result = []
    replaced = False
    for k, v in pairs:
        if k != key:
            result.append((k, v))
        elif not replaced:
            result.append((k, value))
            replaced = True
    if not replaced:
        result.append((key, value))
    pairs[:] = result


def _apply(pairs: QueryParams, key: str, value: str) -> None:
    if value:
        _set(pairs, key, value)
    else:
        _delete(pairs, key)


# ============================================================================
# FIELD NORMALIZATION
# ============================================================================

def _normalize_date(value: Optional[str]) -> str:
    trimmed = (value or "").strip()
    return trimmed if DATE_PATTERN.match(trimmed) else ""


def _normalize_status(value: Optional[str]) -> str:
    trimmed = (value or "").strip()
    return trimmed if trimmed in ALLOWED_STATUSES else DashboardStatus.ALL.value


def _normalize_desa_id(value: Optional[str]) -> str:
    trimmed = (value or "").strip()
    if not DESA_ID_PATTERN.match(trimmed):
        return ""
    return trimmed if trimmed.strip("0") else ""


def _ordered_dates(date_from: str, date_to: str) -> Tuple[str, str]:
    if date_from and date_to and date_from > date_to:
        return date_to, date_from
    return date_from, date_to


# ============================================================================
# PUBLIC API
# ============================================================================

def parse_dashboard_filters(params: QueryParamsInput) -> DashboardFilters:
    """
    Canonical filter set from untrusted query parameters.

    Never raises:
        - status outside the allowed set -> 'all'
        - desaId not a positive integer -> ''
        - dates not YYYY-MM-DD -> ''
        - dateFrom after dateTo -> swapped

    Args:
        params: Query string, mapping, or (key, value) pairs

    Returns:
        Fully populated DashboardFilters
    """
    pairs = _to_pairs(params)

    raw_status = _get(pairs, PARAM_STATUS)
    status = _normalize_status(raw_status)
    if raw_status and raw_status.strip() and status != raw_status.strip():
        logger.debug(f"Unknown dashboard status ignored: {raw_status!r}")

    date_from, date_to = _ordered_dates(
        _normalize_date(_get(pairs, PARAM_DATE_FROM)),
        _normalize_date(_get(pairs, PARAM_DATE_TO))
    )

    return DashboardFilters(
        search=(_get(pairs, PARAM_SEARCH) or "").strip(),
        status=status,
        desa_id=_normalize_desa_id(_get(pairs, PARAM_DESA_ID)),
        kecamatan=(_get(pairs, PARAM_KECAMATAN) or "").strip(),
        date_from=date_from,
        date_to=date_to
    )


def build_dashboard_search_params(
    current: QueryParamsInput,
    patch: Union[DashboardFilterPatch, Mapping[str, Optional[str]]]
) -> QueryParams:
    """
    Apply a filter patch to the current query parameters.

    Fields left as None in the patch are not touched. A provided field is
    written normalized, or its parameter is removed when the normalized
    value is the default. Providing desa_id always removes the legacy
    kecamatan parameter. Finally the dates are re-ordered so dateFrom never
    follows dateTo.

    Args:
        current: Current query parameters (not modified)
        patch: DashboardFilterPatch or a mapping accepted by it

    Returns:
        New ordered (key, value) list
    """
    if not isinstance(patch, DashboardFilterPatch):
        patch = DashboardFilterPatch.model_validate(patch)

    pairs = list(_to_pairs(current))

    if patch.search is not None:
        _apply(pairs, PARAM_SEARCH, patch.search.strip())

    if patch.status is not None:
        status = _normalize_status(patch.status)
        _apply(pairs, PARAM_STATUS, "" if status == DashboardStatus.ALL.value else status)

    if patch.date_from is not None:
        _apply(pairs, PARAM_DATE_FROM, _normalize_date(patch.date_from))

    if patch.date_to is not None:
        _apply(pairs, PARAM_DATE_TO, _normalize_date(patch.date_to))

    if patch.desa_id is not None:
        _apply(pairs, PARAM_DESA_ID, _normalize_desa_id(patch.desa_id))
        # Village filter supersedes the free-text region filter
        _delete(pairs, PARAM_KECAMATAN)

    normalized = parse_dashboard_filters(pairs)
    _apply(pairs, PARAM_DATE_FROM, normalized.date_from)
    _apply(pairs, PARAM_DATE_TO, normalized.date_to)

    return pairs


def to_query_string(params: QueryParamsInput) -> str:
    """URL-encode query parameters (no leading '?')."""
    return urlencode(_to_pairs(params))
