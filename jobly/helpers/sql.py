"""
SQL fragment builders shared by the model layer.

Every builder returns a ClauseResult: SQL text with 1-indexed ``$n``
placeholders plus the values bound to them, in placeholder order.
The text is meant to be spliced into a larger statement and executed
with ``jobly.core.database.execute_positional``.
"""

import math
from typing import Any, List, Mapping, NamedTuple, Optional, Union

from jobly.core.errors import BadRequestError

Number = Union[int, float]

DEFAULT_MIN_EMPLOYEES = 0
DEFAULT_MAX_EMPLOYEES = 999999


class ClauseResult(NamedTuple):
    """SQL fragment and the values bound to its placeholders."""
    clause: str
    values: List[Any]


def parse_number(value: Any, message: str) -> Optional[Number]:
    """
    Parse a filter value into a non-negative number.

    Args:
        value: Raw value from a query string or JSON body
        message: Error message used when the value is not a number

    Returns:
        None when the value is absent (None or empty string),
        otherwise the parsed int or float

    Raises:
        BadRequestError: value was supplied but is not a non-negative number
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
        try:
            number = int(value)
        except ValueError:
            try:
                number = float(value)
            except ValueError:
                raise BadRequestError(message)
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BadRequestError(message)
    else:
        number = value

    if isinstance(number, float):
        if not math.isfinite(number):
            raise BadRequestError(message)
        if number.is_integer():
            number = int(number)

    if number < 0:
        raise BadRequestError(message)
    return number


def sql_for_partial_update(data: Mapping[str, Any], field_map: Mapping[str, str]) -> ClauseResult:
    """
    Build the SET clause of a partial UPDATE.

    Keys of ``data`` are translated to column names through ``field_map``;
    keys missing from the map are used as column names verbatim.

        {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        => ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        BadRequestError: ``data`` is empty
    """
    keys = list(data.keys())
    if not keys:
        raise BadRequestError("No data")

    cols = [f'"{field_map.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)]

    return ClauseResult(", ".join(cols), [data[key] for key in keys])


def _join_predicates(predicates: List[str]) -> str:
    if not predicates:
        return ""
    return "WHERE " + " AND ".join(predicates)


def sql_for_company_filter(criteria: Optional[Mapping[str, Any]]) -> ClauseResult:
    """
    Build the WHERE clause for company searches.

    Supported criteria: ``name`` (case-insensitive substring),
    ``minEmployees`` and ``maxEmployees``. Employee bounds are validated
    numbers and are written into the clause as literals.
    """
    predicates: List[str] = []
    values: List[Any] = []

    if not criteria:
        return ClauseResult("", values)

    name = criteria.get("name")
    if name:
        values.append(f"%{name}%")
        predicates.append(f"name ILIKE ${len(values)}")

    min_employees = parse_number(criteria.get("minEmployees"), "Minimum employees must be a number")
    max_employees = parse_number(criteria.get("maxEmployees"), "Maximum employees must be a number")

    if min_employees is not None or max_employees is not None:
        low = min_employees or DEFAULT_MIN_EMPLOYEES
        high = max_employees or DEFAULT_MAX_EMPLOYEES
        predicates.append(f"num_employees BETWEEN {low} AND {high}")

    return ClauseResult(_join_predicates(predicates), values)


def _is_truthy_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


def sql_for_job_filter(criteria: Optional[Mapping[str, Any]]) -> ClauseResult:
    """
    Build the WHERE clause for job searches.

    Supported criteria, always emitted in this order:
        title: case-insensitive substring match
        minSalary: salary strictly greater than the value
        hasEquity: True or "true" restricts to jobs with non-zero equity
    """
    predicates: List[str] = []
    values: List[Any] = []

    if not criteria:
        return ClauseResult("", values)

    title = criteria.get("title")
    if title:
        values.append(f"%{title}%")
        predicates.append(f"title ILIKE ${len(values)}")

    min_salary = parse_number(criteria.get("minSalary"), "Minimum salary must be a number")
    if min_salary is not None:
        values.append(min_salary)
        predicates.append(f"salary > ${len(values)}")

    if _is_truthy_flag(criteria.get("hasEquity")):
        predicates.append("equity > 0")

    return ClauseResult(_join_predicates(predicates), values)

