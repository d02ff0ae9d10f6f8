from __future__ import annotations

import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, Iterable, Mapping, Optional, TypeVar
from uuid import uuid4

from dateutil import parser as date_parser
from pydantic import BaseModel, BeforeValidator, ConfigDict


M = TypeVar("M", bound=BaseModel)

_EPOCH_LITERAL = re.compile(r"^/Date\((-?\d+)([+-]\d{4})?\)/$")
_YEAR_MONTH = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


class Step(str, Enum):
    GOALS = "goals"
    BASELINE = "baseline"
    TEAM = "team"
    INVESTMENTS = "investments"
    REVIEW = "review"


STEP_ORDER: tuple[Step, ...] = (
    Step.GOALS,
    Step.BASELINE,
    Step.TEAM,
    Step.INVESTMENTS,
    Step.REVIEW,
)

STEP_LABELS: Dict[Step, str] = {
    Step.GOALS: "Goals",
    Step.BASELINE: "Prior Year",
    Step.TEAM: "Team",
    Step.INVESTMENTS: "Investments",
    Step.REVIEW: "Review",
}


class CostClassification(str, Enum):
    COGS = "cogs"
    OPEX = "opex"


class InvestmentType(str, Enum):
    CAPEX = "capex"
    OPEX = "opex"


class FrozenModel(BaseModel):
    """Base for every snapshot piece. Sequences are tuples so nothing mutates in place."""

    model_config = ConfigDict(frozen=True, extra="forbid")


def normalize_year_month(value: Any) -> Optional[str]:
    """Reduce any date-like input to ``YYYY-MM``.

    Accepts ``date``/``datetime`` objects, ISO strings, already-normalized
    ``YYYY-MM`` strings and payroll ``/Date(<epoch-ms>)/`` literals. Empty or
    unparseable values become ``None``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return f"{value.year:04d}-{value.month:02d}"
    text = str(value).strip()
    if _YEAR_MONTH.match(text):
        return text
    epoch = _EPOCH_LITERAL.match(text)
    if epoch:
        try:
            moment = datetime.fromtimestamp(int(epoch.group(1)) / 1000, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
        return f"{moment.year:04d}-{moment.month:02d}"
    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError):
        return None
    return f"{parsed.year:04d}-{parsed.month:02d}"


YearMonth = Annotated[Optional[str], BeforeValidator(normalize_year_month)]
RequiredYearMonth = Annotated[str, BeforeValidator(normalize_year_month)]


def merge(model: M, changes: Mapping[str, Any]) -> M:
    """Shallow-merge ``changes`` into ``model`` and re-validate the result."""
    data = model.model_dump()
    data.update(changes)
    return type(model).model_validate(data)


def new_id(prefix: str, existing: Iterable[str]) -> str:
    taken = set(existing)
    candidate = f"{prefix}-{uuid4().hex}"
    while candidate in taken:
        candidate = f"{prefix}-{uuid4().hex}"
    return candidate
