"""Record models for squads and members - the dashboard's only data shapes."""

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import ClassVar, Dict, List, Optional, Tuple, Union


class RecordKind(str, Enum):
    """Explicit tag distinguishing squad records from member records."""

    SQUAD = "squad"
    MEMBER = "member"


class ViewMode(str, Enum):
    """Which collection the dashboard currently displays."""

    SQUAD = "squad"
    MEMBER = "member"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class MetricRecord:
    """Common metric shape shared by squads and members.

    Scores are unitless and have no declared range.
    """

    kind: ClassVar[RecordKind]

    name: str
    performance: float
    efficiency: float
    quality: float

    def metrics(self) -> Tuple[float, float, float]:
        """(performance, efficiency, quality) in chart order."""
        return (self.performance, self.efficiency, self.quality)


@dataclass(frozen=True)
class SquadRecord(MetricRecord):
    """An aggregate group."""

    kind: ClassVar[RecordKind] = RecordKind.SQUAD

    record_id: Optional[int] = None


@dataclass(frozen=True)
class MemberRecord(MetricRecord):
    """An individual belonging to a squad (by name, not enforced)."""

    kind: ClassVar[RecordKind] = RecordKind.MEMBER

    squad: str
    record_id: Optional[int] = None


AnyRecord = Union[SquadRecord, MemberRecord]


@dataclass(frozen=True)
class ChartPoint:
    """One bar group of the performance overview chart."""

    label: str
    performance: float
    efficiency: float
    quality: float


@dataclass(frozen=True)
class ListEntry:
    """A record paired with a stable list key.

    The key is derived from the record's position in the supplied
    collection, so two members sharing a name never collide.
    """

    key: str
    record: AnyRecord

    @classmethod
    def create(cls, index: int, record: AnyRecord) -> "ListEntry":
        return cls(key=f"{record.kind.value}-{index}", record=record)


# ----------------------------------------------------------------------
# JSON payload parsing
# ----------------------------------------------------------------------

_METRIC_FIELDS = ("performance", "efficiency", "quality")


def _require_number(item: Dict, field_name: str, index: int) -> float:
    value = item.get(field_name)
    # bool is a subclass of int but is never a score
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(
            f"Record {index}: '{field_name}' must be a number, got {value!r}"
        )
    return value


def _require_name(item: Dict, index: int) -> str:
    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Record {index}: 'name' must be a non-empty string")
    return name


def _optional_id(item: Dict, index: int) -> Optional[int]:
    record_id = item.get("id")
    if record_id is None:
        return None
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise ValueError(f"Record {index}: 'id' must be an integer, got {record_id!r}")
    return record_id


def _require_items(payload) -> List[Dict]:
    if not isinstance(payload, list):
        raise ValueError(
            f"Expected a JSON array of records, got {type(payload).__name__}"
        )
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValueError(
                f"Record {index}: expected an object, got {type(item).__name__}"
            )
    return payload


def parse_squads(payload) -> List[SquadRecord]:
    """Build squad records from a decoded ``/api/squads`` body.

    Raises:
        ValueError: if the payload is not an array of well-formed squads.
    """
    squads = []
    for index, item in enumerate(_require_items(payload)):
        performance, efficiency, quality = (
            _require_number(item, f, index) for f in _METRIC_FIELDS
        )
        squads.append(
            SquadRecord(
                name=_require_name(item, index),
                performance=performance,
                efficiency=efficiency,
                quality=quality,
                record_id=_optional_id(item, index),
            )
        )
    return squads


def parse_members(payload) -> List[MemberRecord]:
    """Build member records from a decoded ``/api/members`` body.

    Raises:
        ValueError: if the payload is not an array of well-formed members.
    """
    members = []
    for index, item in enumerate(_require_items(payload)):
        squad = item.get("squad")
        if not isinstance(squad, str):
            raise ValueError(f"Record {index}: 'squad' must be a string")
        performance, efficiency, quality = (
            _require_number(item, f, index) for f in _METRIC_FIELDS
        )
        members.append(
            MemberRecord(
                name=_require_name(item, index),
                performance=performance,
                efficiency=efficiency,
                quality=quality,
                squad=squad,
                record_id=_optional_id(item, index),
            )
        )
    return members
