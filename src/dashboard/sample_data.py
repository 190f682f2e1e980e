"""Built-in sample collections used by the static dashboard."""

from src.dashboard.records import MemberRecord, SquadRecord

SAMPLE_SQUADS = (
    SquadRecord(name="Alpha", performance=85, efficiency=90, quality=88),
    SquadRecord(name="Beta", performance=78, efficiency=82, quality=80),
    SquadRecord(name="Gamma", performance=92, efficiency=88, quality=95),
    SquadRecord(name="Delta", performance=70, efficiency=75, quality=72),
)

SAMPLE_MEMBERS = (
    MemberRecord(name="Alice", squad="Alpha", performance=88, efficiency=92, quality=90),
    MemberRecord(name="Bob", squad="Alpha", performance=82, efficiency=88, quality=86),
    MemberRecord(name="Charlie", squad="Beta", performance=76, efficiency=80, quality=78),
    MemberRecord(name="Diana", squad="Beta", performance=80, efficiency=84, quality=82),
    MemberRecord(name="Eve", squad="Gamma", performance=94, efficiency=90, quality=96),
    MemberRecord(name="Frank", squad="Gamma", performance=90, efficiency=86, quality=94),
    MemberRecord(name="Grace", squad="Delta", performance=72, efficiency=76, quality=74),
    MemberRecord(name="Henry", squad="Delta", performance=68, efficiency=74, quality=70),
)
