"""PlannedWeek entity - aggregate root for weekly meal plans."""

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Optional, Union
from uuid import uuid4

from domain.shared.errors import AlignmentError, NotFoundError, ValidationError
from domain.shared.value_objects.calendar_date import DateLike, parse_iso_date
from domain.shared.value_objects.day_of_week import day_index
from domain.shared.value_objects.meal_slot import MealSlot
from domain.shared.value_objects.week_start_day import WeekStartDay

from ..value_objects.meal_assignment import MealAssignment
from .day_plan import DayPlan
from .planned_week_snapshot import PlannedWeekSnapshot

DAYS_IN_WEEK = 7


@dataclass
class PlannedWeek:
    """Planned week aggregate root.

    Seven consecutive day plans for one tenant, each with a lunch and a
    dinner slot. Dinners assigned with ``makes_lunch`` feed the following
    day's lunch as a leftover when :meth:`populate_leftovers` runs.

    Invariants:
    - Exactly 7 day plans on consecutive dates starting at ``starting_date``
    - ``starting_date`` falls on ``week_start_day`` (checked by ``create``)
    - ``is_leftover`` is only set by leftover propagation

    The aggregate is loaded, mutated and persisted as a whole. It does not
    serialize concurrent writers; the store is expected to.

    Attributes:
        id: Planned week identifier
        tenant_id: Owning tenant
        starting_date: First day of the week
        week_start_day: Configured week start at creation time
        day_plans: The 7 day plans, in date order
    """

    id: str
    tenant_id: str
    starting_date: date
    week_start_day: WeekStartDay
    day_plans: list[DayPlan] = field(default_factory=list)
    _dinner_assignments: dict[date, MealAssignment] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate aggregate invariants.

        Raises:
            ValidationError: If any invariant is violated
        """
        self.week_start_day = WeekStartDay.parse(self.week_start_day)
        self.validate_invariants()

    def validate_invariants(self) -> None:
        """Validate identity and day plan layout.

        Raises:
            ValidationError: If any invariant is violated
        """
        if not self.id or not str(self.id).strip():
            raise ValidationError("Planned week ID cannot be empty")

        if not self.tenant_id or not self.tenant_id.strip():
            raise ValidationError("Tenant ID cannot be empty")

        if len(self.day_plans) != DAYS_IN_WEEK:
            raise ValidationError(
                f"Planned week must contain exactly {DAYS_IN_WEEK} day plans, "
                f"got {len(self.day_plans)}"
            )

        for offset, day_plan in enumerate(self.day_plans):
            if day_plan.date != self.starting_date + timedelta(days=offset):
                raise ValidationError(
                    "Day plans must be consecutive dates starting at "
                    f"{self.starting_date.isoformat()}"
                )

    # ============================================================
    # Factories
    # ============================================================

    @classmethod
    def create(
        cls,
        tenant_id: str,
        starting_date: DateLike,
        week_start_day: Union[WeekStartDay, str],
        id: Optional[str] = None,
    ) -> "PlannedWeek":
        """Create a new planned week with 7 empty day plans.

        Args:
            tenant_id: Owning tenant
            starting_date: First day (date or ISO string)
            week_start_day: Weekday the tenant's weeks start on
            id: Optional identifier (generated when omitted)

        Returns:
            PlannedWeek: New aggregate

        Raises:
            InvalidInputError: If starting_date is not a valid date
            AlignmentError: If starting_date is not on week_start_day

        Example:
            >>> week = PlannedWeek.create("tenant-1", "2025-01-06", "MONDAY")
            >>> week.day_plans[6].date
            datetime.date(2025, 1, 12)
        """
        start = parse_iso_date(starting_date)
        start_day = WeekStartDay.parse(week_start_day)

        if day_index(start) != start_day.day_index():
            raise AlignmentError("starting date must align with configured week start day")

        return cls(
            id=id or str(uuid4()),
            tenant_id=tenant_id,
            starting_date=start,
            week_start_day=start_day,
            day_plans=[
                DayPlan.empty(start + timedelta(days=offset)) for offset in range(DAYS_IN_WEEK)
            ],
        )

    @classmethod
    def rehydrate(cls, snapshot: PlannedWeekSnapshot) -> "PlannedWeek":
        """Rebuild an aggregate from its persisted snapshot.

        Week start alignment is not re-checked: tenant settings may have
        changed since the week was created.

        When the snapshot has no dinner assignment map, every planned dinner
        is restored with ``makes_lunch=False``.

        Raises:
            ValidationError: If the day plans break the 7-day layout
        """
        week = cls(
            id=snapshot.id,
            tenant_id=snapshot.tenant_id,
            starting_date=snapshot.starting_date,
            week_start_day=snapshot.week_start_day,
            day_plans=[replace(plan) for plan in sorted(snapshot.day_plans, key=lambda p: p.date)],
        )

        if snapshot.dinner_assignments is not None:
            week._dinner_assignments = dict(snapshot.dinner_assignments)
        else:
            week._dinner_assignments = {
                plan.date: MealAssignment(meal_id=plan.dinner_meal_id, makes_lunch=False)
                for plan in week.day_plans
                if plan.dinner_meal_id
            }
        return week

    # ============================================================
    # Slot assignment
    # ============================================================

    def assign_meal(
        self,
        day: DateLike,
        slot: Union[MealSlot, str],
        assignment: Optional[MealAssignment],
    ) -> None:
        """Assign a meal to a slot, or clear the slot when assignment is None.

        A dinner assignment stores its ``makes_lunch`` decision for leftover
        propagation. A lunch write makes the lunch manual, so the day is no
        longer a leftover. Leftovers are not recomputed here; call
        :meth:`populate_leftovers`.

        Raises:
            InvalidInputError: If day is not a valid date
            NotFoundError: If day is not in this week
        """
        target = parse_iso_date(day)
        meal_slot = MealSlot.parse(slot)
        day_plan = self._find_day_plan(target)

        if meal_slot is MealSlot.LUNCH:
            day_plan.lunch_meal_id = assignment.meal_id if assignment else None
            day_plan.is_leftover = False
            return

        if assignment is None:
            day_plan.dinner_meal_id = None
            self._dinner_assignments.pop(target, None)
            return

        day_plan.dinner_meal_id = assignment.meal_id
        self._dinner_assignments[target] = assignment

    def remove_meal(self, day: DateLike, slot: Union[MealSlot, str]) -> None:
        """Clear a slot. Same as ``assign_meal(day, slot, None)``."""
        self.assign_meal(day, slot, None)

    # ============================================================
    # Leftovers
    # ============================================================

    def populate_leftovers(self) -> None:
        """Recompute leftover lunches from the week's dinners.

        Previously propagated lunches are cleared first, then each dinner
        with ``makes_lunch`` fills the next day's lunch, unless that lunch
        was assigned manually. The last day's dinner does not wrap around.
        Running it twice in a row yields the same day plans.
        """
        for day_plan in self.day_plans:
            if day_plan.is_leftover:
                day_plan.lunch_meal_id = None
                day_plan.is_leftover = False

        for previous, current in zip(self.day_plans, self.day_plans[1:]):
            dinner = self._dinner_assignments.get(previous.date)
            if dinner is None or not dinner.makes_lunch or previous.dinner_meal_id is None:
                continue
            if current.has_manual_lunch:
                continue
            current.lunch_meal_id = previous.dinner_meal_id
            current.is_leftover = True

    # ============================================================
    # Queries
    # ============================================================

    def get_day_plan(self, day: DateLike) -> DayPlan:
        """Get a copy of the day plan for an exact date.

        Raises:
            InvalidInputError: If day is not a valid date
            NotFoundError: If day is not in this week
        """
        return replace(self._find_day_plan(parse_iso_date(day)))

    def dinner_assignment_for(self, day: DateLike) -> Optional[MealAssignment]:
        """Dinner assignment captured for a date, if any."""
        return self._dinner_assignments.get(parse_iso_date(day))

    @property
    def ending_date(self) -> date:
        return self.starting_date + timedelta(days=DAYS_IN_WEEK - 1)

    def to_snapshot(self) -> PlannedWeekSnapshot:
        """Flat copy of the aggregate state for persistence."""
        return PlannedWeekSnapshot(
            id=self.id,
            tenant_id=self.tenant_id,
            starting_date=self.starting_date,
            week_start_day=self.week_start_day,
            day_plans=tuple(replace(plan) for plan in self.day_plans),
            dinner_assignments=dict(self._dinner_assignments),
        )

    def _find_day_plan(self, target: date) -> DayPlan:
        for day_plan in self.day_plans:
            if day_plan.date == target:
                return day_plan
        raise NotFoundError("date not in planned week")

    def __str__(self) -> str:
        return (
            f"PlannedWeek {self.id} - Tenant {self.tenant_id} - "
            f"{self.starting_date.isoformat()}..{self.ending_date.isoformat()}"
        )
