"""
Seat Grid Aggregate - Aggregate Root for one event's seats

[Business Invariants]
- Seats are generated once, row-major, and only mutated afterwards
- An occupied seat is never selected
- The live selection holds each seat id at most once, in selection order

Persistence is not done here; the engine snapshots the grid after each
mutation and writes the snapshot through the state handlers.
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

import attrs

from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.seating.domain.entity.seat_entity import Seat
from campus_seats.service.seating.domain.enum.seat_action_status import SeatActionStatus
from campus_seats.service.seating.domain.value_object.seat_selection import SeatSelection
from campus_seats.service.seating.domain.value_object.selected_seat_record import (
    SelectedSeatRecord,
)


@attrs.define
class ReconciliationReport:
    """Persisted ids that did not survive reconciliation."""

    unknown_occupied_ids: List[str] = attrs.field(factory=list)
    unknown_selected_ids: List[str] = attrs.field(factory=list)
    occupied_selected_ids: List[str] = attrs.field(factory=list)
    duplicate_selected_ids: List[str] = attrs.field(factory=list)
    invariant_violations: List[str] = attrs.field(factory=list)

    @property
    def is_clean(self) -> bool:
        return not (
            self.unknown_occupied_ids
            or self.unknown_selected_ids
            or self.occupied_selected_ids
            or self.duplicate_selected_ids
            or self.invariant_violations
        )


@attrs.define
class SeatGrid:
    event_id: str
    rows: int
    columns: int
    seats: List[Seat]
    selected_seat_ids: List[str] = attrs.field(factory=list)
    selection_created_at: Optional[datetime] = None
    _index: Dict[str, Seat] = attrs.field(init=False, factory=dict)

    def __attrs_post_init__(self) -> None:
        self._index = {seat.id: seat for seat in self.seats}

    @classmethod
    def generate(cls, *, event_id: str, rows: int, columns: int) -> 'SeatGrid':
        seats = [Seat(row=row, column=column) for row in range(rows) for column in range(columns)]
        return cls(event_id=event_id, rows=rows, columns=columns, seats=seats)

    def get_seat(self, seat_id: str) -> Optional[Seat]:
        return self._index.get(seat_id)

    @property
    def selected_seats(self) -> List[Seat]:
        return [self._index[seat_id] for seat_id in self.selected_seat_ids]

    @property
    def occupied_seat_ids(self) -> List[str]:
        """Occupied ids in row-major order"""
        return [seat.id for seat in self.seats if seat.is_occupied]

    # ============================ Reconciliation ============================

    def reconcile(
        self,
        *,
        occupied_ids: Iterable[str],
        selection: Optional[SeatSelection],
    ) -> ReconciliationReport:
        """
        Overlay persisted occupancy, then the persisted selection, on a fresh grid.

        Occupancy is applied first so it always wins over a stale selection.
        """
        report = ReconciliationReport()

        for seat_id in occupied_ids:
            seat = self._index.get(seat_id)
            if seat is None:
                report.unknown_occupied_ids.append(seat_id)
                continue
            seat.is_occupied = True

        if selection is not None:
            for record in selection.selected_seats:
                seat = self._index.get(record.seat_id)
                if seat is None:
                    report.unknown_selected_ids.append(record.seat_id)
                elif seat.is_occupied:
                    report.occupied_selected_ids.append(record.seat_id)
                elif seat.is_selected:
                    report.duplicate_selected_ids.append(record.seat_id)
                else:
                    seat.is_selected = True
                    self.selected_seat_ids.append(seat.id)
            if self.selected_seat_ids:
                self.selection_created_at = selection.created_at

        for seat in self.seats:
            if seat.is_occupied and seat.is_selected:
                seat.is_selected = False
                report.invariant_violations.append(seat.id)
        if report.invariant_violations:
            self.selected_seat_ids = [
                seat_id
                for seat_id in self.selected_seat_ids
                if seat_id not in report.invariant_violations
            ]

        self._log_report(report)
        return report

    def _log_report(self, report: ReconciliationReport) -> None:
        if report.unknown_occupied_ids:
            Logger.base.warning(
                f'⚠️ [SEAT_GRID] {self.event_id}: dropped unknown occupied ids {report.unknown_occupied_ids}'
            )
        if report.unknown_selected_ids:
            Logger.base.warning(
                f'⚠️ [SEAT_GRID] {self.event_id}: dropped unknown selected ids {report.unknown_selected_ids}'
            )
        if report.occupied_selected_ids:
            Logger.base.warning(
                f'⚠️ [SEAT_GRID] {self.event_id}: dropped occupied ids from selection {report.occupied_selected_ids}'
            )
        if report.duplicate_selected_ids:
            Logger.base.warning(
                f'⚠️ [SEAT_GRID] {self.event_id}: dropped duplicate selected ids {report.duplicate_selected_ids}'
            )
        if report.invariant_violations:
            Logger.base.error(
                f'❌ [SEAT_GRID] {self.event_id}: seats both occupied and selected, kept occupied {report.invariant_violations}'
            )

    # ============================ Mutations ============================

    def toggle_select(self, seat_id: str) -> SeatActionStatus:
        seat = self._index.get(seat_id)
        if seat is None:
            return SeatActionStatus.SEAT_NOT_FOUND
        if seat.is_occupied:
            return SeatActionStatus.SEAT_OCCUPIED

        if seat.is_selected:
            seat.is_selected = False
            self.selected_seat_ids.remove(seat.id)
            return SeatActionStatus.DESELECTED

        seat.is_selected = True
        self.selected_seat_ids.append(seat.id)
        if self.selection_created_at is None:
            self.selection_created_at = datetime.now(timezone.utc)
        return SeatActionStatus.SELECTED

    def deselect(self, seat_id: str) -> bool:
        """Drop a seat from the live selection; False when it was not selected"""
        seat = self._index.get(seat_id)
        if seat is None or not seat.is_selected:
            return False
        seat.is_selected = False
        self.selected_seat_ids.remove(seat.id)
        return True

    def toggle_occupied(self, seat_id: str) -> SeatActionStatus:
        seat = self._index.get(seat_id)
        if seat is None:
            return SeatActionStatus.SEAT_NOT_FOUND

        seat.is_occupied = not seat.is_occupied
        return SeatActionStatus.OCCUPIED if seat.is_occupied else SeatActionStatus.RELEASED

    def clear_selection(self) -> SeatActionStatus:
        for seat in self.selected_seats:
            seat.is_selected = False
        self.selected_seat_ids = []
        self.selection_created_at = None
        return SeatActionStatus.CLEARED

    # ============================ Snapshots ============================

    def snapshot_selection(self, *, renew: bool = False) -> SeatSelection:
        """
        Re-derive the selection from the live seats.

        Records always get fresh ids and timestamps. ``created_at`` is kept
        unless ``renew`` is set, which is how a booking starts a new selection.
        """
        now = datetime.now(timezone.utc)
        if renew or self.selection_created_at is None:
            self.selection_created_at = now
        return SeatSelection(
            event_id=self.event_id,
            selected_seats=[
                SelectedSeatRecord.from_seat(seat, now=now) for seat in self.selected_seats
            ],
            created_at=self.selection_created_at,
        )
