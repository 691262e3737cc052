import attrs


def make_seat_id(row: int, column: int) -> str:
    return f'{row}_{column}'


def make_seat_label(row: int, column: int) -> str:
    """Row letter plus 1-based column, e.g. row 1 column 0 -> 'B1'"""
    return f'{chr(ord("A") + row)}{column + 1}'


@attrs.define
class Seat:
    row: int
    column: int
    is_selected: bool = False
    is_occupied: bool = False
    id: str = attrs.field(init=False)

    def __attrs_post_init__(self) -> None:
        self.id = make_seat_id(self.row, self.column)

    @property
    def label(self) -> str:
        return make_seat_label(self.row, self.column)
