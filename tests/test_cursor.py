from awildtxt.buffer import cursor

TEXT = "alpha\nbe\ngamma"


def test_line_and_column() -> None:
    assert cursor.line_of(TEXT, 0) == 0
    assert cursor.line_of(TEXT, 5) == 0
    assert cursor.line_of(TEXT, 6) == 1
    assert cursor.column_of(TEXT, 7) == 1
    assert cursor.column_of(TEXT, 9) == 0
    assert cursor.line_count(TEXT) == 3


def test_line_start_and_length() -> None:
    assert cursor.line_start(TEXT, 1) == 6
    assert cursor.line_start(TEXT, 2) == 9
    assert cursor.line_length(TEXT, 1) == 2
    assert cursor.line_length(TEXT, 2) == 5


def test_move_horizontal_clamps() -> None:
    assert cursor.move_horizontal(TEXT, 0, -1) == 0
    assert cursor.move_horizontal(TEXT, len(TEXT), 1) == len(TEXT)
    assert cursor.move_horizontal(TEXT, 3, 1) == 4


def test_move_vertical_keeps_column() -> None:
    assert cursor.move_vertical(TEXT, 1, 2) == 10
    assert cursor.move_vertical(TEXT, 10, -1) == 7


def test_move_vertical_clamps_to_shorter_line() -> None:
    assert cursor.move_vertical(TEXT, 4, 1) == 8
    assert cursor.move_vertical(TEXT, 13, -1) == 8


def test_move_vertical_without_target_line() -> None:
    assert cursor.move_vertical(TEXT, 3, -1) == 3
    assert cursor.move_vertical(TEXT, 11, 1) == 11
    assert cursor.move_vertical("", 0, 1) == 0
