import pytest

from knightquest.mapfile import (
    BAD_BORDER,
    BAD_ELEMENTS,
    EMPTY,
    IMPOSSIBLE,
    INVALID_CHARACTER,
    INVALID_SIZE,
    GameMap,
    MapError,
    check_map,
    count_elements,
    has_wall_border,
    load_map,
    parse_map,
    reach_exit,
)

VALID = ["1111111\n", "1P0C0E1\n", "1000001\n", "1111111"]


def rows_of(*lines):
    return [list(line) for line in lines]


def test_parse_dimensions_and_lookup():
    game_map = parse_map(VALID)
    assert game_map.height == len(VALID)
    assert game_map.width == len(VALID[-1])
    assert game_map.find("P") == (VALID[1].index("P"), 1)
    assert game_map.count("C") == 1
    assert game_map.find("M") is None


def test_parse_round_trips_text():
    assert str(parse_map(VALID)) == "".join(VALID)


@pytest.mark.parametrize("bad", ["1X1", "1 1", "111\r\n", "1p1"])
def test_invalid_character(bad):
    with pytest.raises(MapError) as err:
        parse_map(["111\n", bad])
    assert str(err.value) == INVALID_CHARACTER


def test_too_narrow():
    with pytest.raises(MapError) as err:
        parse_map(["11\n", "11"])
    assert str(err.value) == INVALID_SIZE


def test_blank_trailing_line_is_too_narrow():
    with pytest.raises(MapError) as err:
        parse_map(["111\n", "1P1\n", "\n"])
    assert str(err.value) == INVALID_SIZE


def test_ragged_rows():
    with pytest.raises(MapError) as err:
        parse_map(["1111\n", "111"])
    assert str(err.value) == INVALID_SIZE


def test_empty_map():
    with pytest.raises(MapError) as err:
        parse_map([])
    assert str(err.value) == EMPTY


def test_border_valid():
    assert has_wall_border(parse_map(VALID).rows) is True


@pytest.mark.parametrize(
    "lines",
    [
        ("1101", "1P01", "1111"),
        ("1111", "0P01", "1111"),
        ("1111", "1P00", "1111"),
        ("1111", "1P01", "1011"),
    ],
)
def test_border_gaps(lines):
    assert has_wall_border(rows_of(*lines)) is False


def test_count_elements():
    assert count_elements(parse_map(VALID).rows) == 1
    assert count_elements(rows_of("11111", "1PCC1", "1CE01", "11111")) == 3
    assert count_elements(rows_of("11111", "1PPC1", "10E01", "11111")) == 0
    assert count_elements(rows_of("11111", "1P0E1", "10E01", "11111")) == 0
    assert count_elements(rows_of("11111", "1P001", "10E01", "11111")) == 0


def test_reach_exit_valid_and_no_mutation():
    game_map = parse_map(VALID)
    before = game_map.copy()
    assert reach_exit(game_map.rows, game_map.find("P"), game_map.find("E"), 1) is True
    assert game_map == before


def test_reach_exit_enclosed_player():
    rows = rows_of("111111", "1P1CE1", "111111")
    assert reach_exit(rows, (1, 1), (4, 1), 1) is False


def test_reach_exit_accepts_reachable_exit_with_stranded_collectible():
    rows = rows_of("111111", "1P0E11", "1111C1", "111111")
    assert reach_exit(rows, (1, 1), (3, 1), 1) is True


def test_check_map_accepts_valid_without_changing_it():
    game_map = parse_map(VALID)
    text = str(game_map)
    check_map(game_map)
    assert str(game_map) == text


@pytest.mark.parametrize(
    "lines, message",
    [
        (("1111111", "1P0C0E0", "1111111"), BAD_BORDER),
        (("1111111", "1P000E1", "1111111"), BAD_ELEMENTS),
        (("1111111", "1PP0CE1", "1111111"), BAD_ELEMENTS),
        (("1111111", "1P1C0E1", "1111111"), IMPOSSIBLE),
    ],
)
def test_check_map_errors(lines, message):
    with pytest.raises(MapError) as err:
        check_map(parse_map(lines))
    assert str(err.value) == message


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("".join(VALID), encoding="ascii")
    assert str(load_map(path)) == "".join(VALID)


def test_load_map_rejects_crlf(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(b"111\r\n1P1\r\n111")
    with pytest.raises(MapError) as err:
        load_map(path)
    assert str(err.value) == INVALID_CHARACTER


def test_copy_is_independent_and_indexing():
    game_map = parse_map(VALID)
    clone = game_map.copy()
    clone[3, 1] = "0"
    assert clone[3, 1] == "0"
    assert game_map[3, 1] == "C"
    assert isinstance(game_map, GameMap)