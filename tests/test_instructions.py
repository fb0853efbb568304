import pytest

from artcanvas.instructions import (
    WIN_HEIGHT,
    WIN_WIDTH,
    ActionWord,
    InstructionError,
    Program,
    build_actions,
    load_instructions,
    parse_instructions,
    validate_pair,
)


def test_build_actions_follows_action_word_order():
    actions = build_actions()
    assert list(actions) == [word.value for word in ActionWord]


def test_build_actions_colour_words():
    assert build_actions()["colour"] == ("red", "green", "blue", "pink", "purple")


def test_build_actions_type_words():
    assert build_actions()["type"] == ("triangle", "sierpinski")


def test_validate_pair_accepts_listed_word():
    assert validate_pair("colour", "red") is ActionWord.COLOUR


def test_validate_pair_rejects_unlisted_word():
    with pytest.raises(InstructionError):
        validate_pair("colour", "yellow")


def test_validate_pair_rejects_unknown_action():
    with pytest.raises(InstructionError):
        validate_pair("fill", "red")


@pytest.mark.parametrize("value", ["0", "25", "-3"])
def test_validate_pair_accepts_integers(value):
    assert validate_pair("size", value) is ActionWord.SIZE


def test_validate_pair_rejects_non_number_for_size():
    with pytest.raises(InstructionError):
        validate_pair("size", "big")


def test_validate_pair_accepts_number_for_any_action():
    assert validate_pair("shape", "7") is ActionWord.SHAPE


def test_default_program_values():
    program = Program.default(0, 0, 200, 100)
    assert program.colour == "red"
    assert program.move == "up"
    assert program.shape == "square"
    assert program.type == "triangle"
    assert program.iterations == 1


def test_default_program_is_offset_from_centre_by_size():
    program = Program.default(10, 20, 200, 100)
    assert program.startx + program.size == 10 + 200 // 2
    assert program.starty + program.size == 20 + 100 // 2


def test_apply_size_moves_start_back_by_half():
    program = Program.default(0, 0, 400, 400)
    before = (program.startx, program.starty)
    program.apply("size", "40")
    assert program.size == 40
    assert (program.startx, program.starty) == (before[0] - 20, before[1] - 20)


def test_apply_integer_and_text_fields():
    program = Program.default(0, 0, 400, 400)
    program.apply("iterations", "4")
    program.apply("shape", "circle")
    program.apply("endx", "33")
    assert program.iterations == 4
    assert program.shape == "circle"
    assert program.endx == 33


def test_apply_unknown_word_raises():
    program = Program.default(0, 0, 400, 400)
    with pytest.raises(InstructionError):
        program.apply("fill", "red")


def test_parse_empty_text_gives_default():
    assert parse_instructions("") == Program.default(0, 0, WIN_WIDTH, WIN_HEIGHT)


def test_parse_instructions_applies_pairs():
    program = parse_instructions(
        "colour blue\nshape circle\ntype sierpinski iterations 3\n"
    )
    assert program.colour == "blue"
    assert program.shape == "circle"
    assert program.type == "sierpinski"
    assert program.iterations == 3


def test_parse_odd_word_count_raises():
    with pytest.raises(InstructionError):
        parse_instructions("colour red shape")


def test_parse_invalid_pair_raises():
    with pytest.raises(InstructionError):
        parse_instructions("colour red shape hexagon")


def test_parse_overlong_word_raises():
    with pytest.raises(InstructionError):
        parse_instructions("colour " + "r" * 30)


def test_load_instructions_reads_file(tmp_path):
    path = tmp_path / "instruction.txt"
    path.write_text("colour green\nmove left\n", encoding="utf-8")
    program = load_instructions(path)
    assert program.colour == "green"
    assert program.move == "left"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_instructions(tmp_path / "absent.txt")


def test_to_draw_copies_settings_to_every_iteration():
    program = parse_instructions("colour pink shape line type sierpinski size 30")
    fractal = program.to_draw()
    assert all(fractal.colour_at(i) == "pink" for i in range(1, 11))
    assert all(fractal.shape_at(i) == "line" for i in range(1, 11))
    assert set(fractal.type) == {"sierpinski"}
    assert set(fractal.size) == {30}
    assert (fractal.startx, fractal.starty) == (program.startx, program.starty)
    assert fractal.iterations == program.iterations