import pytest

from xivalexutil.commandline import join_windows_args, strip_program_name


@pytest.mark.parametrize(
    "args",
    [
        ["DEV.TestSID=0", "language=1"],
        ["a", "b", "c"],
        ["single"],
        ["path\\with\\backslashes"],
    ],
)
def test_plain_arguments_joined_by_single_space(args):
    assert join_windows_args(args) == " ".join(args)


def test_empty_sequence_gives_empty_line():
    assert join_windows_args([]) == ""


def test_accepts_generator():
    assert join_windows_args(a for a in ["x", "y"]) == "x y"


def test_argument_with_space_is_quoted():
    assert join_windows_args(["hello world"]) == '"hello world"'


def test_quote_inside_is_escaped():
    assert join_windows_args(['say"hi']) == '"say\\"hi"'


def test_backslash_escaped_only_when_quoted():
    quoted = join_windows_args(["a b\\c"])
    assert quoted.startswith('"') and quoted.endswith('"')
    assert quoted.count("\\") == 2
    assert join_windows_args(["a\\c"]).count("\\") == 1


def test_leading_empty_argument_adds_no_separator():
    assert join_windows_args(["", "x"]) == "x"


def test_quoted_argument_length_invariant():
    arg = 'a "b" \\c'
    special = sum(ch in '\\"' for ch in arg)
    assert len(join_windows_args([arg])) == len(arg) + special + 2


def test_strip_simple_program_name():
    assert strip_program_name("prog rest of line") == "rest of line"


def test_strip_quoted_program_name_with_spaces():
    assert strip_program_name('"C:\\Program Files\\game.exe" -a b') == "-a b"


def test_strip_program_only():
    assert strip_program_name("prog") == ""
    assert strip_program_name('"quoted prog"') == ""


def test_strip_removes_only_one_separator():
    assert strip_program_name("prog  two") == " two"


def test_strip_tab_separator():
    assert strip_program_name("prog\tx y") == "x y"


def test_strip_empty():
    assert strip_program_name("") == ""


@pytest.mark.parametrize(
    "args",
    [
        ["one", "two words", 'q"uote'],
        ["language=1", "path=C:\\x y\\z"],
    ],
)
def test_round_trip_through_strip(args):
    joined = join_windows_args(args)
    assert strip_program_name('"my program.exe" ' + joined) == joined
    assert strip_program_name("prog " + joined) == joined