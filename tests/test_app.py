import io
import json

import pytest

from undoredo.app import Editor, main, parse_command_line, print_events
from undoredo.pubsub import pub as Publisher

LOREM_FULL = "Lorem ipsum, consectetur adipiscing elit."


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def editor(out):
    return Editor(out=out)


def test_parse_command_line():
    args = parse_command_line(["-d", "-l", "5", "-c", "cfg.json", "script.txt"])
    assert args.debug is True
    assert args.limit == 5
    assert args.config == "cfg.json"
    assert args.script == "script.txt"

    args = parse_command_line([])
    assert args.debug is False
    assert args.limit is None
    assert args.script is None


def test_editing_commands(editor, out):
    editor.run(
        [
            "append Lorem ipsum\n",
            "append , consectetur adipiscing elit.\n",
            "insert 12 FOO BAR\n",
            "show\n",
            "undo\n",
            "show\n",
            "redo\n",
            "clear\n",
            "show\n",
            "undo\n",
            "show\n",
        ]
    )
    assert out.getvalue().splitlines() == [
        '"Lorem ipsum,FOO BAR consectetur adipiscing elit."',
        'Undo insert in 12 the text "FOO BAR"',
        f'"{LOREM_FULL}"',
        'Redo insert in 12 the text "FOO BAR"',
        '""',
        "Undo clear buffer",
        '"Lorem ipsum,FOO BAR consectetur adipiscing elit."',
    ]


def test_transaction_commands(editor, out):
    editor.run(
        [
            f"append {LOREM_FULL}",
            "begin Clear and append",
            "clear",
            "append Hi World!!",
            "commit",
            "show",
            "undo",
            "show",
        ]
    )
    assert out.getvalue().splitlines() == [
        "committed Clear and append",
        '"Hi World!!"',
        "Undo Clear and append",
        f'"{LOREM_FULL}"',
    ]
    assert len(editor.history) == 2


def test_empty_transaction_is_discarded(editor, out):
    editor.run(["begin", "commit"])
    assert out.getvalue().strip() == "empty transaction discarded"
    assert len(editor.history) == 0


def test_undo_inside_transaction_is_reported(editor, out):
    editor.run(["append a", "begin", "undo"])
    assert out.getvalue().strip() == "error: Can't undo while a transaction is open"
    assert str(editor.buffer) == "a"


def test_unavailable_undo_is_reported(editor, out):
    editor.run(["undo", "redo", "commit"])
    assert out.getvalue().splitlines() == [
        "error: Can't undo",
        "error: Can't redo",
        "error: No transaction to commit",
    ]


def test_errors_stay_in_their_editor():
    out_a, out_b = io.StringIO(), io.StringIO()
    editor_a = Editor(out=out_a)
    editor_b = Editor(out=out_b)

    editor_a.run(["undo"])
    editor_b.run(["append b", "show"])

    assert out_a.getvalue() == "error: Can't undo\n"
    assert out_b.getvalue() == '"b"\n'


def test_bad_input_is_reported(editor, out):
    editor.run(["insert x text", "insert 5 text", "frobnicate"])
    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert all(line.startswith("error: ") for line in lines)
    assert "frobnicate" in lines[2]
    assert len(editor.history) == 0


def test_history_listing(editor, out):
    editor.run(["history", "append a", "append b", "undo", "history"])
    assert out.getvalue().splitlines() == [
        "Empty or rewound manager",
        'Undo append "b"',
        '>   0  append "a"',
        '    1  append "b"',
    ]


def test_quit_stops_reading(editor, out):
    editor.run(["append a", "quit", "append b"])
    assert str(editor.buffer) == "a"


def test_editor_limit(out):
    editor = Editor(limit=2, out=out)
    editor.run(["append a", "append b", "append c", "undo", "undo", "undo", "show"])
    assert out.getvalue().splitlines()[-2:] == ["error: Can't undo", '"a"']


def test_main_with_script(tmp_path, capsys):
    script = tmp_path / "edits.txt"
    script.write_text("append one\nappend two\nundo\nshow\n")
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"history_limit": 10}))

    assert main(["-c", str(config), str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ['Undo append "two"', '"one"']


def test_main_with_invalid_limit(tmp_path, capsys):
    assert main(["-c", str(tmp_path / "missing.json"), "-l", "0", str(tmp_path / "unused")]) == 2
    assert "History limit must be a positive integer" in capsys.readouterr().err


def test_main_debug_prints_events(tmp_path, capsys):

    script = tmp_path / "edits.txt"
    script.write_text("append one\nshow\n")

    try:
        assert main(["-d", "-c", str(tmp_path / "missing.json"), str(script)]) == 0
    finally:
        Publisher.unsubscribe(print_events, Publisher.ALL_TOPICS)

    output = capsys.readouterr().out
    assert "History changed" in output
    assert '"one"' in output


def test_main_with_missing_script(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["-c", str(tmp_path / "missing.json"), str(missing)]) == 2

    err = capsys.readouterr().err
    assert err.startswith("undoredo: can't open script")
    assert "missing.txt" in err
