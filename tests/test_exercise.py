import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustlings.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    Mode,
    State,
    clean,
    load_exercises,
    parse_exercise_list,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def make(tmp_path, name, source, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(source)
    return Exercise(name=name, path=path, mode=mode, hint="")


def fake_subprocess(compile_code=0, run_code=0, stdout=b"", stderr=b""):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        if args[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(args, compile_code, b"", stderr)
        return subprocess.CompletedProcess(args, run_code, stdout, stderr)

    return fake_run, calls


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = make(tmp_path, "example", PENDING)
    fake, _ = fake_subprocess()
    with mock.patch("rustlings.exercise.subprocess.run", side_effect=fake):
        compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_cleans(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    with CompiledExercise(make(tmp_path, "example", PENDING)) as compiled:
        assert Path(temp_file()).exists()
        assert compiled.exercise.name == "example"
    assert not Path(temp_file()).exists()


def test_clean_function(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    clean()
    assert not Path(temp_file()).exists()
    clean()
    assert not Path(temp_file()).exists()


def test_temp_file_mentions_process():
    assert temp_file().startswith(f"./temp_{os.getpid()}_")


def test_pending_state(tmp_path):
    exercise = make(tmp_path, "pending_exercise", PENDING)
    expected = State(
        (
            ContextLine("// fake_exercise", 1, False),
            ContextLine("", 2, False),
            ContextLine("// I AM NOT DONE", 3, True),
            ContextLine("", 4, False),
            ContextLine("fn main() {", 5, False),
        )
    )
    assert exercise.state() == expected
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    exercise = make(tmp_path, "finished_exercise", FINISHED)
    assert exercise.state() == State()
    assert exercise.state().done
    assert exercise.looks_done() is True


def test_marker_on_first_line(tmp_path):
    exercise = make(tmp_path, "first", "/// I  AM NOT\tDONE\nfn main() {}\n")
    state = exercise.state()
    assert [line.number for line in state.context] == [1, 2]
    assert state.context[0].important


def test_marker_in_code_is_not_pending(tmp_path):
    exercise = make(tmp_path, "code", 'fn main() { let s = "I AM NOT DONE"; }\n')
    assert exercise.looks_done()


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "exercise_with_output", "#[test]\nfn passing() {}\n", Mode.TEST)
    fake, calls = fake_subprocess(stdout=b"THIS TEST TOO SHALL PASS\n")
    with mock.patch("rustlings.exercise.subprocess.run", side_effect=fake):
        with exercise.compile() as compiled:
            out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert "--test" in calls[0]
    assert calls[1][1] == "--show-output"


def test_compile_failure_raises_with_stderr(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "broken", "fn main() {\n    let\n}\n")
    fake, _ = fake_subprocess(compile_code=1, stderr=b"expected pattern")
    with mock.patch("rustlings.exercise.subprocess.run", side_effect=fake):
        with pytest.raises(ExerciseFailed) as info:
            exercise.compile()
    assert info.value.output.stderr == "expected pattern"


def test_run_failure_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "panics", FINISHED)
    fake, calls = fake_subprocess(run_code=101, stdout=b"partial", stderr=b"panicked")
    with mock.patch("rustlings.exercise.subprocess.run", side_effect=fake):
        with exercise.compile() as compiled:
            with pytest.raises(ExerciseFailed) as info:
                compiled.run()
    assert info.value.output.stdout == "partial"
    assert info.value.output.stderr == "panicked"
    assert calls[1] == [temp_file(), ""]


def test_clippy_writes_cargo_toml(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(tmp_path, "clippy1", FINISHED, Mode.CLIPPY)
    fake, calls = fake_subprocess()
    with mock.patch("rustlings.exercise.subprocess.run", side_effect=fake):
        exercise.compile().close()
    toml = (tmp_path / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in toml
    assert 'path = "clippy1.rs"' in toml
    assert [call[:2] for call in calls] == [
        ["rustc", str(exercise.path)],
        ["cargo", "clean"],
        ["cargo", "clippy"],
    ]


def test_display_is_path():
    exercise = Exercise("intro1", Path("exercises/intro/intro1.rs"), Mode.COMPILE, "")
    assert str(exercise) == "exercises/intro/intro1.rs"


def test_parse_exercise_list():
    text = (
        "[[exercises]]\n"
        'name = "testFailure"\n'
        'path = "testFailure.rs"\n'
        'mode = "test"\n'
        'hint = "Hello!"\n'
        "[[exercises]]\n"
        'name = "compSuccess"\n'
        'path = "compSuccess.rs"\n'
        'mode = "compile"\n'
        'hint = ""\n'
    )
    exercises = parse_exercise_list(text)
    assert [e.name for e in exercises] == ["testFailure", "compSuccess"]
    assert exercises[0].mode is Mode.TEST
    assert exercises[0].hint == "Hello!"
    assert exercises[1].path == Path("compSuccess.rs")


def test_parse_exercise_list_missing_field():
    with pytest.raises(ValueError):
        parse_exercise_list('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "test"\n')


def test_parse_exercise_list_bad_mode():
    with pytest.raises(ValueError):
        parse_exercise_list(
            '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "lint"\nhint = ""\n'
        )


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "c"\npath = "c.rs"\nmode = "clippy"\nhint = "h"\n')
    exercises = load_exercises(info)
    assert exercises == [Exercise("c", Path("c.rs"), Mode.CLIPPY, "h")]