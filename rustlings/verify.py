"""Check exercises in order, stopping at the first one that is not finished."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import no_emoji, success, warn


class VerificationFailed(Exception):
    """An exercise failed to build, run, pass its tests, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def verify(exercises: Iterable[Exercise], verbose: bool) -> None:
    """Verify each exercise in turn; raise VerificationFailed for the first failure."""
    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
            elif exercise.mode is Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            else:
                passed = _compile_only(exercise)
        except ExerciseFailed:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)


def test(exercise: Exercise, verbose: bool) -> None:
    """Compile and run the test harness; raise ExerciseFailed if it fails."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as failure:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        raise


def _compile_only(exercise: Exercise) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _console().status(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(failure.output.stdout)
                print(failure.output.stderr)
                raise
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _console().status(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(failure.output.stdout)
                raise
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    return prompt_for_completion(exercise, None) if interactive else True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done:
        return True

    plain = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if plain
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    print()
    print(f"~*~ {success_message} ~*~" if plain else f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator())
        print(prompt_output)
        console.print(separator())
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False


def separator() -> Text:
    """The bold rule framing an exercise's output."""
    return Text("====================", style="bold")