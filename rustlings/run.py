"""Run a single exercise without prompting about its progress."""

from __future__ import annotations

from rich.console import Console

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import test


def run(exercise: Exercise, verbose: bool) -> None:
    """Compile and run, or test, an exercise; raise ExerciseFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile an exercise and run the binary, showing its output."""
    console = Console(highlight=False, soft_wrap=True)
    with console.status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as failure:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(failure.output.stderr)
            raise
        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                print(failure.output.stdout)
                print(failure.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise
    print(output.stdout)
    success(f"Successfully ran {exercise}")