# rustlings

A command-line runner for a course of small programming exercises. Each
exercise is a source file that does not yet compile or whose tests do not
yet pass; you fix it, the runner compiles it with `rustc`, runs it, and
moves you on to the next one.

## Requirements

- Python 3.11 or later
- `rustc` on your `PATH` (the runner checks with `rustc --version` before
  doing anything); the clippy exercises also need `cargo clippy`
- an exercise directory holding `info.toml`, the exercise sources under
  `./exercises` and `default_out.txt`

## Installation

```
pip install .
```

To run the package's own tests:

```
pip install ".[test]"
pytest
```

## Getting started

Run every command from the exercise directory, the one holding
`info.toml`. Started anywhere else, the runner says so and exits with
status 1.

```
rustlings
```

With no subcommand it prints a welcome banner and the contents of
`default_out.txt`.

## Commands

```
rustlings verify
```

Checks every exercise in the order given in `info.toml`: compile
exercises are built and run, test exercises are built as a test harness
and run, clippy exercises are linted. It stops at the first one that
fails or is still marked `I AM NOT DONE`, and exits with status 1 in
that case.

```
rustlings watch
```

Like `verify`, but keeps running: when a `.rs` file under `./exercises`
is created or modified, the changed exercise and every pending one are
checked again, once the file has been quiet for about two seconds. While
watching you can type:

- `hint`  – show the hint for the exercise you are stuck on
- `clear` – clear the screen
- `quit`  – leave watch mode
- `help`  – list these commands

```
rustlings run NAME
```

Compiles and runs (or tests) a single exercise without asking you to
remove the marker. `rustlings run next` picks the first exercise that is
not yet done.

```
rustlings hint NAME
```

Prints the hint for one exercise. `next` works here too.

```
rustlings list
```

Shows every exercise with its path and whether it is `Done` or `Pending`,
followed by your overall progress. Options:

- `-p`, `--paths` – print only the paths
- `-n`, `--names` – print only the names
- `-f`, `--filter TEXT` – keep exercises whose name or path contains one
  of the comma-separated patterns
- `-u`, `--unsolved` – only exercises not yet done
- `-s`, `--solved` – only exercises already done

Global options:

- `--nocapture` – show the output of test exercises
- `-v`, `--version` – print the version and exit

## Marking an exercise as done

An exercise counts as pending while its source contains a comment line
`// I AM NOT DONE`. Once it compiles and passes, the runner shows the
lines around that marker; delete the comment to move on.

## Emoji

Set the environment variable `NO_EMOJI` to print plain-text markers
instead of emoji.

## Using it from Python

`rustlings.exercise` loads `info.toml` (`load_exercises`,
`parse_exercise_list`) into `Exercise` objects, whose `state()` and
`looks_done()` report the marker and whose `compile()` raises
`ExerciseFailed` on failure. `rustlings.verify.verify` and
`rustlings.run.run` do what the commands of the same name do, raising
`VerificationFailed` or `ExerciseFailed` instead of exiting.

## Worked solutions

The `rustlings.lessons` package holds solved versions of exercise topics
as plain Python modules: `quizzes`, `functions`, `errors`,
`advanced_errors`, `generics`, `iterators`, `concurrency`, `containers`,
`strings`, `enums`, `structs`, `primitives` and `greetings`.

## What this package does not do

It does not ship the exercises themselves: there is no `info.toml` and
no exercise source in the package, so the runner needs an exercise
directory to be present. The worked solutions have no module on type
conversions.