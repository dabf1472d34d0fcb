"""Command-line interface: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import enum
import itertools
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, ExerciseFailed, load_exercises
from .run import run
from .ui import no_emoji
from .verify import VerificationFailed, verify

VERSION = "4.6.0"
DEBOUNCE_SECONDS = 2.0
POLL_SECONDS = 1.0

_BANNER = "\n".join(
    (
        "",
        r"       welcome to...                      ",
        r"                 _   _ _                  ",
        r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
        r" | '__| | | / __| __| | | '_ \ / _` / __| ",
        r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
        r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
        r"                               |___/      ",
        "",
    )
)

_FINISHED_ART = (
    "+----------------------------------------------------+",
    "|          You made it to the Fe-nish line!          |",
    "+--------------------------  ------------------------+",
    "                          \\/                         ",
    "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
    "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
    "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
    " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
    "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
    "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
    "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
    "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
    "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
    "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
    "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
    "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
    "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
    "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
    "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
)

_WATCH_HELP = (
    "Commands available to you in watch mode:",
    "  hint  - prints the current exercise's hint",
    "  clear - clears the screen",
    "  quit  - quits watch mode",
    "  help  - displays this help message",
    "",
    "Watch mode automatically re-evaluates the current exercise",
    "when you edit a file's contents.",
)


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = enum.auto()
    UNFINISHED = enum.auto()


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="rustlings",
        description="Rustlings is a collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument("--nocapture", action="store_true", help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true", help="show the executable version")
    commands = parser.add_subparsers(dest="command", parser_class=_ArgumentParser)
    commands.add_parser("verify", help="Verifies all exercises according to the recommended order")
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser("list", help="Lists the exercises available in Rustlings")
    list_parser.add_argument("-p", "--paths", action="store_true", help="show only the paths of the exercises")
    list_parser.add_argument("-n", "--names", action="store_true", help="show only the names of the exercises")
    list_parser.add_argument(
        "-f",
        "--filter",
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument("-u", "--unsolved", action="store_true", help="display only exercises not yet solved")
    list_parser.add_argument("-s", "--solved", action="store_true", help="display only exercises that have been solved")
    return parser


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        completed = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return completed.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name, or the first pending one for "next"; raise LookupError."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool,
    names: bool,
    filter: str | None,
    unsolved: bool,
    solved: bool,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with the progress summary."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    patterns = [p for p in (filter or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches or filter is None):
            if paths:
                yield fname
            elif names:
                yield exercise.name
            else:
                status = "Done" if done else "Pending"
                yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = f"{done_count / total * 100:.2f}" if total else "NaN"
    yield f"Progress: You completed {done_count} / {total} exercises ({percentage} %)."


class _SharedHint:
    """Hint of the exercise that failed last, shared with the command thread."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._lock = threading.Lock()

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @text.setter
    def text(self, value: str) -> None:
        with self._lock:
            self._text = value


def _watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    while True:
        try:
            raw = sys.stdin.readline()
        except (OSError, ValueError) as err:
            print(f"error reading command: {err}")
            return
        if not raw:
            return
        command = raw.strip()
        if command == "hint":
            print(hint.text)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            should_quit.set()
            print("Bye!")
        elif command == "help":
            print("\n".join(_WATCH_HELP))
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview of the "
        "commands you can use here."
    )
    threading.Thread(target=_watch_shell, args=(hint, should_quit), daemon=True).start()


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = suffix.parts
    return 0 < len(tail) <= len(path.parts) and path.parts[len(path.parts) - len(tail):] == tail


def _pending_after(filepath: Path, exercises: Sequence[Exercise]) -> Iterable[Exercise]:
    return itertools.chain(
        itertools.dropwhile(lambda e: not _ends_with(filepath, e.path), exercises),
        (e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path)),
    )


def _clear_screen() -> None:
    print("\x1bc")


def watch(exercises: Sequence[Exercise], verbose: bool) -> WatchStatus:
    """Verify the exercises, then re-verify whenever an exercise file changes."""
    changes: queue.Queue[Path] = queue.Queue()
    should_quit = threading.Event()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
            return WatchStatus.FINISHED
        except VerificationFailed as failure:
            hint = _SharedHint(failure.exercise.hint)
        _spawn_watch_shell(hint, should_quit)

        recent: dict[Path, float] = {}
        while True:
            try:
                recent[changes.get(timeout=POLL_SECONDS)] = time.monotonic()
            except queue.Empty:
                pass
            now = time.monotonic()
            settled = [path for path, seen in recent.items() if now - seen >= DEBOUNCE_SECONDS]
            for path in settled:
                del recent[path]
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                _clear_screen()
                try:
                    verify(_pending_after(filepath, exercises), verbose)
                    return WatchStatus.FINISHED
                except VerificationFailed as failure:
                    hint.text = failure.exercise.hint
            if should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _print_finished() -> None:
    emoji = "★" if no_emoji() else "🎉"
    print(f"{emoji} All exercises completed! {emoji}")
    print()
    print("\n".join(_FINISHED_ART))
    print()
    print("We hope you enjoyed learning about the various aspects of Rust!")
    print("If you noticed any issues, please don't hesitate to report them to our repo.")
    print("You can also contribute your own exercises to help the greater community!")
    print()
    print("Before reporting an issue or contributing, please read our contributing guidelines.")


def _list(exercises: Sequence[Exercise], args: argparse.Namespace) -> int:
    try:
        for line in list_exercises(
            exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
        ):
            print(line)
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _watch(exercises: Sequence[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        _print_finished()
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustlings watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    args = _parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(_BANNER)

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(Path("default_out.txt").read_text(encoding="utf-8"))
        return 0

    try:
        match args.command:
            case "list":
                return _list(exercises, args)
            case "run":
                try:
                    run(find_exercise(args.name, exercises), verbose)
                except ExerciseFailed:
                    return 1
                return 0
            case "hint":
                print(find_exercise(args.name, exercises).hint)
                return 0
            case "verify":
                try:
                    verify(exercises, verbose)
                except VerificationFailed:
                    return 1
                return 0
            case _:
                return _watch(exercises, verbose)
    except LookupError as err:
        print(err)
        return 1