from __future__ import annotations

from itertools import count
from subprocess import run
from threading import Lock
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from libmacropub.prober.environment import ProberEnvironment

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from pathlib import Path

    # Runs given command with given bytes on stdin, returns exit code
    CompilerRunner: TypeAlias = Callable[[Sequence[str], bytes], int]

NO_STD_PREAMBLE = b"#![no_std]\n"
PROBE_CRATE_NAME_PREFIX = "probe"
STDIN_SOURCE = "-"


def run_compiler_process(command: Sequence[str], stdin: bytes) -> int:
    """Spawn compiler process, feed source via stdin and wait for it, output is not captured."""
    process = run(
        command,
        input=stdin,
        check=False,
        capture_output=False,
        shell=False,
    )
    return process.returncode


class CompilerProber:
    """Detects host compiler features by compiling synthetic snippets.

    Each probe compiles snippet as standalone library crate with same flags real build would use,
    snippet is supported iff compiler exits successfully (output is not parsed).
    Probe never raises on compiler failure, failure to compile means feature is absent.
    """

    # Scratch artifacts identifiers, shared between all probers within process
    __probe_ids: ClassVar[count[int]] = count()
    __probe_ids_lock: ClassVar[Lock] = Lock()

    environment: ProberEnvironment

    # Whether target requires `#![no_std]` (e.g there is no standard library for it)
    no_std: bool

    def __init__(
        self,
        environment: ProberEnvironment,
        *,
        no_std: bool = False,
        runner: CompilerRunner = run_compiler_process,
        on_shell_call: Callable[[list[str]], None] | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self.environment = environment
        self.no_std = no_std
        self._runner = runner
        self._on_shell_call = on_shell_call
        self._on_warning = on_warning

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        runner: CompilerRunner = run_compiler_process,
        on_shell_call: Callable[[list[str]], None] | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> CompilerProber:
        """Construct prober from environment and detect whether target requires `no_std`."""
        prober = cls(
            ProberEnvironment.from_mapping(environ),
            runner=runner,
            on_shell_call=on_shell_call,
            on_warning=on_warning,
        )
        prober.detect_no_std()
        return prober

    def detect_no_std(self) -> None:
        """Sanity check with and without standard library by compiling an empty snippet.

        If neither works, standard library is assumed and warning is emitted (never fails).
        """
        self.no_std = False
        if self.probe(b""):
            return

        self.no_std = True
        if self.probe(b""):
            return

        # Neither worked, so assume nothing
        self.no_std = False
        self._warn("could not probe for `std`")

    def probe(self, code: bytes | str) -> bool:
        """Is given snippet compiles with host compiler (and current flags)."""
        if isinstance(code, str):
            code = code.encode()

        command = self.compose_probe_command(self._next_probe_id())
        if self._on_shell_call:
            self._on_shell_call(command)

        stdin = NO_STD_PREAMBLE + code if self.no_std else code
        try:
            exit_code = self._runner(command, stdin)
        except OSError as e:
            # Compiler is missing or cannot be spawned, treated as feature absence
            self._warn(f"could not spawn compiler `{self.environment.rustc}`: {e}")
            return False
        return exit_code == 0

    def compose_probe_command(self, probe_id: int) -> list[str]:
        """Construct compiler command to compile source from stdin into scratch directory."""
        env = self.environment

        # fmt: off
        command = [
            env.rustc,
            "--crate-name", f"{PROBE_CRATE_NAME_PREFIX}{probe_id}",
            "--crate-type=lib",
            "--out-dir", str(env.out_dir),
            "--emit=llvm-ir",
        ]
        # fmt: on

        if env.target is not None:
            command.extend(("--target", env.target))

        command.extend(env.rustflags)
        command.append(STDIN_SOURCE)
        return command

    @property
    def out_dir(self) -> Path:
        return self.environment.out_dir

    @classmethod
    def _next_probe_id(cls) -> int:
        with cls.__probe_ids_lock:
            return next(cls.__probe_ids)

    def _warn(self, text: str) -> None:
        if self._on_warning:
            self._on_warning(text)
