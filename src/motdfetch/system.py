from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
import os
import subprocess

from motdfetch.util.logging import get_logger

LOG = get_logger(__name__)

COMMAND_TIMEOUT_SECONDS = 2.0

Runner = Callable[[Sequence[str]], str]


@dataclass(frozen=True)
class SystemFacts:
    username: str | None = None
    os_name: str | None = None
    machine: str | None = None
    uptime: str | None = None
    shell: str | None = None
    terminal: str | None = None
    editor: str | None = None
    browser: str | None = None
    desktop: str | None = None


def run_command(args: Sequence[str]) -> str:
    proc = subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        check=True,
        timeout=COMMAND_TIMEOUT_SECONDS,
    )
    return proc.stdout


def _command_fact(run: Runner, args: Sequence[str]) -> str | None:
    try:
        value = run(args).strip()
    except (OSError, subprocess.SubprocessError) as exc:
        LOG.debug("Command %s failed: %s", " ".join(args), exc)
        return None
    return value or None


def _env_fact(env: Mapping[str, str], name: str) -> str | None:
    return env.get(name) or None


def _shell_name(env: Mapping[str, str]) -> str | None:
    shell = _env_fact(env, "SHELL")
    if shell is None:
        return None
    return shell.rstrip("/").split("/")[-1] or None


def collect_facts(
    env: Mapping[str, str] | None = None,
    run: Runner | None = None,
) -> SystemFacts:
    env = os.environ if env is None else env
    run = run or run_command
    return SystemFacts(
        username=_command_fact(run, ["whoami"]),
        os_name=_command_fact(run, ["uname", "-o"]),
        machine=_command_fact(run, ["uname", "-m"]),
        uptime=_command_fact(run, ["uptime", "-p"]),
        shell=_shell_name(env),
        terminal=_env_fact(env, "TERM"),
        editor=_env_fact(env, "EDITOR"),
        browser=_env_fact(env, "BROWSER"),
        desktop=_env_fact(env, "DESKTOP_SESSION"),
    )
