import subprocess

from motdfetch.system import SystemFacts, collect_facts


def _runner(outputs):
    def run(args):
        key = " ".join(args)
        value = outputs[key]
        if isinstance(value, Exception):
            raise value
        return value

    return run


def test_collect_facts_strips_command_output() -> None:
    run = _runner(
        {
            "whoami": "alice\n",
            "uname -o": "GNU/Linux\n",
            "uname -m": "x86_64\n",
            "uptime -p": "up 3 hours, 2 minutes\n",
        }
    )
    env = {
        "SHELL": "/usr/bin/zsh",
        "TERM": "xterm-kitty",
        "EDITOR": "nvim",
        "BROWSER": "firefox",
        "DESKTOP_SESSION": "plasma",
    }

    facts = collect_facts(env=env, run=run)

    assert facts == SystemFacts(
        username="alice",
        os_name="GNU/Linux",
        machine="x86_64",
        uptime="up 3 hours, 2 minutes",
        shell="zsh",
        terminal="xterm-kitty",
        editor="nvim",
        browser="firefox",
        desktop="plasma",
    )


def test_failed_commands_and_missing_env_are_absent() -> None:
    run = _runner(
        {
            "whoami": FileNotFoundError("whoami"),
            "uname -o": subprocess.CalledProcessError(1, ["uname", "-o"]),
            "uname -m": subprocess.TimeoutExpired(["uname", "-m"], 2.0),
            "uptime -p": "   \n",
        }
    )

    facts = collect_facts(env={"TERM": ""}, run=run)

    assert facts == SystemFacts()
