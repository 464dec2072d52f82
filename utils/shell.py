import logging
import platform
import subprocess
from rich.console import Console
from rich.spinner import Spinner
from rich.live import Live
from typing import List, Optional

_log = logging.getLogger(__name__)

# Platform detection for compatible symbols
IS_WINDOWS = platform.system().lower() == 'windows'

# Use ASCII-compatible symbols for Windows cmd.exe, Unicode for Linux/Mac
if IS_WINDOWS:
    SYMBOL_DONE = "[OK]"
    SYMBOL_FAILED = "[X]"
    SPINNER_STYLE = "line"
else:
    SYMBOL_DONE = "✅"
    SYMBOL_FAILED = "❌"
    SPINNER_STYLE = "dots"

console = Console()


class CommandProgressMonitor:
    """Context manager showing a spinner while an external command runs."""

    def __init__(self, message: str = "Command in progress"):
        self.message = message
        self.spinner = Spinner(SPINNER_STYLE, text=f"│     {message}")
        self.live = None
        self.result = None

    def __enter__(self):
        """Start the spinner display."""
        self.live = Live(self.spinner, console=console, refresh_per_second=10, transient=True)
        self.live.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop the spinner and show final status."""
        if self.live:
            self.live.stop()

        # The exit status of the command is not judged here, only that it ran
        if exc_type is not None:
            console.print(f"  │     {SYMBOL_FAILED} {self.message} - Failed (Exception)", style="bold red")
        elif self.result is not None:
            console.print(f"  │     {SYMBOL_DONE} {self.message} - Done", style="bold green")

    def set_result(self, result):
        self.result = result


class ShellRunner:
    '''Runs external commands and echoes their combined output'''

    def __init__(self, echo=True):
        self.echo = echo

    def run(self, command: List[str], cwd, message: Optional[str] = None) -> Optional[subprocess.CompletedProcess]:
        """Run command inside cwd. Returns None when the executable is not installed."""
        message = message or f"Running {' '.join(command)}"
        _log.info("Running %s in %s", command, cwd)

        try:
            with CommandProgressMonitor(message) as monitor:
                result = subprocess.run(
                    command,
                    cwd=str(cwd),
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    encoding='utf-8',
                    errors='ignore'
                )
                monitor.set_result(result)
        except FileNotFoundError:
            _log.warning("Command not found: %s", command[0])
            return None

        _log.debug("%s exited with %s", command, result.returncode)
        if self.echo and result.stdout:
            console.print(result.stdout, end="" if result.stdout.endswith("\n") else "\n",
                          markup=False, highlight=False)

        return result
