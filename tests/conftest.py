import json
import subprocess

import pytest

from installer.models import EnvironmentType


class FakePrompts:
    """Answers questions from a dict keyed by prompt text and records them."""

    def __init__(self, answers=None, confirm=False):
        self.answers = answers or {}
        self.confirm_answer = confirm
        self.asked = []

    def ask(self, prompt):
        self.asked.append(prompt)
        return self.answers.get(prompt)

    def confirm(self, prompt):
        self.asked.append(prompt)
        return self.confirm_answer


class FakeShell:
    """Records commands instead of running them."""

    def __init__(self, missing=False):
        self.calls = []
        self.missing = missing

    def run(self, command, cwd, message=None):
        self.calls.append((list(command), str(cwd)))
        if self.missing:
            return None
        return subprocess.CompletedProcess(args=command, returncode=0, stdout="added 1 package\n")


class StubProbe:
    def __init__(self, environment_type):
        self.environment_type = environment_type

    def detect_environment_type(self):
        return self.environment_type


@pytest.fixture
def dev_probe():
    return StubProbe(EnvironmentType.DEVELOPMENT)


@pytest.fixture
def live_probe():
    return StubProbe(EnvironmentType.NON_DEVELOPMENT)


@pytest.fixture
def project(tmp_path):
    """A freshly scaffolded project tree."""
    root = tmp_path / "myproj"
    (root / "themes" / "default" / "css").mkdir(parents=True)
    (root / "themes" / "default" / "css" / "layout.css").write_text("body {}\n")
    (root / "mysite" / "_config").mkdir(parents=True)

    (root / "package.json").write_text(json.dumps({
        "name": "default",
        "version": "1.0.0",
        "devDependencies": {"gulp": "^4.0.0"}
    }))

    (root / "mysite" / "_config" / "config.yml").write_text(
        "---\n"
        "Name: mysite\n"
        "After:\n"
        "  - 'framework/*'\n"
        "  - 'cms/*'\n"
        "---\n"
        "SSViewer:\n"
        "  current_theme: default\n"
        "Database:\n"
        "  host: old-host\n"
        "  name: old_db\n"
        "Foo:\n"
        "  bar: 1\n"
    )

    (root / "mysite" / "_config" / "logging.yml").write_text(
        "---\n"
        "Name: mysite-logging\n"
        "---\n"
        "Injector:\n"
        "  Monolog:\n"
        "    class: Monolog\\Logger\n"
        "    constructor:\n"
        "      - 'Placeholder'\n"
        "      - '%$LogHandlers'\n"
    )

    (root / "README.md").write_text("# Scaffold\n")
    return root
