import json

import pytest
import yaml

from conftest import FakePrompts, FakeShell
from installer.models import InstallConfig
from installer.orchestrator import (
    InstallOrchestrator, THEME_PROMPT, DESCRIPTION_PROMPT, SQL_HOST_PROMPT,
    SQL_NAME_PROMPT, VHOST_PROMPT, HOST_NAME_PROMPT
)


def _snapshot(root):
    return {
        str(p.relative_to(root)): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }


class RecordingMutator:
    def __init__(self):
        self.configs = []

    def apply_configuration(self, config):
        self.configs.append(config)


FULL_ANSWERS = {
    THEME_PROMPT: "mytheme",
    DESCRIPTION_PROMPT: "My project",
    SQL_HOST_PROMPT: "localhost",
    SQL_NAME_PROMPT: "my_db",
    HOST_NAME_PROMPT: "myproj",
}


def test_non_dev_environment_does_nothing(project, live_probe, tmp_path):
    before = _snapshot(project)
    prompts = FakePrompts(FULL_ANSWERS, confirm=True)
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=live_probe, vhost_dir=tmp_path)

    assert orchestrator.on_install_event(prompts, shell) == 0
    assert orchestrator.on_update_event(prompts, shell) == 0

    assert _snapshot(project) == before
    assert prompts.asked == []
    assert shell.calls == []
    assert not (tmp_path / "myproj.conf").exists()


def test_path_marker_gate(project, dev_probe):
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe, required_path_marker="Devsites")

    assert orchestrator.check_environment() is False
    assert orchestrator.on_update_event(FakePrompts(), shell) == 0
    assert shell.calls == []


def test_path_marker_is_case_insensitive(tmp_path, dev_probe):
    root = tmp_path / "devsites" / "client"
    root.mkdir(parents=True)
    orchestrator = InstallOrchestrator(root, probe=dev_probe, required_path_marker="Devsites")

    assert orchestrator.check_environment() is True


def test_full_install(project, dev_probe, tmp_path):
    vhost_dir = tmp_path / "sites-enabled"
    vhost_dir.mkdir()
    prompts = FakePrompts(FULL_ANSWERS, confirm=True)
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe, vhost_dir=vhost_dir)

    assert orchestrator.on_install_event(prompts, shell) == 0

    assert prompts.asked == [
        THEME_PROMPT, DESCRIPTION_PROMPT, SQL_HOST_PROMPT, SQL_NAME_PROMPT,
        VHOST_PROMPT, HOST_NAME_PROMPT,
    ]
    assert (project / "themes" / "mytheme").is_dir()
    assert not (project / "README.md").exists()
    manifest = json.loads((project / "package.json").read_text())
    assert manifest["sql"] == {"name": "my_db", "host": "localhost"}
    assert "ServerName myproj.dev" in (vhost_dir / "myproj.conf").read_text()
    assert shell.calls == [(["npm", "install"], str(project))]


def test_blank_optional_answers_become_none(project, dev_probe):
    mutator = RecordingMutator()
    prompts = FakePrompts({THEME_PROMPT: "mytheme", SQL_HOST_PROMPT: ""})
    orchestrator = InstallOrchestrator(project, probe=dev_probe, mutator=mutator)

    orchestrator.on_install_event(prompts, FakeShell())

    assert mutator.configs == [InstallConfig("mytheme", "", None, None)]


def test_empty_theme_skips_configuration(project, dev_probe):
    mutator = RecordingMutator()
    prompts = FakePrompts({THEME_PROMPT: None})
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe, mutator=mutator)

    assert orchestrator.on_install_event(prompts, shell) == 0

    assert mutator.configs == []
    assert prompts.asked == [THEME_PROMPT, VHOST_PROMPT]
    assert (project / "themes" / "default").is_dir()
    assert (project / "README.md").exists()
    assert shell.calls == [(["npm", "install"], str(project))]


def test_theme_setup_skipped_once_applied(project, dev_probe):
    (project / "themes" / "default").rename(project / "themes" / "mytheme")
    mutator = RecordingMutator()
    prompts = FakePrompts(FULL_ANSWERS)
    orchestrator = InstallOrchestrator(project, probe=dev_probe, mutator=mutator)

    orchestrator.on_install_event(prompts, FakeShell())

    assert THEME_PROMPT not in prompts.asked
    assert mutator.configs == []


def test_declined_vhost_is_not_written(project, dev_probe, tmp_path):
    prompts = FakePrompts({THEME_PROMPT: None}, confirm=False)
    orchestrator = InstallOrchestrator(project, probe=dev_probe, vhost_dir=tmp_path)

    orchestrator.on_install_event(prompts, FakeShell())

    assert HOST_NAME_PROMPT not in prompts.asked
    assert not (tmp_path / "myproj.conf").exists()


def test_no_package_json_skips_npm(project, dev_probe):
    (project / "package.json").unlink()
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe)

    assert orchestrator.on_update_event(FakePrompts(), shell) == 0
    assert shell.calls == []


def test_update_only_installs_dependencies(project, dev_probe):
    before = _snapshot(project)
    prompts = FakePrompts(FULL_ANSWERS, confirm=True)
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe)

    assert orchestrator.on_update_event(prompts, shell) == 0

    assert prompts.asked == []
    assert shell.calls == [(["npm", "install"], str(project))]
    assert _snapshot(project) == before


def test_missing_npm_does_not_fail(project, dev_probe):
    shell = FakeShell(missing=True)
    orchestrator = InstallOrchestrator(project, probe=dev_probe)

    assert orchestrator.on_update_event(FakePrompts(), shell) == 0
    assert len(shell.calls) == 1


def test_parse_error_aborts_remaining_steps(project, dev_probe, tmp_path):
    (project / "mysite" / "_config" / "config.yml").write_text("SSViewer: [unclosed\n")
    prompts = FakePrompts(FULL_ANSWERS, confirm=True)
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe, vhost_dir=tmp_path)

    with pytest.raises(yaml.YAMLError):
        orchestrator.on_install_event(prompts, shell)

    assert VHOST_PROMPT not in prompts.asked
    assert shell.calls == []
    # Steps before the failure are not rolled back
    assert (project / "themes" / "mytheme").is_dir()
    assert (project / "README.md").exists()


def test_vhost_write_failure_propagates(project, dev_probe, tmp_path):
    prompts = FakePrompts({THEME_PROMPT: None, HOST_NAME_PROMPT: "myproj"}, confirm=True)
    shell = FakeShell()
    orchestrator = InstallOrchestrator(project, probe=dev_probe, vhost_dir=tmp_path / "missing")

    with pytest.raises(OSError):
        orchestrator.on_install_event(prompts, shell)

    assert shell.calls == []
