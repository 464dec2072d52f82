# HOOKSMITH v1.0
import logging
from pathlib import Path

from config import (
    DEFAULT_THEME_DIR, PACKAGE_FILE, README_FILE, VHOST_DIR, VHOST_SUFFIX,
    REQUIRED_PATH_MARKER, NPM_INSTALL_COMMAND
)
from installer.environment import EnvironmentProbe
from installer.models import EnvironmentType, InstallConfig
from installer.mutator import ConfigMutator
from installer.vhost import write_vhost

_log = logging.getLogger(__name__)

THEME_PROMPT = 'Please specify the theme name: '
DESCRIPTION_PROMPT = 'Please specify the project description: '
SQL_HOST_PROMPT = 'Please specify the database host: '
SQL_NAME_PROMPT = 'Please specify the database name: '
VHOST_PROMPT = 'Would you like to set up a vhost?'
HOST_NAME_PROMPT = f"Please specify the host name (excluding '.{VHOST_SUFFIX}'): "


class InstallOrchestrator:
    '''
    Runs the post-install and post-update steps for one project.

    Steps run strictly in order. An exception in any step aborts the
    ones after it.
    '''

    def __init__(self, base_path, probe=None, mutator=None, vhost_dir=VHOST_DIR,
                 required_path_marker=REQUIRED_PATH_MARKER):
        self.base_path = Path(base_path)
        self.probe = probe or EnvironmentProbe(start_dir=self.base_path)
        self.mutator = mutator or ConfigMutator(self.base_path)
        self.vhost_dir = vhost_dir
        self.required_path_marker = required_path_marker

    def check_environment(self):
        '''Only development checkouts get set up'''
        if self.required_path_marker:
            if self.required_path_marker.lower() not in str(self.base_path).lower():
                _log.info("%s does not contain '%s', nothing to do", self.base_path, self.required_path_marker)
                return False

        if self.probe.detect_environment_type() is not EnvironmentType.DEVELOPMENT:
            _log.info("Not a development environment, nothing to do")
            return False

        return True

    def needs_theme_setup(self):
        '''themes/default disappears once the setup has been applied'''
        return (self.base_path / DEFAULT_THEME_DIR).exists()

    def get_configuration(self, prompts):
        '''Ask for the project settings. None when no theme name is given.'''
        theme = prompts.ask(THEME_PROMPT)
        if not theme:
            return None

        return InstallConfig.from_answers(
            theme,
            description=prompts.ask(DESCRIPTION_PROMPT),
            sql_host=prompts.ask(SQL_HOST_PROMPT),
            sql_name=prompts.ask(SQL_NAME_PROMPT),
        )

    def setup_theme(self, prompts):
        from cli.ui import show_step, show_step_detail

        if not self.needs_theme_setup():
            show_step("Theme already configured", "skipped")
            return False

        show_step("Project setup", "active")
        config = self.get_configuration(prompts)
        if config is None:
            show_step("No theme name given, project setup skipped", "skipped")
            return False

        self.mutator.apply_configuration(config)
        self.remove_readme()

        show_step(f"Project configured for theme '{config.theme}'")
        if config.has_database():
            show_step_detail(f"Database: {config.sql_name or '-'} @ {config.sql_host or '-'}")
        return True

    def remove_readme(self):
        readme = self.base_path / README_FILE
        if readme.exists():
            readme.unlink()
            _log.info("Removed %s", readme)

    def setup_vhost(self, prompts):
        from cli.ui import show_step, show_step_detail

        if not prompts.confirm(VHOST_PROMPT):
            return None

        host_name = prompts.ask(HOST_NAME_PROMPT) or ''
        conf_path = write_vhost(self.base_path, host_name, self.vhost_dir)
        show_step(f"Vhost {host_name}.{VHOST_SUFFIX} written")
        show_step_detail(str(conf_path))
        return conf_path

    def install_dependencies(self, shell):
        '''npm install, when the project has a package.json'''
        from cli.ui import show_step, show_warning

        if not (self.base_path / PACKAGE_FILE).exists():
            _log.debug("No %s, skipping npm install", PACKAGE_FILE)
            return None

        result = shell.run(NPM_INSTALL_COMMAND, cwd=self.base_path, message="Installing npm packages")
        if result is None:
            show_warning(f"{NPM_INSTALL_COMMAND[0]}: command not found")
        else:
            show_step("npm install finished")
        return result

    def on_install_event(self, prompts, shell):
        '''Full first-time setup. Returns the exit code.'''
        from cli.ui import show_step_final, show_header

        if not self.check_environment():
            return 0

        show_header("post-install")
        self.setup_theme(prompts)
        self.setup_vhost(prompts)
        self.install_dependencies(shell)

        show_step_final("Install hook complete")
        return 0

    def on_update_event(self, prompts, shell):
        '''After composer update only the front-end dependencies are refreshed'''
        from cli.ui import show_step_final, show_header

        if not self.check_environment():
            return 0

        show_header("post-update")
        self.install_dependencies(shell)

        show_step_final("Update hook complete")
        return 0
