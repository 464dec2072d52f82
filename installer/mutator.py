# HOOKSMITH v1.0
import json
import logging
import os
from pathlib import Path

from config import (
    DEFAULT_THEME_DIR, THEMES_DIR, PACKAGE_FILE, VIEWER_CONFIG_FILE,
    LOGGING_CONFIG_FILE, DEFAULT_LOG_NAME
)
from utils.yaml_io import YamlConfigFile, SingleQuoted, ensure_mapping

_log = logging.getLogger(__name__)


class ConfigMutator:
    '''
    Apply an InstallConfig to a freshly scaffolded project.

    Steps run in a fixed order and each one is skipped when its target is
    missing. Nothing is rolled back when a later step fails.
    '''

    def __init__(self, base_path):
        self.base_path = Path(base_path)

    def apply_configuration(self, config):
        '''Rename the theme and update package.json, config.yml and logging.yml'''
        self.rename_theme(config.theme)

        package_path = self.base_path / PACKAGE_FILE
        if package_path.exists():
            self.update_package_manifest(package_path, config)
        else:
            _log.debug("No %s, skipping manifest update", package_path)

        viewer_path = self.base_path / VIEWER_CONFIG_FILE
        if viewer_path.exists():
            self.update_viewer_config(viewer_path, config)
        else:
            _log.debug("No %s, skipping theme/database config", viewer_path)

        logging_path = self.base_path / LOGGING_CONFIG_FILE
        if logging_path.exists():
            self.update_logging_config(logging_path, config)
        else:
            _log.debug("No %s, skipping logging config", logging_path)

    def rename_theme(self, theme):
        '''Rename themes/default to themes/<theme>. Returns False instead of raising.'''
        source = self.base_path / DEFAULT_THEME_DIR
        target = self.base_path / THEMES_DIR / theme

        if not source.is_dir():
            _log.debug("No %s to rename", source)
            return False
        if target.exists():
            _log.warning("Theme directory %s already exists, leaving %s in place", target, source)
            return False

        try:
            os.rename(source, target)
        except OSError as e:
            _log.warning("Could not rename %s to %s: %s", source, target, e)
            return False

        _log.info("Renamed %s to %s", source, target)
        return True

    def update_package_manifest(self, path, config):
        '''Overlay name, description and sql settings; every other key is kept'''
        with open(path, 'r', encoding='utf-8') as f:
            contents = json.load(f)

        contents.update({
            'name': config.theme,
            'description': config.description,
            'sql': {
                'name': config.sql_name,
                'host': config.sql_host
            }
        })

        with open(path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(contents, indent=2, ensure_ascii=False) + '\n')

        _log.info("Updated %s (name=%s)", path, config.theme)

    def update_viewer_config(self, path, config):
        '''Set the active theme and, if any database answer was given, both database keys'''
        yaml_file = YamlConfigFile.load(path)

        # Keys are edited in the document that already holds them
        ensure_mapping(yaml_file.document_for('SSViewer'), 'SSViewer')['current_theme'] = config.theme

        # One answer is enough to overwrite both keys; the other becomes null
        if config.has_database():
            database = ensure_mapping(yaml_file.document_for('Database'), 'Database')
            database['host'] = config.sql_host
            database['name'] = config.sql_name

        yaml_file.save()
        _log.info("Updated %s (theme=%s, database=%s)", path, config.theme, config.has_database())

    def update_logging_config(self, path, config):
        '''Use the project description as the Monolog channel name'''
        yaml_file = YamlConfigFile.load(path)

        name = config.description or DEFAULT_LOG_NAME
        monolog = ensure_mapping(ensure_mapping(yaml_file.document_for('Injector'), 'Injector'), 'Monolog')

        constructor = monolog.get('constructor')
        if not isinstance(constructor, list):
            constructor = []
            monolog['constructor'] = constructor

        if constructor:
            constructor[0] = SingleQuoted(name)
        else:
            constructor.append(SingleQuoted(name))

        yaml_file.save()
        _log.info("Updated %s (channel=%s)", path, name)


def apply_configuration(base_path, config):
    '''Shortcut for ConfigMutator(base_path).apply_configuration(config)'''
    ConfigMutator(base_path).apply_configuration(config)
