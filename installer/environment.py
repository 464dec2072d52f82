# HOOKSMITH v1.0
import logging
import os
import re
from pathlib import Path

from config import ENVIRONMENT_FILE, ENVIRONMENT_CONSTANT, DEV_ENVIRONMENT, DEFAULT_ENVIRONMENT
from installer.models import EnvironmentType

_log = logging.getLogger(__name__)

_BLOCK_COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)
_LINE_COMMENT = re.compile(r'^[ \t]*(//|#).*$', re.MULTILINE)
_DEFINE = re.compile(
    r'''define\s*\(\s*(['"])(?P<name>[A-Za-z_][A-Za-z0-9_]*)\1\s*,\s*(['"])(?P<value>[^\n]*?)\3\s*\)''',
    re.IGNORECASE
)


def read_php_constants(path):
    '''Collect define('NAME', 'value') declarations from a PHP file.

    The file is read as text and never executed. Only string literal values
    are picked up; commented-out lines are ignored. When a constant is
    declared twice the first declaration wins, as it does in PHP.
    '''
    source = Path(path).read_text(encoding='utf-8', errors='ignore')
    source = _BLOCK_COMMENT.sub('', source)
    source = _LINE_COMMENT.sub('', source)

    constants = {}
    for match in _DEFINE.finditer(source):
        constants.setdefault(match.group('name'), match.group('value'))

    return constants


class EnvironmentProbe:
    '''Find the environment declaration file and read the environment type'''

    def __init__(self, start_dir=None, filename=ENVIRONMENT_FILE, loader=read_php_constants,
                 constant=ENVIRONMENT_CONSTANT):
        self.start_dir = start_dir
        self.filename = filename
        self.loader = loader
        self.constant = constant

    def find_environment_file(self):
        '''Walk upwards from the start directory. Returns a Path or None.'''
        directory = Path(os.path.realpath(self.start_dir or os.getcwd()))

        while True:
            # Give up on the first directory we are not allowed to read
            if not os.access(directory, os.R_OK):
                _log.debug("Directory not readable, stopping search: %s", directory)
                return None

            candidate = directory / self.filename
            if candidate.is_file():
                return candidate

            directory = directory.parent

            # The filesystem root itself is never searched, unless the walk started there
            if directory.parent == directory:
                return None

    def get_environment_label(self):
        '''Declared environment type, or 'live' when nothing is declared'''
        env_file = self.find_environment_file()
        if env_file is None:
            _log.debug("No %s found above %s", self.filename, self.start_dir or os.getcwd())
            return DEFAULT_ENVIRONMENT

        constants = self.loader(env_file)
        label = constants.get(self.constant)
        if label is None:
            _log.debug("%s does not declare %s", env_file, self.constant)
            return DEFAULT_ENVIRONMENT

        _log.info("Environment type '%s' declared in %s", label, env_file)
        return label

    def detect_environment_type(self):
        if self.get_environment_label() == DEV_ENVIRONMENT:
            return EnvironmentType.DEVELOPMENT
        return EnvironmentType.NON_DEVELOPMENT
