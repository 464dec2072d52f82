# HOOKSMITH v1.0
import os
from pathlib import Path

# Environment declaration
ENVIRONMENT_FILE = '_ss_environment.php'
ENVIRONMENT_CONSTANT = 'GLOBAL_ENVIRONMENT_TYPE'
DEV_ENVIRONMENT = 'dev'
DEFAULT_ENVIRONMENT = 'live'

# Project layout (relative to the project root)
DEFAULT_THEME_DIR = Path('themes') / 'default'
THEMES_DIR = Path('themes')
PACKAGE_FILE = Path('package.json')
VIEWER_CONFIG_FILE = Path('mysite') / '_config' / 'config.yml'
LOGGING_CONFIG_FILE = Path('mysite') / '_config' / 'logging.yml'
README_FILE = Path('README.md')

DEFAULT_LOG_NAME = 'App'

# Vhost
VHOST_DIR = Path(os.environ.get('HOOKSMITH_VHOST_DIR', '/private/etc/apache2/sites-enabled'))
VHOST_SUFFIX = 'dev'
VHOST_ALIAS_SUFFIX = 't.proxylocal.com'

# Only run inside projects whose path contains this text (unset = any path)
REQUIRED_PATH_MARKER = os.environ.get('HOOKSMITH_PATH_MARKER') or None

# Front-end dependencies
NPM_INSTALL_COMMAND = ['npm', 'install']

# Central directory for HOOKSMITH log files
HOOKSMITH_CONFIG_DIR = Path.home() / '.hooksmith'
LOG_FILE = Path(os.environ.get('HOOKSMITH_LOG_FILE', HOOKSMITH_CONFIG_DIR / 'log.txt'))
