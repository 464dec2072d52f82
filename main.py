import argparse
import logging
import os
import sys

import yaml

import config
from cli.prompts import get_prompts
from cli.ui import show_error
from installer.orchestrator import InstallOrchestrator
from utils.log_setup import setup_logging
from utils.shell import ShellRunner

_log = logging.getLogger(__name__)

INSTALL_EVENTS = ('install', 'post-install-cmd')
UPDATE_EVENTS = ('update', 'post-update-cmd')


def build_parser():
    '''Command line for the composer script hooks'''
    parser = argparse.ArgumentParser(
        prog='hooksmith',
        description='Post-install/post-update hook for SilverStripe projects'
    )
    parser.add_argument('event', choices=INSTALL_EVENTS + UPDATE_EVENTS,
                        help='Composer lifecycle event')
    parser.add_argument('--project-dir', default=None,
                        help='Project root (default: current directory)')
    parser.add_argument('--vhost-dir', default=str(config.VHOST_DIR),
                        help='Directory for the Apache vhost file')
    parser.add_argument('--require-path-marker', default=config.REQUIRED_PATH_MARKER,
                        help='Only run when the project path contains this text')
    parser.add_argument('--log-file', default=None,
                        help='Log file (default: ~/.hooksmith/log.txt)')
    parser.add_argument('--no-interaction', '-n', action='store_true',
                        help='Do not ask any questions')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')
    return parser


def run(argv=None):
    args = build_parser().parse_args(argv)

    setup_logging(loglevel=logging.DEBUG if args.verbose else logging.INFO, logfile=args.log_file)

    base_path = os.path.realpath(args.project_dir or os.getcwd()).rstrip(os.sep) or os.sep
    orchestrator = InstallOrchestrator(
        base_path,
        vhost_dir=args.vhost_dir,
        required_path_marker=args.require_path_marker
    )
    # Without a terminal nobody can answer, as with composer -n
    prompts = get_prompts(interactive=not args.no_interaction and sys.stdin is not None and sys.stdin.isatty())
    shell = ShellRunner()

    _log.info("%s event for %s", args.event, base_path)
    try:
        if args.event in INSTALL_EVENTS:
            return orchestrator.on_install_event(prompts, shell)
        return orchestrator.on_update_event(prompts, shell)
    except (OSError, ValueError, yaml.YAMLError) as e:
        _log.exception("%s hook aborted", args.event)
        show_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(run())
