# HOOKSMITH v1.0
import logging
import os
from pathlib import Path

from config import VHOST_DIR, VHOST_SUFFIX, VHOST_ALIAS_SUFFIX

_log = logging.getLogger(__name__)

VHOST_TEMPLATE = """<VirtualHost *:80>
    DocumentRoot "{document_root}"
    ServerName {host_name}.{suffix}
    ServerAlias {host_name}.{alias_suffix}
</VirtualHost>
"""


def render_vhost(base_path, host_name):
    '''Apache vhost stanza serving base_path as <host_name>.dev'''
    return VHOST_TEMPLATE.format(
        document_root=str(base_path).rstrip(os.sep) or os.sep,
        host_name=host_name,
        suffix=VHOST_SUFFIX,
        alias_suffix=VHOST_ALIAS_SUFFIX
    )


def vhost_path(base_path, vhost_dir=VHOST_DIR):
    '''The config file is named after the project directory'''
    dir_name = Path(str(base_path).rstrip(os.sep)).name
    return Path(vhost_dir) / f'{dir_name}.conf'


def write_vhost(base_path, host_name, vhost_dir=VHOST_DIR):
    '''Write (or overwrite) the vhost file. Apache is not restarted.'''
    conf_path = vhost_path(base_path, vhost_dir)
    conf_path.write_text(render_vhost(base_path, host_name), encoding='utf-8')
    _log.info("Wrote vhost for %s.%s to %s", host_name, VHOST_SUFFIX, conf_path)
    return conf_path
