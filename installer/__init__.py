# HOOKSMITH v1.0
from installer.models import EnvironmentType, InstallConfig
from installer.environment import EnvironmentProbe, read_php_constants
from installer.mutator import ConfigMutator, apply_configuration
from installer.vhost import write_vhost, render_vhost
from installer.orchestrator import InstallOrchestrator

__all__ = [
    'EnvironmentType',
    'InstallConfig',
    'EnvironmentProbe',
    'read_php_constants',
    'ConfigMutator',
    'apply_configuration',
    'write_vhost',
    'render_vhost',
    'InstallOrchestrator'
]
