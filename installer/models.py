# HOOKSMITH v1.0
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EnvironmentType(Enum):
    """Whether the hook runs on a development machine"""
    DEVELOPMENT = "development"
    NON_DEVELOPMENT = "non-development"


@dataclass
class InstallConfig:
    '''Operator answers for the first-time project setup'''
    theme: str
    description: str = ''
    sql_host: Optional[str] = None
    sql_name: Optional[str] = None

    @classmethod
    def from_answers(cls, theme, description=None, sql_host=None, sql_name=None):
        '''Build from raw answers; blank answers count as not given'''
        return cls(
            theme=theme,
            description=description or '',
            sql_host=sql_host or None,
            sql_name=sql_name or None,
        )

    def has_database(self):
        return self.sql_host is not None or self.sql_name is not None
