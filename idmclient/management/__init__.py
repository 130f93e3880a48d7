"""
idmclient management module.

Resource managers for the management API.
"""

from .options import ManagerOptions, validate_manager_options
from .organizations import OrganizationsManager

__all__ = [
    "OrganizationsManager",
    "ManagerOptions",
    "validate_manager_options",
]
