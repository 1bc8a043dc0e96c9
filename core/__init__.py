"""
Core Governance Components.

Contains the rule core for SPPTG submissions, separated from the
projection services that consume it.

Structure:
    models/: Pure data structures (no business logic)
    logic/: Pure rule functions (access scoping, geometry, codecs)
    errors.py: Error codes and HTTP mapping
"""

# Models have no dependencies outside core.models
from . import models

# logic imports exceptions, which imports core.errors; load it on first access
_LAZY_SUBPACKAGES = {'logic': '.logic'}


def __getattr__(name):
    """Lazy import subpackages to avoid circular dependencies."""
    if name in _LAZY_SUBPACKAGES:
        from importlib import import_module
        return import_module(_LAZY_SUBPACKAGES[name], package='core')
    raise AttributeError(f"module 'core' has no attribute '{name}'")


__all__ = [
    'models',
    'logic',
]
