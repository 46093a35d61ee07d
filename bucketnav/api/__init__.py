"""
Public API

Modules:
    shell: NavShell, programmatic navigation over a storage client
"""

from bucketnav.api.shell import NavShell

__all__ = ["NavShell"]
