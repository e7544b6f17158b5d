"""Serving ports (interfaces) module.

Ports define the contracts between the application layer and infrastructure.
They allow for dependency inversion, enabling the domain to remain
independent of specific implementations.
"""

from serving.ports.filesystem import IFileSystem

__all__ = ["IFileSystem"]
