"""
Project Starter: scaffold a new project and hand it to a starter template.

Provides the version gate, directory checks, descriptor writer, starter
package installer and the hand-off to the installed initializer.
"""

__version__ = "0.3.0"
__author__ = "Project Starter Maintainers"
__license__ = "Apache-2.0"

from .cli import cli

__all__ = ["cli"]
