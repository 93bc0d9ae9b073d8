"""CLI command implementations for the wardrobes application.

This package contains subcommands for the wardrobes CLI, including:
- validate: Validate a configuration file
- templates: Manage project templates
"""

from wardrobes.cli.commands.templates import templates_app
from wardrobes.cli.commands.validate import display_config_error, validate_command

__all__ = ["display_config_error", "templates_app", "validate_command"]
