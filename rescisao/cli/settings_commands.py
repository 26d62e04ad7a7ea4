"""Settings CLI commands for Rescisão Calc.

Manages settings.json - custom rules path.
"""

from pathlib import Path

import click

from rescisao.sdk import (
    clear_setting,
    get_default_rules_path,
    get_setting,
    get_settings_path,
    load_settings,
    read_rules_file,
    set_setting,
    RulesNotFoundError,
    RulesValidationError,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - rules: path to a custom rules YAML
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        click.echo()
        click.echo(f"Effective rules: {get_default_rules_path()} (default)")
        return

    click.echo("Current settings:")
    for key, value in current.items():
        click.echo(f"  {key}: {value}")


@settings.command("rules")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom rules, revert to packaged default")
def settings_rules(path, clear):
    """Set or clear the custom rules file.

    PATH is a YAML rule set (same keys as the packaged clt.yaml).

    Examples:
        rescisao settings rules ~/rescisao/rules-2026.yaml
        rescisao settings rules --clear
    """
    if clear:
        if clear_setting("rules"):
            click.echo("Cleared rules setting.")
        else:
            click.echo("rules was not set.")
        click.echo(f"Rules are now: {get_default_rules_path()} (default)")
        return

    if not path:
        current = get_setting("rules")
        if current:
            click.echo(f"Current rules: {current}")
        else:
            click.echo(f"No custom rules set. Using default: {get_default_rules_path()}")
        return

    rules_path = Path(path).expanduser().resolve()

    # Validate before saving
    try:
        read_rules_file(rules_path)
    except (RulesNotFoundError, RulesValidationError) as e:
        raise click.ClickException(str(e))

    set_setting("rules", str(rules_path))
    click.echo(f"Set rules: {rules_path}")
    click.echo(f"Saved to: {get_settings_path()}")
