"""Rescisão Calc CLI - Command-line interface for severance calculations."""

import json
import logging
import os

import click
from rich.console import Console

from rescisao import __version__
from rescisao.sdk import (
    InvalidInputError,
    NoticeType,
    RulesNotFoundError,
    RulesValidationError,
    TerminationReason,
    TerminationRequest,
    calculate_severance,
    load_rules,
    resolve_rules_path,
)

from .renderers.result_renderer import render_result, render_rules
from .settings_commands import settings as settings_group


def _configure_logging(verbose: bool) -> None:
    """Configure logging from LOG_LEVEL (or DEBUG when verbose)."""
    level_name = "DEBUG" if verbose else os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def _load_rules_or_fail(rules_path):
    try:
        return load_rules(rules_path)
    except (RulesNotFoundError, RulesValidationError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="rescisao")
@click.option("--verbose", "-v", is_flag=True, help="Log each calculation step.")
def cli(verbose):
    """Rescisão Calc - Brazilian severance (rescisão) calculator.

    Computes gross severance line items (saldo de salário, aviso prévio,
    13º, férias, FGTS) under CLT rules. No tax withholding is applied.

    Rules are loaded from (in order):

    \b
    1. --rules option
    2. settings.json 'rules' key (set via 'rescisao settings rules')
    3. Packaged default (rules/clt.yaml)
    """
    _configure_logging(verbose)


cli.add_command(settings_group)


@cli.command("calc")
@click.option("--salary", "-s", type=float, required=True, help="Monthly base salary.")
@click.option("--hire", "hire_date", required=True, help="Hire date (YYYY-MM-DD).")
@click.option("--termination", "termination_date", required=True, help="Termination date (YYYY-MM-DD).")
@click.option("--reason", "-r", type=click.Choice([r.value for r in TerminationReason]), required=True,
              help="Termination reason.")
@click.option("--notice", "-n", type=click.Choice([n.value for n in NoticeType]), required=True,
              help="Notice period handling.")
@click.option("--expired-vacation", is_flag=True, help="An unused vacation period is owed.")
@click.option("--absences", type=click.IntRange(min=0), default=None,
              help="Unexcused absence days (recorded, not applied).")
@click.option("--rules", "rules_path", type=click.Path(), default=None, help="Custom rules YAML.")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format (default: table)")
def calc(salary, hire_date, termination_date, reason, notice, expired_vacation, absences,
         rules_path, output_format):
    """Calculate the gross severance for a termination.

    Examples:

    \b
      rescisao calc -s 3000 --hire 2023-01-01 --termination 2023-06-20 \\
          -r sem_justa_causa -n indenizado
      rescisao calc -s 2000 --hire 2024-08-13 --termination 2026-09-18 \\
          -r pedido_demissao -n trabalhado --format json
    """
    rules = _load_rules_or_fail(rules_path)

    request = TerminationRequest(
        salary=salary,
        hire_date=hire_date,
        termination_date=termination_date,
        reason=reason,
        notice=notice,
        expired_vacation=expired_vacation,
        absences=absences,
    )

    try:
        result = calculate_severance(request, rules=rules)
    except InvalidInputError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    render_result(Console(), result)


@cli.group("rules")
def rules_group():
    """Inspect severance rule sets."""
    pass


@rules_group.command("show")
@click.option("--rules", "rules_path", type=click.Path(), default=None, help="Custom rules YAML.")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table",
              help="Output format (default: table)")
def rules_show(rules_path, output_format):
    """Show the effective rule set and where it was loaded from."""
    path, source = resolve_rules_path(rules_path)
    rules = _load_rules_or_fail(rules_path)

    if output_format == "json":
        click.echo(json.dumps({
            "source": source,
            "path": str(path),
            "rules": rules.model_dump(mode="json"),
        }, indent=2))
        return

    render_rules(Console(), rules, source, str(path))


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
