"""Rich renderer for severance results.

Transforms SDK SeveranceResult output into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rescisao.sdk import SeveranceResult, SeveranceRules

# (breakdown key, label) in display order
EARNING_LINES = [
    ("balance_of_salary", "Saldo de salário"),
    ("notice_pay", "Aviso prévio"),
    ("thirteenth_salary", "13º proporcional"),
    ("vacation_proportional", "Férias proporcionais"),
    ("vacation_one_third", "1/3 férias"),
    ("expired_vacation", "Férias vencidas + 1/3"),
    ("fgts_penalty", "Multa FGTS"),
]

FGTS_LINES = [
    ("fgts_base_deposits", "Depósitos (salário)"),
    ("fgts_additional_deposits", "Depósitos (verbas)"),
    ("fgts_deposits", "Total depositado"),
    ("fgts_penalty_on_base", "Multa sobre depósitos (salário)"),
]


def render_result(console: Console, result: SeveranceResult) -> None:
    """Render a severance result as Rich tables.

    Args:
        console: Rich Console instance
        result: SDK output from calculate_severance()
    """
    details = {entry.name: entry.detail for entry in result.log}

    table = Table(title="Rescisão (bruto)", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=25)
    table.add_column("Valor", justify="right", min_width=12)
    table.add_column("", style="dim")

    table.add_row("[bold]VERBAS[/bold]", "", "")
    for key, label in EARNING_LINES:
        table.add_row(f"  {label}", _fmt(result.breakdown.get(key)), details.get(key) or "")
    table.add_row("", "", "")
    table.add_row(
        "[bold green]TOTAL BRUTO[/bold green]",
        f"[bold green]{_fmt(result.gross_total)}[/bold green]",
        "",
    )
    console.print(table)

    fgts = Table(title="FGTS (não incluso no total)", box=box.SIMPLE)
    fgts.add_column("", min_width=25)
    fgts.add_column("Valor", justify="right", min_width=12)
    fgts.add_column("", style="dim")
    for key, label in FGTS_LINES:
        fgts.add_row(label, _fmt(result.breakdown.get(key)), details.get(key) or "")
    console.print(fgts)

    if result.notice_pay < 0:
        console.print(Panel(
            "[yellow]Aviso prévio negativo: desconto devido pelo empregado (aviso não cumprido).[/yellow]",
            title="Note",
            border_style="yellow"
        ))


def render_rules(console: Console, rules: SeveranceRules, source: str, path: str) -> None:
    """Render the effective rule set."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    table.add_row("Days per month", str(rules.days_per_month))
    table.add_row("15-day rule threshold", f"{rules.fifteen_day_threshold} days")
    table.add_row("FGTS rate", f"{rules.fgts_rate:.2%}")
    table.add_row("FGTS penalty rate", f"{rules.fgts_penalty_rate:.2%}")
    table.add_row(
        "Notice",
        f"{rules.notice.base_days} days + {rules.notice.days_per_year}/year "
        f"(max {rules.notice.max_days})",
    )

    console.print(Panel(table, title=f"Rules ({source}: {path})", border_style="dim"))


def _fmt(amount: float | None) -> str:
    """Format currency amount."""
    if amount is None:
        return "-"
    return f"{amount:,.2f}"
