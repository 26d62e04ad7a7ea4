"""Severance line-item calculators (traditional accounting model).

Each function computes one line item of the rescisão and returns it rounded
to cents. They are pure: the orchestrator in engine.py decides the order and
records the results.

Tax withholding (INSS/IRRF) is not applied here. The values are gross
amounts meant to be consumed by a separate fiscal module.
"""

from datetime import date
from typing import Optional

from .dates import count_months_15_day_rule, months_between
from .helpers import require_positive_salary, round2
from .rules import default_rules
from .schemas import NoticeType, SeveranceRules, TerminationReason


def calc_balance_of_salary(
    salary: float,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> float:
    """Saldo de salário: days worked in the termination month.

    Uses the 30ths convention (salary / 30 * day of month) regardless of
    the actual month length, so day 31 pays slightly more than a salary.
    """
    rules = rules or default_rules()
    require_positive_salary(salary)
    return round2(salary / rules.days_per_month * termination.day)


def calc_notice_days(
    hire: date,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> int:
    """Notice period length: base days + extra days per completed year, capped."""
    rules = rules or default_rules()
    completed_years = months_between(hire, termination) // 12
    extra = min(
        completed_years * rules.notice.days_per_year,
        rules.notice.max_days - rules.notice.base_days,
    )
    return rules.notice.base_days + extra


def calc_notice_pay(
    salary: float,
    hire: date,
    termination: date,
    reason: str,
    notice: str,
    rules: Optional[SeveranceRules] = None,
) -> float:
    """Aviso prévio.

    - Paid in lieu on dismissal without cause: paid to the employee.
    - Not given on resignation: the same amount, negative (employee owes it).
    - Anything else (including worked notice): 0.

    Returns:
        Notice amount, positive or negative, rounded
    """
    rules = rules or default_rules()
    require_positive_salary(salary)
    days = calc_notice_days(hire, termination, rules)
    amount = salary / rules.days_per_month * days

    if notice == NoticeType.INDENIZADO and reason == TerminationReason.SEM_JUSTA_CAUSA:
        return round2(amount)

    if notice == NoticeType.NAO_CUMPRIDO and reason == TerminationReason.PEDIDO_DEMISSAO:
        return round2(-amount)

    return 0.0


def thirteenth_salary_months(
    hire: date,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> int:
    """Months of the termination year counted for the 13th (15-day rule)."""
    rules = rules or default_rules()
    count_from = max(hire, date(termination.year, 1, 1))
    return count_months_15_day_rule(count_from, termination, rules.fifteen_day_threshold)


def vacation_months(
    hire: date,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> int:
    """Months of the open acquisition period (whole contract, modulo 12)."""
    rules = rules or default_rules()
    return count_months_15_day_rule(hire, termination, rules.fifteen_day_threshold) % 12


def calc_thirteenth_salary(
    salary: float,
    hire: date,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> float:
    """13º proporcional: 1/12 per month of the termination year with >= 15 days worked.

    Counting starts on January 1st of the termination year, or on the hire
    date when hired during that year.
    """
    rules = rules or default_rules()
    require_positive_salary(salary)
    months = thirteenth_salary_months(hire, termination, rules)
    return round2(salary / 12 * months)


def calc_vacation_proportional(
    salary: float,
    hire: date,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> float:
    """Férias proporcionais, without the 1/3 bonus.

    Months are counted with the 15-day rule over the whole contract and
    reduced modulo 12. This approximates the months of the open acquisition
    period; it does not track the real anniversary of the last period.
    """
    rules = rules or default_rules()
    require_positive_salary(salary)
    months = vacation_months(hire, termination, rules)
    return round2(salary / 12 * months)


def calc_vacation_one_third(vacation: float) -> float:
    """1/3 constitucional on an already computed vacation amount."""
    return round2(vacation / 3)


def calc_expired_vacation(salary: float, expired: bool) -> float:
    """Férias vencidas: a full salary plus 1/3, when an unused period exists."""
    require_positive_salary(salary)
    if not expired:
        return 0.0
    return round2(salary + salary / 3)


def calc_fgts_base_deposits(
    salary: float,
    hire: date,
    termination: date,
    rules: Optional[SeveranceRules] = None,
) -> float:
    """Approximate monthly FGTS deposits on base salary.

    Note: FGTS is also due on 13th, vacation and paid-in-lieu notice; the
    orchestrator adds those separately.
    """
    rules = rules or default_rules()
    require_positive_salary(salary)
    months_worked = max(0, months_between(hire, termination))
    return round2(salary * rules.fgts_rate * months_worked)


def calc_fgts_penalty(
    deposits: float,
    reason: str,
    rules: Optional[SeveranceRules] = None,
) -> float:
    """Multa do FGTS: applies only on dismissal without cause."""
    rules = rules or default_rules()
    if reason == TerminationReason.SEM_JUSTA_CAUSA:
        return round2(deposits * rules.fgts_penalty_rate)
    return 0.0
