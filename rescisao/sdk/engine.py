"""Severance orchestrator.

Validates a TerminationRequest, runs the line-item calculators in a fixed
order and assembles the itemized SeveranceResult.

Pipeline:
    balance_of_salary -> notice_pay -> thirteenth_salary ->
    vacation_proportional -> vacation_one_third -> expired_vacation ->
    fgts_base_deposits -> fgts_penalty_on_base -> fgts_additional_deposits ->
    fgts_deposits -> fgts_penalty -> gross_total

Each value is rounded when computed, so later steps see rounded inputs.
FGTS deposits are reported but not part of gross_total (they go to the
worker's FGTS account); only the fine on them is.

Usage:
    from rescisao.sdk import calculate_severance

    result = calculate_severance({
        "salary": 3000,
        "hire_date": "2023-01-01",
        "termination_date": "2023-06-20",
        "reason": "sem_justa_causa",
        "notice": "indenizado",
    })
    result.gross_total
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Tuple, Union

from pydantic import ValidationError

from .components import (
    calc_balance_of_salary,
    calc_expired_vacation,
    calc_fgts_base_deposits,
    calc_fgts_penalty,
    calc_notice_days,
    calc_notice_pay,
    calc_thirteenth_salary,
    calc_vacation_one_third,
    calc_vacation_proportional,
    thirteenth_salary_months,
    vacation_months,
)
from .dates import months_between, parse_iso_date
from .helpers import InvalidInputError, require_positive_salary, round2
from .rules import default_rules
from .schemas import (
    LogEntry,
    NoticeType,
    SeveranceResult,
    SeveranceRules,
    TerminationReason,
    TerminationRequest,
)

logger = logging.getLogger(__name__)

VALID_REASONS = tuple(r.value for r in TerminationReason)
VALID_NOTICE_TYPES = tuple(n.value for n in NoticeType)


def validate_request(
    request: Union[TerminationRequest, Mapping, None],
) -> Tuple[TerminationRequest, date, date]:
    """Check a request and parse its dates.

    Args:
        request: TerminationRequest or a mapping with the same fields

    Returns:
        Tuple of (request, hire_date, termination_date)

    Raises:
        InvalidInputError: On any invalid or missing input
    """
    if request is None:
        raise InvalidInputError("request is required")

    if isinstance(request, Mapping):
        try:
            request = TerminationRequest.model_validate(dict(request))
        except ValidationError as e:
            raise InvalidInputError(f"Invalid termination request:\n{e}")
    elif not isinstance(request, TerminationRequest):
        raise InvalidInputError(
            f"request must be a TerminationRequest or mapping, got {type(request).__name__}"
        )

    require_positive_salary(request.salary)
    if not request.hire_date:
        raise InvalidInputError("hire_date is required")
    if not request.termination_date:
        raise InvalidInputError("termination_date is required")
    if request.reason not in VALID_REASONS:
        raise InvalidInputError(
            f"Invalid reason: {request.reason!r} (expected one of {', '.join(VALID_REASONS)})"
        )
    if request.notice not in VALID_NOTICE_TYPES:
        raise InvalidInputError(
            f"Invalid notice: {request.notice!r} (expected one of {', '.join(VALID_NOTICE_TYPES)})"
        )

    hire = parse_iso_date(request.hire_date, "hire_date")
    termination = parse_iso_date(request.termination_date, "termination_date")

    if termination < hire:
        raise InvalidInputError(
            f"termination_date ({termination}) must not precede hire_date ({hire})"
        )

    return request, hire, termination


def calculate_severance(
    request: Union[TerminationRequest, Mapping[str, Any], None],
    rules: Optional[SeveranceRules] = None,
) -> SeveranceResult:
    """Compute the itemized gross severance for a termination.

    Args:
        request: TerminationRequest or mapping (see TerminationRequest fields)
        rules: Rule set to apply (default: packaged CLT rules)

    Returns:
        SeveranceResult with named line items, breakdown and ordered log

    Raises:
        InvalidInputError: If the request is invalid. No partial result is returned.
    """
    request, hire, termination = validate_request(request)
    rules = rules or default_rules()
    salary = request.salary
    reason = TerminationReason(request.reason)
    notice = NoticeType(request.notice)

    logger.debug(
        f"Calculating severance: salary={salary} hire={hire} termination={termination} "
        f"reason={reason.value} notice={notice.value}"
    )
    if request.absences:
        logger.debug(f"absences={request.absences} recorded but not applied to any line item")

    balance = calc_balance_of_salary(salary, termination, rules)

    notice_days = calc_notice_days(hire, termination, rules)
    notice_pay = calc_notice_pay(salary, hire, termination, reason, notice, rules)

    thirteenth_months = thirteenth_salary_months(hire, termination, rules)
    thirteenth = calc_thirteenth_salary(salary, hire, termination, rules)

    open_period_months = vacation_months(hire, termination, rules)
    vacation = calc_vacation_proportional(salary, hire, termination, rules)
    one_third = calc_vacation_one_third(vacation)
    expired = calc_expired_vacation(salary, request.expired_vacation)

    months_worked = max(0, months_between(hire, termination))
    fgts_base = calc_fgts_base_deposits(salary, hire, termination, rules)
    penalty_on_base = calc_fgts_penalty(fgts_base, reason, rules)

    # FGTS is also due on 13th, vacation and paid-in-lieu notice (never on a notice deduction)
    positive_notice = notice_pay if notice_pay > 0 else 0.0
    fgts_additional = round2(rules.fgts_rate * (thirteenth + vacation + expired + positive_notice))
    fgts_total = round2(fgts_base + fgts_additional)
    fgts_penalty = calc_fgts_penalty(fgts_total, reason, rules)

    gross_total = round2(
        balance
        + notice_pay
        + thirteenth
        + vacation
        + one_third
        + expired
        + fgts_penalty
    )

    log = (
        LogEntry(name="balance_of_salary", value=balance, detail=f"{termination.day}/{rules.days_per_month} days"),
        LogEntry(name="notice_pay", value=notice_pay, detail=f"{notice_days} days ({notice.value})"),
        LogEntry(name="thirteenth_salary", value=thirteenth, detail=f"{thirteenth_months}/12 months"),
        LogEntry(name="vacation_proportional", value=vacation, detail=f"{open_period_months}/12 months"),
        LogEntry(name="vacation_one_third", value=one_third),
        LogEntry(name="expired_vacation", value=expired),
        LogEntry(name="fgts_base_deposits", value=fgts_base, detail=f"{months_worked} months"),
        LogEntry(name="fgts_penalty_on_base", value=penalty_on_base),
        LogEntry(name="fgts_additional_deposits", value=fgts_additional),
        LogEntry(name="fgts_deposits", value=fgts_total),
        LogEntry(name="fgts_penalty", value=fgts_penalty),
        LogEntry(name="gross_total", value=gross_total),
    )
    for entry in log:
        logger.debug(f"{entry.name} = {entry.value:.2f}" + (f" [{entry.detail}]" if entry.detail else ""))

    return SeveranceResult(
        balance_of_salary=balance,
        notice_pay=notice_pay,
        thirteenth_salary=thirteenth,
        vacation_proportional=vacation,
        vacation_one_third=one_third,
        expired_vacation=expired,
        fgts_deposits=fgts_total,
        fgts_penalty=fgts_penalty,
        gross_total=gross_total,
        breakdown={entry.name: entry.value for entry in log},
        log=log,
    )
