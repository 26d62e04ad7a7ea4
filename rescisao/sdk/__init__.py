"""Rescisão SDK - Core severance calculation functionality."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
)

from .helpers import (
    InvalidInputError,
    round2,
    require_positive_salary,
)

from .dates import (
    parse_iso_date,
    months_between,
    count_months_15_day_rule,
    count_whole_months,
    FIFTEEN_DAY_THRESHOLD,
)

from .schemas import (
    TerminationReason,
    NoticeType,
    TerminationRequest,
    SeveranceResult,
    SeveranceRules,
    NoticeRules,
    LogEntry,
)

from .rules import (
    load_rules,
    default_rules,
    read_rules_file,
    resolve_rules_path,
    get_default_rules_path,
    RulesNotFoundError,
    RulesValidationError,
)

from .components import (
    calc_balance_of_salary,
    calc_notice_days,
    calc_notice_pay,
    calc_thirteenth_salary,
    calc_vacation_proportional,
    calc_vacation_one_third,
    calc_expired_vacation,
    calc_fgts_base_deposits,
    calc_fgts_penalty,
    thirteenth_salary_months,
    vacation_months,
)

from .engine import (
    calculate_severance,
    validate_request,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    # Helpers
    "InvalidInputError",
    "round2",
    "require_positive_salary",
    # Dates
    "parse_iso_date",
    "months_between",
    "count_months_15_day_rule",
    "count_whole_months",
    "FIFTEEN_DAY_THRESHOLD",
    # Schemas
    "TerminationReason",
    "NoticeType",
    "TerminationRequest",
    "SeveranceResult",
    "SeveranceRules",
    "NoticeRules",
    "LogEntry",
    # Rules
    "load_rules",
    "default_rules",
    "read_rules_file",
    "resolve_rules_path",
    "get_default_rules_path",
    "RulesNotFoundError",
    "RulesValidationError",
    # Calculators
    "calc_balance_of_salary",
    "calc_notice_days",
    "calc_notice_pay",
    "calc_thirteenth_salary",
    "calc_vacation_proportional",
    "calc_vacation_one_third",
    "calc_expired_vacation",
    "calc_fgts_base_deposits",
    "calc_fgts_penalty",
    "thirteenth_salary_months",
    "vacation_months",
    # Orchestrator
    "calculate_severance",
    "validate_request",
]
