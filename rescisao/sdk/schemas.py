"""Pydantic schemas for severance requests, results and rule sets."""

from datetime import date
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, model_validator


class TerminationReason(str, Enum):
    """Why the employment contract ended."""
    SEM_JUSTA_CAUSA = "sem_justa_causa"  # dismissal without cause
    PEDIDO_DEMISSAO = "pedido_demissao"  # resignation
    JUSTA_CAUSA = "justa_causa"  # dismissal for cause
    ACORDO = "acordo"  # mutual agreement


class NoticeType(str, Enum):
    """How the notice period (aviso prévio) was handled."""
    TRABALHADO = "trabalhado"  # worked
    INDENIZADO = "indenizado"  # paid in lieu
    NAO_CUMPRIDO = "nao_cumprido"  # not given


class NoticeRules(BaseModel):
    """Notice period (aviso prévio) day counts."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_days: int = Field(30, ge=0)
    days_per_year: int = Field(3, ge=0, description="Extra days per completed year of service")
    max_days: int = Field(90, ge=0, description="Cap on base + extra days")

    @model_validator(mode="after")
    def _check_cap(self):
        if self.max_days < self.base_days:
            raise ValueError("max_days must be >= base_days")
        return self


class SeveranceRules(BaseModel):
    """Parameters of the severance rule regime."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    days_per_month: int = Field(30, gt=0, description="Divisor for daily salary")
    fifteen_day_threshold: int = Field(15, ge=1, le=31, description="Days worked for a month to count")
    fgts_rate: float = Field(0.08, ge=0, le=1, description="FGTS monthly deposit rate")
    fgts_penalty_rate: float = Field(0.40, ge=0, le=1, description="FGTS fine rate")
    notice: NoticeRules = Field(default_factory=NoticeRules)


class TerminationRequest(BaseModel):
    """Input of a severance calculation.

    Only types are enforced here; business rules (positive salary, date
    order, enumerated reason/notice) are checked by the engine so they all
    surface as InvalidInputError.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: Union[StrictInt, StrictFloat] = Field(..., description="Monthly base salary (no bool or string coercion)")
    hire_date: Union[date, str] = Field(..., description="Admission date (YYYY-MM-DD)")
    termination_date: Union[date, str] = Field(..., description="Termination date (YYYY-MM-DD)")
    reason: str = Field(..., description="TerminationReason value")
    notice: str = Field(..., description="NoticeType value")
    expired_vacation: bool = Field(False, description="An unused, fully accrued vacation period exists")
    absences: Optional[int] = Field(None, ge=0, description="Unexcused absence days (not used yet)")


class LogEntry(BaseModel):
    """One computed line item, in computation order."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    value: float
    detail: Optional[str] = None


class SeveranceResult(BaseModel):
    """Itemized severance result. All amounts are rounded to cents."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    balance_of_salary: float = Field(..., description="Saldo de salário")
    notice_pay: float = Field(..., description="Aviso prévio (negative = owed by employee)")
    thirteenth_salary: float = Field(..., description="13º proporcional")
    vacation_proportional: float = Field(..., description="Férias proporcionais")
    vacation_one_third: float = Field(..., description="1/3 constitucional")
    expired_vacation: float = Field(..., description="Férias vencidas + 1/3")
    fgts_deposits: float = Field(..., description="Total FGTS deposits (base + additional)")
    fgts_penalty: float = Field(..., description="FGTS fine on total deposits")
    gross_total: float = Field(..., description="Gross amount, FGTS deposits excluded")
    breakdown: Dict[str, float] = Field(default_factory=dict)
    log: Tuple[LogEntry, ...] = Field(default_factory=tuple)
