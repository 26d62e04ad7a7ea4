"""Rescisão MCP Server - FastMCP implementation for severance tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from rescisao.sdk import (
    InvalidInputError,
    RulesNotFoundError,
    RulesValidationError,
    calculate_severance as sdk_calculate_severance,
    default_rules,
    load_rules,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("rescisao")


# --- Tools ---

@mcp.tool()
async def calculate_severance(
    salary: float = Field(description="Monthly base salary"),
    hire_date: str = Field(description="Hire date (YYYY-MM-DD)"),
    termination_date: str = Field(description="Termination date (YYYY-MM-DD)"),
    reason: str = Field(description="'sem_justa_causa', 'pedido_demissao', 'justa_causa' or 'acordo'"),
    notice: str = Field(description="'trabalhado', 'indenizado' or 'nao_cumprido'"),
    expired_vacation: bool = Field(default=False, description="An unused vacation period is owed"),
    absences: int | None = Field(default=None, description="Unexcused absence days (recorded, not applied)"),
    rules_path: str | None = Field(default=None, description="Custom rules YAML path"),
) -> dict[str, Any]:
    """Calculate gross Brazilian severance (rescisão) line items. No tax withholding is applied."""
    try:
        rules = load_rules(rules_path)
        result = sdk_calculate_severance(
            {
                "salary": salary,
                "hire_date": hire_date,
                "termination_date": termination_date,
                "reason": reason,
                "notice": notice,
                "expired_vacation": expired_vacation,
                "absences": absences,
            },
            rules=rules,
        )
        return {"result": result.model_dump(mode="json")}

    except (InvalidInputError, RulesNotFoundError, RulesValidationError) as e:
        return {"error": str(e), "result": None}
    except Exception as e:
        logger.error(f"Error calculating severance: {e}")
        return {"error": str(e), "result": None}


# --- Resources ---

@mcp.resource("rescisao://rules")
async def rules_resource() -> str:
    """Packaged default rule set."""
    return json.dumps(default_rules().model_dump(mode="json"), indent=2)


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
