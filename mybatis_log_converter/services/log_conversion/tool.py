"""Registry entry describing this converter to the tools collection."""
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    path: str
    description: str
    created_at: date
    keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data


MYBATIS_LOG_CONVERTER_TOOL = ToolDefinition(
    name="mybatis-log-converter",
    path="/mybatis-log-converter",
    description="MyBatis Log Converter",
    keywords=["mybatis", "log", "converter", "sql"],
    created_at=date(2025, 12, 31),
)

TOOLS = [MYBATIS_LOG_CONVERTER_TOOL]
