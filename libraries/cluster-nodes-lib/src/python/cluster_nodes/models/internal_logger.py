from pydantic import BaseModel, Field

class LoggerSummary(BaseModel):
    level: str
    level_syslog: int

class LoggersResponse(BaseModel):
    loggers: dict[str, LoggerSummary] = Field(default_factory=dict)

class InternalLogger(BaseModel):
    name: str
    level: str
    syslog_level: int
