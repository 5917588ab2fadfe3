# 服务器配置
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_TITLE: str = "Blog Service Demo"
    HOST: str = "0.0.0.0"
    PORT: int = 4567
    ENABLE_LOGGING: bool = True
    LOG_LEVEL: str = "INFO"
    JSON_INDENT: int = 2 # GET /posts 输出的缩进宽度
    ALLOWED_ORIGINS: list[str] = ["*"]

    @field_validator("JSON_INDENT")
    @classmethod
    def validate_json_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("JSON_INDENT must be >= 0")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

config = Config()
