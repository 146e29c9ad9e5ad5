# config.py
"""
Global configuration for Folio Chat.

Usage (preferred):
    import config as cfg
    s = cfg.settings
    print(s.ollama_url)

Override via env vars (prefix FOLIOCHAT_, case-insensitive), e.g.:
  FOLIOCHAT_OLLAMA_URL=http://10.0.0.5:11434
  FOLIOCHAT_OLLAMA_MODEL=mistral
  FOLIOCHAT_LOG_LEVEL=debug
  FOLIOCHAT_CORS_ALLOW_ORIGINS='["https://example.com"]'
  FOLIOCHAT_SERVER_PORT=3000
  FOLIOCHAT_UI_ENABLED=false

The plain OLLAMA_URL / OLLAMA_MODEL / PORT variables are honoured too, and a
.env file in the working directory is read (real env vars win).
"""
from __future__ import annotations

from typing import List, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.llm.ollama_client import OllamaConfig

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

DEFAULT_PERSONA_PROMPT = """You are a helpful assistant for Rayhan Abdurrahim, a DevOps Engineer.

You can answer questions about:
- His expertise: AWS, Kubernetes, Terraform, Docker, CI/CD
- Services: Infrastructure design, cloud migration, automation, security
- Availability: Currently available for consulting projects
- Rates: $100-150/hour depending on project scope
- Contact: Use the contact form on the website

Be friendly, professional, and concise. If asked technical questions, demonstrate deep knowledge.
If someone wants to hire him, encourage them to use the contact form."""


class Settings(BaseSettings):
    # ---- Generative backend (Ollama) ----
    ollama_url: str = Field(
        default="http://localhost:11434",
        validation_alias=AliasChoices("foliochat_ollama_url", "ollama_url"),
    )
    ollama_model: str = Field(
        default="llama3",
        validation_alias=AliasChoices("foliochat_ollama_model", "ollama_model"),
    )
    probe_timeout_sec: float = Field(default=2.0, gt=0)
    generate_timeout_sec: float = Field(default=30.0, gt=0)
    persona_prompt: str = DEFAULT_PERSONA_PROMPT

    # CORS (the site widget calls us cross-origin). Supports JSON list via env.
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: LogLevel = "info"

    # ---- Server ----
    server_host: str = "0.0.0.0"
    server_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("foliochat_server_port", "port"),
    )
    uvicorn_access_log: bool = False

    # ---- Gradio chat panel ----
    ui_enabled: bool = True
    ui_mount_path: str = "/ui"
    gradio_analytics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_prefix="FOLIOCHAT_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def local_url(self) -> str:
        """Base URL a client on this machine uses to reach the server."""
        host = "127.0.0.1" if self.server_host in ("0.0.0.0", "::", "") else self.server_host
        return f"http://{host}:{self.server_port}"

    def ollama_config(self) -> OllamaConfig:
        return OllamaConfig(
            base_url=self.ollama_url,
            model=self.ollama_model,
            probe_timeout=self.probe_timeout_sec,
            generate_timeout=self.generate_timeout_sec,
        )

    @field_validator("ollama_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> LogLevel:
        vv = str(v).lower().strip()
        return vv if vv in {"debug", "info", "warning", "error", "critical"} else "info"  # type: ignore[return-value]


# Single global instance
settings = Settings()
