from __future__ import annotations

import os
from dataclasses import dataclass


def _getenv_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return default if value is None else value


def _getenv_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


def _getenv_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class ServiceConfig:
    DRAFTMCP_HOST: str
    DRAFTMCP_GENERATOR_PORT: int
    DRAFTMCP_WRITER_PORT: int
    DRAFTMCP_LOG_LEVEL: str
    DRAFTMCP_CORS_ORIGINS: tuple[str, ...]

    def port_for(self, service: str) -> int:
        if service == "generator":
            return self.DRAFTMCP_GENERATOR_PORT
        if service == "writer":
            return self.DRAFTMCP_WRITER_PORT
        raise ValueError(f"Unsupported service: {service}")


def load_config() -> ServiceConfig:
    return ServiceConfig(
        DRAFTMCP_HOST=_getenv_str("DRAFTMCP_HOST", "0.0.0.0"),
        DRAFTMCP_GENERATOR_PORT=_getenv_int("DRAFTMCP_GENERATOR_PORT", 8080),
        DRAFTMCP_WRITER_PORT=_getenv_int("DRAFTMCP_WRITER_PORT", 8081),
        DRAFTMCP_LOG_LEVEL=_getenv_str("DRAFTMCP_LOG_LEVEL", "INFO").upper(),
        DRAFTMCP_CORS_ORIGINS=tuple(_getenv_list("DRAFTMCP_CORS_ORIGINS", ["*"])),
    )
