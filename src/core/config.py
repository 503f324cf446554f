"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El adaptador HTTP y el pipeline leen la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "aoc-similarity"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "aoc-similarity"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "aoc-similarity"
    return Path.home() / ".config" / "aoc-similarity"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# aoc-similarity user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env) sin ensuciar el Core.
    - `SecretStr` evita que la cookie de sesión aparezca en reprs o logs.
    """

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file_encoding="utf-8",
    )

    session: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AOC_SESSION", "SESSION"),
        description="Cookie `session` de adventofcode.com.",
    )
    base_url: str = Field(
        default="https://adventofcode.com",
        min_length=8,
        description="Host del servicio de puzzles (sin barra final).",
    )
    user_agent: str = Field(
        default="aoc-similarity/0.1 (+https://github.com)",
        min_length=1,
        description="User-Agent para la petición del input.",
    )

    @classmethod
    def load(cls) -> "AppSettings":
        """Construye los settings leyendo env, `./.env` y el `.env` de usuario.

        Orden: proyecto primero (dev), luego config global de usuario. Las
        rutas se resuelven en cada llamada para respetar el entorno actual.
        """

        try:
            return cls(_env_file=(".env", str(get_user_env_file())))
        except ValidationError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc

    def require_session(self) -> str:
        """Devuelve el token de sesión o falla con `ConfigError`."""

        token = self.session.get_secret_value().strip() if self.session else ""
        if not token:
            raise ConfigError(
                "SESSION environment variable not set "
                "(set AOC_SESSION or SESSION, or run `aoc-similarity doctor setup-session`)"
            )
        if not token.isascii():
            raise ConfigError("SESSION contains non-ASCII characters; it cannot be sent as a cookie")
        return token
