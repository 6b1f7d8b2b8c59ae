"""Settings read from config.yml: personas, chat options and provider defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml


class ConfigError(ValueError):
    """Raised when a configuration document cannot be understood."""


@dataclass
class PersonaConfig:
    system: str = ""
    model: str = ""
    base_url: str = ""


@dataclass
class ChatConfig:
    timeout_seconds: int = 0
    dump_file: str = ""


@dataclass
class OpenAIConfig:
    model: str = ""
    base_url: str = ""


@dataclass
class Config:
    """Everything under the ``ai`` key of config.yml."""

    personas: Dict[str, PersonaConfig] = field(default_factory=dict)
    chat: ChatConfig = field(default_factory=ChatConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    research_manager: str = ""

    @classmethod
    def from_mapping(cls, data: Any) -> "Config":
        """Build a Config from a parsed YAML document."""
        if data is None:
            return cls()

        root = _mapping(data, "document")
        ai = _mapping(root.get("ai"), "ai")

        thinkcursion = _mapping(ai.get("thinkcursion"), "ai.thinkcursion")
        raw_personas = _mapping(thinkcursion.get("personas"), "ai.thinkcursion.personas")
        personas = {
            str(name): _persona(value, f"ai.thinkcursion.personas.{name}")
            for name, value in raw_personas.items()
        }

        chat_section = _mapping(ai.get("chat"), "ai.chat")
        chat = ChatConfig(
            timeout_seconds=_integer(chat_section.get("timeoutSeconds"), "ai.chat.timeoutSeconds"),
            dump_file=_string(chat_section.get("dumpFile"), "ai.chat.dumpFile"),
        )

        provider = _mapping(ai.get("provider"), "ai.provider")
        openai_section = _mapping(provider.get("openai"), "ai.provider.openai")
        openai = OpenAIConfig(
            model=_string(openai_section.get("model"), "ai.provider.openai.model"),
            base_url=_string(openai_section.get("baseURL"), "ai.provider.openai.baseURL"),
        )

        persona = _mapping(ai.get("persona"), "ai.persona")
        research = _mapping(persona.get("research"), "ai.persona.research")
        manager = _string(research.get("manager"), "ai.persona.research.manager")

        return cls(personas=personas, chat=chat, openai=openai, research_manager=manager)


def _mapping(value: Any, where: str) -> Mapping:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    raise ConfigError(f"{where}: expected a mapping, got {type(value).__name__}")


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"{where}: expected a scalar, got {type(value).__name__}")


def _integer(value: Any, where: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ConfigError(f"{where}: expected an integer, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigError(f"{where}: expected an integer, got {value!r}")


def _persona(value: Any, where: str) -> PersonaConfig:
    section = _mapping(value, where)
    return PersonaConfig(
        system=_string(section.get("system"), f"{where}.system"),
        model=_string(section.get("model"), f"{where}.model"),
        base_url=_string(section.get("baseURL"), f"{where}.baseURL"),
    )


def parse_config(text: str) -> Config:
    """Parse YAML text into a Config."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc
    return Config.from_mapping(data)


def load_file(path: Union[str, os.PathLike]) -> Config:
    """Read and parse the config file at ``path``."""
    return parse_config(Path(path).read_text(encoding="utf-8"))


def load(home: Optional[Union[str, os.PathLike]] = None) -> Config:
    """Load ``<home>/.piaf/config.yml``, or an empty Config when it is absent."""
    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            home = "."

    override = Path(home) / ".piaf" / "config.yml"
    try:
        text = override.read_text(encoding="utf-8")
    except OSError:
        return Config()
    return parse_config(text)