"""Brewing stage definitions and the table they are loaded from."""
from __future__ import annotations
import logging
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import yaml

log = logging.getLogger(__name__)


class StageState(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass(frozen=True)
class StageDefinition:
    id: str
    name: str
    description: str
    duration: int  # minutes
    temperature: Optional[int] = None  # Fahrenheit
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class StageTableError(ValueError):
    """Raised when a stage table cannot be turned into definitions."""


DEFAULT_STAGES: Tuple[StageDefinition, ...] = (
    StageDefinition(
        id="milling",
        name="Milling",
        description="Crushing the grain to expose the starches",
        duration=15,
        notes="Ensure consistent grain crush for optimal extraction",
    ),
    StageDefinition(
        id="mashing",
        name="Mashing",
        description="Converting starches to fermentable sugars",
        duration=60,
        temperature=152,
        notes="Maintain steady temperature for enzyme activity",
    ),
    StageDefinition(
        id="lautering",
        name="Lautering",
        description="Separating wort from grain husks",
        duration=45,
        notes="Slow and steady sparge for clear wort",
    ),
    StageDefinition(
        id="boiling",
        name="Boiling",
        description="Sterilizing wort and adding hops",
        duration=90,
        temperature=212,
        notes="Add hops according to recipe schedule",
    ),
    StageDefinition(
        id="cooling",
        name="Cooling",
        description="Rapidly cooling wort to fermentation temperature",
        duration=30,
        temperature=68,
        notes="Cool quickly to prevent contamination",
    ),
    StageDefinition(
        id="fermentation",
        name="Fermentation",
        description="Yeast converts sugars to alcohol and CO2",
        duration=7 * 24 * 60,
        temperature=68,
        notes="Monitor temperature and airlock activity",
    ),
    StageDefinition(
        id="conditioning",
        name="Conditioning",
        description="Beer matures and flavors develop",
        duration=14 * 24 * 60,
        temperature=38,
        notes="Allow time for flavors to meld and clarify",
    ),
)


def _definition_from_mapping(raw: Any, position: int) -> StageDefinition:
    if not isinstance(raw, dict):
        raise StageTableError(f"Stage #{position} must be a mapping, got {type(raw).__name__}")

    missing = [key for key in ("id", "name", "duration") if key not in raw]
    if missing:
        raise StageTableError(f"Stage #{position} is missing {', '.join(missing)}")

    duration = raw["duration"]
    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
        raise StageTableError(f"Stage '{raw['id']}' duration must be a non-negative integer")

    temperature = raw.get("temperature")
    if temperature is not None and (isinstance(temperature, bool) or not isinstance(temperature, int)):
        raise StageTableError(f"Stage '{raw['id']}' temperature must be an integer")

    return StageDefinition(
        id=str(raw["id"]),
        name=str(raw["name"]),
        description=str(raw.get("description", "")),
        duration=duration,
        temperature=temperature,
        notes=raw.get("notes"),
    )


def parse_stage_table(data: Any) -> Tuple[StageDefinition, ...]:
    """Build stage definitions from a parsed YAML document.

    Accepts either a bare list of stages or a mapping with a ``stages`` key.
    Stage ids must be unique and the table must not be empty.
    """
    if isinstance(data, dict):
        data = data.get("stages")
    if not isinstance(data, list) or not data:
        raise StageTableError("Stage table must be a non-empty list of stages")

    definitions: List[StageDefinition] = [
        _definition_from_mapping(raw, position) for position, raw in enumerate(data)
    ]

    seen = set()
    for definition in definitions:
        if definition.id in seen:
            raise StageTableError(f"Duplicate stage id '{definition.id}'")
        seen.add(definition.id)

    return tuple(definitions)


def load_stage_definitions(path: Optional[str] = None) -> Tuple[StageDefinition, ...]:
    """Load the stage table from a YAML file, or return the built-in table."""
    if not path:
        return DEFAULT_STAGES

    stage_file = Path(path)
    if not stage_file.is_file():
        raise StageTableError(f"Stage file not found: {stage_file}")

    try:
        data = yaml.safe_load(stage_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise StageTableError(f"Stage file {stage_file} is not valid YAML: {e}") from e

    definitions = parse_stage_table(data)
    log.info("Loaded %d brewing stages from %s", len(definitions), stage_file)
    return definitions
