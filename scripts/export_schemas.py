"""Export JSON schemas for the trip document and its derived views."""

import json
from pathlib import Path

from pydantic import BaseModel

from tripstate.models import CompletionSummary, Itinerary, PackingCategory, ReadinessItem, Trip, TripSummary

SCHEMA_MODELS: tuple[type[BaseModel], ...] = (
    Trip,
    ReadinessItem,
    Itinerary,
    PackingCategory,
    CompletionSummary,
    TripSummary,
)


def main(schemas_dir: Path = Path("docs/schemas")) -> list[Path]:
    """Export schemas to docs/schemas/."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for model in SCHEMA_MODELS:
        schema = model.model_json_schema(by_alias=True)
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"Exported {model.__name__} schema to {path}")
        written.append(path)
    return written


if __name__ == "__main__":
    main()
