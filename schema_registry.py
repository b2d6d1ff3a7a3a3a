"""
Jurisdiction schema catalog.

Each jurisdiction lives in its own YAML file under the catalog directory,
named after its country code (``in.yaml``, ``us.yaml``, ...). Adding a
jurisdiction only needs a new file with the same record shape.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from constants import DEFAULT_LEGAL_SCHEMA, GENERIC_JURISDICTION_LABEL
from schemas import LegalSchema, SchemaResolution

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = LegalSchema.model_validate(DEFAULT_LEGAL_SCHEMA)


def _load_yaml_file(path: Path) -> Tuple[str, LegalSchema]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    country_code = str(raw.pop("countryCode", None) or path.stem).strip().lower()
    return country_code, LegalSchema.model_validate(raw)


class SchemaRegistry:
    """Read-only index of legal schemas keyed by lowercase country code."""

    def __init__(self, schemas: Optional[Dict[str, LegalSchema]] = None):
        self._schemas: Dict[str, LegalSchema] = {
            code.strip().lower(): schema for code, schema in (schemas or {}).items()
        }
        self._default = SchemaResolution(
            legal_schema=DEFAULT_SCHEMA,
            country_code=GENERIC_JURISDICTION_LABEL,
            is_default=True,
        )

    @classmethod
    def from_directory(cls, dir_path) -> "SchemaRegistry":
        """Load every ``*.yaml``/``*.yml`` file in ``dir_path``. Invalid files are skipped."""
        schemas: Dict[str, LegalSchema] = {}
        directory = Path(dir_path)
        if not directory.is_dir():
            logger.warning(f"Schema directory not found: {directory}. Only the default schema is available.")
            return cls(schemas)

        for path in sorted(directory.glob("*.y*ml")):
            try:
                country_code, schema = _load_yaml_file(path)
            except (OSError, yaml.YAMLError, ValidationError, AttributeError) as e:
                logger.error(f"Failed to load legal schema from {path.name}: {str(e)}")
                continue
            if country_code in schemas:
                logger.warning(f"Duplicate schema for '{country_code}' in {path.name}; keeping the first one")
                continue
            schemas[country_code] = schema

        logger.info(f"Loaded {len(schemas)} legal schema(s): {', '.join(sorted(schemas)) or 'none'}")
        return cls(schemas)

    def supported_countries(self) -> List[str]:
        return sorted(self._schemas)

    def resolve(self, country_code, region_code: Optional[str] = None) -> SchemaResolution:
        """
        Resolve a jurisdiction to its legal schema. Never raises.

        ``region_code`` is accepted but does not select a different schema yet.
        """
        try:
            code = str(country_code).strip().lower()
            schema = self._schemas.get(code)
        except Exception as e:
            logger.warning(f"Schema lookup failed for country '{country_code}': {str(e)}. Using default schema.")
            return self._default

        if schema is None:
            logger.warning(f"No legal schema for country '{code}'. Using default schema.")
            return self._default

        if region_code:
            logger.debug(f"Region '{region_code}' has no dedicated schema; using country schema for '{code}'")
        return SchemaResolution(legal_schema=schema, country_code=code)
