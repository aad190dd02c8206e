"""
Compatibility Catalog Service.

Loads compatibility_catalog.yaml, which names the model classes evaluated by the
assessment and, for each compatibility tier, which classes run comfortably
("capable") and which run with difficulty ("struggling").

The catalog is configuration data: tier boundaries are fixed in
src/config/constants.py, only the model names and tier contents come from YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

import yaml

from src.schemas.assessment import CompatibilityTier
from src.utils.logger import log


class CatalogError(Exception):
    """Raised when the compatibility catalog is missing or malformed."""
    pass


@dataclass(frozen=True)
class ModelClass:
    """A size class of models, e.g. 'medium' -> Llama 3 8B, Mistral 7B."""
    id: str
    label: str
    models: tuple = ()


@dataclass(frozen=True)
class TierEntry:
    """Catalog contents for one CompatibilityTier."""
    tier: CompatibilityTier
    summary: str
    capable_classes: tuple = ()
    struggling_classes: tuple = ()


@dataclass
class CompatibilityCatalog:
    """
    Parsed catalog.

    Usage:
        catalog = CompatibilityCatalog.load()
        names = catalog.capable_models(CompatibilityTier.HIGH)
    """
    model_classes: Dict[str, ModelClass] = field(default_factory=dict)
    tiers: Dict[CompatibilityTier, TierEntry] = field(default_factory=dict)

    DEFAULT_PATH = Path(__file__).parent.parent / "config" / "compatibility_catalog.yaml"

    @classmethod
    def load(cls, yaml_path: Optional[Path] = None) -> "CompatibilityCatalog":
        """
        Load and validate a catalog from YAML.

        Raises:
            CatalogError: file missing, unparsable, or structurally invalid
        """
        path = Path(yaml_path) if yaml_path else cls.DEFAULT_PATH
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise CatalogError(f"Compatibility catalog not found: {path}") from None
        except yaml.YAMLError as e:
            raise CatalogError(f"Failed to parse compatibility catalog {path}: {e}") from e

        catalog = cls.from_dict(raw)
        log.info(f"Loaded compatibility catalog with {len(catalog.model_classes)} model classes from {path}")
        return catalog

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CompatibilityCatalog":
        if not isinstance(raw, dict):
            raise CatalogError("Catalog root must be a mapping")

        classes_raw = raw.get("model_classes")
        if not isinstance(classes_raw, dict) or not classes_raw:
            raise CatalogError("Catalog must define at least one model class")

        model_classes = {}
        for class_id, data in classes_raw.items():
            data = data or {}
            if not isinstance(data, dict):
                raise CatalogError(f"Model class '{class_id}' must be a mapping")
            models = data.get("models") or []
            if not isinstance(models, list):
                raise CatalogError(f"Model class '{class_id}': models must be a list")
            model_classes[class_id] = ModelClass(
                id=class_id,
                label=data.get("label", class_id),
                models=tuple(str(m) for m in models),
            )

        tiers_raw = raw.get("tiers")
        if not isinstance(tiers_raw, dict):
            raise CatalogError("Catalog must define tiers")

        tiers = {}
        for tier in CompatibilityTier:
            data = tiers_raw.get(tier.value)
            if not isinstance(data, dict):
                raise CatalogError(f"Catalog is missing tier '{tier.value}'")
            capable = cls._class_refs(tier, "capable", data, model_classes)
            struggling = cls._class_refs(tier, "struggling", data, model_classes)
            both = sorted(set(capable) & set(struggling))
            if both:
                raise CatalogError(f"Tier '{tier.value}' lists {both} as both capable and struggling")
            tiers[tier] = TierEntry(
                tier=tier,
                summary=str(data.get("summary", "")),
                capable_classes=capable,
                struggling_classes=struggling,
            )

        unknown = set(tiers_raw) - {t.value for t in CompatibilityTier}
        if unknown:
            log.warning(f"Ignoring unknown catalog tiers: {sorted(unknown)}")

        return cls(model_classes=model_classes, tiers=tiers)

    @staticmethod
    def _class_refs(tier, key, data, model_classes) -> tuple:
        refs = data.get(key) or []
        if not isinstance(refs, list):
            raise CatalogError(f"Tier '{tier.value}': {key} must be a list")
        for ref in refs:
            if not isinstance(ref, str):
                raise CatalogError(f"Tier '{tier.value}': {key} entries must be class ids")
            if ref not in model_classes:
                raise CatalogError(f"Tier '{tier.value}' references unknown model class '{ref}'")
        return tuple(refs)

    def _models_for(self, class_ids) -> FrozenSet[str]:
        names: List[str] = []
        for class_id in class_ids:
            names.extend(self.model_classes[class_id].models)
        return frozenset(names)

    def capable_models(self, tier: CompatibilityTier) -> FrozenSet[str]:
        return self._models_for(self.tiers[tier].capable_classes)

    def struggling_models(self, tier: CompatibilityTier) -> FrozenSet[str]:
        return self._models_for(self.tiers[tier].struggling_classes)

    def summary(self, tier: CompatibilityTier) -> str:
        return self.tiers[tier].summary

    @property
    def all_models(self) -> FrozenSet[str]:
        return self._models_for(self.model_classes)


# =============================================================================
# Module-level singleton for convenience
# =============================================================================

_default_catalog: Optional[CompatibilityCatalog] = None


def get_compatibility_catalog() -> CompatibilityCatalog:
    """
    Get the default catalog, loading it on first call.

    Honours the catalog_path config override.
    """
    global _default_catalog

    if _default_catalog is None:
        from src.config.manager import config_manager
        _default_catalog = CompatibilityCatalog.load(config_manager.get("catalog_path"))

    return _default_catalog


def reload_compatibility_catalog() -> CompatibilityCatalog:
    global _default_catalog

    _default_catalog = None
    return get_compatibility_catalog()
