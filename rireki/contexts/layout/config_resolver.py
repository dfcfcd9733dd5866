"""
Layout Preset Resolution

Applies named presets from config/layout_presets.yaml to a PageGeometry.
Presets are grouped by category in the file and addressed as
<category>_<name>; they compose, and later presets override earlier ones.

Examples:
    >>> apply_layout_presets(A4, ["margin_narrow", "spacing_tight"])
    PageGeometry(width_mm=210.0, height_mm=297.0, margin_mm=6, section_gap_mm=4)
"""

import dataclasses
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from rireki.contexts.layout.exceptions import LayoutError
from rireki.contexts.layout.geometry import PageGeometry

load_dotenv()
LAYOUT_PRESETS_PATH = Path(os.getenv("LAYOUT_PRESETS_PATH", "config/layout_presets.yaml"))

GEOMETRY_FIELDS = frozenset(f.name for f in dataclasses.fields(PageGeometry))


def load_layout_presets(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the presets file as {"<category>_<name>": {field: value}}.

    Args:
        config_path: Presets file (defaults to LAYOUT_PRESETS_PATH)

    Returns:
        Flattened presets, e.g. {"margin_narrow": {"margin_mm": 6}, ...}

    Raises:
        LayoutError: If the file is missing or a category does not map preset
            names to settings
    """
    path = Path(config_path or LAYOUT_PRESETS_PATH)
    if not path.exists():
        raise LayoutError(f"Layout presets file not found: {path}")

    categories = OmegaConf.to_container(OmegaConf.load(path), resolve=True)

    presets: Dict[str, Dict[str, Any]] = {}
    for category, entries in categories.items():
        if not isinstance(entries, dict):
            raise LayoutError(f"Preset category '{category}' must map preset names to settings")
        for name, settings in entries.items():
            presets[f"{category}_{name}"] = dict(settings or {})
    return presets


def apply_layout_presets(
    geometry: PageGeometry,
    preset_names: List[str],
    config_path: Optional[Path] = None,
) -> PageGeometry:
    """
    Return a copy of geometry with the named presets applied in order.

    Raises:
        LayoutError: If a preset is unknown, sets a field PageGeometry lacks,
            or produces an invalid geometry
    """
    if not preset_names:
        return geometry

    presets = load_layout_presets(config_path)

    overrides: Dict[str, Any] = {}
    for preset_name in preset_names:
        if preset_name not in presets:
            raise LayoutError(f"Preset '{preset_name}' not found. Available presets: {sorted(presets)}")

        settings = presets[preset_name]
        unknown = set(settings) - GEOMETRY_FIELDS
        if unknown:
            raise LayoutError(f"Preset '{preset_name}' sets unknown fields: {sorted(unknown)}")
        overrides.update(settings)

    return dataclasses.replace(geometry, **overrides)
