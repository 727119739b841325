from pathlib import Path
from typing import Dict, Any
import json

import yaml

from wavebatch.errors import ConfigError
from wavebatch.spec.planner_config import PlannerConfig

def load_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix not in {".json", ".yml", ".yaml"}:
        raise ConfigError(f"Formato no soportado: {path.suffix} (usa .json o .yaml)")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"No se pudo leer {path}: {e}") from e
    try:
        if suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Configuración mal formada en {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"La configuración en {path} debe ser un objeto/mapa")
    return data

def load_planner_config(path=None):
    """PlannerConfig desde archivo, o la de código si no hay ruta."""
    return PlannerConfig.default() if not path else PlannerConfig.from_dict(load_config(Path(path)))
