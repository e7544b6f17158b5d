import json
import sys
from pathlib import Path
from typing import Any, Type

from pydantic_core import PydanticUndefined
from pydantic_settings import BaseSettings

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from infrastructure.settings import ServerSettings  # noqa: E402


def _display_default(default: Any) -> Any:
    if default is PydanticUndefined or default is None:
        return None
    if isinstance(default, (bool, int)):
        return default
    return str(default)


def describe_settings(settings_class: Type[BaseSettings]) -> dict[str, Any]:
    """Describe every environment variable a settings class reads."""
    prefix = settings_class.model_config.get("env_prefix", "")
    variables = []

    for name, field in settings_class.model_fields.items():
        variables.append(
            {
                "env_var": f"{prefix}{name.upper()}",
                "type": getattr(field.annotation, "__name__", str(field.annotation)),
                "default": _display_default(field.get_default()),
                "required": field.is_required(),
                "description": field.description or "",
            }
        )

    return {
        "class_name": settings_class.__name__,
        "prefix": prefix,
        "doc": (settings_class.__doc__ or "").strip(),
        "variables": variables,
    }


def export_settings(output_path: Path | None = None) -> Path:
    data = {cls.__name__: describe_settings(cls) for cls in (ServerSettings,)}

    output_path = output_path or root_path / "docs" / "env-vars.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2) + "\n")

    print(f"Exported settings to {output_path}")
    return output_path


if __name__ == "__main__":
    export_settings()
