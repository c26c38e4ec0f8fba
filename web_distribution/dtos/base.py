"""
DTO hydration.

Every DTO is a pydantic model with a declarative ``source_map`` table
(destination field -> dotted source path). ``Dto.hydrate`` walks the table,
recursively hydrates nested DTOs and lets pydantic validate the result.

Example:
    class Product(Dto):
        source_map: ClassVar[Dict[str, str]] = {"style_name": "style.name"}
        style_name: str

    Product.hydrate({"style": {"name": "Velvet"}}).style_name == "Velvet"
"""

from __future__ import annotations

import types
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Set, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from web_distribution.exceptions import HydrationError

_MISSING = object()


def resolve_path(data: Mapping[str, Any], path: str) -> Any:
    """Follow a dotted path through nested mappings. Returns _MISSING when any segment is absent."""
    current: Any = data
    for segment in path.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return _MISSING
        current = current[segment]
    return current


class CustomField(BaseModel):
    key: str
    value: Any = None


class Dto(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    source_map: ClassVar[Dict[str, str]] = {}

    @classmethod
    def hydrate(cls, data: Any):
        if not isinstance(data, Mapping):
            raise HydrationError(
                f"Cannot hydrate {cls.__name__} from {type(data).__name__}",
                payload=data,
            )

        values: Dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            path = cls.source_map.get(name, name)
            raw = resolve_path(data, path)
            if raw is _MISSING or raw is None:
                if info.is_required():
                    raise HydrationError(
                        f"{cls.__name__}.{name} is missing (source '{path}')",
                        field=name,
                        payload=data,
                    )
                continue
            try:
                values[name] = _hydrate_value(info.annotation, raw)
            except HydrationError as e:
                raise HydrationError(
                    f"{cls.__name__}.{name}: {e}",
                    field=f"{name}.{e.field}" if e.field else name,
                    payload=data,
                ) from e

        if issubclass(cls, HasCustomFields):
            explicit = values.get("custom_fields") or []
            if isinstance(explicit, Mapping):
                explicit = [CustomField(key=str(key), value=value) for key, value in explicit.items()]
            elif not isinstance(explicit, list):
                raise HydrationError(
                    f"{cls.__name__}.custom_fields must be a list or an object, got {type(explicit).__name__}",
                    field="custom_fields",
                    payload=data,
                )
            values["custom_fields"] = list(explicit) + cls._collect_custom_fields(data)

        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise HydrationError(
                f"{cls.__name__}.{field}: {first['msg']}",
                field=field,
                payload=data,
            ) from e

    @classmethod
    def known_keys(cls) -> Set[str]:
        keys = set(cls.model_fields)
        keys.update(path.split(".", 1)[0] for path in cls.source_map.values())
        return keys


class HasCustomFields(BaseModel):
    """Mixin for DTOs that keep vendor-defined fields instead of dropping them."""

    custom_fields: List[CustomField] = Field(default_factory=list)

    @classmethod
    def _collect_custom_fields(cls, data: Mapping[str, Any]) -> List[CustomField]:
        known = cls.known_keys()
        return [CustomField(key=str(key), value=value) for key, value in data.items() if key not in known]

    def get_all_custom_fields(self) -> List[CustomField]:
        return list(self.custom_fields)


def get_all_custom_fields(dto: Any) -> List[CustomField]:
    if isinstance(dto, HasCustomFields):
        return dto.get_all_custom_fields()
    return []


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _hydrate_value(annotation: Any, raw: Any) -> Any:
    annotation = _unwrap_optional(annotation)

    if _is_dto(annotation) and isinstance(raw, Mapping):
        return annotation.hydrate(raw)

    if get_origin(annotation) in (list, List):
        args = get_args(annotation)
        item_type = _unwrap_optional(args[0]) if args else None
        if _is_dto(item_type) and isinstance(raw, list):
            hydrated = []
            for index, item in enumerate(raw):
                try:
                    hydrated.append(item_type.hydrate(item))
                except HydrationError as e:
                    raise HydrationError(
                        f"item {index}: {e}",
                        field=f"{index}.{e.field}" if e.field else str(index),
                        payload=raw,
                    ) from e
            return hydrated

    return raw


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_dto(annotation: Optional[Any]) -> bool:
    return isinstance(annotation, type) and get_origin(annotation) is None and issubclass(annotation, Dto)
