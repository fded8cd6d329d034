"""
Validation boundary and output cleanup for card elements.

``validate_params`` turns builder keyword input into a parameter model and
translates pydantic failures into ``InvalidEnumValue`` / ``InvalidShape``.
``clean_element`` prepares an element for JSON by dropping unset fields.
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError
from typing_extensions import get_args

from cards.elements.constants import enum_values
from cards.elements.exceptions import ElementError, InvalidEnumValue, InvalidShape
from cards.elements.params import ElementParams
from config.settings import settings

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=ElementParams)


def _field_info(model_cls: Type[ElementParams], key: Any) -> Tuple[Optional[str], Any]:
    """Resolve a loc entry (field name or alias) to (schema name, annotation)."""
    for name, field in model_cls.model_fields.items():
        if key == name or key == field.alias:
            return field.alias or name, field.annotation
    return (str(key) if key is not None else None), None


def _enum_in(annotation: Any) -> Optional[Type[Enum]]:
    """Find the Enum class inside ``Optional[SomeEnum]`` or ``SomeEnum``."""
    for candidate in (annotation, *get_args(annotation)):
        if isinstance(candidate, type) and issubclass(candidate, Enum):
            return candidate
    return None


def _translate(
    error: ValidationError,
    model_cls: Type[ElementParams],
    element: str,
) -> ElementError:
    """Convert the first pydantic error into the element error taxonomy."""
    detail = error.errors()[0]
    loc = detail.get("loc", ())
    field_name, annotation = _field_info(model_cls, loc[0] if loc else None)
    if len(loc) > 1:
        field_name = ".".join([field_name or ""] + [str(part) for part in loc[1:]])
    value = detail.get("input")

    enum_cls = _enum_in(annotation)
    if detail.get("type") == "enum" and enum_cls is not None:
        allowed = enum_values(enum_cls)
        message = f"{element}.{field_name}: {value!r} is not one of {list(allowed)}"
        if isinstance(value, str) and value in enum_cls.__members__:
            message += f" (use {enum_cls.__name__}.{value} = {enum_cls[value].value!r})"
        return InvalidEnumValue(
            message,
            value=value,
            allowed=allowed,
            element=element,
            field=field_name,
        )

    if detail.get("type") == "missing":
        message = f"{element}.{field_name} is required"
    elif detail.get("type") == "extra_forbidden":
        message = f"{element} has no field {field_name!r}"
    else:
        message = f"{element}.{field_name}: {detail.get('msg')}"
    return InvalidShape(message, element=element, field=field_name)


def validate_params(model_cls: Type[P], element: str, values: Mapping[str, Any]) -> P:
    """Build the parameter model for one builder call.

    With ``settings.strict_validation`` disabled the values are taken as-is
    and only defaults are filled in.

    Raises:
        InvalidEnumValue: An enum-restricted field got an out-of-set value
        InvalidShape: A required field is missing, of the wrong kind, or unknown
    """
    if not settings.strict_validation:
        # Required fields the caller left out come through as None
        missing = {
            name: None
            for name, field in model_cls.model_fields.items()
            if field.is_required() and name not in values and field.alias not in values
        }
        return model_cls.model_construct(**missing, **values)
    try:
        return model_cls.model_validate(dict(values))
    except ValidationError as e:
        translated = _translate(e, model_cls, element)
        logger.warning(f"Rejected {element} input: {translated}")
        raise translated from e


def clean_element(obj: Any) -> Any:
    """Drop ``None``-valued keys recursively.

    Builders emit every declared key and use ``None`` for unset fields. The
    renderer treats a missing key and an unset one alike, but ``null`` in
    JSON is not the same as absent, so serialize the cleaned form.

    Args:
        obj: Element dict, list of elements, or primitive value

    Returns:
        Copy of the structure without ``None`` values in any dict
    """
    if isinstance(obj, dict):
        return {k: clean_element(v) for k, v in obj.items() if v is not None}
    elif isinstance(obj, list):
        return [clean_element(item) for item in obj]
    elif isinstance(obj, Enum):
        return obj.value
    return obj


def literal(value: Any) -> Any:
    """Plain schema value for an enum member; anything else unchanged."""
    if isinstance(value, Enum):
        return value.value
    return value


__all__ = [
    "validate_params",
    "clean_element",
    "literal",
]
