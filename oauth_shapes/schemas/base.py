"""Shared base for OAuth wire schemas and the schema-merge primitive."""

import copy
import types
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict


class AdditionalFields(str, Enum):
    """What a schema does with fields it does not declare."""

    PRESERVE = "preserve"
    STRIP = "strip"
    REJECT = "reject"

    @property
    def extra(self) -> str:
        """Matching pydantic ``extra`` setting."""
        return _PYDANTIC_EXTRA[self]

    @classmethod
    def from_extra(cls, extra: Optional[str]) -> "AdditionalFields":
        for policy, value in _PYDANTIC_EXTRA.items():
            if value == extra:
                return policy
        return cls.STRIP


_PYDANTIC_EXTRA = {
    AdditionalFields.PRESERVE: "allow",
    AdditionalFields.STRIP: "ignore",
    AdditionalFields.REJECT: "forbid",
}


def wire_config(additional_fields: AdditionalFields = AdditionalFields.STRIP) -> ConfigDict:
    """Model config for a wire schema with the given additional-field policy."""
    return ConfigDict(extra=additional_fields.extra)


class WireSchema(BaseModel):
    """Immutable, strictly typed OAuth wire document.

    Subclasses pick their additional-field policy with
    ``model_config = wire_config(AdditionalFields.PRESERVE)``; the default
    is to strip unknown fields.

    Optional fields accept ``null`` as well as absence; both read back as
    ``None`` and are left out of ``to_wire()``. Preserved extension fields
    keep ``null`` values as sent. Freezing covers attribute assignment only:
    nested dicts and lists inside a value are not frozen, so use
    ``extra_fields()`` to get a copy that is safe to modify.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    # Parent schemas when built by merge(); empty for plain schemas.
    merged_from: ClassVar[Tuple[Type["WireSchema"], ...]] = ()

    @classmethod
    def additional_fields(cls) -> AdditionalFields:
        """The additional-field policy this schema applies."""
        return AdditionalFields.from_extra(cls.model_config.get("extra"))

    @classmethod
    def is_merged(cls) -> bool:
        return bool(cls.merged_from)

    def present_fields(self, mode: str = "python") -> dict[str, Any]:
        """Dump of the declared fields that are set, plus every extension field.

        Declared optional fields holding ``None`` count as absent; extension
        fields are kept whatever their value.
        """
        declared = type(self).model_fields
        return {
            name: value
            for name, value in self.model_dump(mode=mode).items()
            if value is not None or name not in declared
        }

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict of the fields present on this value."""
        return self.present_fields(mode="json")

    def extra_fields(self) -> dict[str, Any]:
        """Deep copy of the unknown fields kept under the preserve policy."""
        return copy.deepcopy(dict(self.model_extra or {}))


def merge(
    first: Type[WireSchema],
    second: Type[WireSchema],
    name: Optional[str] = None,
    doc: Optional[str] = None,
) -> Type[WireSchema]:
    """Compose two schemas into one whose values must satisfy both.

    The merged schema inherits the fields and validators of both parents,
    so changes to either parent carry over. On a field name clash the
    second parent wins, and the merged schema uses the second parent's
    additional-field policy.
    """
    for parent in (first, second):
        if not (isinstance(parent, type) and issubclass(parent, WireSchema)):
            raise TypeError(f"merge() expects WireSchema subclasses, got {parent!r}")

    name = name or f"{first.__name__}{second.__name__}"
    namespace = {
        "__module__": first.__module__,
        "__qualname__": name,
        "__doc__": doc or f"Document satisfying both {first.__name__} and {second.__name__}.",
        "model_config": wire_config(second.additional_fields()),
        "merged_from": (first, second),
    }
    return types.new_class(name, (second, first), exec_body=lambda ns: ns.update(namespace))
