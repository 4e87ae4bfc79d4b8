"""Tour sections and their display headings."""

from __future__ import annotations

from enum import StrEnum


class Section(StrEnum):
    """Tour sections, declared in the order they run."""

    STORED_PROPERTIES = "stored-properties"
    COMPUTED_PROPERTIES = "computed-properties"
    LAZY_PROPERTIES = "lazy-properties"
    PROPERTY_OBSERVERS = "property-observers"
    INSTANCE_METHODS = "instance-methods"
    TYPE_METHODS = "type-methods"
    MUTATING_METHODS = "mutating-methods"
    VALUE_VS_REFERENCE = "value-vs-reference"

    @property
    def heading(self) -> str:
        return SECTION_HEADINGS[self]

    @property
    def number(self) -> int:
        return list(Section).index(self) + 1

    @property
    def op(self) -> str:
        """Service operation name (``stored-properties`` -> ``stored_properties``)."""
        return self.value.replace("-", "_")


SECTION_HEADINGS: dict[Section, str] = {
    Section.STORED_PROPERTIES: "Stored Properties",
    Section.COMPUTED_PROPERTIES: "Computed Properties",
    Section.LAZY_PROPERTIES: "Lazy Stored Properties",
    Section.PROPERTY_OBSERVERS: "Property Observers",
    Section.INSTANCE_METHODS: "Instance Methods",
    Section.TYPE_METHODS: "Type Methods",
    Section.MUTATING_METHODS: "Mutating Methods",
    Section.VALUE_VS_REFERENCE: "Choosing Between Values and References",
}
