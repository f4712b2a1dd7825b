"""Variable domain models as delivered by the extraction layer.

A variable carries one value per mode. Each value is either a literal
(DirectValue) or a pointer to another variable in the same mode (AliasValue).
Aliases may cross collection boundaries, so resolution always works against
a lookup table built from every extracted collection.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from dtcg_exporter.domain.value_objects import RGBA, ResolvedType, VariableScope

RawValue = RGBA | float | int | str | bool


@dataclass(frozen=True, slots=True)
class DirectValue:
    """A literal value authored on the variable for one mode."""

    value: RawValue


@dataclass(frozen=True, slots=True)
class AliasValue:
    """A reference to another variable, resolved in the same mode."""

    variable_id: str


VariableValue = DirectValue | AliasValue


@dataclass(frozen=True, slots=True)
class Mode:
    mode_id: str
    name: str


@dataclass
class Variable:
    """A design variable with per-mode values.

    ``name`` is slash-hierarchical ("colors/brand/primary"); the slashes
    become token groups on export.
    """

    id: str
    name: str
    resolved_type: ResolvedType
    collection_id: str
    values_by_mode: dict[str, VariableValue] = field(default_factory=dict)
    scopes: frozenset[str] = field(default_factory=frozenset)
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.resolved_type, ResolvedType):
            self.resolved_type = ResolvedType(self.resolved_type)
        self.scopes = frozenset(
            s.value if isinstance(s, VariableScope) else s for s in self.scopes
        )

    def has_scope(self, scope: VariableScope) -> bool:
        return scope.value in self.scopes

    def value_for_mode(self, mode_id: str) -> VariableValue | None:
        return self.values_by_mode.get(mode_id)

    def value_with_fallback(self, mode_id: str) -> VariableValue | None:
        """Value for ``mode_id``, or the first recorded mode's value."""
        value = self.values_by_mode.get(mode_id)
        if value is not None:
            return value
        for fallback in self.values_by_mode.values():
            return fallback
        return None


@dataclass
class Collection:
    id: str
    name: str
    modes: list[Mode] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)

    @property
    def mode_ids(self) -> list[str]:
        return [mode.mode_id for mode in self.modes]

    @property
    def variable_count(self) -> int:
        return len(self.variables)


VariableMap = Mapping[str, Variable]


def build_variable_map(collections: Iterable[Collection]) -> VariableMap:
    """Index every variable of every collection by id.

    The returned mapping is read-only; it is built once per conversion call
    and shared by reference with every conversion step.
    """
    variables: dict[str, Variable] = {}
    for collection in collections:
        for variable in collection.variables:
            variables[variable.id] = variable
    return MappingProxyType(variables)


__all__ = [
    "AliasValue",
    "Collection",
    "DirectValue",
    "Mode",
    "RawValue",
    "Variable",
    "VariableMap",
    "VariableValue",
    "build_variable_map",
]
