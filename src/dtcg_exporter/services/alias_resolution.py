"""Alias resolution for variable values.

An alias is rendered either as a DTCG reference string (``{colors.brand}``)
or, when flattening, as the literal value at the end of the alias chain.
Broken chains never raise; they degrade to sentinel strings and are logged
and recorded as ConversionIssue.
"""

from dtcg_exporter.domain.tokens import (
    CIRCULAR_SENTINEL,
    NO_VALUE_SENTINEL,
    UNKNOWN_SENTINEL,
    ConversionIssue,
    ExportConfig,
    IssueKind,
)
from dtcg_exporter.domain.value_objects import RGBA, ResolvedType
from dtcg_exporter.domain.variables import (
    AliasValue,
    DirectValue,
    RawValue,
    Variable,
    VariableMap,
    VariableValue,
)
from dtcg_exporter.logging_config import get_logger
from dtcg_exporter.services.classification import convert_float
from dtcg_exporter.services.color import convert_color

logger = get_logger(__name__)


def path_to_reference(name: str) -> str:
    """Convert ``colors/brand/primary`` to ``{colors.brand.primary}``."""
    return "{" + name.replace("/", ".") + "}"


class AliasResolver:
    """Turns variable values into DTCG ``$value`` payloads.

    One resolver serves a single export call: the variable map is the
    read-only lookup table built for that call and ``issues`` collects the
    references that had to be replaced by sentinels.
    """

    def __init__(
        self,
        variable_map: VariableMap,
        config: ExportConfig,
        issues: list[ConversionIssue] | None = None,
    ) -> None:
        self._variable_map = variable_map
        self._config = config
        self.issues: list[ConversionIssue] = issues if issues is not None else []

    def convert_value(
        self, variable: Variable, value: VariableValue, mode_id: str
    ) -> object:
        """Convert one mode's value of ``variable`` to a DTCG value."""
        if isinstance(value, AliasValue):
            if self._config.resolve_references:
                return self.resolve(value.variable_id, mode_id)
            return self.to_reference(value.variable_id, mode_id)
        return self.convert_raw_value(variable, value.value)

    def to_reference(self, variable_id: str, mode_id: str) -> str:
        """Render an alias as a reference to the target's name.

        Only the first hop is looked up; the target's own value is never
        needed, so chain depth and cycles beyond it do not matter.
        """
        referenced = self._variable_map.get(variable_id)
        if referenced is None:
            return self._degrade(IssueKind.UNKNOWN_REFERENCE, variable_id, mode_id)
        return path_to_reference(referenced.name)

    def resolve(self, variable_id: str, mode_id: str) -> object:
        """Follow the alias chain from ``variable_id`` to a literal value.

        Every hop looks up the requested mode; a target lacking that mode
        falls back to its first recorded mode. The visited set lives only
        for this call, so cycles are detected exactly without any depth cap.
        """
        visited: set[str] = set()
        current_id = variable_id

        while True:
            if current_id in visited:
                return self._degrade(IssueKind.CIRCULAR_REFERENCE, current_id, mode_id)
            visited.add(current_id)

            referenced = self._variable_map.get(current_id)
            if referenced is None:
                return self._degrade(IssueKind.UNKNOWN_REFERENCE, current_id, mode_id)

            value = referenced.value_with_fallback(mode_id)
            if value is None:
                return self._degrade(
                    IssueKind.MISSING_VALUE,
                    current_id,
                    mode_id,
                    variable_name=referenced.name,
                )

            if isinstance(value, DirectValue):
                return self.convert_raw_value(referenced, value.value)

            current_id = value.variable_id

    def convert_raw_value(self, variable: Variable, raw: RawValue) -> object:
        resolved_type = variable.resolved_type

        if resolved_type == ResolvedType.COLOR:
            if not isinstance(raw, RGBA):
                raise TypeError(f"Expected RGBA for color variable {variable.name}")
            return convert_color(raw, self._config.color_format)

        if resolved_type == ResolvedType.FLOAT:
            return convert_float(raw, variable, self._config.default_unit)

        if resolved_type == ResolvedType.STRING:
            return str(raw)

        # BOOLEAN: DTCG has no boolean type, encode as 0/1
        return 1 if raw else 0

    def _degrade(
        self,
        kind: IssueKind,
        variable_id: str,
        mode_id: str,
        **log_context: str,
    ) -> str:
        sentinel = _SENTINELS[kind]
        logger.warning(
            _LOG_EVENTS[kind],
            variable_id=variable_id,
            mode_id=mode_id,
            **log_context,
        )
        self.issues.append(
            ConversionIssue(
                kind=kind,
                variable_id=variable_id,
                mode_id=mode_id,
                sentinel=sentinel,
            )
        )
        return sentinel


_SENTINELS = {
    IssueKind.CIRCULAR_REFERENCE: CIRCULAR_SENTINEL,
    IssueKind.UNKNOWN_REFERENCE: UNKNOWN_SENTINEL,
    IssueKind.MISSING_VALUE: NO_VALUE_SENTINEL,
}

_LOG_EVENTS = {
    IssueKind.CIRCULAR_REFERENCE: "circular_reference_detected",
    IssueKind.UNKNOWN_REFERENCE: "unknown_variable_reference",
    IssueKind.MISSING_VALUE: "variable_has_no_value",
}


__all__ = [
    "AliasResolver",
    "path_to_reference",
]
