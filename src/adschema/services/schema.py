"""SchemaService — resolve, validate, and audit the ad attribute catalog.

Thin adapter between the pure domain layer and any caller that wants a
uniform :class:`ServiceResult` (the CLI today). Domain exceptions are
converted to structured errors here and nowhere else.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from adschema.config.discovery import load_config
from adschema.config.models import ValidationConfig
from adschema.domain.audit import audit_catalog
from adschema.domain.categories import categories_for_template
from adschema.domain.fields import field_to_dict
from adschema.domain.resolution import Resolution, resolve, resolve_for_category
from adschema.domain.subcategories import list_overrides
from adschema.domain.templates import list_templates
from adschema.domain.validation import parse_form_values, validate_submission
from adschema.errors import UnknownTemplate
from adschema.services.result import ServiceResult

logger = logging.getLogger(__name__)


class SchemaService:
    """Operations over the static field catalog.

    Args:
        config: Validation behaviour. When omitted, the ``[validation]``
            section of the ``adschema.toml`` in effect is used (see
            :func:`~adschema.config.discovery.load_config`), falling back
            to the built-in defaults.

    Raises:
        ConfigFileError: *config* was omitted and the discovered file is
            unusable.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config if config is not None else load_config().validation

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_templates(self) -> ServiceResult:
        """Summarize every template with its mapped categories."""
        items: list[dict[str, Any]] = []
        for template in list_templates():
            items.append(
                {
                    "name": str(template.name),
                    "label": template.label,
                    "icon": template.icon,
                    "field_count": len(template.fields),
                    "override_count": len(list_overrides(template.name)),
                    "categories": list(categories_for_template(template.name)),
                }
            )
        return ServiceResult.success("list_templates", {"items": items, "count": len(items)})

    def resolve(
        self,
        category: str,
        leaf: str,
        *,
        template: str | None = None,
    ) -> ServiceResult:
        """Resolve the field list for a top-level *category* and *leaf*.

        *template* bypasses the category map and names the template
        directly.
        """
        op = "resolve"
        try:
            resolution = self._resolve(category, leaf, template)
        except UnknownTemplate as exc:
            return _unknown_template(op, exc)

        fields = [field_to_dict(f) for f in resolution.fields]
        return ServiceResult.success(
            op,
            {
                "category": category,
                "leaf": leaf,
                "template": str(resolution.template),
                "source": resolution.source,
                "fields": fields,
                "count": len(fields),
            },
        )

    def validate(
        self,
        category: str,
        leaf: str,
        values: Mapping[str, Any],
        *,
        template: str | None = None,
        form: Mapping[str, Sequence[str]] | None = None,
    ) -> ServiceResult:
        """Validate submitted *values* against the resolved field list.

        *form* holds raw ``name -> [text, ...]`` input (the CLI's ``-s``
        pairs). It is typed per field kind with
        :func:`~adschema.domain.validation.parse_form_values` and wins over
        *values* for the same name.
        """
        op = "validate"
        try:
            resolution = self._resolve(category, leaf, template)
        except UnknownTemplate as exc:
            return _unknown_template(op, exc)

        if form:
            values = {**values, **parse_form_values(resolution.fields, form)}
        outcome = validate_submission(
            resolution.fields,
            values,
            coerce_numeric_strings=self._config.coerce_numeric_strings,
        )
        warnings = outcome.warnings if self._config.report_ignored_fields else []
        logger.debug(
            "Validated %d values for %s/%s: %d violations",
            len(values),
            resolution.template,
            leaf,
            len(outcome.violations),
        )

        violations = [v.to_dict() for v in outcome.violations]
        if not outcome.valid:
            count = len(violations)
            noun = "field" if count == 1 else "fields"
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                f"{count} {noun} failed validation",
                detail={
                    "template": str(resolution.template),
                    "leaf": leaf,
                    "violations": violations,
                },
                warnings=warnings,
            )
        return ServiceResult.success(
            op,
            {
                "category": category,
                "leaf": leaf,
                "template": str(resolution.template),
                "valid": True,
                "checked": len(resolution.fields),
                "ignored": outcome.ignored,
            },
            warnings=warnings,
        )

    def check(self, *, min_severity: str = "warning") -> ServiceResult:
        """Audit the whole catalog and report issues without failing.

        Args:
            min_severity: ``"error"`` hides warnings from the report.
        """
        issues = [
            issue.to_dict()
            for issue in audit_catalog()
            if min_severity != "error" or issue.severity == "error"
        ]
        errors = sum(1 for i in issues if i["severity"] == "error")
        if errors:
            logger.warning("Catalog audit found %d errors", errors)
        return ServiceResult.success(
            "check",
            {
                "issues": issues,
                "count": len(issues),
                "error_count": errors,
                "warning_count": len(issues) - errors,
                "healthy": errors == 0,
            },
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve(category: str, leaf: str, template: str | None) -> Resolution:
        if template is not None:
            return resolve(template, leaf)
        return resolve_for_category(category, leaf)


def _unknown_template(op: str, exc: UnknownTemplate) -> ServiceResult:
    return ServiceResult.failure(
        op, "UNKNOWN_TEMPLATE", str(exc), detail={"template": exc.name}
    )
