"""Tests for the template name enum."""

from adschema.domain.templates import TEMPLATES
from adschema.domain.types import TemplateName


class TestTemplateName:
    def test_seven_templates(self) -> None:
        assert len(TemplateName) == 7

    def test_string_values(self) -> None:
        assert TemplateName("pets") is TemplateName.PETS
        assert str(TemplateName.GENERAL) == "general"

    def test_every_name_has_a_template(self) -> None:
        assert set(TEMPLATES) == set(TemplateName)
