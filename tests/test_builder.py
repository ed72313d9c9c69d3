"""Tests for the fluent icon builder."""

import pytest
from pydantic import ValidationError

from pyheroicons.builder import IconBuilder, configure_icon
from pyheroicons.models.icon import Icon, IconVariant


@pytest.fixture()
def template() -> Icon:
    """A template Outline icon with one attribute."""
    return Icon(name="moon", attrs={"class": "icon"})


class TestBuilderChain:
    """Test chained configuration."""

    def test_methods_chain(self, template):
        """Test every setter returns the builder."""
        builder = configure_icon(template)
        assert builder.set_size(32) is builder
        assert builder.set_stroke("red") is builder
        assert builder.set_stroke_width("2") is builder
        assert builder.set_fill("blue") is builder
        assert builder.set_color("#000") is builder
        assert builder.set_attrs({"id": "x"}) is builder

    def test_build_applies_overrides(self, template):
        """Test the built record carries every override."""
        icon = (
            configure_icon(template)
            .set_size(32)
            .set_stroke("red")
            .set_stroke_width("2")
            .set_fill("blue")
            .set_color("#000")
            .set_attrs({"id": "x"})
            .build()
        )

        assert icon.name == "moon"
        assert icon.variant == IconVariant.OUTLINE
        assert icon.size == "32"
        assert icon.stroke == "red"
        assert icon.stroke_width == "2"
        assert icon.fill == "blue"
        assert icon.color == "#000"
        assert icon.attrs == {"id": "x"}

    def test_set_attrs_replaces(self, template):
        """Test set_attrs replaces rather than merges."""
        icon = configure_icon(template).set_attrs({"id": "a"}).set_attrs({"title": "b"}).build()
        assert icon.attrs == {"title": "b"}

    def test_set_attrs_copies_mapping(self, template):
        """Test later changes to the caller's mapping are not seen."""
        attrs = {"id": "a"}
        builder = configure_icon(template).set_attrs(attrs)
        attrs["id"] = "b"
        assert builder.build().attrs == {"id": "a"}

    def test_invalid_size_rejected(self, template):
        """Test an invalid size raises a validation error."""
        with pytest.raises(ValidationError):
            configure_icon(template).set_size(-1)

    def test_non_string_attrs_rejected(self, template):
        """Test attribute values must be strings."""
        with pytest.raises(ValidationError):
            configure_icon(template).set_attrs({"tabindex": 0})  # type: ignore[dict-item]


class TestTemplateIsolation:
    """Test templates are never modified through a builder."""

    def test_template_unchanged(self, template):
        """Test a full chain leaves the template as it was."""
        before = template.model_dump()

        builder = configure_icon(template).set_size(48).set_color("red").set_attrs({"id": "x"})
        builder.build().attrs["extra"] = "y"

        assert template.model_dump() == before
        assert template.size == "24"
        assert template.color is None
        assert template.attrs == {"class": "icon"}

    def test_render_does_not_set_template_body(self, template, renderer):
        """Test rendering through a builder resolves the body on the snapshot only."""
        IconBuilder(template, renderer).render()
        assert template.body is None

    def test_builders_are_independent(self, template):
        """Test two builders from one template do not share state."""
        first = configure_icon(template).set_size(16)
        second = configure_icon(template).set_size(48)
        assert first.build().size == "16"
        assert second.build().size == "48"


class TestBuildSnapshots:
    """Test build() idempotence."""

    def test_build_twice_is_equal(self, template):
        """Test repeated builds produce equal records."""
        builder = configure_icon(template).set_size(32).set_attrs({"id": "x"})
        assert builder.build() == builder.build()

    def test_build_returns_fresh_records(self, template):
        """Test a built record is unaffected by later builder calls."""
        builder = configure_icon(template).set_size(32)
        first = builder.build()
        builder.set_size(64).set_attrs({"id": "y"})

        assert first.size == "32"
        assert first.attrs == {"class": "icon"}

    def test_render_twice_is_identical(self, template, renderer):
        """Test repeated renders are byte-identical."""
        builder = IconBuilder(template, renderer).set_size(32).set_attrs({"b": "2", "a": "1"})
        assert builder.render() == builder.render()

    def test_render_matches_build(self, template, renderer):
        """Test render() is the render of build()."""
        builder = IconBuilder(template, renderer).set_stroke("#0f172a")
        assert builder.render() == renderer.render(builder.build())


class TestRenderScenarios:
    """Test builder-driven renders."""

    def test_set_size_keeps_viewbox(self, renderer):
        """Test the moon at 32px keeps the 24-unit coordinate space."""
        output = IconBuilder(Icon(name="moon"), renderer).set_size(32).render()
        assert 'width="32" height="32" viewBox="0 0 24 24"' in output

    def test_reserved_fill_in_attrs(self, renderer):
        """Test a fill passed through attrs is rejected."""
        output = (
            IconBuilder(Icon(name="moon"), renderer)
            .set_attrs({"aria-hidden": "true", "fill": "red"})
            .render()
        )
        assert 'aria-hidden="true"' in output
        assert 'fill="none"' in output
        assert 'fill="red"' not in output

    def test_attribute_name_cannot_inject_event(self, renderer):
        """Test a key hiding a second attribute name is dropped entirely."""
        output = (
            configure_icon(Icon(name="moon"), renderer)
            .set_attrs({"data-x onclick": "javascript:alert(1)", "id": "m"})
            .render()
        )
        assert "onclick" not in output
        assert "javascript:" not in output
        assert output.endswith('stroke="currentColor" id="m"><path d="M1"/></svg>')

    def test_fill_override(self, renderer):
        """Test set_fill changes the filled variants' fill."""
        output = (
            IconBuilder(Icon(name="moon-solid", variant=IconVariant.SOLID), renderer)
            .set_fill("#f59e0b")
            .render()
        )
        assert ' fill="#f59e0b">' in output
