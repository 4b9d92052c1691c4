"""
Tokens component tests.

- Typography uses the mobile and desktop ratios; spacing and gap one ratio
- Errors name the camelCase configuration field
- The merged stylesheet holds every family in one `:root` block
"""

from __future__ import annotations

import pytest

from fluid_tokens.components.tokens import (
    GenerateTokensInput,
    PreviewTokensInput,
    resolve_preview_width,
    run,
    run_generate,
    run_preview,
    scale_config_for,
)
from fluid_tokens.domain.entities import RootFontSize, ScaleStep, TokenConfig
from fluid_tokens.domain.errors import DegenerateViewport, InvalidConfig
from fluid_tokens.rules.models import Rules


def generate(families, **config: object):
    return run_generate(GenerateTokensInput(config=TokenConfig(**config), families=families))


def by_name(scale) -> dict:
    return {t.name: t for t in scale.tokens}


class TestScaleConfigFor:
    """Mapping configuration fields onto each family."""

    def test_typography_uses_both_ratios(self) -> None:
        config = scale_config_for("typography", TokenConfig(), ())
        assert (config.base_min, config.base_max) == (1.4, 1.6)
        assert (config.ratio_min, config.ratio_max) == (1.125, 1.2)

    def test_spacing_uses_one_ratio(self) -> None:
        config = scale_config_for("spacing", TokenConfig(), ())
        assert (config.base_min, config.base_max) == (0.5, 1.0)
        assert config.ratio_min == config.ratio_max == 1.333

    def test_gap_uses_one_ratio(self) -> None:
        config = scale_config_for("gap", TokenConfig(gap_ratio=1.5), ())
        assert (config.base_min, config.base_max) == (0.75, 1.5)
        assert config.ratio_min == config.ratio_max == 1.5


class TestGenerate:
    """Generating every family from the default configuration."""

    def test_families_in_canonical_order(self, families) -> None:
        output = generate(families)
        assert list(output.scales) == ["typography", "spacing", "gap"]

    def test_typography_values(self, families) -> None:
        tokens = by_name(generate(families).scales["typography"])
        assert tokens["body-m"].expression == "clamp(1.400rem, 0.018vw + 1.343rem, 1.600rem)"
        assert tokens["body-xs"].expression.startswith("clamp(1.106rem, ")
        assert tokens["title-1"].max == pytest.approx(1.6 * 1.2**8)

    def test_spacing_values(self, families) -> None:
        tokens = by_name(generate(families).scales["spacing"])
        assert tokens["space-s"].expression == "clamp(0.500rem, 0.045vw + 0.357rem, 1.000rem)"
        assert tokens["space-m"].min == pytest.approx(0.5 * 1.333)

    def test_gap_values(self, families) -> None:
        tokens = by_name(generate(families).scales["gap"])
        assert tokens["gap-s"].expression == "clamp(0.750rem, 0.067vw + 0.536rem, 1.500rem)"

    def test_family_css_has_preamble_and_root(self, families) -> None:
        css = generate(families).scales["spacing"].css
        assert css.startswith("/* Root font-size: 100% (16px) */\n\n:root {\n")
        assert css.count("--space-") == 5

    def test_merged_css_holds_every_token_once(self, families) -> None:
        merged = generate(families, root_font_size=10).merged_css
        assert merged.count(":root {") == 1
        assert merged.count("/* Root font-size: 62.5% (10px) */") == 1
        assert merged.count("\n    --") == 21
        assert merged.index("--title-1:") < merged.index("--space-xs:") < merged.index("--gap-xs:")

    def test_values_mapping(self, families) -> None:
        values = generate(families).scales["gap"].values()
        assert values["gap-s"] == (0.75, 1.5)

    def test_is_deterministic(self, families) -> None:
        assert generate(families) == generate(families)

    def test_no_families(self) -> None:
        output = generate({})
        assert output.scales == {}
        assert output.merged_css == ""

    def test_custom_steps(self) -> None:
        output = generate({"gap": (ScaleStep("only", 2),)})
        assert list(by_name(output.scales["gap"])) == ["only"]


class TestGenerateErrors:
    """Invalid configurations fail before any text is produced."""

    @pytest.mark.parametrize(
        ("field", "alias"),
        [
            ("type_base_min", "typeBaseMin"),
            ("type_ratio_desktop", "typeRatioDesktop"),
            ("space_base_max", "spaceBaseMax"),
            ("space_ratio", "spaceRatio"),
            ("gap_ratio", "gapRatio"),
        ],
    )
    @pytest.mark.parametrize("value", [0, -1.5])
    def test_non_positive_field(self, families, field: str, alias: str, value: float) -> None:
        with pytest.raises(InvalidConfig) as exc_info:
            generate(families, **{field: value})
        assert exc_info.value.field == alias

    def test_error_message_names_family(self, families) -> None:
        with pytest.raises(InvalidConfig, match="^spacing: "):
            generate(families, space_base_min=0)

    @pytest.mark.parametrize(("vmin", "vmax"), [(500, 500), (1440, 320)])
    def test_degenerate_viewport(self, families, vmin: float, vmax: float) -> None:
        with pytest.raises(DegenerateViewport):
            generate(families, viewport_min=vmin, viewport_max=vmax)


class TestPreview:
    """Actual pixel sizes at named widths."""

    def _preview(self, families, width: float, **config: object):
        return run_preview(
            PreviewTokensInput(config=TokenConfig(**config), families=families, width=width)
        )

    def test_mobile(self, families) -> None:
        body = self._preview(families, 320).items["typography"][2]
        assert body.name == "body-m"
        assert body.pixels == 22.4
        assert body.pixels_text == "22.40"
        assert (body.min_text, body.max_text) == ("1.400", "1.600")

    def test_desktop(self, families) -> None:
        items = {i.name: i for i in self._preview(families, 1440).items["typography"]}
        assert items["body-m"].pixels_text == "25.60"
        assert items["title-1"].pixels_text == "110.08"

    def test_sixty_two_point_five_root(self, families) -> None:
        body = self._preview(families, 320, root_font_size=RootFontSize.SIXTY_TWO_FIVE)
        assert body.items["typography"][2].pixels_text == "14.00"

    def test_beyond_viewport_is_clamped(self, families) -> None:
        wide = self._preview(families, 4000).items["gap"]
        desktop = self._preview(families, 1440).items["gap"]
        assert [i.pixels for i in wide] == [i.pixels for i in desktop]

    def test_degenerate_viewport(self, families) -> None:
        with pytest.raises(DegenerateViewport):
            self._preview(families, 320, viewport_min=800, viewport_max=800)


class TestResolvePreviewWidth:
    def test_default_viewport(self, rules: Rules) -> None:
        assert resolve_preview_width(rules) == 320

    @pytest.mark.parametrize(("name", "width"), [("tablet", 768), ("desktop", 1440)])
    def test_named_viewport(self, rules: Rules, name: str, width: float) -> None:
        assert resolve_preview_width(rules, viewport=name) == width

    def test_explicit_width_wins(self, rules: Rules) -> None:
        assert resolve_preview_width(rules, viewport="desktop", width=1024) == 1024.0

    def test_unknown_viewport(self, rules: Rules) -> None:
        with pytest.raises(InvalidConfig, match="watch"):
            resolve_preview_width(rules, viewport="watch")

    @pytest.mark.parametrize("width", [0, -10])
    def test_non_positive_width(self, rules: Rules, width: float) -> None:
        with pytest.raises(InvalidConfig):
            resolve_preview_width(rules, width=width)


class TestRunEntryPoint:
    def test_dispatches_preview(self, families) -> None:
        output = run(PreviewTokensInput(config=TokenConfig(), families=families, width=768))
        assert output.width == 768

    def test_rejects_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(TokenConfig())  # type: ignore[arg-type]
