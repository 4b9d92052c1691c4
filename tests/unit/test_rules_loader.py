"""
Rules loader tests.

- The packaged rules file validates
- Missing files raise FileNotFoundError, bad content ValueError
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fluid_tokens.domain.entities import TokenConfig
from fluid_tokens.rules.loader import DEFAULT_RULES_PATH, RULES_ENV_VAR, load_rules

MINIMAL = """
project:
  slug: test
  rules_version: "1"
families:
  typography:
    steps:
      - { name: body, exponent: 0 }
  spacing:
    steps:
      - { name: space, exponent: 0 }
  gap:
    steps:
      - { name: gap, exponent: 0 }
preview:
  viewports: { narrow: 400 }
  default_viewport: narrow
"""


def write(tmp_path: Path, content: str, name: str = "rules.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content)
    return path


class TestPackagedRules:
    def test_loads(self) -> None:
        rules = load_rules()
        assert rules.project.slug == "fluid-tokens"
        assert rules.output.unit == "rem"

    def test_step_tables(self) -> None:
        rules = load_rules()
        typography = rules.families["typography"].to_steps()
        assert [s.name for s in typography][:3] == ["body-xs", "body-s", "body-m"]
        assert (typography[0].exponent, typography[-1].exponent) == (-2, 8)
        assert len(rules.families["spacing"].steps) == 5
        assert len(rules.families["gap"].steps) == 5

    def test_defaults_match_builtin_defaults(self) -> None:
        assert load_rules().defaults == TokenConfig()

    def test_preview_viewports(self) -> None:
        preview = load_rules().preview
        assert preview.viewports == {"mobile": 320, "tablet": 768, "desktop": 1440}
        assert preview.default_viewport == "mobile"

    def test_storage_keys(self) -> None:
        storage = load_rules().storage
        assert (storage.config_key, storage.dark_mode_key) == ("tokenConfig", "darkMode")


class TestLoadRules:
    def test_minimal_file_gets_defaults(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, MINIMAL))
        assert rules.defaults == TokenConfig()
        assert rules.storage.config_key == "tokenConfig"

    def test_fenced_yaml_in_markdown(self, tmp_path: Path) -> None:
        doc = "# Rules\n\nSome prose.\n\n```yaml\n" + MINIMAL + "\n```\n\nMore prose.\n"
        rules = load_rules(write(tmp_path, doc, "rules.md"))
        assert rules.preview.default_viewport == "narrow"

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RULES_ENV_VAR, str(write(tmp_path, MINIMAL)))
        assert load_rules().project.slug == "test"

    def test_explicit_path_beats_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(RULES_ENV_VAR, str(tmp_path / "missing.yaml"))
        assert load_rules(DEFAULT_RULES_PATH).project.slug == "fluid-tokens"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="YAML"):
            load_rules(write(tmp_path, "project: [unclosed"))

    @pytest.mark.parametrize(
        ("old", "new"),
        [
            ("  gap:\n    steps:\n      - { name: gap, exponent: 0 }\n", ""),
            ("{ name: space, exponent: 0 }", "{ name: space, exponent: 0.5 }"),
            ("{ name: space, exponent: 0 }", "{ name: 'two words', exponent: 0 }"),
            (
                "      - { name: body, exponent: 0 }\n",
                "      - { name: body, exponent: 0 }\n      - { name: body, exponent: 1 }\n",
            ),
            ("default_viewport: narrow", "default_viewport: wide"),
            ("preview:", "colour: blue\npreview:"),
        ],
    )
    def test_schema_violations(self, tmp_path: Path, old: str, new: str) -> None:
        content = MINIMAL.replace(old, new)
        assert content != MINIMAL
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write(tmp_path, content))
