from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from fluid_tokens.domain.entities import ScaleFamily, ScaleStep, TokenConfig

REQUIRED_FAMILIES: tuple[ScaleFamily, ...] = ("typography", "spacing", "gap")


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class StepRule(BaseModel):
    name: str = Field(pattern=r"^[A-Za-z_][A-Za-z0-9_-]*$")
    exponent: StrictInt

    def to_step(self) -> ScaleStep:
        return ScaleStep(name=self.name, exponent=self.exponent)


class FamilyRules(BaseModel):
    steps: list[StepRule] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_names(self) -> "FamilyRules":
        names = [s.name for s in self.steps]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate step names: {', '.join(duplicates)}")
        return self

    def to_steps(self) -> tuple[ScaleStep, ...]:
        return tuple(s.to_step() for s in self.steps)


class OutputRules(BaseModel):
    unit: str = "rem"


class PreviewRules(BaseModel):
    viewports: dict[str, float]
    default_viewport: str

    @model_validator(mode="after")
    def _default_is_known(self) -> "PreviewRules":
        if self.default_viewport not in self.viewports:
            raise ValueError(f"default_viewport '{self.default_viewport}' is not in viewports")
        return self


class StorageRules(BaseModel):
    config_key: str = "tokenConfig"
    dark_mode_key: str = "darkMode"


class Rules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project: ProjectRules
    output: OutputRules = Field(default_factory=OutputRules)
    families: dict[ScaleFamily, FamilyRules]
    preview: PreviewRules
    defaults: TokenConfig = Field(default_factory=TokenConfig)
    storage: StorageRules = Field(default_factory=StorageRules)

    @model_validator(mode="after")
    def _all_families_present(self) -> "Rules":
        missing = [f for f in REQUIRED_FAMILIES if f not in self.families]
        if missing:
            raise ValueError(f"missing scale families: {', '.join(missing)}")
        return self
