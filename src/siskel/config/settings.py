"""Application settings."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from siskel.models import FrequencyPolicy, PersonalityId

DEFAULT_STATE_PATH = Path("~/.siskel/state.json")


class Settings(BaseModel):
  """Application configuration.

  Field names are snake_case; the camelCase names used by editor
  settings files are accepted as aliases.
  """

  model_config = ConfigDict(use_enum_values=False, populate_by_name=True)

  proactive_analysis_enabled: bool = Field(True, alias="proactiveAnalysisEnabled")
  auto_review_on_save: bool = Field(True, alias="autoReviewOnSave")
  intervention_frequency: FrequencyPolicy = Field(
    FrequencyPolicy.BALANCED, alias="interventionFrequency"
  )
  max_suggestions_per_cycle: int = Field(3, ge=1, alias="maxSuggestionsPerCycle")
  active_personality: PersonalityId = Field(PersonalityId.SUPPORTIVE, alias="activePersonality")
  use_ai_enhancement: bool = Field(False, alias="useAIEnhancement")
  cooldown_seconds: int = Field(20, ge=0, alias="cooldownSeconds")
  debounce_ms: int = Field(1000, ge=0, alias="debounceMs")
  ai_provider: str = Field("local", alias="aiProvider")
  ai_model: str | None = Field(None, alias="aiModel")
  state_path: Path = Field(DEFAULT_STATE_PATH, alias="statePath")
  log_level: str = Field("WARNING", alias="logLevel")
