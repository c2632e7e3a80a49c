"""Engine settings definitions using Pydantic.

This module defines the immutable configuration contract for the
classification, projection and display layers. Every threshold the
classifier applies lives here so runs are reproducible from a settings file.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

RuleName = Literal["number", "date", "boolean", "category"]

DEFAULT_RULE_ORDER: tuple[RuleName, ...] = ("number", "date", "boolean", "category")


class DateLabelStyle(str, Enum):
    """Rendering style for date labels."""

    US = "us"  # 1/5/2024
    ISO = "iso"  # 2024-01-05


class ClassifierSettings(BaseModel):
    """Sampling window and rule thresholds for column classification."""

    sample_size: int = Field(
        default=50, ge=1, le=100000, description="Rows sampled per column"
    )
    numeric_threshold: float = Field(
        default=0.7, ge=0.0, le=1.0, description="numeric ratio must exceed this"
    )
    date_threshold: float = Field(
        default=0.6, ge=0.0, le=1.0, description="date ratio must exceed this"
    )
    boolean_threshold: float = Field(
        default=0.6, ge=0.0, le=1.0, description="boolean ratio must exceed this"
    )
    category_max_distinct: int = Field(
        default=20, ge=1, description="Maximum distinct values for a category"
    )
    category_max_unique_ratio: float = Field(
        default=0.7, ge=0.0, le=1.0, description="unique ratio must stay below this"
    )
    rule_order: tuple[RuleName, ...] = Field(
        default=DEFAULT_RULE_ORDER,
        description="Rule evaluation order; first match wins, text is the fallback",
    )

    @field_validator("rule_order")
    @classmethod
    def validate_rule_order(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty or duplicated rule lists."""
        if not v:
            raise ValueError("rule_order must name at least one rule")
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"rule_order contains duplicate rules: {duplicates}")
        return v

    model_config = ConfigDict(frozen=True, extra="forbid")


class SerialDateSettings(BaseModel):
    """Numeric window interpreted as spreadsheet date serials."""

    serial_min: float = Field(default=25000, ge=0, description="Inclusive lower bound")
    serial_max: float = Field(default=60000, gt=0, description="Exclusive upper bound")

    @model_validator(mode="after")
    def validate_window(self) -> "SerialDateSettings":
        """Ensure the window is not empty."""
        if self.serial_min >= self.serial_max:
            raise ValueError(
                f"serial_min ({self.serial_min}) must be below serial_max ({self.serial_max})"
            )
        return self

    def contains(self, value: float) -> bool:
        """Check whether a number falls inside the serial window."""
        return self.serial_min <= value < self.serial_max

    model_config = ConfigDict(frozen=True, extra="forbid")


class DisplaySettings(BaseModel):
    """Presentation options for formatted cells and previews."""

    date_label_style: DateLabelStyle = Field(
        default=DateLabelStyle.US, description="How date labels are rendered"
    )
    category_max_chars: int = Field(default=24, ge=1, description="Category truncation width")
    text_max_chars: int = Field(default=48, ge=1, description="Text truncation width")
    preview_rows: int = Field(default=50, ge=0, description="Rows shown in previews")

    model_config = ConfigDict(frozen=True, extra="forbid")


class EngineSettings(BaseModel):
    """Complete engine settings - immutable once validated."""

    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    serial_dates: SerialDateSettings = Field(default_factory=SerialDateSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_SETTINGS = EngineSettings()
