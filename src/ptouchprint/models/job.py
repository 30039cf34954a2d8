"""Print job configuration models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class JobState(StrEnum):
    """Lifecycle state of a print job."""

    NONE = "none"
    CONFIGURING = "configuring"
    READY = "ready"


class PrintJobConfig(BaseModel):
    """Settings applied to every page of a print job."""

    model_config = ConfigDict(frozen=True)

    tape_size: int = Field(default=12, gt=0)  # Tape width in mm
    margin_size: int = Field(default=14, ge=0, le=0xFFFF)  # Feed margin in dots
    auto_cut: int = Field(default=1, ge=0, le=0xFF)  # Cut every N pages, 0 disables
    half_cut: bool = True
    chain_printing: bool = False

    @property
    def auto_cut_enabled(self) -> bool:
        """Whether the printer should cut automatically."""
        return self.auto_cut > 0
