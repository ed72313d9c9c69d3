"""Icon dataset models.

Describes the iconify JSON layout the bundled dataset uses. Only the
``icons`` mapping and each entry's ``body`` matter; everything else in the
document is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class IconEntry(BaseModel):
    """One icon in the dataset."""

    model_config = ConfigDict(extra="ignore")

    body: str


class IconDataset(BaseModel):
    """A full icon set document."""

    model_config = ConfigDict(extra="ignore")

    prefix: str | None = None
    icons: dict[str, IconEntry] = Field(...)

    @property
    def bodies(self) -> dict[str, str]:
        """Map of icon name to path-data body."""
        return {name: entry.body for name, entry in self.icons.items()}
