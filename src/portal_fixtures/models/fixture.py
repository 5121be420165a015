"""
Fixture Entry Model

One labelled (content key, content value) pair of the Hive beacon fixture
file, together with its rendering.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FixtureEntry(BaseModel):
    """
    A fixture entry.

    Attributes:
        label: Human readable name written as a comment above the entry
        content_key: Encoded content key as 0x-prefixed hex
        content_value: Encoded content value as 0x-prefixed hex
        updated_at: Date the entry was generated
    """
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Entry label")
    content_key: str = Field(..., description="0x-prefixed content key")
    content_value: str = Field(..., description="0x-prefixed content value")
    updated_at: date = Field(default_factory=date.today, description="Generation date")

    @field_validator('content_key', 'content_value')
    @classmethod
    def validate_hex(cls, v):
        if not v.startswith('0x'):
            raise ValueError("Content must be hex with a '0x' prefix")
        return v

    def to_yaml_string(self) -> str:
        """
        Render the entry as a commented YAML list item.

        Examples:
            >>> print(FixtureEntry(label="X", content_key="0x12", content_value="0x34",
            ...                    updated_at=date(2024, 1, 2)).to_yaml_string(), end="")
            # X
            # Last updated: 2024-01-02
            - content_key: "0x12"
              content_value: "0x34"
        """
        return (
            f"# {self.label}\n"
            f"# Last updated: {self.updated_at.isoformat()}\n"
            f"- content_key: \"{self.content_key}\"\n"
            f"  content_value: \"{self.content_value}\"\n"
        )
