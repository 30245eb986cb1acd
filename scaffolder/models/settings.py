"""Schema for the optional scaffolder config file."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SettingsFile(BaseModel):
    """User settings read from config.yml.

    Every field is optional; missing fields keep the built-in defaults.
    """

    model_config = ConfigDict(
        extra='forbid',
        json_schema_extra={
            "example": {
                "cargo_bin": "/home/me/.cargo/bin/cargo",
                "author_name": "Jane Doe",
                "author_email": "jane@example.com",
            }
        },
    )

    cargo_bin: Optional[str] = Field(None, description="Path or name of the cargo executable")
    git_bin: Optional[str] = Field(None, description="Path or name of the git executable")
    author_name: Optional[str] = Field(None, description="Author of the initial commit")
    author_email: Optional[str] = Field(None, description="Email of the initial commit author")
    commit_message: Optional[str] = Field(None, description="Message of the initial commit")
    log_file: Optional[str] = Field(None, description="Write logs to this file")
    verbose: Optional[bool] = Field(None, description="Log cargo/git commands and their output")

    @field_validator('author_email')
    @classmethod
    def validate_email(cls, v):
        """Reject obviously malformed author emails."""
        if v is not None and '@' not in v:
            raise ValueError(f"author_email must contain '@'. Got: {v}")
        return v

    @field_validator('commit_message')
    @classmethod
    def validate_commit_message(cls, v):
        """Commit message cannot be blank."""
        if v is not None and not v.strip():
            raise ValueError("commit_message cannot be empty")
        return v
