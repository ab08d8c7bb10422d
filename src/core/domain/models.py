"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.
- Frozen models: once a run's options are validated nothing downstream can
  mutate them.

Note:
- These models describe *what* a build is, not *how* it is executed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.choices import DEFAULT_SSH_TIMEOUT, OnErrorPolicy, Provider


class RawOptions(BaseModel):
    """Options exactly as captured from the command line.

    Only the country is normalized (uppercase); everything else is checked
    later by `core.validators`.
    """

    model_config = ConfigDict(frozen=True)

    country: str | None = None
    provider: str | None = None
    timeout: str | None = None
    on_error: str | None = None
    skip_write_zeros: bool = False
    force: bool = False
    dry_run: bool = False
    headless: bool = False


class BuildOptions(BaseModel):
    """Validated build options for a single run."""

    model_config = ConfigDict(frozen=True)

    country: str | None = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Whitelisted uppercase country code; None selects the default mirror.",
    )
    provider: Provider = Field(
        default_factory=Provider.default,
        description="Canonical builder profile.",
    )
    ssh_timeout: str = Field(
        default=DEFAULT_SSH_TIMEOUT,
        description="How long the builder waits for SSH in the guest.",
    )
    write_zeros: bool = Field(
        default=True,
        description="Zero free disk space during cleanup (better box compression).",
    )
    on_error: OnErrorPolicy = Field(
        default_factory=OnErrorPolicy.default,
        description="Builder behaviour when a step fails.",
    )
    force: bool = Field(
        default=False,
        description="Delete existing output artifacts before building.",
    )
    dry_run: bool = Field(
        default=False,
        description="Print the builder invocation instead of running it.",
    )
    headless: bool = Field(
        default=False,
        description="Run the VM without a console window.",
    )


class MirrorInfo(BaseModel):
    """Mirror resolved for this run."""

    model_config = ConfigDict(frozen=True)

    country: str = Field(..., min_length=2, max_length=2)
    url: str = Field(
        ...,
        min_length=8,
        description="Mirror base URL without repository suffix or trailing slash.",
    )


class IsoManifest(BaseModel):
    """Current installer media published by a mirror."""

    model_config = ConfigDict(frozen=True)

    checksum_url: str = Field(..., description="URL of the checksum manifest.")
    iso_name: str = Field(..., min_length=1, description="Installer filename from the manifest.")
    iso_url: str = Field(..., description="Download URL of the installer media.")


class Invocation(BaseModel):
    """Fully resolved call of the external builder."""

    model_config = ConfigDict(frozen=True)

    provider_filter: str = Field(..., description="Build profile selected with -only.")
    argv: tuple[str, ...] = Field(..., description="Argument vector, executable first.")
    variables: dict[str, str] = Field(
        default_factory=dict,
        description="Template variables passed with -var, in contract order.",
    )
    template: str = Field(..., description="Template file handed to the builder.")
