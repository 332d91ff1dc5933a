"""Base model shared by packet and race-state models.

Every f1dash model inherits from :class:`F1BaseModel`, which makes
instances immutable and rejects unknown fields. State changes are
expressed by building new instances (``model_copy(update=...)``), never by
mutating a snapshot another reader may hold.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class F1BaseModel(BaseModel):
    """Frozen, strict base for f1dash models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
