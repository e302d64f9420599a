# src/hardener/contracts/config.py
"""Options accepted by create_hardener().

Options are validated with Pydantic and frozen after construction. A
fringe set without add() and has() raises ConfigError directly, whether the
options are built here or passed to create_hardener() as a mapping; the
facade converts any other validation failure into ConfigError.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hardener.contracts.errors import ConfigError


class HardenerOptions(BaseModel):
    """Construction options for a hardener.

    Example:
        options = HardenerOptions(fringe_set=shared_fringe, prepare_hook=normalize)
        harden = create_hardener(realm.intrinsics(), options, model=realm)
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    fringe_set: Any = Field(
        default=None,
        description="Externally supplied fringe exposing add() and has(); replaces the private fringe",
    )
    prepare_hook: Callable[[Any], None] | None = Field(
        default=None,
        description="Called with each node immediately before it is hardened",
    )

    @field_validator("fringe_set")
    @classmethod
    def validate_fringe_set(cls, v: Any) -> Any:
        """A supplied fringe set must expose callable add() and has().

        ConfigError is not a ValueError, so Pydantic lets it propagate
        unwrapped.
        """
        if v is None:
            return v
        if not callable(getattr(v, "add", None)) or not callable(getattr(v, "has", None)):
            raise ConfigError("fringe_set must have add() and has() methods")
        return v
