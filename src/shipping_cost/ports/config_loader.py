from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

ConfigT_co = TypeVar("ConfigT_co", covariant=True)


# One loader per rule family; each returns the snapshot of the currently active configuration.
@runtime_checkable
class RuleConfigLoader(Protocol[ConfigT_co]):
    def load(self) -> ConfigT_co:
        """Return the active configuration snapshot.

        Raises ConfigError when no configuration is active or the rule's section is
        missing or disabled. Implementations never substitute defaults.
        """
        raise NotImplementedError("RuleConfigLoader is a port; use a concrete adapter.")
