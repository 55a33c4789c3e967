"""Variable environments used by the interpreter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from msdscript.errors import MSDScriptError

if TYPE_CHECKING:
    from msdscript.values import Val


class Env(ABC):
    """A chain of variable bindings."""

    @abstractmethod
    def lookup(self, name: str) -> Val:
        """Return the value bound to ``name``."""

    def extend(self, name: str, value: Val) -> ExtendedEnv:
        """Return a new environment binding ``name`` on top of this one."""
        return ExtendedEnv(name, value, self)


class EmptyEnv(Env):
    """The environment with no bindings."""

    def lookup(self, name: str) -> Val:
        raise MSDScriptError(f"Free variable: {name}")


@dataclass(frozen=True, eq=False)
class ExtendedEnv(Env):
    """One binding in front of an enclosing environment."""

    name: str
    value: Val
    rest: Env

    def lookup(self, name: str) -> Val:
        env: Env = self
        while isinstance(env, ExtendedEnv):
            if env.name == name:
                return env.value
            env = env.rest
        return env.lookup(name)


_EMPTY = EmptyEnv()


def empty_env() -> Env:
    """Return the shared empty environment."""
    return _EMPTY