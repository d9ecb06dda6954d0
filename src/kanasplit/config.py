from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from kanasplit.categories import Mode


@dataclass(frozen=True)
class TokenizeOptions:
    compact: bool = False
    detailed: bool = False

    @property
    def mode(self) -> Mode:
        return "compact" if self.compact else "full"

    @staticmethod
    def from_mapping(options: Mapping[str, Any] | None) -> "TokenizeOptions":
        """
        Build options from a plain mapping such as `{"compact": True}`.

        Missing keys keep their defaults. Unknown keys raise ValueError,
        non-bool values raise TypeError.
        """
        if options is None:
            return TokenizeOptions()

        known = {f.name for f in fields(TokenizeOptions)}
        unknown = sorted(str(k) for k in options if k not in known)
        if unknown:
            raise ValueError(
                f"Unknown tokenize option(s): {', '.join(unknown)} "
                f"(expected: {', '.join(sorted(known))})"
            )

        for key, value in options.items():
            if not isinstance(value, bool):
                raise TypeError(
                    f"Option {key!r} must be a bool, got {type(value).__name__}"
                )

        return TokenizeOptions(**dict(options))
