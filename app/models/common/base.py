"""Base dataclass for domain records."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for records carried through a run."""

    def to_dict(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Convert to a plain dictionary, nested records included."""
        data = asdict(self)
        for key in exclude or ():
            data.pop(key, None)
        return data
