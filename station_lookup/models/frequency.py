from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Frequency:
    """Radio frequency published for an airport."""

    type: Optional[str] = None
    desc: Optional[str] = None
    # Kept exactly as written in the reference file
    mhz: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'type': self.type,
            'desc': self.desc,
            'mhz': self.mhz,
        }
