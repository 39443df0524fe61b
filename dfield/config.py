from dataclasses import dataclass
from typing import Optional


@dataclass
class FieldConfig:
    """Settings for one distance-field build.

    threshold: intensity strictly above this marks a seed pixel
    scale: output magnitude per pixel of distance (255/scale saturates)
    connectivity: 4 (axis neighbors) or 8 (axis + diagonal)
    channel: channel index for multi-channel input, None for gray conversion
    num_workers: thread count for seeding/extraction bands, None runs inline
    verbose: print stage timings
    """
    threshold: float = 128
    scale: float = 8.0
    connectivity: int = 4
    channel: Optional[int] = None
    num_workers: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        if self.connectivity not in (4, 8):
            raise ValueError(f"connectivity must be 4 or 8, got {self.connectivity}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if self.num_workers is not None and self.num_workers < 0:
            raise ValueError(f"num_workers must be >= 0, got {self.num_workers}")

    @classmethod
    def from_dict(cls, d):
        """Build from a mapping, ignoring keys that are not config fields."""
        names = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in (d or {}).items() if k in names and v is not None})


def log(config, msg):
    if config.verbose:
        print(f"[DF] {msg}")
