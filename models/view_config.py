"""Per-view visualization settings."""

from dataclasses import dataclass
from typing import Literal, Optional

from models.errors import InvalidScheme, InvalidTarget

TransformationTarget = Literal['original', 'r', 'g', 'b', 'y', 'cb', 'cr']
SubsamplingScheme = Literal['4:4:4', '4:2:2', '4:2:0']

TRANSFORMATION_TARGETS = ('original', 'r', 'g', 'b', 'y', 'cb', 'cr')
SUBSAMPLING_SCHEMES = ('4:4:4', '4:2:2', '4:2:0')


@dataclass
class ViewConfig:
    """Transformation target and subsampling scheme of one view."""

    transformation_target: TransformationTarget = 'original'
    subsampling_scheme: Optional[SubsamplingScheme] = None

    def __post_init__(self):
        if self.subsampling_scheme == 'none':
            self.subsampling_scheme = None
        if self.transformation_target not in TRANSFORMATION_TARGETS:
            raise InvalidTarget(
                f"Transformation target must be one of {TRANSFORMATION_TARGETS}, "
                f"got {self.transformation_target!r}"
            )
        if self.subsampling_scheme is not None and self.subsampling_scheme not in SUBSAMPLING_SCHEMES:
            raise InvalidScheme(
                f"Subsampling scheme must be one of {SUBSAMPLING_SCHEMES} or None, "
                f"got {self.subsampling_scheme!r}"
            )
