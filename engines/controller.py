"""Controller for the three visualization views."""

import logging
from dataclasses import replace
from typing import Dict, Optional

import numpy as np

from models.pixel_buffer import PixelBuffer
from models.view_config import ViewConfig
from engines.pipeline import PipelineOrchestrator
from utils.render_surface import PixelReader, PixelWriter

logger = logging.getLogger(__name__)

DEFAULT_VIEWS: Dict[str, ViewConfig] = {
    'rgb': ViewConfig(transformation_target='original'),
    'ycc': ViewConfig(transformation_target='y'),
    'subsampling': ViewConfig(transformation_target='original', subsampling_scheme='4:4:4'),
}


class VisualizationController:
    """
    Owns one pipeline per view and re-renders views when settings change.

    Views:
    - rgb: isolate R, G or B
    - ycc: isolate Y, Cb or Cr
    - subsampling: chroma subsampling, optionally with channel isolation
    """

    def __init__(self, writers: Optional[Dict[str, PixelWriter]] = None):
        writers = writers or {}
        unknown = set(writers) - set(DEFAULT_VIEWS)
        if unknown:
            raise KeyError(f"Unknown views: {sorted(unknown)}")
        self._views: Dict[str, PipelineOrchestrator] = {
            name: PipelineOrchestrator(config=replace(config), writer=writers.get(name))
            for name, config in DEFAULT_VIEWS.items()
        }

    @property
    def view_names(self):
        return list(self._views)

    def view(self, name: str) -> PipelineOrchestrator:
        if name not in self._views:
            raise KeyError(f"Unknown view: {name}")
        return self._views[name]

    def config(self, name: str) -> ViewConfig:
        return self.view(name).config

    def attach_writer(self, name: str, writer: PixelWriter) -> None:
        self.view(name).writer = writer

    def change_source(self, source: PixelBuffer) -> Dict[str, np.ndarray]:
        """Use a new source image in every view, reset settings and re-render."""
        logger.info("New source image %dx%d", source.width, source.height)
        for orchestrator in self._views.values():
            orchestrator.source = source
        self.reset()
        return self.reload()

    def load_source(self, reader: PixelReader) -> Dict[str, np.ndarray]:
        return self.change_source(reader.read_pixels())

    def reset(self) -> None:
        """Restore the default settings of every view without re-rendering."""
        for name, orchestrator in self._views.items():
            orchestrator.config = replace(DEFAULT_VIEWS[name])

    def reload(self) -> Dict[str, np.ndarray]:
        """Re-render every view."""
        return {name: orchestrator.render() for name, orchestrator in self._views.items()}

    def set_transformation(self, name: str, target: str) -> np.ndarray:
        orchestrator = self.view(name)
        orchestrator.config = replace(orchestrator.config, transformation_target=target)
        return orchestrator.render()

    def set_subsampling_scheme(self, name: str, scheme: Optional[str]) -> np.ndarray:
        orchestrator = self.view(name)
        orchestrator.config = replace(orchestrator.config, subsampling_scheme=scheme)
        return orchestrator.render()
