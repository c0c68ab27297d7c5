"""End-to-end combine pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pixweave.core.errors import ImageDataError
from pixweave.core.interleave import combine_images
from pixweave.core.loader import check_formats, load_image
from pixweave.core.output import OutputImage, save_output
from pixweave.core.reconcile import standardize_size
from pixweave.core.state import PipelineStateMachine
from pixweave.schemas.status import CombineResult, PipelineStage

logger = logging.getLogger(__name__)

StageCallback = Callable[[PipelineStage], None]


def combine(
    image1_path: str | Path,
    image2_path: str | Path,
    output_path: str | Path,
    on_stage: StageCallback | None = None,
) -> CombineResult:
    """Combine two images into one by alternating their pixels.

    Runs load, format check, size reconciliation, interleaving and save in
    order. Any failure aborts the run; nothing is retried.

    Args:
        image1_path: Image supplying even-indexed pixels
        image2_path: Image supplying odd-indexed pixels
        output_path: Destination; encoded in the inputs' common format
        on_stage: Called with each stage as it is reached

    Returns:
        CombineResult describing the written image

    Raises:
        ImageDataError: On any failure, with ``stage`` set to the last stage
            reached before it
    """
    machine = PipelineStateMachine()

    def advance(stage: PipelineStage) -> None:
        machine.transition(stage)
        if on_stage:
            on_stage(stage)

    try:
        first = load_image(image1_path)
        second = load_image(image2_path)
        advance(PipelineStage.LOADED)

        image_format = check_formats(first, second)
        advance(PipelineStage.FORMATS_VALIDATED)

        image1, image2, resized = standardize_size(first.image, second.image)
        advance(PipelineStage.RESIZED)

        output = OutputImage(image1.width, image1.height, str(output_path))
        output.set_data(combine_images(image1, image2))
        advance(PipelineStage.INTERLEAVED)

        save_output(output, image_format)
        advance(PipelineStage.SAVED)
    except ImageDataError as e:
        machine.transition(PipelineStage.FAILED)
        e.stage = machine.failed_at
        logger.warning("Combine failed after %s: %s", e.stage.value, e)
        if on_stage:
            on_stage(PipelineStage.FAILED)
        raise

    return CombineResult(
        output=str(output_path),
        format=image_format,
        width=output.width,
        height=output.height,
        resized=resized,
        stages=machine.history,
    )
