"""The "copy as clean markdown" action.

Fetch the block tree, transform it, put the result on the clipboard and
tell the user what happened. Each boundary step is awaited once, in order;
any failure ends the run and is reported, there are no retries.
"""

from enum import Enum
from typing import Optional

from ripbullets.models.config import TransformOptions
from ripbullets.services.clipboard import Clipboard
from ripbullets.services.exceptions import EmptyResultError, EmptySourceError
from ripbullets.services.notifications import ERROR, SUCCESS, WARNING, Notifier
from ripbullets.services.sources import BlockSource
from ripbullets.markdown.renderer import transform_block_tree
from ripbullets.utils.logging import get_logger


logger = get_logger(__name__)

COPIED_MESSAGE = "Copied clean markdown to clipboard!"


class CopyOutcome(str, Enum):
    """How a copy run ended."""

    COPIED = "copied"
    EMPTY_SOURCE = "empty_source"
    EMPTY_RESULT = "empty_result"
    FAILED = "failed"


async def render_source(
    source: BlockSource,
    options: Optional[TransformOptions] = None,
) -> str:
    """
    Fetch blocks from a source and transform them.

    Args:
        source: Block source to read
        options: Rendering switches

    Returns:
        Non-empty markdown

    Raises:
        EmptySourceError: If the source returned no blocks
        EmptyResultError: If the blocks rendered to nothing
        BoundaryError: If the source could not be read
    """
    blocks = await source.fetch()
    if not blocks:
        raise EmptySourceError()

    markdown = transform_block_tree(blocks, options)
    if not markdown.strip():
        raise EmptyResultError()

    logger.info("markdown_rendered", root_blocks=len(blocks), chars=len(markdown))
    return markdown


async def copy_clean_markdown(
    source: BlockSource,
    clipboard: Clipboard,
    notifier: Notifier,
    options: Optional[TransformOptions] = None,
) -> CopyOutcome:
    """
    Transform a page to clean markdown and copy it to the clipboard.

    Never raises for source or clipboard failures: they are logged and
    reported through the notifier.

    Args:
        source: Where to read the block tree from
        clipboard: Where to write the markdown
        notifier: How to report the outcome
        options: Rendering switches

    Returns:
        Outcome of the run
    """
    logger.info("copy_started", source=type(source).__name__)

    try:
        markdown = await render_source(source, options)
        await clipboard.write_text(markdown)

    except EmptySourceError as e:
        logger.warning("copy_empty_source")
        await notifier.show_msg(str(e), WARNING)
        return CopyOutcome.EMPTY_SOURCE

    except EmptyResultError as e:
        logger.warning("copy_empty_result")
        await notifier.show_msg(str(e), WARNING)
        return CopyOutcome.EMPTY_RESULT

    except Exception as e:
        logger.error("copy_failed", error=str(e), error_type=type(e).__name__, exc_info=True)
        await notifier.show_msg(f"Failed to copy: {e}", ERROR)
        return CopyOutcome.FAILED

    logger.info("copy_completed", chars=len(markdown))
    await notifier.show_msg(COPIED_MESSAGE, SUCCESS)
    return CopyOutcome.COPIED
