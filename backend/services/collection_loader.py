"""Collection loading service for corpus JSON files."""
import logging
import os
from typing import List, Optional

from models.base import Color
from models.collection import Collection
from services.color_palette import ColorPalette
from services.loader import base_name, is_valid_file, read_json
from config import DOCUMENT_COLOR_ALPHA

logger = logging.getLogger(__name__)


class CollectionLoader:
    """Loads collections from corpus JSON files and colors their documents."""

    def __init__(self, palette: Optional[ColorPalette] = None, color_alpha: float = DOCUMENT_COLOR_ALPHA):
        """
        Initialize CollectionLoader.

        Args:
            palette: Palette used to color documents (default palette if None)
            color_alpha: Opacity of document colors
        """
        self.palette = palette or ColorPalette()
        self.color_alpha = color_alpha

    def _pick_color(self, index: int) -> Color:
        return self.palette.color(index, self.color_alpha)

    def load_collection(self, path_or_url: str, name: Optional[str] = None) -> Collection:
        """
        Load a single collection file.

        Args:
            path_or_url: Local path or URL of the collection JSON
            name: Collection name, defaults to the file name without suffix

        Returns:
            Parsed Collection

        Raises:
            LoadError: If the file cannot be loaded
            RecordFormatError: If the file is not valid JSON
        """
        if name is None:
            name = os.path.basename(base_name(path_or_url.rstrip("/")))

        record = read_json(path_or_url)
        collection = Collection.from_record(record, name=name, pick_color=self._pick_color)

        logger.info(
            f"Loaded collection {name}: {collection.num_documents()} documents, "
            f"{collection.num_pages()} pages"
        )
        return collection

    def load_directory(self, directory: str) -> List[Collection]:
        """
        Load all collection files from a directory.

        Args:
            directory: Directory containing *.json collection files

        Returns:
            List of Collection objects, one per readable file
        """
        collections = []

        if not os.path.isdir(directory):
            logger.error(f"Corpus directory not found: {directory}")
            return collections

        files = [
            f for f in sorted(os.listdir(directory))
            if is_valid_file(os.path.join(directory, f))
        ]
        logger.info(f"Found {len(files)} collection files in {directory}")

        for filename in files:
            filepath = os.path.join(directory, filename)

            try:
                collections.append(self.load_collection(filepath))
            except (IOError, ValueError) as e:
                logger.error(f"Error loading {filename}: {str(e)}", exc_info=True)
                # Skip corrupted file and continue
                continue

        logger.info(f"Successfully loaded {len(collections)} collections")
        return collections
