"""Services for the Page Corpus Explorer."""
from .loader import LoadError, RecordFormatError, load_bytes, read_json, write_json, is_valid_file, base_name
from .color_palette import ColorPalette
from .collection_loader import CollectionLoader
from .similarity_engine import SimilarityEngine

__all__ = ['LoadError', 'RecordFormatError', 'load_bytes', 'read_json', 'write_json', 'is_valid_file', 'base_name', 'ColorPalette', 'CollectionLoader', 'SimilarityEngine']
