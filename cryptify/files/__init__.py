"""File handling around the codec: output naming and streaming processing."""

from .naming import DEFAULT_DECRYPTED_PREFIX, DEFAULT_ENCRYPTED_SUFFIX, output_name, output_path_for
from .processor import FileProcessor, ProcessingError, ProcessResult, format_file_size

__all__ = [
    'DEFAULT_DECRYPTED_PREFIX',
    'DEFAULT_ENCRYPTED_SUFFIX',
    'output_name',
    'output_path_for',
    'FileProcessor',
    'ProcessingError',
    'ProcessResult',
    'format_file_size',
]
