"""
Streaming file processor

Reads a source file in chunks, runs each chunk through the byte-shift codec
and writes the result to a temporary file beside the destination. The
temporary file replaces the destination only once the whole source has been
transformed, so a failed run leaves no partial artifact.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from cryptify.codec.byte_shift import ByteShiftCodec, Mode
from cryptify.config.loader import get_config_value
from cryptify.files.naming import (
    DEFAULT_DECRYPTED_PREFIX,
    DEFAULT_ENCRYPTED_SUFFIX,
    output_path_for,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024  # 8MB


class ProcessingError(Exception):
    """File-level failure (missing source, output conflict)."""
    pass


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of processing one file."""
    source: Path
    output: Path
    mode: Mode
    bytes_processed: int
    dry_run: bool = False


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "750.0 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def read_chunks(path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield a file's contents in chunks of at most chunk_size bytes."""
    with open(path, 'rb') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk


class FileProcessor:
    """
    Encrypts or decrypts files on disk.

    Example:
        processor = FileProcessor(overwrite=False)
        result = processor.process(Path("report.pdf"), shift=10, mode=Mode.ENCRYPT)
        # result.output == Path("report.pdf.enc")
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        suffix: str = DEFAULT_ENCRYPTED_SUFFIX,
        prefix: str = DEFAULT_DECRYPTED_PREFIX,
        overwrite: bool = False
    ):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size
        self.suffix = suffix
        self.prefix = prefix
        self.overwrite = overwrite

    @classmethod
    def from_config(cls, config: dict) -> 'FileProcessor':
        """Build a processor from the output/processing config sections."""
        return cls(
            chunk_size=get_config_value(config, 'processing.chunk_size', DEFAULT_CHUNK_SIZE),
            suffix=get_config_value(config, 'output.encrypted_suffix', DEFAULT_ENCRYPTED_SUFFIX),
            prefix=get_config_value(config, 'output.decrypted_prefix', DEFAULT_DECRYPTED_PREFIX),
            overwrite=get_config_value(config, 'output.overwrite', False)
        )

    def resolve_output(
        self,
        source: Path,
        mode: Union[Mode, str],
        output: Optional[Path] = None,
        output_dir: Optional[Path] = None
    ) -> Path:
        """Destination path: explicit output wins over the naming convention."""
        if output is not None:
            return Path(output)
        return output_path_for(
            source, mode, output_dir=output_dir, suffix=self.suffix, prefix=self.prefix
        )

    def process(
        self,
        source: Path,
        shift: int,
        mode: Union[Mode, str],
        output: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        dry_run: bool = False
    ) -> ProcessResult:
        """
        Transform one file.

        Args:
            source: File to read
            shift: Derived shift (already validated by the caller)
            mode: Transform direction
            output: Explicit destination path
            output_dir: Directory for the conventionally named output
            dry_run: Validate and report without writing

        Returns:
            ProcessResult describing the written (or planned) artifact

        Raises:
            ProcessingError: If the source is unusable or the destination conflicts
            OSError: If reading or writing fails
        """
        source = Path(source)
        mode = Mode.coerce(mode)

        if not source.exists():
            raise ProcessingError(f"File not found: {source}")
        if not source.is_file():
            raise ProcessingError(f"Not a regular file: {source}")

        destination = self.resolve_output(source, mode, output=output, output_dir=output_dir)

        if destination.exists() and destination.resolve() == source.resolve():
            raise ProcessingError(f"Output would overwrite the input file: {destination}")
        if destination.exists() and not self.overwrite:
            raise ProcessingError(
                f"Output already exists: {destination} (use --force to overwrite)"
            )

        size = source.stat().st_size

        if dry_run:
            logger.info(f"[dry-run] Would {mode.value} {source} -> {destination}")
            return ProcessResult(source, destination, mode, size, dry_run=True)

        logger.debug(f"Starting {mode.value}ion of {source} ({format_file_size(size)})")
        written = self._write_transformed(source, destination, ByteShiftCodec(shift, mode))
        logger.info(f"{mode.value.capitalize()}ed {source.name} -> {destination}")

        return ProcessResult(source, destination, mode, written)

    def _write_transformed(self, source: Path, destination: Path, codec: ByteShiftCodec) -> int:
        destination.parent.mkdir(parents=True, exist_ok=True)

        # Sibling temp file opened normally so permissions follow the umask
        tmp_path = destination.with_name(f".{destination.name}.part")
        written = 0
        try:
            with open(tmp_path, 'wb') as out:
                for chunk in codec.transform_stream(read_chunks(source, self.chunk_size)):
                    out.write(chunk)
                    written += len(chunk)
            tmp_path.replace(destination)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        return written
