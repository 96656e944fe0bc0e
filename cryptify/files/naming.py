"""Output artifact naming."""

from pathlib import Path
from typing import Optional, Union

from cryptify.codec.byte_shift import Mode

DEFAULT_ENCRYPTED_SUFFIX = ".enc"
DEFAULT_DECRYPTED_PREFIX = "decrypted_"


def output_name(
    name: str,
    mode: Union[Mode, str],
    suffix: str = DEFAULT_ENCRYPTED_SUFFIX,
    prefix: str = DEFAULT_DECRYPTED_PREFIX
) -> str:
    """
    Name for the transformed copy of a file.

    Encrypting appends the suffix. Decrypting strips the suffix when the
    name ends with it, otherwise marks the name with the prefix.

    Args:
        name: Original file name (no directory)
        mode: Transform direction
        suffix: Suffix marking encrypted files
        prefix: Prefix marking decrypted files that had no suffix

    Returns:
        New file name

    Example:
        >>> output_name("notes.txt.enc", Mode.DECRYPT)
        'notes.txt'
        >>> output_name("notes.txt", Mode.DECRYPT)
        'decrypted_notes.txt'
    """
    if Mode.coerce(mode) is Mode.ENCRYPT:
        return f"{name}{suffix}"

    if suffix and name.endswith(suffix) and len(name) > len(suffix):
        return name[:-len(suffix)]

    return f"{prefix}{name}"


def output_path_for(
    source: Path,
    mode: Union[Mode, str],
    output_dir: Optional[Path] = None,
    suffix: str = DEFAULT_ENCRYPTED_SUFFIX,
    prefix: str = DEFAULT_DECRYPTED_PREFIX
) -> Path:
    """
    Full output path for a source file.

    The file lands in output_dir when given, otherwise beside the source.
    """
    directory = Path(output_dir) if output_dir is not None else source.parent
    return directory / output_name(source.name, mode, suffix=suffix, prefix=prefix)
