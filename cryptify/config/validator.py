"""Configuration validation."""

from typing import Dict, Any, List

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
VALID_UI_MODES = ['rich', 'headless']


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    for section in ('output', 'processing', 'logging', 'ui'):
        if not isinstance(config.get(section, {}), dict):
            errors.append(f"{section} must be a mapping")

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )

    errors.extend(_validate_output(config.get('output', {})))
    errors.extend(_validate_processing(config.get('processing', {})))
    errors.extend(_validate_logging(config.get('logging', {})))
    errors.extend(_validate_ui(config.get('ui', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_output(section: Dict[str, Any]) -> List[str]:
    """Validate output naming section."""
    errors = []

    suffix = section.get('encrypted_suffix', '.enc')
    if not isinstance(suffix, str) or not suffix:
        errors.append("output.encrypted_suffix must be a non-empty string")
    elif '/' in suffix or '\\' in suffix:
        errors.append("output.encrypted_suffix must not contain path separators")

    prefix = section.get('decrypted_prefix', 'decrypted_')
    if not isinstance(prefix, str) or not prefix:
        errors.append("output.decrypted_prefix must be a non-empty string")
    elif '/' in prefix or '\\' in prefix:
        errors.append("output.decrypted_prefix must not contain path separators")

    if 'overwrite' in section:
        if not isinstance(section['overwrite'], bool):
            errors.append("output.overwrite must be a boolean")

    if 'directory' in section and section['directory'] is not None:
        if not isinstance(section['directory'], str):
            errors.append("output.directory must be a string path or null")

    return errors


def _validate_processing(section: Dict[str, Any]) -> List[str]:
    """Validate processing options section."""
    errors = []

    if 'chunk_size' in section:
        chunk_size = section['chunk_size']
        # bool is an int subclass
        if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size < 1:
            errors.append("processing.chunk_size must be a positive integer")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging options section."""
    errors = []

    # Validate level
    level = section.get('level', 'INFO')
    if level not in VALID_LOG_LEVELS:
        errors.append(f"logging.level must be one of: {', '.join(VALID_LOG_LEVELS)}")

    # Validate console flag
    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be a boolean")

    # Validate optional log file
    if 'file' in section and section['file'] is not None:
        if not isinstance(section['file'], str):
            errors.append("logging.file must be a string path or null")

    return errors


def _validate_ui(section: Dict[str, Any]) -> List[str]:
    """Validate UI options section."""
    errors = []

    mode = section.get('mode', 'rich')
    if mode not in VALID_UI_MODES:
        errors.append(f"ui.mode must be one of: {', '.join(VALID_UI_MODES)}")

    return errors
