from pathlib import Path

from receipt_parser.structuring.exceptions import StructuringError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the structuring prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled structuring_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        StructuringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "structuring_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StructuringError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the expense JSON schema from a file.

    Defaults to the bundled expense_schema.json.

    Raises:
        StructuringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "expense_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StructuringError(f"Failed to load JSON schema: {exc}") from exc
