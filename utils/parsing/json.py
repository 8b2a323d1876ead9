import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import json5
import demjson3

logger = logging.getLogger(__name__)

CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.MULTILINE)


def strip_code_fences(text: str) -> str:
    """Remove markdown ```json fences and any prose around the outermost object."""
    cleaned = CODE_FENCE.sub("", text.strip()).strip()
    start, end = cleaned.find("{"), cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start:end + 1]
    return cleaned


def clean_common_mistakes(text: str) -> str:
    # Trailing commas before closing braces/brackets
    cleaned = re.sub(r",(\s*[}\]])", r"\1", text)
    # Single-line comments (// ...) that are not part of a URL
    cleaned = re.sub(r"(?<!:)//.*?(\n|$)", r"\1", cleaned)
    # Multi-line comments (/* ... */)
    cleaned = re.sub(r"/\*.*?\*/", "", cleaned, flags=re.DOTALL)
    return cleaned


# JSON Repair and Parsing Function
def repair_and_parse_json(response_text: str, debug_dir: Optional[str] = None) -> dict:
    """
    Multi-layered JSON parsing with auto-repair capabilities.

    Attempts to parse JSON through multiple strategies:
    1. Standard json.loads() on the fence-stripped text
    2. Clean common issues (trailing commas, comments)
    3. json5 parser (tolerates comments and trailing commas)
    4. demjson3 parser (auto-repairs many errors)

    Args:
        response_text: Raw text response from Claude
        debug_dir: If set, the raw response is written there when every layer fails

    Returns:
        Parsed dictionary

    Raises:
        ValueError: If all parsing attempts fail or the payload is not an object
    """
    original_text = response_text or ""
    text = strip_code_fences(original_text)
    errors = []

    layers = (
        ("Standard JSON", lambda: json.loads(text)),
        ("Cleaned JSON", lambda: json.loads(clean_common_mistakes(text))),
        ("JSON5", lambda: json5.loads(text)),
        ("DemJSON", lambda: demjson3.decode(text)),
    )

    for name, parse in layers:
        try:
            result = parse()
        except Exception as e:
            errors.append(f"{name}: {str(e)}")
            logger.debug(f"🔧 {name} parsing failed: {str(e)}")
            continue
        if not isinstance(result, dict):
            errors.append(f"{name}: expected a JSON object, got {type(result).__name__}")
            continue
        if errors:
            logger.info(f"✅ {name} parsing succeeded after {len(errors)} failed attempt(s)")
        return result

    log_file = _save_failure(original_text, errors, debug_dir) if debug_dir else None
    logger.error(f"❌ JSON parsing failed. Response preview: {original_text[:200]}...")

    raise ValueError(
        f"Failed to parse JSON after all attempts. "
        f"Errors: {'; '.join(errors[:2])}."
        + (f" Debug log saved to {log_file}." if log_file else "")
    )


def _save_failure(original_text: str, errors: list, debug_dir: str) -> Path:
    error_log_path = Path(debug_dir)
    error_log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = error_log_path / f"failed_{timestamp}.txt"

    with open(log_file, "w") as f:
        f.write(f"=== PARSING FAILURE DEBUG LOG ===\n")
        f.write(f"Timestamp: {timestamp}\n\n")
        f.write(f"=== ORIGINAL RESPONSE ===\n{original_text}\n\n")
        f.write(f"=== PARSING ERRORS ===\n")
        for i, error in enumerate(errors, 1):
            f.write(f"{i}. {error}\n")
        f.write(f"\n=== RESPONSE LENGTH ===\n")
        f.write(f"Original: {len(original_text)} chars\n")

    return log_file
