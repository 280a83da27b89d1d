# finlearn-api/helper_functions.py
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from shared.contracts import ApiError

# Use logger
logger = logging.getLogger(__name__)


def normalize_symbol(symbol: Optional[str]) -> str:
    """Canonical (uppercase) form of a ticker symbol; None becomes ''."""
    return (symbol or "").upper()


def parse_int_arg(raw: Optional[str], default: int, name: str = "value") -> int:
    """
    Parses an integer query parameter.

    Missing, blank or non-numeric values fall back to `default` so that list
    endpoints never fail on a malformed paging parameter. Range clamping is left
    to the caller.
    """
    if raw is None:
        return default
    value = raw.strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-numeric '{name}' parameter: {raw!r}; using {default}")
        return default


def dump_model(model: BaseModel) -> Dict[str, Any]:
    """JSON-ready dict of a contract model."""
    return model.model_dump(mode="json")


def dump_models(models: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    return [dump_model(m) for m in models]


def error_body(error: str, message: Optional[str] = None) -> Dict[str, Any]:
    """Error payload in the shared {"error": ...} shape; `message` only when given."""
    return ApiError(error=error, message=message).model_dump(exclude_none=True)


def stock_not_found_message(symbol: str) -> str:
    return f"Stock {normalize_symbol(symbol)} not found"
