# Parsing subpackage - JSON repair for AI responses
from .json import repair_and_parse_json

__all__ = [
    "repair_and_parse_json",
]
