from objkit.serialization.codec import decode, encode, from_json, get_json
from objkit.serialization.errors import ParseError
from objkit.serialization.record import BehaviorSet, Record

__all__ = [
    "encode",
    "decode",
    "get_json",
    "from_json",
    "ParseError",
    "Record",
    "BehaviorSet",
]
