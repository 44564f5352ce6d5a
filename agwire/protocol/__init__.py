"""Protocol schema core.

- **aliases**: camelCase / snake_case field resolution
- **content**: role-aware content resolution
- **models**: run input, messages, multimodal parts and reasoning events
- **decoding**: public decode entry points raising ``DecodeError``
"""

from agwire.protocol.decoding import (
    decode_event,
    decode_input_content,
    decode_message,
    decode_run_input,
    to_json,
)
from agwire.protocol.errors import DecodeError

__all__ = [
    "DecodeError",
    "decode_event",
    "decode_input_content",
    "decode_message",
    "decode_run_input",
    "to_json",
]
