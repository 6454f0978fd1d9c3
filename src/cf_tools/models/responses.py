from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

SUCCESS = "success"


class ApiResponse(BaseModel):
    """
    Decoded response of the client API.
    ``result`` and ``msg`` are kept as sent, everything else as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    result: Any = None
    msg: Any = None

    @property
    def success(self) -> bool:
        return self.result == SUCCESS

    @property
    def error_text(self) -> str | None:
        """What the API said went wrong, ``msg`` first, then ``result``."""
        if self.success:
            return None
        for value in (self.msg, self.result):
            if value not in (None, ""):
                return str(value)
        return None

    @property
    def data(self) -> dict[str, Any]:
        """The decoded JSON object, as received."""
        data = self.model_dump()
        for name in ("result", "msg"):
            if name not in self.model_fields_set:
                data.pop(name)
        return data
