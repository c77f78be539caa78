from __future__ import annotations
from typing import Dict
from pydantic import BaseModel, Field

from urlbuilder.io.urls import URLBuilder

PORT_MIN = -32768
PORT_MAX = 32767

class URLSpec(BaseModel):
    protocol: str = ""
    host: str = ""
    port: int = Field(default=0, ge=PORT_MIN, le=PORT_MAX)
    params: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_builder(cls, builder: URLBuilder) -> "URLSpec":
        return cls(
            protocol=builder.protocol(),
            host=builder.host(),
            port=builder.port(),
            params=dict(builder.params()),
        )

    def to_builder(self) -> URLBuilder:
        ub = URLBuilder().set_protocol(self.protocol).set_host(self.host).set_port(self.port)
        for key, value in self.params.items():
            ub.add_param(key, value)
        return ub

class BuildResult(BaseModel):
    url: str
    params_count: int = 0
