"""
Pydantic schemas for request descriptions.

Defines the structured request the engine sends, the closed set of
authentication variants, and the partial request produced by the
cURL importer.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# HTTP methods supported by the engine
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


class NoAuth(BaseModel):
    """No authentication."""
    model_config = ConfigDict(frozen=True)

    type: Literal["none"] = "none"


class BearerAuth(BaseModel):
    """Bearer token authentication."""
    model_config = ConfigDict(frozen=True)

    type: Literal["bearer"] = "bearer"
    token: str


class BasicAuth(BaseModel):
    """HTTP Basic authentication."""
    model_config = ConfigDict(frozen=True)

    type: Literal["basic"] = "basic"
    username: str
    password: str


Auth = Annotated[Union[NoAuth, BearerAuth, BasicAuth], Field(discriminator="type")]


class RequestSpec(BaseModel):
    """
    Structured description of one outgoing request.

    Headers are raw "Name: Value" lines and query params raw "key=value"
    lines, both kept in the order the user entered them.
    """
    model_config = ConfigDict(frozen=True)

    method: HttpMethod = "GET"
    url: str = ""
    headers: list[str] = []
    query_params: list[str] = []
    body: str = ""
    auth: Auth = NoAuth()


class PartialRequestSpec(BaseModel):
    """
    Fields recognised in an imported cURL command.

    method and url are always present; the other fields are None when
    the command did not set them.
    """
    method: HttpMethod = "GET"
    url: str
    headers: list[str] | None = None
    body: str | None = None
    auth: Auth | None = None

    def apply_to(self, spec: RequestSpec) -> RequestSpec:
        """Merge into spec, replacing headers/body/auth only when non-empty."""
        update: dict = {"method": self.method, "url": self.url}
        if self.headers:
            update["headers"] = list(self.headers)
        if self.body:
            update["body"] = self.body
        if self.auth is not None and not isinstance(self.auth, NoAuth):
            update["auth"] = self.auth
        return spec.model_copy(update=update)


DEFAULT_REQUEST = RequestSpec(
    method="GET",
    url="https://httpbin.org/get",
    headers=["Content-Type: application/json"],
)
