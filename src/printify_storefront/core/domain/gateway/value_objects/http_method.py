from enum import StrEnum


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def carries_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)
