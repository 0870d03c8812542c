from __future__ import annotations


class DeployCheckError(RuntimeError):
    pass


class AccessError(DeployCheckError):
    def __init__(self, path: str) -> None:
        super().__init__(f'Failed to access REPO_PATH: "{path}"')
        self.path = path


class FetchError(DeployCheckError):
    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class HTTPStatusError(FetchError):
    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"Status code is {status_code}", url)
        self.status_code = status_code


class NetworkError(FetchError):
    pass


class ParseError(DeployCheckError, ValueError):
    pass


class CacheNameCollisionError(DeployCheckError):
    def __init__(self, cache_name: str) -> None:
        super().__init__("Cache names are the same.")
        self.cache_name = cache_name
