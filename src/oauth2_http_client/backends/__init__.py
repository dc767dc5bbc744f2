from .aiohttp_backend import AiohttpInterface
from .httpx_backend import HttpxInterface

__all__ = [
    "AiohttpInterface",
    "HttpxInterface",
]
