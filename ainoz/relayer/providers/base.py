# provider contract: async generate(prompt, *, model) -> text
# lets us put a real inference backend behind the relayer later without touching the routers

from typing import Awaitable, Callable


class ProviderError(Exception):
    pass


GenerateFn = Callable[..., Awaitable[str]]
