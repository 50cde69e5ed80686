from ainoz.core import config
from ainoz.relayer.providers.base import GenerateFn, ProviderError


async def _not_implemented(prompt: str, *, model: str) -> str:
    raise ProviderError(f"Unknown provider: {config.PROVIDER}")


def get_generate(model: str) -> GenerateFn:
    # every model resolves to the configured provider; there is no per-model routing yet
    if config.PROVIDER == "stub":
        from ainoz.relayer.providers.stub import generate
        return generate
    return _not_implemented
