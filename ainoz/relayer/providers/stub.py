# placeholder provider; echoes the prompt instead of running inference


def stub_response(prompt: str) -> str:
    return (
        f'[STUB RESPONSE] You asked: "{prompt}". '
        "This is a placeholder response from the AINOZ relayer. "
        "In production, this would be replaced with actual LLM inference."
    )


async def generate(prompt: str, *, model: str) -> str:
    # model is accepted but does not change the output
    return stub_response(prompt)
