from pydantic import BaseModel


class PromptRequest(BaseModel):
    prompt: str | None = None


class PromptResponse(BaseModel):
    response: str
