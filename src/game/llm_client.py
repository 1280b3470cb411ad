from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Role


class LLMClient(BaseModel):
    """
    Client for managing LLM interactions via LiteLLM.

    Holds the messages of the current request and handles async
    API calls to various LLM providers.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    timeout: Optional[float] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the conversation.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        self.messages.append({"role": role, "content": content})

    def clear_messages(self) -> None:
        """Clear all messages from the conversation."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """
        Get the current conversation.

        Returns:
            List of message dictionaries in OpenAI format
        """
        return self.messages.copy()

    def _build_params(self, **kwargs: Any) -> Dict[str, Any]:
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        if self.timeout is not None:
            params.setdefault("timeout", self.timeout)

        return params

    async def acompletion(self, **kwargs: Any) -> Any:
        """
        Generate a completion for the current messages.

        Args:
            **kwargs: Additional arguments to pass to litellm.acompletion()

        Returns:
            The completion response from LiteLLM
        """
        return await litellm.acompletion(**self._build_params(**kwargs))
