from investor_intake.llm.client_base import BaseChatClient
from investor_intake.llm.factory import ChatClientFactory

__all__ = ["BaseChatClient", "ChatClientFactory"]
