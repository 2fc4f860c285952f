"""Inference backend clients."""
from apps.backend.llm.ollama_client import OllamaClient, close_client, get_client

__all__ = ["OllamaClient", "close_client", "get_client"]
