# src/seoai/llm_service.py
"""Service for LLM interactions, handling the configured provider or a mock LLM."""

import logging
from typing import Optional

from llama_index.llms.groq import Groq
from llama_index.llms.mistralai import MistralAI
from llama_index.llms.openai import OpenAI

from seoai.config import LLM_PROVIDERS, PROVIDER_MODELS
from seoai.exceptions import ProviderConfigError
from seoai.mock_llm import MockLLM

logger = logging.getLogger(__name__)


class LLMService:
    def __init__(
        self,
        provider: Optional[str],
        api_key: str = "",
        use_mock: bool = False,
        model_name: Optional[str] = None,
    ):
        self.provider = provider
        self.api_key = api_key
        self.use_mock = use_mock
        self.model_name = model_name or PROVIDER_MODELS.get(provider or "", "mock")
        self.llm = self._initialize_llm()

    def _initialize_llm(self):
        if self.use_mock:
            logger.info(f"Using mock LLM (model: {self.model_name})")
            return MockLLM(model=self.model_name)

        if self.provider not in LLM_PROVIDERS:
            raise ProviderConfigError(f"Invalid provider: {self.provider}")
        if not self.api_key:
            raise ProviderConfigError(f"No API key configured for {self.provider}")

        logger.info(f"Initializing {self.provider} LLM (model: {self.model_name})")
        if self.provider == "mistral":
            return MistralAI(model=self.model_name, api_key=self.api_key)
        if self.provider == "groq":
            return Groq(model=self.model_name, api_key=self.api_key)
        # Special handling for GPT-4o models, otherwise standard init
        if self.model_name.startswith("gpt-4o"):
            return OpenAI(model=self.model_name, api_key=self.api_key, strict=False)
        return OpenAI(model=self.model_name, api_key=self.api_key)

    def predict(self, prompt, **prompt_args) -> str:
        """Run a text completion for ``prompt`` formatted with ``prompt_args``."""
        return self.llm.predict(prompt, **prompt_args).strip()

    def structured_predict(self, output_cls, prompt, **prompt_args):
        """Run a structured completion and return an ``output_cls`` instance."""
        return self.llm.structured_predict(output_cls, prompt, **prompt_args)

    @property
    def is_mock(self) -> bool:
        return self.use_mock
